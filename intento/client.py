"""Client for the Intento text translation API."""

import json
import logging
from typing import Any, Callable, List, Optional, Tuple

import requests

from intento.client_options import (
    ClientOption,
    Logger,
    apply_options,
    client_with_server_url,
    default_client_options,
)
from intento.config import (
    LANGUAGES_PATH,
    ROUTING_PATH,
    TRANSLATE_PATH,
    resolve_api_key,
    resolve_server_url,
)
from intento.errors import DecodeError, IntentoError, RequestBuildError, TransportError, classify
from intento.models import Language, Provider, SmartRouting, TranslationResult
from intento.translation_options import TranslationOption, TranslationOptions
from intento.validate.schema import (
    validate_language_list,
    validate_provider_list,
    validate_routing_list,
    validate_translation_result,
)

Timeout = Optional[Any]


class Client:
    """
    Client for the Intento API.

    Example:
        client = Client(api_key, client_with_logger(std_logger()))
        result = client.translate(["Hello World!"], "en", "es")
        print(result.results[0])
    """

    def __init__(self, api_key: str, *options: ClientOption):
        """
        Initialize the client.

        Args:
            api_key: Intento API key, sent in the "apikey" header
            *options: ClientOption values, applied in order
        """
        settings = apply_options(default_client_options(), options)
        self._api_key = api_key
        self._owns_http_client = settings.http_client is None
        self._http_client = settings.http_client
        if self._owns_http_client:
            self._http_client = requests.Session()
        self._logger = settings.logger
        self._server_url = settings.server_url

    @classmethod
    def from_env(cls, *options: ClientOption) -> "Client":
        """
        Create a client from INTENTO_API_KEY and, if set, INTENTO_SERVER_URL.

        Explicit options take precedence over the environment.

        Raises:
            ValueError: If INTENTO_API_KEY is not set
        """
        api_key = resolve_api_key()
        server_url = client_with_server_url(resolve_server_url())
        return cls(api_key, server_url, *options)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session the client created. Injected clients are left open."""
        if self._owns_http_client:
            self._http_client.close()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def http_client(self) -> Any:
        return self._http_client

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def server_url(self) -> str:
        return self._server_url

    def available_providers(self, timeout: Timeout = None) -> List[Provider]:
        """
        List the providers available for text translation.

        Args:
            timeout: Passed to the HTTP client (seconds or (connect, read))

        Returns:
            List of Provider records
        """
        data = self._api_request("GET", TRANSLATE_PATH, timeout=timeout)
        self._check_shape(validate_provider_list, data)
        return [Provider.from_dict(item) for item in data or []]

    def available_languages(self, timeout: Timeout = None) -> List[Language]:
        """List the languages supported for text translation."""
        data = self._api_request("GET", LANGUAGES_PATH, timeout=timeout)
        self._check_shape(validate_language_list, data)
        return [Language.from_dict(item) for item in data or []]

    def smart_routing_list(self, timeout: Timeout = None) -> List[SmartRouting]:
        """List the smart routing schemes usable with translation_with_routing()."""
        data = self._api_request("GET", ROUTING_PATH, timeout=timeout)
        self._check_shape(validate_routing_list, data)
        return [SmartRouting.from_dict(item) for item in data or []]

    def translate(
        self,
        texts: List[str],
        from_lang: str,
        to_lang: str,
        *options: TranslationOption,
        timeout: Timeout = None
    ) -> TranslationResult:
        """
        Translate texts with the given options.

        Args:
            texts: Source texts; results keep the same order
            from_lang: Source language code, or AUTO_DETECT_SOURCE_LANGUAGE
            to_lang: Target language code
            *options: TranslationOption values, applied in order
            timeout: Passed to the HTTP client (seconds or (connect, read))

        Returns:
            TranslationResult

        Raises:
            IntentoError: Subclass matching the failure
        """
        params = TranslationOptions()
        params.context.text = list(texts)
        params.context.from_lang = from_lang
        params.context.to_lang = to_lang
        apply_options(params, options)

        data = self._api_request("POST", TRANSLATE_PATH, params.to_dict(), timeout=timeout)
        self._check_shape(validate_translation_result, data)
        return TranslationResult.from_dict(data)

    def _api_request(
        self,
        method: str,
        path: str,
        payload: Optional[Any] = None,
        timeout: Timeout = None
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        The status code is checked before the body is decoded. The response
        is closed on every path; a failure to close it is only logged.

        Args:
            method: HTTP method
            path: Endpoint path below the server URL
            payload: JSON-serializable body, or None for no body
            timeout: Passed to the HTTP client

        Returns:
            Parsed JSON body
        """
        url = f"{self._server_url}{path}"
        headers = {
            "Content-Type": "application/json",
            "apikey": self._api_key,
        }

        data = None
        if payload is not None:
            try:
                data = json.dumps(payload)
            except (TypeError, ValueError) as e:
                raise self._fail(RequestBuildError(str(e), stage="marshal json")) from e

        self._record("log_request", method, url, payload)

        try:
            response = self._http_client.request(
                method,
                url,
                headers=headers,
                data=data,
                timeout=timeout
            )
        except requests.exceptions.InvalidURL as e:
            raise self._fail(RequestBuildError(str(e), stage="create request")) from e
        except (requests.exceptions.RequestException, OSError) as e:
            raise self._fail(TransportError(str(e), stage="send request")) from e

        try:
            self._record("log_response", method, url, response.status_code)

            error = classify(response.status_code, stage="check http status code")
            if error is not None:
                raise self._fail(error)

            try:
                return json.loads(response.content)
            except ValueError as e:
                raise self._fail(DecodeError(str(e), stage="decode response")) from e
        finally:
            self._close(response)

    def _check_shape(self, validator: Callable[[Any], Tuple[bool, str]], data: Any) -> None:
        is_valid, error_msg = validator(data)
        if not is_valid:
            raise self._fail(DecodeError(error_msg, stage="decode response"))

    def _close(self, response: Any) -> None:
        try:
            response.close()
        except Exception as e:
            self._log("close response body: %s", e)

    def _fail(self, error: IntentoError) -> IntentoError:
        self._record("log_failure", error.kind.value, str(error))
        return error

    def _record(self, hook_name: str, *args: Any) -> None:
        # Loggers such as RunLogger may also record request/response traffic.
        hook = getattr(self._logger, hook_name, None)
        if not callable(hook):
            return
        try:
            hook(*args)
        except Exception as e:
            self._log("%s: %s", hook_name, e)

    def _log(self, message: str, *args: Any) -> None:
        try:
            self._logger(message, *args)
        except Exception as e:
            # The injected logger is broken; fall back to the process log.
            fallback = logging.getLogger("intento")
            fallback.warning(message, *args)
            fallback.warning("logger failed: %s", e)
