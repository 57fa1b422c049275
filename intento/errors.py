"""Error taxonomy for the Intento API client."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Closed set of error kinds a client call can fail with."""

    REQUEST_BUILD = "request_build"
    TRANSPORT = "transport"
    DECODE = "decode"
    PROVIDER_RELATED = "provider_related"
    AUTH_KEY_MISSING = "auth_key_missing"
    AUTH_KEY_INVALID = "auth_key_invalid"
    NOT_FOUND = "not_found"
    CAPABILITIES_MISMATCH = "capabilities_mismatch"
    RATE_LIMIT = "rate_limit"
    INTERNAL = "internal"
    NOT_IMPLEMENTED = "not_implemented"
    GATEWAY_TIMEOUT = "gateway_timeout"
    UNEXPECTED_STATUS = "unexpected_status"


class IntentoError(Exception):
    """Base exception for the client.

    Attributes:
        kind: ErrorKind of this error
        stage: Short label of the step that failed (e.g. "send request")
    """

    kind: ErrorKind
    default_message = "intento: error"

    def __init__(self, message: Optional[str] = None, stage: str = ""):
        self.message = message or self.default_message
        self.stage = stage
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.stage:
            return f"{self.stage}: {self.message}"
        return self.message


class RequestBuildError(IntentoError):
    """Request body could not be serialized or the request could not be built."""

    kind = ErrorKind.REQUEST_BUILD
    default_message = "intento: cannot build request"


class TransportError(IntentoError):
    """Network-level failure reported by the HTTP client."""

    kind = ErrorKind.TRANSPORT
    default_message = "intento: transport failure"


class DecodeError(IntentoError):
    """Response body is not valid JSON or does not have the expected shape."""

    kind = ErrorKind.DECODE
    default_message = "intento: cannot decode response"


class StatusError(IntentoError):
    """Base class for errors derived from a non-success HTTP status code."""

    status_code: Optional[int] = None


class ProviderRelatedError(StatusError):
    kind = ErrorKind.PROVIDER_RELATED
    status_code = 400
    default_message = "provider-related error"


class AuthKeyIsMissingError(StatusError):
    kind = ErrorKind.AUTH_KEY_MISSING
    status_code = 401
    default_message = "intento: auth key is missing"


class AuthKeyIsInvalidError(StatusError):
    kind = ErrorKind.AUTH_KEY_INVALID
    status_code = 403
    default_message = "intento: auth key is invalid"


class NotFoundError(StatusError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    default_message = "intento: intent/provider not found"


class CapabilitiesMismatchError(StatusError):
    kind = ErrorKind.CAPABILITIES_MISMATCH
    status_code = 413
    default_message = "intento: capabilities mismatch for the chosen provider"


class APIRateLimitError(StatusError):
    kind = ErrorKind.RATE_LIMIT
    status_code = 429
    default_message = "intento: API rate limit exceeded"


class InternalError(StatusError):
    kind = ErrorKind.INTERNAL
    status_code = 500
    default_message = "intento: internal error"


class NotImplementedAPIError(StatusError):
    kind = ErrorKind.NOT_IMPLEMENTED
    status_code = 501
    default_message = "intento: not implemented"


class GatewayTimeoutError(StatusError):
    kind = ErrorKind.GATEWAY_TIMEOUT
    status_code = 502
    default_message = "intento: gateway timeout errors"


class UnexpectedStatusError(StatusError):
    """Any non-2xx status code without a dedicated error class."""

    kind = ErrorKind.UNEXPECTED_STATUS
    default_message = "intento: unexpected status code"

    def __init__(self, status_code: int, stage: str = ""):
        super().__init__(f"{self.default_message} {status_code}", stage=stage)
        self.status_code = status_code


_STATUS_ERRORS = {
    cls.status_code: cls
    for cls in (
        ProviderRelatedError,
        AuthKeyIsMissingError,
        AuthKeyIsInvalidError,
        NotFoundError,
        CapabilitiesMismatchError,
        APIRateLimitError,
        InternalError,
        NotImplementedAPIError,
        GatewayTimeoutError,
    )
}


def classify(status_code: int, stage: str = "") -> Optional[StatusError]:
    """
    Map an HTTP status code to an error.

    Args:
        status_code: HTTP status code of the response
        stage: Optional stage label attached to the returned error

    Returns:
        None for 2xx codes, otherwise a new StatusError instance
    """
    if 200 <= status_code <= 299:
        return None

    error_cls = _STATUS_ERRORS.get(status_code)
    if error_cls is None:
        return UnexpectedStatusError(status_code, stage=stage)
    return error_cls(stage=stage)
