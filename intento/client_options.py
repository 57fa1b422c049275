"""Client-level options for the Intento client."""

import logging
from typing import Any, Callable, Iterable, Optional, TypeVar

from intento.config import DEFAULT_SERVER_URL

Logger = Callable[..., None]

T = TypeVar("T")


def _noop_logger(message: str, *args: Any) -> None:
    pass


def std_logger(name: str = "intento") -> Logger:
    """
    Build a logger that writes warnings to the stdlib logging tree.

    Args:
        name: Name of the logging.Logger to write to

    Returns:
        Callable accepting a %-style message and its arguments
    """
    return logging.getLogger(name).warning


class ClientOptions:
    """Mutable settings assembled while building a Client."""

    def __init__(self, http_client: Optional[Any], logger: Logger, server_url: str):
        self.http_client = http_client
        self.logger = logger
        self.server_url = server_url


def default_client_options() -> ClientOptions:
    """
    Options used when the caller passes none.

    http_client stays None here; Client opens a requests.Session of its own
    only when no HTTP client was injected.
    """
    return ClientOptions(
        http_client=None,
        logger=_noop_logger,
        server_url=DEFAULT_SERVER_URL,
    )


class ClientOption:
    """Wraps a function that modifies ClientOptions."""

    def __init__(self, fn: Callable[[ClientOptions], None]):
        self._fn = fn

    def apply(self, options: ClientOptions) -> None:
        self._fn(options)


def apply_options(base: T, options: Iterable[Any]) -> T:
    """
    Apply options to a settings object in the given order.

    Later options overwrite fields set by earlier ones.

    Args:
        base: Settings object to mutate
        options: Objects exposing apply(base)

    Returns:
        The mutated settings object
    """
    for option in options:
        option.apply(base)
    return base


def client_with_http_client(http_client: Any) -> ClientOption:
    """
    Set the HTTP client used to send requests.

    The object must provide request(method, url, headers=, data=, timeout=),
    as requests.Session does.
    """
    def fn(o: ClientOptions) -> None:
        o.http_client = http_client

    return ClientOption(fn)


def client_with_logger(logger: Logger) -> ClientOption:
    """Set the logger, a callable taking a %-style message and arguments."""
    def fn(o: ClientOptions) -> None:
        o.logger = logger

    return ClientOption(fn)


def client_with_server_url(server_url: str) -> ClientOption:
    """Set the base URL of the API server."""
    def fn(o: ClientOptions) -> None:
        o.server_url = server_url.rstrip("/")

    return ClientOption(fn)
