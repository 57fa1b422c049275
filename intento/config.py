"""Defaults and environment lookup for the Intento client."""

import os
from typing import Optional

DEFAULT_SERVER_URL = "https://syncwrapper.inten.to"

TRANSLATE_PATH = "/ai/text/translate"
LANGUAGES_PATH = "/ai/text/translate/languages"
ROUTING_PATH = "/ai/text/translate/routing"

API_KEY_ENV = "INTENTO_API_KEY"
SERVER_URL_ENV = "INTENTO_SERVER_URL"

# Empty source language asks the service to detect it.
AUTO_DETECT_SOURCE_LANGUAGE = ""


def resolve_api_key(api_key: Optional[str] = None) -> str:
    """
    Return the API key from the parameter or the environment.

    Args:
        api_key: Explicit API key (default: from INTENTO_API_KEY env var)

    Returns:
        API key string

    Raises:
        ValueError: If no key is given and the env var is unset
    """
    api_key = api_key or os.getenv(API_KEY_ENV)
    if not api_key:
        raise ValueError(
            f"Intento API key required. Set {API_KEY_ENV} environment variable "
            "or pass api_key parameter."
        )
    return api_key


def resolve_server_url(server_url: Optional[str] = None) -> str:
    """Return the server URL from the parameter, the environment or the default."""
    return server_url or os.getenv(SERVER_URL_ENV) or DEFAULT_SERVER_URL
