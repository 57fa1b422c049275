"""Validate the shape of decoded API responses."""

from typing import Any, Dict, Tuple

# Fields absent from a response are accepted and decode to zero values;
# fields present must have the listed JSON type.
PROVIDER_FIELDS = {
    "production": bool,
    "integrated": bool,
    "billable": bool,
    "own_auth": bool,
    "stock_model": bool,
    "custom_model": bool,
    "delegated_credentials": bool,
    "async_only": bool,
    "id": str,
    "name": str,
    "vendor": str,
    "score": int,
    "price": int,
    "api_id": str,
    "picture": str,
    "type": str,
    "description": str,
    "tone": list,
    "symmetric": list,
    "pairs": list,
}

PAIR_FIELDS = {"from": str, "to": str}

SERVICE_PROVIDER_FIELDS = {
    "id": str,
    "name": str,
    "vendor": str,
    "description": str,
    "logo": str,
}

LANGUAGE_FIELDS = {
    "intento_code": str,
    "iso_name": str,
    "localized_name": str,
    "client_code": str,
}

ROUTING_FIELDS = {"name": str, "description": str}


def _type_name(expected: type) -> str:
    return {bool: "a boolean", int: "an integer", str: "a string", list: "an array"}[expected]


def _check_fields(obj: Any, fields: Dict[str, type], path: str) -> str:
    """Return an error message for the first mismatching field, or ""."""
    if obj is None:
        return ""
    if not isinstance(obj, dict):
        return f"{path} must be an object"

    for name, expected in fields.items():
        value = obj.get(name)
        if value is None:
            continue
        # bool is a subclass of int, do not accept it for integer fields
        if expected is int and isinstance(value, bool):
            return f"{path}.{name} must be {_type_name(expected)}"
        if not isinstance(value, expected):
            return f"{path}.{name} must be {_type_name(expected)}"
    return ""


def _check_string_list(values: Any, path: str) -> str:
    if values is None:
        return ""
    if not isinstance(values, list):
        return f"{path} must be an array"
    for i, value in enumerate(values):
        if not isinstance(value, str):
            return f"{path}[{i}] must be a string"
    return ""


def _check_list(data: Any, fields: Dict[str, type], name: str) -> Tuple[bool, str]:
    if data is None:
        return True, ""
    if not isinstance(data, list):
        return False, f"{name} response must be a JSON array"

    for i, item in enumerate(data):
        error_msg = _check_fields(item, fields, f"{name}[{i}]")
        if error_msg:
            return False, error_msg
    return True, ""


def validate_translation_result(data: Any) -> Tuple[bool, str]:
    """
    Validate a decoded translate response.

    Args:
        data: Parsed JSON body

    Returns:
        Tuple of (is_valid: bool, error_message: str)
    """
    # A null body decodes to an empty result, like an empty listing does
    if data is None:
        return True, ""
    if not isinstance(data, dict):
        return False, "Translation response must be a JSON object"

    if data.get("id") is not None and not isinstance(data["id"], str):
        return False, "id must be a string"

    error_msg = _check_string_list(data.get("results"), "results")
    if error_msg:
        return False, error_msg

    meta = data.get("meta")
    error_msg = _check_fields(meta, {"detected_source_language": list}, "meta")
    if error_msg:
        return False, error_msg
    if meta:
        error_msg = _check_string_list(
            meta.get("detected_source_language"), "meta.detected_source_language"
        )
        if error_msg:
            return False, error_msg

    service = data.get("service")
    error_msg = _check_fields(service, {}, "service")
    if error_msg:
        return False, error_msg
    if service:
        error_msg = _check_fields(
            service.get("provider"), SERVICE_PROVIDER_FIELDS, "service.provider"
        )
        if error_msg:
            return False, error_msg

    return True, ""


def validate_provider_list(data: Any) -> Tuple[bool, str]:
    """
    Validate a decoded provider listing.

    Args:
        data: Parsed JSON body

    Returns:
        Tuple of (is_valid: bool, error_message: str)
    """
    is_valid, error_msg = _check_list(data, PROVIDER_FIELDS, "providers")
    if not is_valid:
        return False, error_msg

    for i, provider in enumerate(data or []):
        if provider is None:
            continue
        for name in ("tone", "symmetric"):
            error_msg = _check_string_list(provider.get(name), f"providers[{i}].{name}")
            if error_msg:
                return False, error_msg
        for j, pair in enumerate(provider.get("pairs") or []):
            error_msg = _check_fields(pair, PAIR_FIELDS, f"providers[{i}].pairs[{j}]")
            if error_msg:
                return False, error_msg

    return True, ""


def validate_language_list(data: Any) -> Tuple[bool, str]:
    """Validate a decoded language listing."""
    return _check_list(data, LANGUAGE_FIELDS, "languages")


def validate_routing_list(data: Any) -> Tuple[bool, str]:
    """Validate a decoded smart routing listing."""
    return _check_list(data, ROUTING_FIELDS, "routing")
