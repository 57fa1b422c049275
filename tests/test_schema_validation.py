"""Tests for response shape validation."""

from intento.validate.schema import (
    validate_language_list,
    validate_provider_list,
    validate_routing_list,
    validate_translation_result,
)


def test_validate_translation_result_valid():
    """Test validation of a full translate response."""
    data = {
        "id": "abc",
        "results": ["Hola, mundo."],
        "meta": {"detected_source_language": ["en"]},
        "service": {"provider": {"id": "p1", "name": "P", "logo": "https://x/logo.png"}},
    }

    is_valid, error_msg = validate_translation_result(data)
    assert is_valid is True
    assert error_msg == ""


def test_validate_translation_result_empty_object():
    """Test missing fields are accepted."""
    assert validate_translation_result({}) == (True, "")


def test_validate_translation_result_not_object():
    """Test validation fails when the body is not an object."""
    is_valid, error_msg = validate_translation_result(["Hola"])
    assert is_valid is False
    assert "JSON object" in error_msg


def test_validate_translation_result_bad_results():
    """Test validation fails on non-string results."""
    is_valid, error_msg = validate_translation_result({"results": "Hola"})
    assert is_valid is False
    assert "results must be an array" in error_msg

    is_valid, error_msg = validate_translation_result({"results": ["Hola", None]})
    assert is_valid is False
    assert "results[1]" in error_msg


def test_validate_translation_result_bad_meta():
    """Test validation fails on a malformed detected source language."""
    is_valid, error_msg = validate_translation_result(
        {"meta": {"detected_source_language": "en"}}
    )
    assert is_valid is False
    assert "detected_source_language" in error_msg


def test_validate_translation_result_bad_provider():
    """Test validation fails on a provider that is not an object."""
    is_valid, error_msg = validate_translation_result({"service": {"provider": "p1"}})
    assert is_valid is False
    assert "service.provider must be an object" in error_msg


def test_validate_provider_list_valid():
    """Test validation of a provider listing."""
    data = [
        {},
        {
            "id": "p1",
            "production": True,
            "score": 3,
            "tone": ["formal"],
            "pairs": [{"from": "en", "to": "es"}],
        },
    ]
    assert validate_provider_list(data) == (True, "")


def test_validate_provider_list_not_array():
    """Test validation fails when the listing is not an array."""
    is_valid, error_msg = validate_provider_list({"id": "p1"})
    assert is_valid is False
    assert "JSON array" in error_msg


def test_validate_provider_list_bool_is_not_integer():
    """Test a boolean score is rejected."""
    is_valid, error_msg = validate_provider_list([{"score": True}])
    assert is_valid is False
    assert "providers[0].score must be an integer" in error_msg


def test_validate_provider_list_bad_pair():
    """Test validation fails on a malformed language pair."""
    is_valid, error_msg = validate_provider_list([{"pairs": [{"from": 1}]}])
    assert is_valid is False
    assert "providers[0].pairs[0].from" in error_msg


def test_validate_language_and_routing_lists():
    """Test validation of the languages and routing listings."""
    assert validate_language_list([{"intento_code": "es", "iso_name": "Spanish"}]) == (True, "")
    assert validate_routing_list([{"name": "best"}]) == (True, "")

    is_valid, error_msg = validate_language_list([{"intento_code": 5}])
    assert is_valid is False
    assert "languages[0].intento_code" in error_msg

    is_valid, error_msg = validate_routing_list(["best"])
    assert is_valid is False
    assert "routing[0] must be an object" in error_msg


def test_validate_null_bodies():
    """Test null bodies are accepted for results and listings alike."""
    assert validate_translation_result(None) == (True, "")
    assert validate_provider_list(None) == (True, "")
    assert validate_language_list(None) == (True, "")
    assert validate_routing_list(None) == (True, "")
