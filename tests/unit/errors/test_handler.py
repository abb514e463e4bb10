"""Tests for error message extraction."""

import pytest

from urgentcargus.errors.handler import decode_error_body, extract_error_message


@pytest.mark.unit
def test_message_field():
    assert extract_error_message('{"message": "Bad input"}', "fallback") == "Bad input"


@pytest.mark.unit
def test_error_field():
    assert extract_error_message('{"Error": "Nope"}', "fallback") == "Nope"


@pytest.mark.unit
def test_message_wins_over_error():
    """`message` is checked before `Error`."""
    body = '{"Error": "second", "message": "first"}'

    assert extract_error_message(body, "fallback") == "first"


@pytest.mark.unit
def test_empty_message_falls_through_to_error():
    body = '{"message": "", "Error": "Nope"}'

    assert extract_error_message(body, "fallback") == "Nope"


@pytest.mark.unit
def test_non_string_message_ignored():
    body = '{"message": null, "Error": {"code": 3}}'

    assert extract_error_message(body, "fallback") == "fallback"


@pytest.mark.unit
def test_string_body():
    assert extract_error_message('"plain string error"', "fallback") == "plain string error"


@pytest.mark.unit
def test_empty_string_body_uses_default():
    assert extract_error_message('""', "fallback") == "fallback"


@pytest.mark.unit
@pytest.mark.parametrize("body", ['{"Status": 1}', "[1, 2]", "42", "true", "null"])
def test_other_shapes_use_default(body):
    assert extract_error_message(body, "fallback") == "fallback"


@pytest.mark.unit
@pytest.mark.parametrize("body", ["<html>Bad Gateway</html>", "plain text", '{"message": '])
def test_undecodable_body_uses_default(body):
    """Bodies that are not JSON fall back instead of raising."""
    assert extract_error_message(body, "fallback") == "fallback"


@pytest.mark.unit
def test_decode_error_body():
    assert decode_error_body('{"a": [1, 2]}') == {"a": [1, 2]}
    assert decode_error_body("not json") is None
