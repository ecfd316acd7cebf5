import pytest

from macalerter.errors import AlerterError, AlerterRuntimeError
from macalerter.response import AlerterResponse


def test_plain_text_content_clicked():
    response = AlerterResponse.from_plain_text("@CONTENTCLICKED")
    assert response.activation_type == "@CONTENTCLICKED"
    assert response.activation_value is None


def test_plain_text_action_clicked():
    assert AlerterResponse.from_plain_text("OK").activation_type == "OK"


def test_plain_text_timeout():
    assert AlerterResponse.from_plain_text("@TIMEOUT").activation_type == "@TIMEOUT"


def test_plain_text_closed():
    assert AlerterResponse.from_plain_text("@CLOSED").activation_type == "@CLOSED"


def test_plain_text_is_trimmed():
    assert AlerterResponse.from_plain_text("  @CLOSED\n").activation_type == "@CLOSED"


def test_json_output():
    text = '{"activationType": "@CONTENTCLICKED", "activationValue": null}'
    response = AlerterResponse.from_json(text)
    assert response.activation_type == "@CONTENTCLICKED"
    assert response.activation_value is None


def test_json_with_activation_value():
    text = '{"activationType": "@REPLIED", "activationValue": "hello back"}'
    response = AlerterResponse.from_json(text)
    assert response.activation_type == "@REPLIED"
    assert response.activation_value == "hello back"


def test_json_with_action_value():
    text = '{"activationType": "Yes", "activationValue": null}'
    response = AlerterResponse.from_json(text)
    assert response.activation_type == "Yes"
    assert response.activation_value is None


def test_json_missing_value_defaults_to_none():
    response = AlerterResponse.from_json('{"activationType": "@TIMEOUT"}')
    assert response == AlerterResponse("@TIMEOUT", None)


def test_json_extra_fields_are_ignored():
    response = AlerterResponse.from_json(
        '{"activationType": "Yes", "activationValue": "a", "deliveredAt": "now"}'
    )
    assert response == AlerterResponse("Yes", "a")


def test_invalid_json_raises():
    with pytest.raises(AlerterRuntimeError) as info:
        AlerterResponse.from_json("not valid json {{{")
    assert "failed to parse JSON" in str(info.value)


def test_missing_activation_type_raises():
    with pytest.raises(AlerterError):
        AlerterResponse.from_json('{"activationValue": "x"}')


def test_non_object_json_raises():
    with pytest.raises(AlerterRuntimeError):
        AlerterResponse.from_json("[1, 2]")


def test_wrong_value_type_raises():
    with pytest.raises(AlerterRuntimeError):
        AlerterResponse.from_json('{"activationType": "Yes", "activationValue": 3}')