import pytest

from macalerter.errors import (
    AlerterError,
    AlerterRuntimeError,
    BinaryExtractionError,
    ProcessSpawnError,
)


def test_binary_extraction_message_contains_detail():
    err = BinaryExtractionError("failed to write binary")
    assert "failed to write binary" in str(err)


def test_binary_extraction_message_format():
    err = BinaryExtractionError("failed to write binary")
    assert str(err) == "failed to extract alerter binary: failed to write binary"


def test_process_spawn_message_contains_detail():
    err = ProcessSpawnError("could not execute")
    assert "could not execute" in str(err)
    assert str(err) == "failed to spawn alerter process: could not execute"


def test_runtime_message_contains_detail():
    err = AlerterRuntimeError("alerter returned error")
    assert "alerter returned error" in str(err)
    assert str(err) == "alerter runtime error: alerter returned error"


def test_detail_attribute_holds_raw_message():
    err = AlerterRuntimeError("test")
    assert err.detail == "test"


@pytest.mark.parametrize(
    "cls", [BinaryExtractionError, ProcessSpawnError, AlerterRuntimeError]
)
def test_all_variants_are_caught_as_alerter_error(cls):
    err = cls("boom")
    assert isinstance(err, AlerterError)
    assert err.detail == "boom"
    assert str(err).endswith(": boom")


def test_alerter_error_is_a_standard_exception():
    err = AlerterRuntimeError("test")
    assert isinstance(err, Exception)
    assert str(err) == "alerter runtime error: test"


def test_repr_names_variant():
    assert repr(ProcessSpawnError("x")) == "ProcessSpawnError('x')"