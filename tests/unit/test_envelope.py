"""Unit tests for the envelope models and constructors."""

import pytest
from pydantic import TypeAdapter, ValidationError

from jsend import (
    Envelope,
    ErrorEnvelope,
    FailEnvelope,
    JSendStatus,
    SuccessEnvelope,
    error,
    fail,
    success,
)


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


class TestSuccess:
    def test_success_with_data(self):
        data = {"key": "value"}
        env = success(data)
        assert isinstance(env, SuccessEnvelope)
        assert env.status == "success"
        assert env.data == data
        assert env.message is None
        assert env.code is None

    def test_success_without_data(self):
        env = success()
        assert env.data is None
        assert env == success(None)

    def test_generic_parametrization(self):
        env = SuccessEnvelope[list[int]](data=[1, 2, 3])
        assert env.data == [1, 2, 3]
        assert env == success([1, 2, 3])


class TestFail:
    def test_fail_with_data(self):
        env = fail({"title": "A title is required"})
        assert isinstance(env, FailEnvelope)
        assert env.status == "fail"
        assert env.data == {"title": "A title is required"}
        assert env.message is None
        assert env.code is None

    def test_fail_with_null_data(self):
        env = fail(None)
        assert env.data is None

    def test_fail_requires_data(self):
        with pytest.raises(ValidationError):
            FailEnvelope()


class TestError:
    def test_error_with_all_fields(self):
        env = error("error message", 123, {"key": "value"})
        assert isinstance(env, ErrorEnvelope)
        assert env.status == "error"
        assert env.message == "error message"
        assert env.code == 123
        assert env.data == {"key": "value"}

    def test_error_only_message(self):
        env = error("error message")
        assert env.message == "error message"
        assert env.code is None
        assert env.data is None

    def test_empty_message_is_allowed(self):
        assert error("").message == ""

    def test_message_must_be_string(self):
        with pytest.raises(ValidationError):
            error(5)  # type: ignore[arg-type]

    def test_explicit_null_code_is_rejected(self):
        with pytest.raises(ValidationError):
            ErrorEnvelope(message="boom", code=None)

    def test_explicit_null_data_differs_from_absent(self):
        explicit = ErrorEnvelope(message="m", data=None)
        assert explicit.data is None
        assert explicit != error("m")
        assert explicit == ErrorEnvelope(message="m", data=None)
        assert error("m", data=None) == ErrorEnvelope(message="m")

    def test_code_must_be_integer(self):
        with pytest.raises(ValidationError):
            error("boom", code="500")  # type: ignore[arg-type]
        with pytest.raises(ValidationError):
            error("boom", code=True)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------


class TestValueSemantics:
    def test_envelopes_are_frozen(self):
        env = success({"a": 1})
        with pytest.raises(ValidationError):
            env.data = {"a": 2}

    def test_variants_with_same_data_differ(self):
        assert success({"a": 1}) != fail({"a": 1})

    def test_equal_by_value(self):
        assert error("m", 1, [1, 2]) == error("m", 1, [1, 2])
        assert error("m", 1) != error("m", 2)

    def test_status_literal_is_enforced(self):
        with pytest.raises(ValidationError):
            SuccessEnvelope(status="fail", data=None)


# ---------------------------------------------------------------------------
# JSendStatus / Envelope union
# ---------------------------------------------------------------------------


class TestJSendStatus:
    def test_values(self):
        assert JSendStatus.SUCCESS == "success"
        assert JSendStatus.FAIL == "fail"
        assert JSendStatus.ERROR == "error"

    def test_from_string(self):
        assert JSendStatus("fail") is JSendStatus.FAIL

    def test_invalid_status(self):
        with pytest.raises(ValueError):
            JSendStatus("ok")


class TestEnvelopeUnion:
    def test_type_adapter_resolves_variant_by_status(self):
        adapter = TypeAdapter(Envelope)
        env = adapter.validate_python({"status": "error", "message": "m", "code": 7})
        assert env == error("m", 7)

    def test_type_adapter_serializes_through_variant(self):
        adapter = TypeAdapter(Envelope)
        assert adapter.dump_python(error("m"), mode="json") == {"status": "error", "message": "m"}
