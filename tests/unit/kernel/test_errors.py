"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from hermes_trace.kernel.errors import ApplicationError, BaseError


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed == {"code": "oops", "message": "oops", "detail": {"x": 1}}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestApplicationError:
    def test_is_base_error(self) -> None:
        assert isinstance(ApplicationError("x"), BaseError)

    def test_default_code(self) -> None:
        assert ApplicationError("x").code == "application_error"

    def test_caught_as_base_error(self) -> None:
        with pytest.raises(BaseError):
            raise ApplicationError("boom")
