"""Tests for validation outcome adapters and pydantic helpers."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from railcase import (
    Failure,
    Success,
    ValidationFailed,
    ValidationOutcome,
    begin,
    from_validation,
    is_failure,
    is_success,
    safe_parse,
    validate,
)


class User(BaseModel):
    name: str = Field(min_length=1)
    age: int = Field(ge=0)


# ═════════════════════════════════════════════════════════════════════════════
# from_validation
# ═════════════════════════════════════════════════════════════════════════════


def test_success_with_data() -> None:
    assert from_validation({"success": True, "data": {"a": 1}}) == Success({"a": 1})


def test_success_with_falsy_data_is_kept() -> None:
    assert from_validation({"success": True, "data": 0}) == Success(0)


def test_success_without_data_uses_default_error() -> None:
    result = from_validation({"success": True, "data": None})

    assert is_failure(result)
    assert isinstance(result.error, ValidationFailed)
    assert result.error.message == "Validation failed"


def test_failure_without_error_uses_same_default() -> None:
    missing_data = from_validation({"success": True})
    no_error = from_validation({"success": False})

    assert no_error == missing_data == Failure(ValidationFailed("Validation failed"))


def test_failure_carries_outcome_error() -> None:
    error = {"issues": ["name is required"]}

    assert from_validation({"success": False, "error": error}) == Failure(error)


def test_explicit_default_error() -> None:
    assert from_validation({"success": False}, default_error="invalid") == Failure("invalid")


def test_attribute_shaped_outcome() -> None:
    outcome = SimpleNamespace(success=True, data=[1, 2, 3], error=None)

    assert from_validation(outcome) == Success([1, 2, 3])
    assert from_validation(ValidationOutcome(False, error="bad")) == Failure("bad")


def test_default_message_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from railcase import clear_settings_cache

    monkeypatch.setenv("RAILCASE_VALIDATION_DEFAULT_MESSAGE", "payload rejected")
    clear_settings_cache()

    result = from_validation({"success": False})

    assert result.unwrap_err().message == "payload rejected"


# ═════════════════════════════════════════════════════════════════════════════
# pydantic: safe_parse / validate
# ═════════════════════════════════════════════════════════════════════════════


def test_safe_parse_model() -> None:
    outcome = safe_parse(User, {"name": "ada", "age": 36})

    assert outcome.success
    assert outcome.data == User(name="ada", age=36)
    assert outcome.error is None


def test_safe_parse_does_not_raise() -> None:
    outcome = safe_parse(User, {"name": "", "age": -1})

    assert not outcome.success
    assert outcome.data is None
    assert isinstance(outcome.error, ValidationError)
    assert outcome.error.error_count() == 2


def test_validate_model() -> None:
    assert validate(User, {"name": "ada", "age": "36"}) == Success(User(name="ada", age=36))


def test_validate_failure_carries_validation_error() -> None:
    result = validate(User, {"name": "ada"})

    assert is_failure(result)
    assert isinstance(result.error, ValidationError)


def test_validate_type_and_adapter() -> None:
    assert validate(int, "12") == Success(12)
    assert validate(TypeAdapter(list[int]), ["1", 2]) == Success([1, 2])
    assert is_failure(validate(int, "twelve"))


def test_validate_strict() -> None:
    assert is_failure(validate(int, "12", strict=True))


def test_validate_none_payload_is_a_failure() -> None:
    result = validate(int | None, None)

    assert result == Failure(ValidationFailed("Validation failed"))


@pytest.mark.asyncio
async def test_validate_inside_chain() -> None:
    def parse_user(raw: dict[str, object]):
        return validate(User, raw)

    ok = await begin({"name": "ada", "age": 36}).chain(parse_user).map(lambda u: u.name).run()
    bad = await begin({"name": "ada", "age": -1}).chain(parse_user).map(lambda u: u.name).run()

    assert ok == Success("ada")
    assert is_failure(bad) and not is_success(bad)
    assert isinstance(bad.error, ValidationError)
