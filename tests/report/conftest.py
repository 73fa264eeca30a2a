"""Shared validation results for report tests."""

import pytest

from jayson.models import ValidationError, ValidationResult


@pytest.fixture
def valid_result():
    return ValidationResult(valid=True)


@pytest.fixture
def invalid_result():
    return ValidationResult.from_errors(
        [
            ValidationError("user_name", "Required field missing"),
            ValidationError("", "Expected type object, got string", "<b>hi</b>"),
            ValidationError("tags", "Value must be one of: a", ["x"] * 40),
        ]
    )


@pytest.fixture
def results(valid_result, invalid_result):
    return {"good.json": valid_result, "bad.json": invalid_result}
