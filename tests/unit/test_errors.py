"""Unit tests for the error hierarchy."""

from imgsign.core.errors import (
    ArgumentError,
    ErrorCategory,
    FormatError,
    ImgSignError,
    ValidationError,
)


def test_errors_share_base_and_value_error() -> None:
    for cls in (ArgumentError, FormatError, ValidationError):
        assert issubclass(cls, ImgSignError)
        assert issubclass(cls, ValueError)


def test_categories() -> None:
    assert ArgumentError("x").category is ErrorCategory.ARGUMENT
    assert FormatError("x").category is ErrorCategory.FORMAT
    assert ValidationError("x").category is ErrorCategory.VALIDATION


def test_validation_error_carries_field() -> None:
    error = ValidationError("width must be >= 0", field_name="width", field_value=-1)

    assert error.field_name == "width"
    assert error.field_value == -1
    assert str(error) == "width must be >= 0"
    assert error.to_dict() == {
        "error": "ValidationError",
        "category": "validation",
        "message": "width must be >= 0",
        "context": {"field_name": "width", "field_value": -1},
    }


def test_cause_is_reported() -> None:
    cause = KeyError("k")
    error = ArgumentError("missing", argument="key", cause=cause)

    assert error.argument == "key"
    assert error.cause is cause
    assert error.to_dict()["cause"] == repr(cause)
