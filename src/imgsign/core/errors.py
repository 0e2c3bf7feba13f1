"""
Error hierarchy for imgsign.

Every failure raised by the library is an input rejection: a missing
configuration value, a malformed hex credential or a directive value outside
its domain. Nothing here is transient, so nothing is retried; errors propagate
to the caller unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Broad classification used by callers that route errors."""

    ARGUMENT = "argument"
    FORMAT = "format"
    VALIDATION = "validation"


class ImgSignError(Exception):
    """Base class for all imgsign errors."""

    default_category = ErrorCategory.ARGUMENT

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: BaseException | None = None,
        **context: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.cause = cause
        self.context: dict[str, Any] = dict(context)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly view of the error."""
        data: dict[str, Any] = {
            "error": type(self).__name__,
            "category": self.category.value,
            "message": self.message,
        }
        if self.context:
            data["context"] = dict(self.context)
        if self.cause is not None:
            data["cause"] = repr(self.cause)
        return data


class ArgumentError(ImgSignError, ValueError):
    """Required configuration is missing or empty (host, key, salt, URL, options)."""

    default_category = ErrorCategory.ARGUMENT

    def __init__(self, message: str, *, argument: str | None = None, **kwargs: Any):
        super().__init__(message, argument=argument, **kwargs)
        self.argument = argument


class FormatError(ImgSignError, ValueError):
    """A hex-encoded credential string could not be decoded."""

    default_category = ErrorCategory.FORMAT


class ValidationError(ImgSignError, ValueError):
    """A directive value is outside of its defined domain."""

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        field_value: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message, field_name=field_name, field_value=field_value, **kwargs
        )
        self.field_name = field_name
        self.field_value = field_value


__all__ = [
    "ArgumentError",
    "ErrorCategory",
    "FormatError",
    "ImgSignError",
    "ValidationError",
]
