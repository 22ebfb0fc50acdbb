"""Error types raised while validating and extracting request-body fields."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from request_body_validator.criteria import Criterion


class RequestBodyValidationError(ValueError):
    """Base error for request-body validation failures."""


class InvalidInputError(RequestBodyValidationError):
    """Raised when the parsed body is missing or is not a mapping."""


class InvalidCriterionError(RequestBodyValidationError):
    """Raised when a check is requested with an unknown criterion."""


class FieldError(RequestBodyValidationError):
    """Base error for a single field that failed its required criterion."""

    def __init__(
        self,
        message: str,
        *,
        field: str,
        criterion: Criterion,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.criterion = criterion
        self.value = value


class MissingFieldError(FieldError):
    """Raised when a required field is absent from the parsed body."""


class MissingOrEmptyError(MissingFieldError):
    """Raised when a required field is absent or holds an empty string."""


class NotNumericError(FieldError):
    """Raised when a field is absent, empty or not a number."""


class InvalidFormatError(FieldError):
    """Raised when a field is present but cannot be coerced to the requested type."""
