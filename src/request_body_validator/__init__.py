"""Validation and typed extraction of decoded request-body fields."""

from __future__ import annotations

from request_body_validator.config import ValidatorConfig, load_config
from request_body_validator.criteria import Criterion
from request_body_validator.errors import (
    FieldError,
    InvalidCriterionError,
    InvalidFormatError,
    InvalidInputError,
    MissingFieldError,
    MissingOrEmptyError,
    NotNumericError,
    RequestBodyValidationError,
)
from request_body_validator.results import FieldResult
from request_body_validator.sources import ParsedBodySource, StaticBodySource
from request_body_validator.validator import FieldValidator

__version__ = "0.1.0"

__all__ = [
    "Criterion",
    "FieldError",
    "FieldResult",
    "FieldValidator",
    "InvalidCriterionError",
    "InvalidFormatError",
    "InvalidInputError",
    "MissingFieldError",
    "MissingOrEmptyError",
    "NotNumericError",
    "ParsedBodySource",
    "RequestBodyValidationError",
    "StaticBodySource",
    "ValidatorConfig",
    "__version__",
    "load_config",
]
