"""Validation criteria applied to individual request-body fields."""

from __future__ import annotations

from enum import StrEnum

from request_body_validator.errors import InvalidCriterionError


class Criterion(StrEnum):
    """Closed set of checks a field can be validated against."""

    EXISTS = "exists"
    NOT_EMPTY = "not_empty"
    NUMERIC = "numeric"
    NOT_NUMERIC = "not_numeric"
    DATE_FORMAT = "date_format"


def coerce_criterion(value: Criterion | str) -> Criterion:
    """Return ``value`` as a :class:`Criterion` or raise ``InvalidCriterionError``."""

    if isinstance(value, Criterion):
        return value
    if isinstance(value, str):
        try:
            return Criterion(value.strip().lower())
        except ValueError:
            pass
    raise InvalidCriterionError(f"Invalid validation criterion {value!r}.")
