"""Field-level validation and typed extraction over a decoded request body."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any, TypeVar

from request_body_validator.config import ValidatorConfig
from request_body_validator.criteria import Criterion, coerce_criterion
from request_body_validator.dates import parse_datetime
from request_body_validator.errors import (
    InvalidCriterionError,
    InvalidFormatError,
    InvalidInputError,
    MissingFieldError,
    MissingOrEmptyError,
    NotNumericError,
)
from request_body_validator.results import FieldResult
from request_body_validator.sources import ParsedBodySource, StaticBodySource
from request_body_validator.values import (
    describe,
    is_empty,
    is_numeric,
    to_float,
    to_int,
    to_number,
    to_string,
)

_LOGGER = logging.getLogger(__name__)

_INVALID_BODY_MESSAGE = "Only supports parsed body in the form of a mapping."

T = TypeVar("T")


class FieldValidator:
    """Validate and extract fields of one request's parsed body.

    Every failed tracked check is remembered in an error set keyed by field
    name, so a handler can run several checks and then report all offending
    fields at once through :meth:`failed_fields`. The error set accumulates
    for the lifetime of the instance; call :meth:`clear_errors` between
    unrelated validation rounds.

    Instances are not thread-safe. Create one per request.
    """

    def __init__(self, source: ParsedBodySource, config: ValidatorConfig | None = None) -> None:
        body = source.get_parsed_body()
        if body is None or not isinstance(body, Mapping):
            raise InvalidInputError(_INVALID_BODY_MESSAGE)

        self._body: Mapping[str, Any] = MappingProxyType(dict(body))
        self._config = config if config is not None else ValidatorConfig()
        self._errors: dict[str, Criterion] = {}

    @classmethod
    def from_mapping(cls, body: object, config: ValidatorConfig | None = None) -> FieldValidator:
        """Build a validator over a body that was decoded elsewhere."""

        return cls(StaticBodySource(body), config)

    @property
    def body(self) -> Mapping[str, Any]:
        return self._body

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def errors(self) -> Mapping[str, Criterion]:
        """Snapshot of the fields that failed a tracked check and their last criterion."""

        return MappingProxyType(dict(self._errors))

    def check_field(self, name: str, criterion: Criterion | str, *, track: bool = True) -> bool:
        """Check one field against ``criterion``.

        Raises ``InvalidCriterionError`` for an unknown criterion. When
        ``track`` is set, a failure is recorded in the error set, replacing
        any earlier criterion stored for the same field.
        """

        resolved = coerce_criterion(criterion)
        passed = self._evaluate(name, resolved)
        if not passed and track:
            self._record_failure(name, resolved)
        return passed

    def check_all(self, names: Iterable[str], criterion: Criterion | str) -> bool:
        """Check fields in order, stopping at the first one that fails.

        A single field name may be passed as a plain string.
        """

        resolved = coerce_criterion(criterion)
        if isinstance(names, str):
            names = (names,)
        for name in names:
            if not self.check_field(name, resolved):
                return False
        return True

    def failed_fields(self) -> list[str]:
        """Fields with a recorded failure, in the order they first failed."""

        return list(self._errors)

    def clear_errors(self) -> None:
        self._errors.clear()

    def get_checkbox(self, name: str) -> bool:
        """Whether a checkbox field was submitted; absence means unchecked."""

        return self.check_field(name, Criterion.EXISTS)

    def try_get_datetime(self, name: str) -> FieldResult[datetime]:
        if not self.check_field(name, Criterion.NOT_EMPTY):
            return FieldResult.failure(
                self._missing_error(name, Criterion.NOT_EMPTY, MissingFieldError)
            )

        value = self._body[name]
        parsed = self._parse_datetime(value)
        if parsed is None:
            self._record_failure(name, Criterion.DATE_FORMAT)
            return FieldResult.failure(
                InvalidFormatError(
                    f"{_display(value)} is not a valid date format (field '{name}').",
                    field=name,
                    criterion=Criterion.DATE_FORMAT,
                    value=value,
                )
            )
        return FieldResult.success(parsed)

    def get_datetime(self, name: str, strict: bool = True) -> datetime | None:
        """Return the field parsed as a ``datetime``.

        Raises ``MissingFieldError`` if the field is absent (``MissingOrEmptyError``
        if it is an empty string) and ``InvalidFormatError`` if it does not
        parse. With ``strict=False`` those cases return ``None`` instead.
        """

        return self._resolve(self.try_get_datetime(name), strict)

    def try_get_numeric(self, name: str) -> FieldResult[int | float]:
        return self._try_numeric(name, to_number)

    def get_numeric(self, name: str, strict: bool = True) -> int | float | None:
        """Return a numeric field as ``int`` or ``float``, keeping numbers as submitted."""

        return self._resolve(self.try_get_numeric(name), strict)

    def try_get_int(self, name: str) -> FieldResult[int]:
        return self._try_numeric(name, to_int)

    def get_int(self, name: str, strict: bool = True) -> int | None:
        """Return a numeric field truncated toward zero."""

        return self._resolve(self.try_get_int(name), strict)

    def try_get_float(self, name: str) -> FieldResult[float]:
        return self._try_numeric(name, to_float)

    def get_float(self, name: str, strict: bool = True) -> float | None:
        return self._resolve(self.try_get_float(name), strict)

    def try_get_string(self, name: str) -> FieldResult[str]:
        return self._try_string(name, Criterion.EXISTS, MissingFieldError)

    def get_string(self, name: str, strict: bool = True) -> str | None:
        """Return the field as a string; an empty string is a valid value."""

        return self._resolve(self.try_get_string(name), strict)

    def try_get_string_non_empty(self, name: str) -> FieldResult[str]:
        return self._try_string(name, Criterion.NOT_EMPTY, MissingOrEmptyError)

    def get_string_non_empty(self, name: str, strict: bool = True) -> str | None:
        return self._resolve(self.try_get_string_non_empty(name), strict)

    def _evaluate(self, name: str, criterion: Criterion) -> bool:
        value = self._body.get(name)
        if criterion is Criterion.EXISTS:
            return value is not None
        if value is None or is_empty(value):
            return False
        if criterion is Criterion.NOT_EMPTY:
            return True
        if criterion is Criterion.NUMERIC:
            return self._is_numeric(value)
        if criterion is Criterion.NOT_NUMERIC:
            return not self._is_numeric(value)
        if criterion is Criterion.DATE_FORMAT:
            return self._parse_datetime(value) is not None
        raise InvalidCriterionError(f"Invalid validation criterion {criterion!r}.")

    def _record_failure(self, name: str, criterion: Criterion) -> None:
        self._errors[name] = criterion
        if self._config.log_failures:
            _LOGGER.debug(
                "field_check_failed field=%s criterion=%s",
                name,
                criterion,
                extra={"field": name, "criterion": str(criterion)},
            )

    def _is_numeric(self, value: Any) -> bool:
        return is_numeric(value, allow_whitespace=self._config.allow_numeric_whitespace)

    def _parse_datetime(self, value: Any) -> datetime | None:
        return parse_datetime(
            value,
            dayfirst=self._config.dayfirst,
            yearfirst=self._config.yearfirst,
        )

    def _try_numeric(self, name: str, coerce: Callable[..., T | None]) -> FieldResult[T]:
        if not self.check_field(name, Criterion.NUMERIC):
            return FieldResult.failure(self._not_numeric_error(name))

        value = self._body[name]
        coerced = coerce(value, allow_whitespace=self._config.allow_numeric_whitespace)
        if coerced is None:
            # Lexically numeric but not representable, e.g. "1e999" as an int.
            self._record_failure(name, Criterion.NUMERIC)
            return FieldResult.failure(
                NotNumericError(
                    f"Field '{name}' is not a finite number: {describe(value)}.",
                    field=name,
                    criterion=Criterion.NUMERIC,
                    value=value,
                )
            )
        return FieldResult.success(coerced)

    def _try_string(
        self, name: str, criterion: Criterion, error_type: type[MissingFieldError]
    ) -> FieldResult[str]:
        if not self.check_field(name, criterion):
            return FieldResult.failure(self._missing_error(name, criterion, error_type))

        value = self._body[name]
        text = to_string(value)
        if text is None:
            self._record_failure(name, criterion)
            return FieldResult.failure(
                InvalidFormatError(
                    f"Field '{name}' does not hold a scalar value: {describe(value)}.",
                    field=name,
                    criterion=criterion,
                    value=value,
                )
            )
        return FieldResult.success(text)

    def _missing_error(
        self, name: str, criterion: Criterion, error_type: type[MissingFieldError]
    ) -> MissingFieldError:
        value = self._body.get(name)
        if value is None:
            return error_type(f"Field '{name}' does not exist.", field=name, criterion=criterion)
        return MissingOrEmptyError(
            f"Field '{name}' is empty.", field=name, criterion=criterion, value=value
        )

    def _not_numeric_error(self, name: str) -> NotNumericError:
        value = self._body.get(name)
        if value is None:
            message = f"Field '{name}' does not exist or is not numeric."
        else:
            message = f"Field '{name}' is not numeric: {describe(value)}."
        return NotNumericError(message, field=name, criterion=Criterion.NUMERIC, value=value)

    def _resolve(self, result: FieldResult[T], strict: bool) -> T | None:
        if strict:
            return result.unwrap()
        if result.error is not None and self._config.log_failures:
            _LOGGER.debug(
                "field_lenient_fallback field=%s error=%s",
                result.error.field,
                type(result.error).__name__,
            )
        return result.value_or_none()


def _display(value: Any) -> str:
    text = to_string(value)
    return text if text is not None else describe(value)
