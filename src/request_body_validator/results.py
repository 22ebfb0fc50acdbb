"""Explicit success/failure envelope for field extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from request_body_validator.errors import FieldError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class FieldResult(Generic[T]):
    """Either a coerced field value or the error explaining why there is none."""

    value: T | None = None
    error: FieldError | None = None

    @classmethod
    def success(cls, value: T) -> FieldResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: FieldError) -> FieldResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error on failure."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or_none(self) -> T | None:
        return None if self.error is not None else self.value
