"""Classification and coercion of raw parsed-body values.

Decoded request bodies carry loosely typed scalars: form decoding yields
strings, JSON decoding yields strings, numbers and booleans. The helpers here
make the coercion rules explicit so the validator never relies on implicit
truthiness or ``int()``/``float()`` guessing.
"""

from __future__ import annotations

import math
import re
from enum import StrEnum
from typing import Any

_NUMERIC_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_NUMERIC_WHITESPACE = " \t\n\r\v\f"


class FieldValue(StrEnum):
    """Kinds of value a parsed-body field can hold."""

    ABSENT = "absent"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OTHER = "other"


def classify(value: Any) -> FieldValue:
    """Return the :class:`FieldValue` kind of a raw body value."""

    if value is None:
        return FieldValue.ABSENT
    # bool is an int subclass, so it has to be checked first.
    if isinstance(value, bool):
        return FieldValue.BOOLEAN
    if isinstance(value, int | float):
        return FieldValue.NUMBER
    if isinstance(value, str):
        return FieldValue.STRING
    return FieldValue.OTHER


def is_empty(value: Any) -> bool:
    """Only the exact empty string counts as empty; ``0`` and ``False`` do not."""

    return isinstance(value, str) and value == ""


def _numeric_text(value: str, *, allow_whitespace: bool) -> str | None:
    text = value.strip(_NUMERIC_WHITESPACE) if allow_whitespace else value
    if _NUMERIC_PATTERN.fullmatch(text):
        return text
    return None


def is_numeric(value: Any, *, allow_whitespace: bool = True) -> bool:
    """Whether ``value`` lexically represents an integer or floating-point number."""

    kind = classify(value)
    if kind is FieldValue.NUMBER:
        return True
    if kind is FieldValue.STRING:
        return _numeric_text(value, allow_whitespace=allow_whitespace) is not None
    return False


def to_number(value: Any, *, allow_whitespace: bool = True) -> int | float | None:
    """Coerce to the narrowest numeric type, or ``None`` if not numeric.

    Numbers are returned unchanged; integer-looking strings become ``int`` and
    every other numeric string becomes ``float``.
    """

    kind = classify(value)
    if kind is FieldValue.NUMBER:
        return value
    if kind is not FieldValue.STRING:
        return None
    text = _numeric_text(value, allow_whitespace=allow_whitespace)
    if text is None:
        return None
    try:
        if _INTEGER_PATTERN.fullmatch(text):
            return int(text)
        return float(text)
    except ValueError:
        # int() refuses strings past sys.get_int_max_str_digits().
        return None


def to_int(value: Any, *, allow_whitespace: bool = True) -> int | None:
    """Coerce to ``int`` truncating toward zero; non-finite numbers yield ``None``."""

    number = to_number(value, allow_whitespace=allow_whitespace)
    if number is None:
        return None
    if isinstance(number, int):
        return number
    if not math.isfinite(number):
        return None
    return int(number)


def to_float(value: Any, *, allow_whitespace: bool = True) -> float | None:
    """Coerce to ``float``, or ``None`` if not numeric."""

    number = to_number(value, allow_whitespace=allow_whitespace)
    if number is None:
        return None
    try:
        return float(number)
    except OverflowError:
        return None


def to_string(value: Any) -> str | None:
    """Return the string form of a scalar value, or ``None`` for absent/non-scalar values."""

    kind = classify(value)
    if kind is FieldValue.STRING:
        return value
    if kind is FieldValue.BOOLEAN:
        return "true" if value else "false"
    if kind is FieldValue.NUMBER:
        try:
            return str(value)
        except ValueError:
            return None
    return None


def describe(value: Any) -> str:
    """Return ``repr(value)`` for error messages, even for integers too long to print."""

    try:
        return repr(value)
    except ValueError:
        return f"<{type(value).__name__} too large to display>"
