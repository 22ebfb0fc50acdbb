"""Typed getter tests, covering strict and lenient extraction."""

from __future__ import annotations

from datetime import datetime

import pytest

from request_body_validator import (
    Criterion,
    FieldValidator,
    InvalidFormatError,
    MissingFieldError,
    MissingOrEmptyError,
    NotNumericError,
)


def test_get_checkbox(validator: FieldValidator) -> None:
    assert validator.get_checkbox("checkboxPresent") is True
    assert validator.get_checkbox("falseFlag") is True
    assert validator.get_checkbox("waitItDoesNotExist") is False
    assert validator.failed_fields() == ["waitItDoesNotExist"]


def test_get_datetime(validator: FieldValidator) -> None:
    assert validator.get_datetime("datetime") == datetime(2021, 3, 21, 18, 8, 23)


def test_get_datetime_lenient_returns_none_for_unparsable_value(
    validator: FieldValidator,
) -> None:
    assert validator.get_datetime("invalidDatetime", strict=False) is None
    assert validator.errors == {"invalidDatetime": Criterion.DATE_FORMAT}


def test_get_datetime_strict_embeds_raw_value(validator: FieldValidator) -> None:
    with pytest.raises(
        InvalidFormatError, match="20203-21 180823 is not a valid date format"
    ) as excinfo:
        validator.get_datetime("invalidDatetime")

    assert excinfo.value.field == "invalidDatetime"
    assert excinfo.value.value == "20203-21 180823"


def test_get_datetime_distinguishes_missing_from_invalid(validator: FieldValidator) -> None:
    with pytest.raises(MissingFieldError, match="'absent' does not exist") as excinfo:
        validator.get_datetime("absent")
    assert not isinstance(excinfo.value, InvalidFormatError)

    with pytest.raises(MissingOrEmptyError, match="'empty' is empty"):
        validator.get_datetime("empty")

    assert validator.get_datetime("absent", False) is None
    assert validator.get_datetime("empty", strict=False) is None


def test_get_numeric_keeps_narrowest_type(validator: FieldValidator) -> None:
    assert validator.get_numeric("numeric0") == 25
    assert isinstance(validator.get_numeric("numeric0"), int)
    assert validator.get_numeric("numeric1") == 27.5
    assert validator.get_numeric("floating") == 1.22
    assert validator.get_numeric("integer") == 36
    assert validator.get_numeric("edfiwgjewig", False) is None


def test_get_numeric_strict_raises_with_value(validator: FieldValidator) -> None:
    with pytest.raises(NotNumericError, match="'text' is not numeric: 'lorem'"):
        validator.get_numeric("text")

    with pytest.raises(NotNumericError, match="'absent' does not exist or is not numeric"):
        validator.get_numeric("absent")


def test_get_int_truncates_toward_zero(validator: FieldValidator) -> None:
    assert validator.get_int("numeric0") == 25
    assert validator.get_int("numeric1") == 27
    assert validator.get_int("floating") == 1
    assert validator.get_int("integer") == 36
    assert validator.get_int("32zu542", False) is None


def test_get_int_truncates_negative_values() -> None:
    validator = FieldValidator.from_mapping({"debit": "-27.9", "exp": "1.5e2"})

    assert validator.get_int("debit") == -27
    assert validator.get_int("exp") == 150


def test_get_int_rejects_non_finite_number() -> None:
    validator = FieldValidator.from_mapping({"huge": "1e999"})

    assert validator.get_float("huge") == float("inf")
    with pytest.raises(NotNumericError):
        validator.get_int("huge")
    assert validator.errors == {"huge": Criterion.NUMERIC}


def test_numeric_getters_handle_overlong_integer_strings() -> None:
    validator = FieldValidator.from_mapping({"n": "1" * 5000})

    assert validator.check_field("n", Criterion.NUMERIC) is True
    assert validator.get_numeric("n", strict=False) is None
    assert validator.get_int("n", strict=False) is None
    assert validator.get_float("n", strict=False) is None
    with pytest.raises(NotNumericError, match="'n' is not a finite number"):
        validator.get_int("n")
    assert validator.errors == {"n": Criterion.NUMERIC}


def test_get_float_handles_integers_beyond_float_range() -> None:
    validator = FieldValidator.from_mapping({"big": 10**400, "digits": "1" + "0" * 400})

    assert validator.get_float("big", strict=False) is None
    assert validator.get_float("digits", strict=False) is None
    assert validator.get_int("digits") == 10**400
    with pytest.raises(NotNumericError):
        validator.get_float("big")


def test_oversized_integer_value_is_reported_without_printing_it() -> None:
    validator = FieldValidator.from_mapping({"big": 10**5000})

    with pytest.raises(NotNumericError, match="<int too large to display>"):
        validator.get_float("big")
    assert validator.get_string("big", strict=False) is None


def test_get_float(validator: FieldValidator) -> None:
    assert validator.get_float("numeric0") == 25.0
    assert isinstance(validator.get_float("numeric0"), float)
    assert validator.get_float("numeric1") == 27.5
    assert validator.get_float("floating") == 1.22
    assert validator.get_float("integer") == 36.0
    assert validator.get_float("apwqfqow", False) is None


def test_get_string(validator: FieldValidator) -> None:
    assert validator.get_string("text") == "lorem"
    assert validator.get_string("numeric1") == "27.5"
    assert validator.get_string("floating") == "1.22"
    assert validator.get_string("integer") == "36"
    assert validator.get_string("checkboxPresent") == "true"
    assert validator.get_string("falseFlag") == "false"
    assert validator.get_string("empty") == ""
    assert validator.get_string("qdqf", False) is None


def test_get_string_strict_raises_missing_field(validator: FieldValidator) -> None:
    with pytest.raises(MissingFieldError, match="'qdqf' does not exist"):
        validator.get_string("qdqf")


def test_get_string_rejects_nested_values() -> None:
    validator = FieldValidator.from_mapping({"tags": ["a", "b"]})

    with pytest.raises(InvalidFormatError, match="'tags' does not hold a scalar value"):
        validator.get_string("tags")
    assert validator.get_string("tags", strict=False) is None


def test_get_string_non_empty(validator: FieldValidator) -> None:
    assert validator.get_string_non_empty("text") == "lorem"
    assert validator.get_string_non_empty("numeric1") == "27.5"
    assert validator.get_string_non_empty("floating") == "1.22"
    assert validator.get_string_non_empty("zero") == "0"
    assert validator.get_string_non_empty("empty", False) is None


def test_get_string_non_empty_strict_raises_missing_or_empty(
    validator: FieldValidator,
) -> None:
    with pytest.raises(MissingOrEmptyError, match="'empty' is empty"):
        validator.get_string_non_empty("empty")
    with pytest.raises(MissingOrEmptyError, match="'absent' does not exist"):
        validator.get_string_non_empty("absent")


def test_getter_failures_are_tracked(validator: FieldValidator) -> None:
    validator.get_int("text", strict=False)
    validator.get_string("absent", strict=False)
    validator.get_string_non_empty("empty", strict=False)

    assert validator.errors == {
        "text": Criterion.NUMERIC,
        "absent": Criterion.EXISTS,
        "empty": Criterion.NOT_EMPTY,
    }


def test_try_getters_return_results_without_raising(validator: FieldValidator) -> None:
    good = validator.try_get_int("numeric1")
    bad = validator.try_get_int("text")

    assert good.ok and good.value == 27
    assert not bad.ok
    assert isinstance(bad.error, NotNumericError)
    assert bad.value_or_none() is None


def test_end_to_end_numeric_extraction() -> None:
    validator = FieldValidator.from_mapping(
        {"numeric0": "25", "numeric1": "27.5", "integer": 36, "floating": 1.22}
    )
    names = ["numeric0", "numeric1", "integer", "floating"]

    assert [validator.get_int(name) for name in names] == [25, 27, 36, 1]
    assert [validator.get_float(name) for name in names] == [25.0, 27.5, 36.0, 1.22]
    assert validator.failed_fields() == []
