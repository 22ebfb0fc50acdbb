"""Permissive date/time parsing for request-body fields."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from dateutil import parser as date_parser

from request_body_validator.values import to_string

# Two defaults that disagree on every date part: input that leaves any of
# year, month or day to the default resolves differently against each.
_FILL_DEFAULTS: tuple[datetime, datetime] = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_datetime(
    value: Any,
    *,
    dayfirst: bool = False,
    yearfirst: bool = False,
) -> datetime | None:
    """Parse ``value`` into a ``datetime``, returning ``None`` when it is not a date.

    Accepts ISO-like ``YYYY-MM-DD[ HH:MM:SS]`` strings and the textual forms
    understood by ``dateutil`` (``21 March 2021``, ``03/21/2021 6pm``, ...).
    Timezone-aware input produces an aware ``datetime``. The year, month and
    day must all be present in the input; partial forms such as ``"25"`` or
    ``"March 21"`` are rejected instead of being completed from today's date,
    and a missing time of day is midnight.
    """

    if isinstance(value, datetime):
        return value

    text = to_string(value)
    if text is None:
        return None

    stripped = text.strip()
    if not stripped:
        return None

    try:
        first, second = (
            date_parser.parse(stripped, default=default, dayfirst=dayfirst, yearfirst=yearfirst)
            for default in _FILL_DEFAULTS
        )
    except (ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first
