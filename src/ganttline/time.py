# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Any, Optional

import pendulum
from pendulum.parsing.exceptions import ParserError

logger = logging.getLogger(__name__)

MIN_DATE = pendulum.date(1, 1, 1)
MAX_DATE = pendulum.date(9999, 12, 31)


def today() -> pendulum.Date:
    return pendulum.today("local").date()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse an ISO date or datetime string, keeping only the calendar date."""
    parsed = pendulum.parse(date_str, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    raise ValueError(f"Not a date: {date_str}")


def date_from_value_optional(value: Any) -> Optional[pendulum.Date]:
    """
    Convert a payload value to a pendulum.Date.

    Accepts ISO strings and the date/datetime objects YAML produces. Values
    that cannot be read as a date give None instead of raising.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            return date_from_str(value.strip())
        except (ValueError, ParserError):
            logger.debug("Ignoring malformed date %r", value)
            return None
    logger.debug("Ignoring non-date value %r", value)
    return None


def date_to_str(date: pendulum.Date) -> str:
    return date.to_date_string()


def date_to_display_str(date: pendulum.Date) -> str:
    """Format a date as DD/MM/YYYY."""
    return date.format("DD/MM/YYYY")


def date_to_display_str_optional(date: Optional[pendulum.Date]) -> str:
    if date is None:
        return ""
    return date_to_display_str(date)


def days_between(start: pendulum.Date, end: pendulum.Date) -> int:
    """Signed number of days from start to end."""
    return start.diff(end, False).in_days()


def add_clamped(date: pendulum.Date, **kwargs: int) -> pendulum.Date:
    """Add a duration, stopping at MAX_DATE instead of overflowing."""
    try:
        return date.add(**kwargs)
    except (OverflowError, ValueError):
        return MAX_DATE


def subtract_clamped(date: pendulum.Date, **kwargs: int) -> pendulum.Date:
    """Subtract a duration, stopping at MIN_DATE instead of overflowing."""
    try:
        return date.subtract(**kwargs)
    except (OverflowError, ValueError):
        return MIN_DATE
