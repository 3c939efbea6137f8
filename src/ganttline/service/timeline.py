# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from ganttline import time
from ganttline.configuration import MAX_TIMELINE_COLUMNS
from ganttline.model.granularity_type import Granularity
from ganttline.model.timeline import TimelineColumn
from ganttline.service.date_range import get_fallback_date_range

logger = logging.getLogger(__name__)


def generate_timeline_columns(
    granularity: Granularity | str,
    start_date: Optional[pendulum.Date],
    end_date: Optional[pendulum.Date],
    max_columns: int = MAX_TIMELINE_COLUMNS,
) -> list[TimelineColumn]:
    """
    Split a date range into ordered, contiguous timeline columns.

    - weeks: 7-day columns anchored at start_date, labelled W1, W2, ...
    - months: calendar months covering start_date's month through end_date's
    - years: calendar years covering start_date's year through end_date's

    Each column's end is the day before the next column's start. The last
    week column may run past end_date. At most max_columns are returned; an
    unrecognized granularity or an end before the start gives no columns.

    Args:
        granularity: "weeks", "months" or "years"
        start_date: First day to cover (defaults to the fallback range)
        end_date: Last day to cover (defaults to the fallback range)
        max_columns: Cap on the number of columns

    Returns:
        List of TimelineColumn ordered by start
    """
    if start_date is None or end_date is None:
        fallback = get_fallback_date_range(time.today())
        start_date = start_date if start_date is not None else fallback["start_date"]
        end_date = end_date if end_date is not None else fallback["end_date"]

    if end_date < start_date:
        logger.debug("Timeline end %s is before start %s", end_date, start_date)
        return []

    match Granularity.from_str(str(granularity)):
        case Granularity.WEEKS:
            columns = _generate_week_columns(start_date, end_date, max_columns)
        case Granularity.MONTHS:
            columns = _generate_month_columns(start_date, end_date, max_columns)
        case Granularity.YEARS:
            columns = _generate_year_columns(start_date, end_date, max_columns)
        case _:
            logger.debug("Unknown granularity %r, no timeline columns", granularity)
            return []

    return columns


def _generate_week_columns(
    start_date: pendulum.Date, end_date: pendulum.Date, max_columns: int
) -> list[TimelineColumn]:
    columns: list[TimelineColumn] = []
    current = start_date
    week_number = 1

    while current <= end_date:
        if len(columns) >= max_columns:
            _log_truncation(max_columns, end_date)
            break
        week_end = time.add_clamped(current, days=6)
        columns.append(
            {
                "label": f"W{week_number}",
                "sublabel": f"{current.format('DD')} - {week_end.format('DD')}",
                "start": current,
                "end": week_end,
            }
        )
        if week_end >= time.MAX_DATE:
            break
        current = current.add(days=7)
        week_number += 1

    return columns


def _generate_month_columns(
    start_date: pendulum.Date, end_date: pendulum.Date, max_columns: int
) -> list[TimelineColumn]:
    columns: list[TimelineColumn] = []
    current = start_date.start_of("month")

    while current <= end_date:
        if len(columns) >= max_columns:
            _log_truncation(max_columns, end_date)
            break
        columns.append(
            {
                "label": current.format("MMM", locale="en"),
                "sublabel": current.format("YYYY"),
                "start": current,
                "end": current.end_of("month"),
            }
        )
        if current.end_of("month") >= time.MAX_DATE:
            break
        current = current.add(months=1)

    return columns


def _generate_year_columns(
    start_date: pendulum.Date, end_date: pendulum.Date, max_columns: int
) -> list[TimelineColumn]:
    columns: list[TimelineColumn] = []

    for year in range(start_date.year, end_date.year + 1):
        if len(columns) >= max_columns:
            _log_truncation(max_columns, end_date)
            break
        columns.append(
            {
                "label": str(year),
                "sublabel": "Year",
                "start": pendulum.date(year, 1, 1),
                "end": pendulum.date(year, 12, 31),
            }
        )

    return columns


def _log_truncation(max_columns: int, end_date: pendulum.Date) -> None:
    logger.debug(
        "Timeline truncated at %d columns before reaching %s", max_columns, end_date
    )
