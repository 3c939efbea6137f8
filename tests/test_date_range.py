"""Tests for resolving and padding the timeline date range."""

import pendulum
import pytest

from ganttline import time
from ganttline.model.granularity_type import Granularity
from ganttline.service.date_range import (
    get_fallback_date_range,
    pad_date_range,
    resolve_date_range,
)


def test_range_spans_every_level(gantt_data):
    date_range = resolve_date_range(gantt_data)

    assert date_range["start_date"] == pendulum.date(2024, 1, 1)
    # OPS-1 only has a due date, in the top-level backlog
    assert date_range["end_date"] == pendulum.date(2024, 5, 1)


def test_empty_data_uses_range_around_today(make_gantt_data):
    date_range = resolve_date_range(
        make_gantt_data(), today=pendulum.date(2024, 6, 15)
    )

    assert date_range == {
        "start_date": pendulum.date(2024, 3, 15),
        "end_date": pendulum.date(2024, 9, 15),
    }


def test_fallback_horizon_is_configurable(make_gantt_data):
    date_range = resolve_date_range(
        make_gantt_data(),
        today=pendulum.date(2024, 6, 15),
        fallback_horizon_months=1,
    )

    assert date_range == get_fallback_date_range(pendulum.date(2024, 6, 15), 1)
    assert date_range["start_date"] == pendulum.date(2024, 5, 15)


def test_tasks_without_dates_use_fallback(make_gantt_data, make_task):
    data = make_gantt_data(backlog_tasks=[make_task("t1", "No dates")])

    date_range = resolve_date_range(data, today=pendulum.date(2024, 6, 15))

    assert date_range["start_date"] == pendulum.date(2024, 3, 15)


def test_only_start_dates(make_gantt_data, make_task):
    data = make_gantt_data(
        backlog_tasks=[make_task("t1", "Start only", start=pendulum.date(2024, 2, 1))]
    )

    date_range = resolve_date_range(data)

    assert date_range["start_date"] == pendulum.date(2024, 2, 1)
    assert date_range["end_date"] == pendulum.date(2024, 2, 1)


def test_only_end_dates(make_gantt_data, make_task):
    data = make_gantt_data(
        backlog_tasks=[
            make_task("t1", "Due", due=pendulum.date(2024, 2, 1)),
            make_task("t2", "Due later", due=pendulum.date(2024, 3, 1)),
        ]
    )

    date_range = resolve_date_range(data)

    assert date_range["start_date"] == pendulum.date(2024, 2, 1)
    assert date_range["end_date"] == pendulum.date(2024, 3, 1)


def test_end_before_every_start_still_gives_ordered_range(
    make_gantt_data, make_task
):
    data = make_gantt_data(
        backlog_tasks=[
            make_task("t1", "Late start", start=pendulum.date(2024, 5, 1)),
            make_task("t2", "Early due", due=pendulum.date(2024, 3, 1)),
        ]
    )

    date_range = resolve_date_range(data)

    assert date_range["start_date"] == pendulum.date(2024, 3, 1)
    assert date_range["end_date"] == pendulum.date(2024, 5, 1)


@pytest.mark.parametrize(
    ("granularity", "start", "end"),
    [
        (Granularity.WEEKS, pendulum.date(2023, 12, 11), pendulum.date(2024, 2, 22)),
        (Granularity.MONTHS, pendulum.date(2023, 12, 1), pendulum.date(2024, 3, 1)),
        ("years", pendulum.date(2023, 1, 1), pendulum.date(2025, 2, 1)),
    ],
)
def test_pad_date_range(granularity, start, end):
    date_range = {
        "start_date": pendulum.date(2024, 1, 1),
        "end_date": pendulum.date(2024, 2, 1),
    }

    assert pad_date_range(date_range, granularity) == {
        "start_date": start,
        "end_date": end,
    }


def test_pad_date_range_unknown_granularity_is_unchanged():
    date_range = {
        "start_date": pendulum.date(2024, 1, 1),
        "end_date": pendulum.date(2024, 2, 1),
    }

    assert pad_date_range(date_range, "days") == date_range


@pytest.mark.parametrize("granularity", ["weeks", "months", "years"])
def test_pad_date_range_stops_at_calendar_limits(granularity):
    date_range = {
        "start_date": pendulum.date(1, 1, 10),
        "end_date": pendulum.date(9999, 12, 31),
    }

    assert pad_date_range(date_range, granularity) == {
        "start_date": time.MIN_DATE,
        "end_date": time.MAX_DATE,
    }


def test_fallback_range_stops_at_calendar_limits():
    assert get_fallback_date_range(pendulum.date(9999, 11, 1))["end_date"] == (
        time.MAX_DATE
    )
    assert get_fallback_date_range(pendulum.date(1, 2, 1))["start_date"] == (
        time.MIN_DATE
    )
