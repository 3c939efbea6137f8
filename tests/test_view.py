"""Tests for turning rows and geometry into terminal output."""

import pendulum
import pytest

from ganttline.color import COMPLETED_TASK_COLOR, ENTITY_COLORS, STATISTIC_COLORS
from ganttline.model.entity_type import EntityType
from ganttline.model.granularity_type import Granularity
from ganttline.service.rows import visible_rows
from ganttline.service.timeline import generate_timeline_columns
from ganttline.view.view.util import (
    fit_left_column,
    percent_span_to_chars,
    row_color,
    row_label,
)
from ganttline.view.view.views.gantt import column_char_boundaries
from ganttline.view.view.views.statistics import build_statistics_badges


def test_fit_left_column():
    assert fit_left_column("abc", 5) == "abc  "
    assert fit_left_column("abcdefgh", 6) == "abc..."
    assert fit_left_column("abcdefgh", 2) == "ab"
    assert fit_left_column("abc", 0) == ""


@pytest.mark.parametrize(
    ("left", "width", "expected"),
    [
        (0, 100, (0, 40)),
        (50, 50, (20, 40)),
        (0, 0, (0, 1)),
        (10, 0, (4, 5)),
        (-50, 75, (0, 10)),
        (90, 50, (36, 40)),
        (-50, 25, None),
        (100, 10, None),
        (10, -5, None),
    ],
)
def test_percent_span_to_chars(left, width, expected):
    assert percent_span_to_chars(left, width, 40) == expected


def test_row_label_shows_depth_and_expansion(gantt_data):
    rows = visible_rows(gantt_data, frozenset({"p1"}))

    assert row_label(rows[0]) == "▾ Website"
    assert row_label(rows[1]) == "  ▸ Sprint 1"
    assert row_label(rows[3]) == "    WEB-4 Set up analytics"


def test_row_color(gantt_data):
    today = pendulum.date(2024, 1, 9)
    rows = {
        row["id"]: row
        for row in visible_rows(gantt_data, frozenset({"p1", "s1", "s2"}))
    }

    assert row_color(rows["p1"], today) == ENTITY_COLORS[EntityType.PROJECT]
    assert row_color(rows["s1"], today) == ENTITY_COLORS[EntityType.SPRINT]
    assert row_color(rows["t1"], today) == COMPLETED_TASK_COLOR
    assert row_color(rows["t2"], today) == STATISTIC_COLORS["at_risk"]
    assert row_color(rows["t3"], today) == ENTITY_COLORS[EntityType.TASK]


def test_column_boundaries_follow_days():
    columns = generate_timeline_columns(
        Granularity.WEEKS, pendulum.date(2024, 1, 1), pendulum.date(2024, 1, 20)
    )

    # Three weeks over a 20 day timeline
    assert column_char_boundaries(columns, 20) == [0, 7, 14, 20]


def _statistics(**counts):
    statistics = {
        "done": 0,
        "in_progress": 0,
        "delay": 0,
        "at_risk": 0,
        "unplanned": 0,
        "total": 0,
        "unrecognized_status": 0,
    }
    statistics.update(counts)
    return statistics


def test_statistics_badges():
    badges = build_statistics_badges(_statistics(done=1, in_progress=2, total=3))

    assert badges.plain == (
        "done 1  in progress 2  delay 0  at risk 0  unplanned 0  total 3"
    )


def test_statistics_badges_show_unrecognized_status():
    badges = build_statistics_badges(_statistics(total=2, unrecognized_status=2))

    assert badges.plain.endswith("total 2  unrecognized status 2")
