# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from ganttline.model.project import Project
from ganttline.model.sprint import Sprint
from ganttline.model.task import Task, task_end
from ganttline.model.timeline import BarGeometry, TimelineColumn
from ganttline.time import days_between

EMPTY_LEFT = "0%"
EMPTY_WIDTH = "0%"


def bar_percentages(
    start_date: Optional[pendulum.Date],
    end_date: Optional[pendulum.Date],
    timeline_columns: list[TimelineColumn],
) -> Optional[tuple[float, float]]:
    """
    Place an interval on the timeline as (left, width) percentages.

    Offsets are measured in days from the first column's start, relative to
    the days between the first column's start and the last column's end.
    Values are not clamped: items outside the timeline give negative
    offsets or offsets beyond 100.

    Returns None when the interval cannot be placed (no columns, a missing
    date, or a timeline without length).
    """
    if not timeline_columns or start_date is None or end_date is None:
        return None

    timeline_start = timeline_columns[0]["start"]
    timeline_end = timeline_columns[-1]["end"]
    total_days = days_between(timeline_start, timeline_end)
    if total_days <= 0:
        return None

    left = days_between(timeline_start, start_date) / total_days * 100
    width = days_between(start_date, end_date) / total_days * 100
    return left, width


def calculate_bar_position(
    start_date: Optional[pendulum.Date],
    end_date: Optional[pendulum.Date],
    timeline_columns: list[TimelineColumn],
) -> BarGeometry:
    percentages = bar_percentages(start_date, end_date, timeline_columns)
    if percentages is None:
        return {"left": EMPTY_LEFT, "width": EMPTY_WIDTH}
    left, width = percentages
    return {"left": format_percent(left), "width": format_percent(width)}


def project_bar(project: Project, timeline_columns: list[TimelineColumn]) -> BarGeometry:
    return calculate_bar_position(
        project["start_date"], project["end_date"], timeline_columns
    )


def sprint_bar(sprint: Sprint, timeline_columns: list[TimelineColumn]) -> BarGeometry:
    return calculate_bar_position(
        sprint["start_date"], sprint["end_date"], timeline_columns
    )


def task_bar(task: Task, timeline_columns: list[TimelineColumn]) -> BarGeometry:
    return calculate_bar_position(task["start_date"], task_end(task), timeline_columns)


def format_percent(value: float) -> str:
    # Avoid "-0%" for values that round to zero
    if value == 0:
        value = 0.0
    return f"{value:g}%"


def parse_percent(value: str) -> float:
    return float(value.rstrip("%"))
