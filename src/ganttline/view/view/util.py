# SPDX-License-Identifier: MIT

import math
from typing import Optional

import pendulum

from ganttline.color import COMPLETED_TASK_COLOR, ENTITY_COLORS, STATISTIC_COLORS
from ganttline.configuration import AT_RISK_DAYS
from ganttline.model.entity_type import EntityType
from ganttline.model.row import Row
from ganttline.model.task import Task
from ganttline.service.statistics import classify_task


def fit_left_column(text: str, width: int) -> str:
    """Pad or cut text to exactly width characters."""
    if width <= 0:
        return ""
    if len(text) > width:
        if width <= 3:
            return text[:width]
        return text[: width - 3] + "..."
    return text.ljust(width)


def percent_span_to_chars(
    left: float, width: float, chart_width: int
) -> Optional[tuple[int, int]]:
    """
    Convert a (left, width) percentage pair to a [start, end) character span.

    Bars are clipped to the chart. A bar that lies entirely outside the
    chart, or has a negative width, gives None. A bar inside the chart is at
    least one character wide.
    """
    if chart_width <= 0 or width < 0:
        return None

    start = math.floor(left / 100 * chart_width)
    end = math.ceil((left + width) / 100 * chart_width)
    if left + width < 0 or start >= chart_width:
        return None

    start = max(start, 0)
    end = min(max(end, start + 1), chart_width)
    return start, end


def row_label(row: Row) -> str:
    marker = "  "
    if row["expandable"]:
        marker = "▾ " if row["expanded"] else "▸ "
    return f"{'  ' * row['depth']}{marker}{row['name']}"


def row_color(
    row: Row, today: pendulum.Date, at_risk_days: int = AT_RISK_DAYS
) -> str:
    if row["entity_type"] != EntityType.TASK:
        return ENTITY_COLORS[row["entity_type"]]

    task: Task = row["item"]  # type: ignore[assignment]
    match classify_task(task, today, at_risk_days):
        case "done":
            return COMPLETED_TASK_COLOR
        case "delay":
            return STATISTIC_COLORS["delay"]
        case "at_risk":
            return STATISTIC_COLORS["at_risk"]
    return ENTITY_COLORS[EntityType.TASK]
