# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.console import Console, Group
from rich.markup import escape
from rich.padding import Padding
from rich.text import Text

from ganttline.configuration import AT_RISK_DAYS
from ganttline.model.granularity_type import Granularity
from ganttline.model.row import Row
from ganttline.model.schedule_statistics import ScheduleStatistics
from ganttline.model.timeline import TimelineColumn
from ganttline.service.bar_position import bar_percentages
from ganttline.time import date_to_str
from ganttline.view.view.util import (
    fit_left_column,
    percent_span_to_chars,
    row_color,
    row_label,
)
from ganttline.view.view.views.header import header
from ganttline.view.view.views.statistics import build_statistics_badges


def gantt_view(
    source_name: str,
    rows: list[Row],
    timeline_columns: list[TimelineColumn],
    statistics: ScheduleStatistics,
    today: pendulum.Date,
    granularity: Granularity,
    keyword: Optional[str] = None,
    left_column_width: int = 40,
    chart_width: Optional[int] = None,
    at_risk_days: int = AT_RISK_DAYS,
) -> None:
    """
    Display rows as bars against the timeline columns.

    Bars are placed with the same percentage geometry a browser chart uses,
    scaled to the chart's character width and clipped to it. Header columns
    are sized by the number of days they cover so they line up with the bars.

    Args:
        source_name: The name of the payload being displayed
        rows: Visible rows in display order
        timeline_columns: Columns of the timeline
        statistics: Schedule-health counts for the complete hierarchy
        today: Reference date used to color tasks
        granularity: The granularity the columns were generated with
        keyword: Active search keyword, shown in the sub-header
        left_column_width: Width of the left column for item names
        chart_width: Width of the timeline (defaults to the remaining terminal width)
        at_risk_days: How many days ahead a deadline counts as at risk
    """
    sub_header = "gantt" if not keyword else f"gantt - search: {escape(keyword)}"
    header(source_name, sub_header)

    console = Console()

    if not timeline_columns:
        console.print("\n[dim]No timeline columns to display[/dim]\n")
        console.print(build_statistics_badges(statistics))
        return

    if chart_width is None:
        chart_width = max(console.width - left_column_width, 10)

    timeline_start = timeline_columns[0]["start"]
    timeline_end = timeline_columns[-1]["end"]
    console.print(
        f"\n[bold]{date_to_str(timeline_start)} to "
        f"{date_to_str(timeline_end)}[/bold] (granularity: {granularity})\n"
    )

    chart_elements: list[Text] = []
    chart_elements.extend(
        _build_column_header(timeline_columns, left_column_width, chart_width)
    )
    chart_elements.append(Text("─" * (left_column_width + chart_width), style="dim"))

    if not rows:
        chart_elements.append(Text("No matching items", style="dim"))

    for row in rows:
        chart_elements.append(
            _build_row(
                row,
                timeline_columns,
                today,
                left_column_width,
                chart_width,
                at_risk_days,
            )
        )

    console.print(Group(*chart_elements))
    console.print(Padding(build_statistics_badges(statistics), (1, 0, 1, 0)))


def column_char_boundaries(
    timeline_columns: list[TimelineColumn], chart_width: int
) -> list[int]:
    """
    Character offset at which each column starts, plus the chart width.

    Offsets follow the bar geometry so a column header sits above the bars
    of the days it covers.
    """
    boundaries: list[int] = []
    for column in timeline_columns:
        percentages = bar_percentages(
            column["start"], column["end"], timeline_columns
        )
        left = percentages[0] if percentages is not None else 0.0
        boundaries.append(round(left / 100 * chart_width))
    boundaries.append(chart_width)
    return boundaries


def _build_column_header(
    timeline_columns: list[TimelineColumn],
    left_column_width: int,
    chart_width: int,
) -> list[Text]:
    """
    Build the label and sublabel rows above the chart.

    Columns too narrow for their text are left blank.
    """
    boundaries = column_char_boundaries(timeline_columns, chart_width)
    label_row = Text(" " * left_column_width)
    sublabel_row = Text(" " * left_column_width)

    for i, column in enumerate(timeline_columns):
        width = boundaries[i + 1] - boundaries[i]
        if width <= 0:
            continue
        bg_style = " on grey23" if i % 2 == 1 else ""
        label = column["label"] if len(column["label"]) < width else ""
        sublabel = column["sublabel"] if len(column["sublabel"]) < width else ""
        label_row.append(label.center(width), style="bold" + bg_style)
        sublabel_row.append(sublabel.center(width), style="dim" + bg_style)

    return [label_row, sublabel_row]


def _build_row(
    row: Row,
    timeline_columns: list[TimelineColumn],
    today: pendulum.Date,
    left_column_width: int,
    chart_width: int,
    at_risk_days: int,
) -> Text:
    """
    Build a single chart row: the indented name, then the bar.

    Returns:
        Rich Text object with the row
    """
    color = row_color(row, today, at_risk_days)
    text = Text()
    text.append(fit_left_column(row_label(row), left_column_width), style=color)

    percentages = bar_percentages(row["start_date"], row["end_date"], timeline_columns)
    span = None
    if percentages is not None:
        span = percent_span_to_chars(percentages[0], percentages[1], chart_width)

    if span is None:
        text.append(" " * chart_width)
        return text

    start, end = span
    text.append(" " * start)
    if end - start == 1:
        text.append("●", style=color)
    else:
        text.append("◄" + "━" * (end - start - 2) + "►", style=color)
    text.append(" " * (chart_width - end))
    return text
