# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ganttline.color import STATISTIC_COLORS
from ganttline.model.schedule_statistics import ScheduleStatistics
from ganttline.view.view.views.header import header

STATISTIC_LABELS = {
    "done": "done",
    "in_progress": "in progress",
    "delay": "delay",
    "at_risk": "at risk",
    "unplanned": "unplanned",
    "total": "total",
    "unrecognized_status": "unrecognized status",
}


def build_statistics_badges(statistics: ScheduleStatistics) -> Text:
    """One line of colored "label count" badges."""
    badges = Text()
    for key, label in STATISTIC_LABELS.items():
        count = statistics[key]  # type: ignore[literal-required]
        # Only show the unrecognized badge when something needs attention
        if key == "unrecognized_status" and count == 0:
            continue
        if len(badges) > 0:
            badges.append("  ")
        badges.append(f"{label} ", style="dim")
        badges.append(str(count), style=f"bold {STATISTIC_COLORS[key]}")
    return badges


def statistics_view(
    source_name: str,
    statistics: ScheduleStatistics,
    keyword: Optional[str] = None,
) -> None:
    header(source_name, "statistics")

    statistics_table = Table(box=box.SIMPLE)
    statistics_table.add_column("bucket")
    statistics_table.add_column("tasks", justify="right")

    for key, label in STATISTIC_LABELS.items():
        statistics_table.add_row(
            Text(label, style=STATISTIC_COLORS[key]),
            str(statistics[key]),  # type: ignore[literal-required]
        )

    console = Console()
    console.print(statistics_table)
    if keyword:
        console.print(
            f"[dim]Counts cover every task; the search '{escape(keyword)}'"
            " does not apply.[/dim]"
        )
