# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from ganttline.model.granularity_type import Granularity
from ganttline.model.timeline import TimelineColumn
from ganttline.time import date_to_str
from ganttline.view.view.views.header import header


def columns_view(
    source_name: str,
    timeline_columns: list[TimelineColumn],
    granularity: Granularity,
) -> None:
    header(source_name, f"timeline columns ({granularity})")

    console = Console()
    if not timeline_columns:
        console.print("No timeline columns.")
        return

    columns_table = Table(box=box.SIMPLE)
    columns_table.add_column("label")
    columns_table.add_column("sublabel")
    columns_table.add_column("start")
    columns_table.add_column("end")

    for column in timeline_columns:
        columns_table.add_row(
            column["label"],
            column["sublabel"],
            date_to_str(column["start"]),
            date_to_str(column["end"]),
        )

    console.print(columns_table)
