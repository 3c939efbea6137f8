# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ganttline.model.gantt_data import GanttData
from ganttline.repository.gantt_data import GanttDataRepository, PayloadError
from ganttline.service.selection import select_gantt_data

logger = logging.getLogger(__name__)


def load_gantt_data(
    payload: Path,
    project: Optional[list[str]] = None,
    assignee: Optional[list[str]] = None,
    unassigned: bool = False,
) -> GanttData:
    """
    Read a payload file and apply the project and assignee selection.

    Raises:
        typer.Exit: With code 1 when the payload can not be read
    """
    try:
        gantt_data = GanttDataRepository(payload).get_gantt_data()
    except PayloadError as e:
        Console(stderr=True).print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    logger.debug(
        "loaded %d projects and %d backlog tasks from %s",
        len(gantt_data["projects"]),
        len(gantt_data["backlog_tasks"]),
        payload,
    )

    if project is None and assignee is None and not unassigned:
        return gantt_data
    return select_gantt_data(
        gantt_data,
        project_ids=project,
        assignee_ids=assignee,
        include_unassigned=unassigned,
    )
