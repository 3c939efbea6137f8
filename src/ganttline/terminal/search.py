# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from ganttline.service.search import filter_gantt_data
from ganttline.terminal.payload import load_gantt_data
from ganttline.view.view.views.search import search_view


def search(
    payload: Annotated[
        Path,
        typer.Argument(help="YAML or JSON file with projects, sprints and tasks"),
    ],
    keyword: Annotated[
        str, typer.Argument(help="Text to find in task keys, names and assignees")
    ],
    project: Annotated[
        Optional[list[str]],
        typer.Option("--project", "-p", help="Only include projects with these ids"),
    ] = None,
    assignee: Annotated[
        Optional[list[str]],
        typer.Option("--assignee", "-a", help="Only include tasks of these assignee ids"),
    ] = None,
    unassigned: Annotated[
        bool,
        typer.Option("--unassigned", help="Include unassigned tasks when selecting"),
    ] = False,
) -> None:
    """Search projects, sprints and tasks and show the matches as a tree."""
    gantt_data = load_gantt_data(payload, project, assignee, unassigned)
    search_view(payload.name, keyword, filter_gantt_data(gantt_data, keyword))
