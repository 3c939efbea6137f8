# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ganttline.color import ENTITY_COLORS
from ganttline.model.entity_type import EntityType
from ganttline.model.gantt_data import GanttData
from ganttline.model.task import Task, task_end
from ganttline.time import date_to_display_str_optional
from ganttline.view.view.views.header import header


def _format_name(name: Optional[str], entity_type: str) -> str:
    color = ENTITY_COLORS[entity_type]
    return f"[{color}]{escape(name or '[no name]')}[/{color}]"


def _format_dates(
    start: Optional[pendulum.Date], end: Optional[pendulum.Date]
) -> str:
    if start is None and end is None:
        return ""
    return (
        f" [dim]{date_to_display_str_optional(start)}"
        f" - {date_to_display_str_optional(end)}[/dim]"
    )


def _format_task(task: Task) -> str:
    name = task["name"] or "[no name]"
    if task["key"]:
        name = f"{task['key']} {name}"
    label = _format_name(name, EntityType.TASK)
    assignee = task["assignee"]
    if assignee is not None and assignee["name"]:
        label = f"{label} [dim]@{escape(assignee['name'])}[/dim]"
    return label + _format_dates(task["start_date"], task_end(task))


def search_view(source_name: str, keyword: str, gantt_data: GanttData) -> None:
    """
    Display a filtered hierarchy as a tree.

    Args:
        source_name: The name of the payload being searched
        keyword: The search keyword
        gantt_data: The filtered hierarchy
    """
    header(source_name, f"search: {escape(keyword)}")

    console = Console()
    if not gantt_data["projects"] and not gantt_data["backlog_tasks"]:
        console.print("No results found.")
        return

    tree = Tree(f"[bold]{escape(keyword)}[/bold]")
    for project in gantt_data["projects"]:
        project_node = tree.add(
            _format_name(project["name"], EntityType.PROJECT)
            + _format_dates(project["start_date"], project["end_date"])
        )
        for sprint in project["sprints"]:
            sprint_node = project_node.add(
                _format_name(sprint["name"], EntityType.SPRINT)
                + _format_dates(sprint["start_date"], sprint["end_date"])
            )
            for task in sprint["tasks"]:
                sprint_node.add(_format_task(task))
        for task in project["backlog_tasks"]:
            project_node.add(_format_task(task))

    if gantt_data["backlog_tasks"]:
        backlog_node = tree.add("[dim]backlog[/dim]")
        for task in gantt_data["backlog_tasks"]:
            backlog_node.add(_format_task(task))

    console.print(tree)
