# SPDX-License-Identifier: MIT

from typing import Iterator, TypedDict

from ganttline.model.project import Project
from ganttline.model.task import Task


class GanttData(TypedDict):
    projects: list[Project]
    backlog_tasks: list[Task]


def iter_tasks(data: GanttData) -> Iterator[Task]:
    """Yield sprint tasks, project backlog tasks, then the top-level backlog."""
    for project in data["projects"]:
        for sprint in project["sprints"]:
            yield from sprint["tasks"]
        yield from project["backlog_tasks"]
    yield from data["backlog_tasks"]
