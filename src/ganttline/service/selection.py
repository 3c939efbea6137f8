# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from ganttline.model.entity_id import EntityId
from ganttline.model.gantt_data import GanttData
from ganttline.model.task import Task


def select_gantt_data(
    gantt_data: GanttData,
    project_ids: Optional[list[EntityId]] = None,
    assignee_ids: Optional[list[EntityId]] = None,
    include_unassigned: bool = False,
) -> GanttData:
    """
    Restrict the hierarchy to chosen projects and assignees.

    Unlike the keyword search this removes data outright: projects outside
    project_ids are dropped, and when assignee_ids is given (or only
    unassigned tasks are wanted) tasks of other assignees are dropped while
    sprints and projects are kept even if they end up empty.

    Args:
        gantt_data: The full hierarchy
        project_ids: Project ids to keep (None or empty keeps every project)
        assignee_ids: Assignee ids whose tasks are kept (None or empty keeps all)
        include_unassigned: Keep tasks without an assignee when filtering by assignee

    Returns:
        A new GanttData
    """
    selected = deepcopy(gantt_data)

    if project_ids:
        wanted_projects = set(project_ids)
        selected["projects"] = [
            project
            for project in selected["projects"]
            if project["id"] in wanted_projects
        ]

    if not assignee_ids and not include_unassigned:
        return selected

    wanted_assignees = set(assignee_ids or [])

    def keep(task: Task) -> bool:
        assignee = task["assignee"]
        if assignee is None or assignee["id"] is None:
            return include_unassigned
        return assignee["id"] in wanted_assignees

    for project in selected["projects"]:
        for sprint in project["sprints"]:
            sprint["tasks"] = [task for task in sprint["tasks"] if keep(task)]
        project["backlog_tasks"] = [
            task for task in project["backlog_tasks"] if keep(task)
        ]
    selected["backlog_tasks"] = [
        task for task in selected["backlog_tasks"] if keep(task)
    ]

    return selected
