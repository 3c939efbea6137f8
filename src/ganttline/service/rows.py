# SPDX-License-Identifier: MIT

from typing import Iterable, TypeAlias

from ganttline.model.entity_type import EntityType
from ganttline.model.gantt_data import GanttData, iter_tasks
from ganttline.model.project import Project
from ganttline.model.row import Row
from ganttline.model.sprint import Sprint
from ganttline.model.task import Task, task_end
from ganttline.service.expansion import ExpansionState, is_expanded

GroupBy: TypeAlias = frozenset[str]

ALL_LEVELS: GroupBy = frozenset(
    {EntityType.PROJECT, EntityType.SPRINT, EntityType.TASK}
)


def _project_tasks(project: Project) -> list[Task]:
    tasks = [task for sprint in project["sprints"] for task in sprint["tasks"]]
    return tasks + project["backlog_tasks"]


def _project_row(project: Project, expansion: ExpansionState, expandable: bool) -> Row:
    return {
        "entity_type": EntityType.PROJECT,
        "depth": 0,
        "id": project["id"],
        "name": project["name"] or project["key"] or "[no name]",
        "start_date": project["start_date"],
        "end_date": project["end_date"],
        "expandable": expandable,
        "expanded": expandable and is_expanded(expansion, project["id"]),
        "item": project,
    }


def _sprint_row(
    sprint: Sprint, expansion: ExpansionState, depth: int, expandable: bool
) -> Row:
    return {
        "entity_type": EntityType.SPRINT,
        "depth": depth,
        "id": sprint["id"],
        "name": sprint["name"] or "[no name]",
        "start_date": sprint["start_date"],
        "end_date": sprint["end_date"],
        "expandable": expandable,
        "expanded": expandable and is_expanded(expansion, sprint["id"]),
        "item": sprint,
    }


def _task_row(task: Task, depth: int) -> Row:
    name = task["name"] or "[no name]"
    if task["key"]:
        name = f"{task['key']} {name}"
    return {
        "entity_type": EntityType.TASK,
        "depth": depth,
        "id": task["id"],
        "name": name,
        "start_date": task["start_date"],
        "end_date": task_end(task),
        "expandable": False,
        "expanded": False,
        "item": task,
    }


def _sprint_rows(
    sprints: Iterable[Sprint], expansion: ExpansionState, depth: int, with_tasks: bool
) -> list[Row]:
    rows: list[Row] = []
    for sprint in sprints:
        sprint_row = _sprint_row(
            sprint, expansion, depth, with_tasks and bool(sprint["tasks"])
        )
        rows.append(sprint_row)
        if sprint_row["expanded"]:
            rows.extend(_task_row(task, depth + 1) for task in sprint["tasks"])
    return rows


def _grouped_by_project(
    gantt_data: GanttData, expansion: ExpansionState, group_by: GroupBy
) -> list[Row]:
    with_sprints = EntityType.SPRINT in group_by
    with_tasks = EntityType.TASK in group_by
    rows: list[Row] = []

    for project in gantt_data["projects"]:
        if with_sprints:
            expandable = bool(project["sprints"]) or (
                with_tasks and bool(project["backlog_tasks"])
            )
        else:
            expandable = with_tasks and bool(_project_tasks(project))

        project_row = _project_row(project, expansion, expandable)
        rows.append(project_row)
        if not project_row["expanded"]:
            continue

        if with_sprints:
            rows.extend(_sprint_rows(project["sprints"], expansion, 1, with_tasks))
            if with_tasks:
                rows.extend(_task_row(task, 1) for task in project["backlog_tasks"])
        else:
            rows.extend(_task_row(task, 1) for task in _project_tasks(project))

    return rows


def visible_rows(
    gantt_data: GanttData,
    expansion: ExpansionState,
    group_by: GroupBy = ALL_LEVELS,
) -> list[Row]:
    """
    Flatten the hierarchy into the rows a gantt chart shows.

    group_by picks the levels on display, any combination of project,
    sprint and task:

    - with projects, every project is listed. An expanded project is
      followed by its sprints (each followed by its tasks when expanded) and
      its backlog tasks, or by all of its tasks when sprints are not shown.
    - without projects but with sprints, every sprint is listed at the top
      level, followed by its tasks when expanded.
    - tasks alone are listed flat.

    Top-level backlog tasks come last whenever tasks are shown. No levels
    gives no rows.

    Args:
        gantt_data: The hierarchy to show, usually already filtered
        expansion: Ids of the expanded projects and sprints
        group_by: EntityType values of the levels to show

    Returns:
        Rows in display order
    """
    with_tasks = EntityType.TASK in group_by

    if EntityType.PROJECT in group_by:
        rows = _grouped_by_project(gantt_data, expansion, group_by)
    elif EntityType.SPRINT in group_by:
        sprints = (
            sprint
            for project in gantt_data["projects"]
            for sprint in project["sprints"]
        )
        rows = _sprint_rows(sprints, expansion, 0, with_tasks)
        if with_tasks:
            rows.extend(
                _task_row(task, 0)
                for project in gantt_data["projects"]
                for task in project["backlog_tasks"]
            )
    elif with_tasks:
        return [_task_row(task, 0) for task in iter_tasks(gantt_data)]
    else:
        return []

    if with_tasks:
        rows.extend(_task_row(task, 0) for task in gantt_data["backlog_tasks"])

    return rows
