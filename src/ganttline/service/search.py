# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from ganttline.model.gantt_data import GanttData
from ganttline.model.project import Project
from ganttline.model.sprint import Sprint
from ganttline.model.task import Task


def __matches(keyword: str, text: Optional[str]) -> bool:
    """
    Case-insensitive substring match.

    Args:
        keyword: The lowercased, trimmed keyword
        text: The text to search within

    Returns:
        True if keyword appears in text, False otherwise
    """
    if text is None:
        return False
    return keyword in text.lower()


def __normalize_keyword(keyword: Optional[str]) -> str:
    if keyword is None:
        return ""
    return keyword.strip().lower()


def task_matches(task: Task, keyword: str) -> bool:
    """
    Check if a task matches a keyword on its key, name or assignee name.

    Args:
        task: The task to check
        keyword: The search keyword (trimmed and compared case-insensitively)

    Returns:
        True if any of the fields contains the keyword
    """
    normalized = __normalize_keyword(keyword)
    if normalized == "":
        return True

    assignee = task["assignee"]
    assignee_name = assignee["name"] if assignee is not None else None

    return (
        __matches(normalized, task["key"])
        or __matches(normalized, task["name"])
        or __matches(normalized, assignee_name)
    )


def __filter_tasks(tasks: list[Task], keyword: str) -> list[Task]:
    return [deepcopy(task) for task in tasks if task_matches(task, keyword)]


def __filter_sprint(sprint: Sprint, keyword: str) -> Optional[Sprint]:
    # A sprint that matches by name keeps all of its tasks
    if __matches(keyword, sprint["name"]):
        return deepcopy(sprint)

    matching_tasks = __filter_tasks(sprint["tasks"], keyword)
    if not matching_tasks:
        return None

    filtered_sprint = deepcopy(sprint)
    filtered_sprint["tasks"] = matching_tasks
    return filtered_sprint


def __filter_project(project: Project, keyword: str) -> Optional[Project]:
    # A project that matches by name keeps its whole subtree
    if __matches(keyword, project["name"]):
        return deepcopy(project)

    filtered_sprints: list[Sprint] = []
    for sprint in project["sprints"]:
        filtered_sprint = __filter_sprint(sprint, keyword)
        if filtered_sprint is not None:
            filtered_sprints.append(filtered_sprint)

    filtered_backlog_tasks = __filter_tasks(project["backlog_tasks"], keyword)

    if not filtered_sprints and not filtered_backlog_tasks:
        return None

    filtered_project = deepcopy(project)
    filtered_project["sprints"] = filtered_sprints
    filtered_project["backlog_tasks"] = filtered_backlog_tasks
    return filtered_project


def filter_gantt_data(gantt_data: GanttData, keyword: Optional[str]) -> GanttData:
    """
    Narrow the project hierarchy to the nodes matching a keyword.

    Tasks match on key, name or assignee name. Sprints and projects match on
    their name; one that does not match is still kept when any of its
    children survive, so no matching task loses its ancestors. The input is
    never modified: the result is always a new structure, and an empty or
    whitespace-only keyword returns a copy of the whole hierarchy.

    Args:
        gantt_data: The full hierarchy
        keyword: Free-text search keyword

    Returns:
        A new GanttData containing only matching nodes and their ancestors
    """
    normalized = __normalize_keyword(keyword)
    if normalized == "":
        return deepcopy(gantt_data)

    filtered_projects: list[Project] = []
    for project in gantt_data["projects"]:
        filtered_project = __filter_project(project, normalized)
        if filtered_project is not None:
            filtered_projects.append(filtered_project)

    return {
        "projects": filtered_projects,
        "backlog_tasks": __filter_tasks(gantt_data["backlog_tasks"], normalized),
    }
