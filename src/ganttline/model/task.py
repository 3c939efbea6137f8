# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from ganttline.model.entity_id import EntityId
from ganttline.model.status_category import StatusCategory


class Assignee(TypedDict):
    id: Optional[EntityId]
    name: Optional[str]


class TaskStatus(TypedDict):
    name: Optional[str]
    category: StatusCategory


class Task(TypedDict):
    id: EntityId
    key: Optional[str]
    name: Optional[str]
    start_date: Optional[pendulum.Date]
    end_date: Optional[pendulum.Date]
    due_date: Optional[pendulum.Date]
    assignee: Optional[Assignee]
    status: TaskStatus


def task_end(task: Task) -> Optional[pendulum.Date]:
    """The end of a task's bar: its end date, else its due date."""
    if task["end_date"] is not None:
        return task["end_date"]
    return task["due_date"]


def task_deadline(task: Task) -> Optional[pendulum.Date]:
    """The date a task is judged against: its due date, else its end date."""
    if task["due_date"] is not None:
        return task["due_date"]
    return task["end_date"]
