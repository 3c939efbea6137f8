# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from ganttline.configuration import AT_RISK_DAYS
from ganttline.model.gantt_data import GanttData, iter_tasks
from ganttline.model.schedule_statistics import ScheduleStatistics
from ganttline.model.status_category import StatusCategory
from ganttline.model.task import Task, task_deadline
from ganttline.time import days_between


def get_empty_statistics() -> ScheduleStatistics:
    return {
        "done": 0,
        "in_progress": 0,
        "delay": 0,
        "at_risk": 0,
        "unplanned": 0,
        "total": 0,
        "unrecognized_status": 0,
    }


def classify_task(
    task: Task,
    today: pendulum.Date,
    at_risk_days: int = AT_RISK_DAYS,
) -> Optional[str]:
    """
    Place a task in its schedule-health bucket.

    Rules are checked in order and the first that applies wins:
    done, in_progress, delay (deadline before today), at_risk (deadline
    within at_risk_days from today). A task that fits none of them, such as
    a to-do task with a distant or missing deadline, gives None.

    Args:
        task: The task to classify
        today: The reference date
        at_risk_days: How many days ahead a deadline counts as at risk

    Returns:
        "done", "in_progress", "delay", "at_risk" or None
    """
    category = task["status"]["category"]
    if category is StatusCategory.DONE:
        return "done"
    if category is StatusCategory.IN_PROGRESS:
        return "in_progress"

    deadline = task_deadline(task)
    if deadline is None:
        return None
    if deadline < today:
        return "delay"
    if 0 <= days_between(today, deadline) <= at_risk_days:
        return "at_risk"
    return None


def is_unplanned(task: Task) -> bool:
    """A task is unplanned when it has neither a start date nor an end or due date."""
    return task["start_date"] is None and task_deadline(task) is None


def calculate_statistics(
    gantt_data: GanttData,
    now: pendulum.DateTime | pendulum.Date,
    at_risk_days: int = AT_RISK_DAYS,
) -> ScheduleStatistics:
    """
    Count every task of the hierarchy by schedule health.

    Pass the complete hierarchy, not a search result: the counts describe
    all tasks regardless of what is currently displayed. ``now`` is reduced
    to its date so the result only depends on the arguments.

    Args:
        gantt_data: The full hierarchy, backlog tasks included
        now: The reference moment
        at_risk_days: How many days ahead a deadline counts as at risk

    Returns:
        ScheduleStatistics where total is the number of tasks seen
    """
    today = now.date() if isinstance(now, pendulum.DateTime) else now
    statistics = get_empty_statistics()

    for task in iter_tasks(gantt_data):
        statistics["total"] += 1

        match classify_task(task, today, at_risk_days):
            case "done":
                statistics["done"] += 1
            case "in_progress":
                statistics["in_progress"] += 1
            case "delay":
                statistics["delay"] += 1
            case "at_risk":
                statistics["at_risk"] += 1

        if is_unplanned(task):
            statistics["unplanned"] += 1
        if task["status"]["category"] is StatusCategory.UNKNOWN:
            statistics["unrecognized_status"] += 1

    return statistics
