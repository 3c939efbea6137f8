# SPDX-License-Identifier: MIT

from ganttline.model.entity_id import EntityId
from ganttline.model.status_category import StatusCategory
from ganttline.model.task import Task


def get_task_template(task_id: EntityId) -> Task:
    return {
        "id": task_id,
        "key": None,
        "name": None,
        "start_date": None,
        "end_date": None,
        "due_date": None,
        "assignee": None,
        "status": {"name": None, "category": StatusCategory.UNKNOWN},
    }
