# SPDX-License-Identifier: MIT

from ganttline.model.entity_id import EntityId
from ganttline.model.sprint import Sprint
from ganttline.model.status_category import SprintStatus


def get_sprint_template(sprint_id: EntityId) -> Sprint:
    return {
        "id": sprint_id,
        "name": None,
        "start_date": None,
        "end_date": None,
        "status": SprintStatus.UNKNOWN,
        "tasks": [],
    }
