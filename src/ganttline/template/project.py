# SPDX-License-Identifier: MIT

from ganttline.model.entity_id import EntityId
from ganttline.model.project import Project


def get_project_template(project_id: EntityId) -> Project:
    return {
        "id": project_id,
        "name": None,
        "key": None,
        "start_date": None,
        "end_date": None,
        "sprints": [],
        "backlog_tasks": [],
    }
