# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from ganttline.model.entity_id import EntityId
from ganttline.model.project import Project
from ganttline.model.sprint import Sprint
from ganttline.model.task import Task


class Row(TypedDict):
    entity_type: str
    depth: int
    id: EntityId
    name: str
    start_date: Optional[pendulum.Date]
    end_date: Optional[pendulum.Date]
    expandable: bool
    expanded: bool
    item: Project | Sprint | Task
