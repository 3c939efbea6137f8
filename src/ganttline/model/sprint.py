# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from ganttline.model.entity_id import EntityId
from ganttline.model.status_category import SprintStatus
from ganttline.model.task import Task


class Sprint(TypedDict):
    id: EntityId
    name: Optional[str]
    start_date: Optional[pendulum.Date]
    end_date: Optional[pendulum.Date]
    status: SprintStatus
    tasks: list[Task]
