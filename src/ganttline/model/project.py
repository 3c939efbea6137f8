# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from ganttline.model.entity_id import EntityId
from ganttline.model.sprint import Sprint
from ganttline.model.task import Task


class Project(TypedDict):
    id: EntityId
    name: Optional[str]
    key: Optional[str]
    start_date: Optional[pendulum.Date]
    end_date: Optional[pendulum.Date]
    sprints: list[Sprint]
    backlog_tasks: list[Task]
