# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from ganttline import time
from ganttline.model.entity_id import EntityId, generate_entity_id
from ganttline.model.gantt_data import GanttData
from ganttline.model.project import Project
from ganttline.model.sprint import Sprint
from ganttline.model.status_category import SprintStatus, StatusCategory
from ganttline.model.task import Assignee, Task
from ganttline.template.gantt_data import get_gantt_data_template
from ganttline.template.project import get_project_template
from ganttline.template.sprint import get_sprint_template
from ganttline.template.task import get_task_template

logger = logging.getLogger(__name__)


class PayloadError(ValueError):
    pass


class GanttDataRepository:
    """
    Reads the hierarchical gantt payload from a YAML or JSON file.

    The payload is cached after the first read; the repository never writes it.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._gantt_data: Optional[GanttData] = None

    @property
    def gantt_data(self) -> GanttData:
        if self._gantt_data is None:
            self.__load_data()
        if self._gantt_data is None:
            raise PayloadError(f"No gantt data loaded from {self.path}")
        return self._gantt_data

    def __load_data(self) -> None:
        if not self.path.is_file():
            raise PayloadError(f"Payload file not found: {self.path}")
        try:
            raw_data = load(self.path.read_bytes(), Loader=Loader)
        except OSError as e:
            raise PayloadError(f"Could not read {self.path}: {e}") from e
        except (YAMLError, UnicodeDecodeError) as e:
            raise PayloadError(f"Could not parse {self.path}: {e}") from e
        self._gantt_data = convert_gantt_data_for_deserialization(raw_data)

    def get_gantt_data(self) -> GanttData:
        return self.gantt_data


def convert_gantt_data_for_deserialization(raw_data: Any) -> GanttData:
    """
    Convert a raw payload into GanttData.

    Accepts either the bare shape ``{projects, backlogTasks}`` or the API
    envelope ``{message, data: {type, data, backlogTasks}}``.
    """
    if raw_data is None:
        return get_gantt_data_template()
    if not isinstance(raw_data, dict):
        raise PayloadError("Gantt payload must be a mapping")

    envelope = raw_data.get("data")
    if isinstance(envelope, dict):
        raw_data = envelope

    raw_projects = raw_data.get("projects")
    if raw_projects is None and isinstance(raw_data.get("data"), list):
        raw_projects = raw_data["data"]

    gantt_data = get_gantt_data_template()
    gantt_data["projects"] = [
        __convert_project(raw_project) for raw_project in __as_list(raw_projects)
    ]
    gantt_data["backlog_tasks"] = [
        __convert_task(raw_task)
        for raw_task in __as_list(
            __first_present(raw_data, "backlogTasks", "backlog_tasks")
        )
    ]
    return gantt_data


def __convert_project(raw_project: dict[str, Any]) -> Project:
    project = get_project_template(__entity_id(raw_project))
    project["name"] = __str_optional(raw_project.get("name"))
    project["key"] = __str_optional(raw_project.get("key"))
    project["start_date"] = time.date_from_value_optional(
        __first_present(raw_project, "startDate", "start_date")
    )
    project["end_date"] = time.date_from_value_optional(
        __first_present(raw_project, "endDate", "end_date")
    )
    project["sprints"] = [
        __convert_sprint(raw_sprint)
        for raw_sprint in __as_list(raw_project.get("sprints"))
    ]
    # Project-task payloads carry tasks directly on the project
    raw_backlog_tasks = __as_list(
        __first_present(raw_project, "backlogTasks", "backlog_tasks")
    ) + __as_list(raw_project.get("tasks"))
    project["backlog_tasks"] = [
        __convert_task(raw_task) for raw_task in raw_backlog_tasks
    ]
    return project


def __convert_sprint(raw_sprint: dict[str, Any]) -> Sprint:
    sprint = get_sprint_template(__entity_id(raw_sprint))
    sprint["name"] = __str_optional(raw_sprint.get("name"))
    sprint["start_date"] = time.date_from_value_optional(
        __first_present(raw_sprint, "startDate", "start_date")
    )
    sprint["end_date"] = time.date_from_value_optional(
        __first_present(raw_sprint, "endDate", "end_date")
    )
    sprint["status"] = SprintStatus.from_str(__str_optional(raw_sprint.get("status")))
    sprint["tasks"] = [
        __convert_task(raw_task) for raw_task in __as_list(raw_sprint.get("tasks"))
    ]
    return sprint


def __convert_task(raw_task: dict[str, Any]) -> Task:
    task = get_task_template(__entity_id(raw_task))
    task["key"] = __str_optional(raw_task.get("key"))
    task["name"] = __str_optional(raw_task.get("name"))
    task["start_date"] = time.date_from_value_optional(
        __first_present(raw_task, "startDate", "start_date")
    )
    task["end_date"] = time.date_from_value_optional(
        __first_present(raw_task, "endDate", "end_date")
    )
    task["due_date"] = time.date_from_value_optional(
        __first_present(raw_task, "dueDate", "due_date")
    )
    task["assignee"] = __convert_assignee(
        __first_present(raw_task, "assigneeId", "assignee")
    )

    raw_status = __first_present(raw_task, "statusId", "status")
    if isinstance(raw_status, dict):
        category = StatusCategory.from_str(__str_optional(raw_status.get("category")))
        if category is StatusCategory.UNKNOWN:
            logger.debug(
                "Task %s has unrecognized status category %r",
                task["id"],
                raw_status.get("category"),
            )
        task["status"] = {
            "name": __str_optional(raw_status.get("name")),
            "category": category,
        }
    elif isinstance(raw_status, str):
        task["status"] = {
            "name": raw_status,
            "category": StatusCategory.from_str(raw_status),
        }
    return task


def __convert_assignee(raw_assignee: Any) -> Optional[Assignee]:
    if raw_assignee is None or raw_assignee == "":
        return None
    if isinstance(raw_assignee, dict):
        assignee_id = __first_present(raw_assignee, "_id", "id")
        return {
            "id": __str_optional(assignee_id),
            "name": __str_optional(
                __first_present(raw_assignee, "fullname", "fullName", "name")
            ),
        }
    # A bare reference carries no display name
    return {"id": str(raw_assignee), "name": None}


def __entity_id(raw_entity: dict[str, Any]) -> EntityId:
    entity_id = __first_present(raw_entity, "id", "_id")
    if entity_id is None:
        return generate_entity_id()
    return str(entity_id)


def __first_present(raw: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


def __as_list(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [cast(dict[str, Any], item) for item in value if isinstance(item, dict)]


def __str_optional(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)
