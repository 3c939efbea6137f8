"""Pytest configuration and shared fixtures."""

from typing import Optional

import pendulum
import pytest

from ganttline import configuration
from ganttline.model.gantt_data import GanttData
from ganttline.model.project import Project
from ganttline.model.sprint import Sprint
from ganttline.model.status_category import StatusCategory
from ganttline.model.task import Task
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.template.gantt_data import get_gantt_data_template
from ganttline.template.project import get_project_template
from ganttline.template.sprint import get_sprint_template
from ganttline.template.task import get_task_template


def _make_task(
    task_id: str,
    name: Optional[str] = None,
    key: Optional[str] = None,
    start: Optional[pendulum.Date] = None,
    end: Optional[pendulum.Date] = None,
    due: Optional[pendulum.Date] = None,
    category: StatusCategory = StatusCategory.TODO,
    assignee: Optional[tuple[str, str]] = None,
) -> Task:
    task = get_task_template(task_id)
    task["name"] = name
    task["key"] = key
    task["start_date"] = start
    task["end_date"] = end
    task["due_date"] = due
    task["status"] = {"name": str(category), "category": category}
    if assignee is not None:
        task["assignee"] = {"id": assignee[0], "name": assignee[1]}
    return task


def _make_sprint(
    sprint_id: str,
    name: str,
    start: Optional[pendulum.Date] = None,
    end: Optional[pendulum.Date] = None,
    tasks: Optional[list[Task]] = None,
) -> Sprint:
    sprint = get_sprint_template(sprint_id)
    sprint["name"] = name
    sprint["start_date"] = start
    sprint["end_date"] = end
    sprint["tasks"] = tasks or []
    return sprint


def _make_project(
    project_id: str,
    name: str,
    key: Optional[str] = None,
    start: Optional[pendulum.Date] = None,
    end: Optional[pendulum.Date] = None,
    sprints: Optional[list[Sprint]] = None,
    backlog_tasks: Optional[list[Task]] = None,
) -> Project:
    project = get_project_template(project_id)
    project["name"] = name
    project["key"] = key
    project["start_date"] = start
    project["end_date"] = end
    project["sprints"] = sprints or []
    project["backlog_tasks"] = backlog_tasks or []
    return project


def _make_gantt_data(
    projects: Optional[list[Project]] = None,
    backlog_tasks: Optional[list[Task]] = None,
) -> GanttData:
    gantt_data = get_gantt_data_template()
    gantt_data["projects"] = projects or []
    gantt_data["backlog_tasks"] = backlog_tasks or []
    return gantt_data


@pytest.fixture
def make_task():
    return _make_task


@pytest.fixture
def make_sprint():
    return _make_sprint


@pytest.fixture
def make_project():
    return _make_project


@pytest.fixture
def make_gantt_data():
    return _make_gantt_data


@pytest.fixture
def gantt_data() -> GanttData:
    """
    Two projects, three sprints and six tasks.

    Website (p1)
        Sprint 1 (s1): WEB-1 Fix login bug (done), WEB-2 Design landing page
        Sprint 2 (s2): WEB-3 Write copy (in progress, unassigned)
        backlog: WEB-4 Set up analytics (no dates)
    Mobile app (p2)
        Mobile sprint (s3): MOB-1 Push notifications
    backlog: OPS-1 Renew certificates (unknown status)
    """
    alice = ("a1", "Alice Smith")
    bob = ("a2", "Bob Jones")

    website = _make_project(
        "p1",
        "Website",
        key="WEB",
        start=pendulum.date(2024, 1, 1),
        end=pendulum.date(2024, 3, 31),
        sprints=[
            _make_sprint(
                "s1",
                "Sprint 1",
                start=pendulum.date(2024, 1, 1),
                end=pendulum.date(2024, 1, 14),
                tasks=[
                    _make_task(
                        "t1",
                        "Fix login bug",
                        key="WEB-1",
                        start=pendulum.date(2024, 1, 2),
                        end=pendulum.date(2024, 1, 5),
                        category=StatusCategory.DONE,
                        assignee=alice,
                    ),
                    _make_task(
                        "t2",
                        "Design landing page",
                        key="WEB-2",
                        start=pendulum.date(2024, 1, 3),
                        due=pendulum.date(2024, 1, 10),
                        assignee=bob,
                    ),
                ],
            ),
            _make_sprint(
                "s2",
                "Sprint 2",
                start=pendulum.date(2024, 1, 15),
                end=pendulum.date(2024, 1, 28),
                tasks=[
                    _make_task(
                        "t3",
                        "Write copy",
                        key="WEB-3",
                        start=pendulum.date(2024, 1, 15),
                        end=pendulum.date(2024, 1, 20),
                        category=StatusCategory.IN_PROGRESS,
                    ),
                ],
            ),
        ],
        backlog_tasks=[_make_task("t4", "Set up analytics", key="WEB-4")],
    )
    mobile = _make_project(
        "p2",
        "Mobile app",
        key="MOB",
        start=pendulum.date(2024, 2, 1),
        end=pendulum.date(2024, 4, 30),
        sprints=[
            _make_sprint(
                "s3",
                "Mobile sprint",
                start=pendulum.date(2024, 2, 1),
                end=pendulum.date(2024, 2, 14),
                tasks=[
                    _make_task(
                        "t5",
                        "Push notifications",
                        key="MOB-1",
                        start=pendulum.date(2024, 2, 1),
                        end=pendulum.date(2024, 2, 10),
                        assignee=alice,
                    ),
                ],
            ),
        ],
    )

    return _make_gantt_data(
        projects=[website, mobile],
        backlog_tasks=[
            _make_task(
                "t6",
                "Renew certificates",
                key="OPS-1",
                due=pendulum.date(2024, 5, 1),
                category=StatusCategory.UNKNOWN,
            )
        ],
    )


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point the configuration at a temporary directory."""
    path = tmp_path / "config"
    monkeypatch.setenv("GANTTLINE_CONFIG_PATH", str(path))
    monkeypatch.setattr(configuration, "CONFIG_PATH", path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path / "config.yaml")
    CONFIGURATION_REPO.reset()
    yield path
    CONFIGURATION_REPO.reset()


PAYLOAD_YAML = """\
projects:
  - id: p1
    name: Website
    key: WEB
    startDate: "2024-01-01"
    endDate: "2024-03-31T00:00:00.000Z"
    sprints:
      - id: s1
        name: Sprint 1
        startDate: 2024-01-01
        endDate: 2024-01-14
        status: started
        tasks:
          - id: t1
            key: WEB-1
            name: Fix login bug
            startDate: 2024-01-02
            endDate: 2024-01-05
            assigneeId: {_id: a1, fullname: Alice Smith}
            statusId: {name: Done, category: Done}
          - id: t2
            key: WEB-2
            name: Design landing page
            startDate: 2024-01-03
            dueDate: 2024-01-10
            assigneeId: a2
            statusId: {name: Open, category: To Do}
    backlogTasks:
      - id: t4
        key: WEB-4
        name: Set up analytics
        statusId: {name: Open, category: To Do}
backlogTasks:
  - id: t6
    key: OPS-1
    name: Renew certificates
    dueDate: not a date
    statusId: {name: Blocked, category: Blocked}
"""


@pytest.fixture
def payload_file(tmp_path):
    path = tmp_path / "payload.yaml"
    path.write_text(PAYLOAD_YAML)
    return path
