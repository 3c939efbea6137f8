"""Tests for the keyword filter over the project hierarchy."""

from copy import deepcopy

from ganttline.service.search import filter_gantt_data, task_matches


def _ids(gantt_data):
    return {
        "projects": [
            (
                project["id"],
                [
                    (sprint["id"], [task["id"] for task in sprint["tasks"]])
                    for sprint in project["sprints"]
                ],
                [task["id"] for task in project["backlog_tasks"]],
            )
            for project in gantt_data["projects"]
        ],
        "backlog_tasks": [task["id"] for task in gantt_data["backlog_tasks"]],
    }


def test_nested_task_keeps_its_ancestors(gantt_data):
    result = filter_gantt_data(gantt_data, "bug")

    assert _ids(result) == {
        "projects": [("p1", [("s1", ["t1"])], [])],
        "backlog_tasks": [],
    }


def test_keyword_is_trimmed_and_case_insensitive(gantt_data):
    assert _ids(filter_gantt_data(gantt_data, "  BUG ")) == _ids(
        filter_gantt_data(gantt_data, "bug")
    )


def test_empty_keyword_returns_copy(gantt_data):
    for keyword in (None, "", "   "):
        result = filter_gantt_data(gantt_data, keyword)

        assert result == gantt_data
        assert result is not gantt_data
        assert result["projects"][0] is not gantt_data["projects"][0]


def test_input_is_not_modified(gantt_data):
    original = deepcopy(gantt_data)

    result = filter_gantt_data(gantt_data, "bug")
    result["projects"][0]["sprints"][0]["tasks"][0]["name"] = "changed"

    assert gantt_data == original


def test_match_on_assignee_name(gantt_data):
    result = filter_gantt_data(gantt_data, "alice")

    assert _ids(result) == {
        "projects": [
            ("p1", [("s1", ["t1"])], []),
            ("p2", [("s3", ["t5"])], []),
        ],
        "backlog_tasks": [],
    }


def test_match_on_task_key(gantt_data):
    result = filter_gantt_data(gantt_data, "web-3")

    assert _ids(result) == {
        "projects": [("p1", [("s2", ["t3"])], [])],
        "backlog_tasks": [],
    }


def test_sprint_name_match_keeps_all_its_tasks(gantt_data):
    result = filter_gantt_data(gantt_data, "sprint 1")

    assert _ids(result) == {
        "projects": [("p1", [("s1", ["t1", "t2"])], [])],
        "backlog_tasks": [],
    }


def test_project_name_match_keeps_whole_subtree(gantt_data):
    result = filter_gantt_data(gantt_data, "website")

    assert result["projects"] == [gantt_data["projects"][0]]
    assert result["backlog_tasks"] == []


def test_project_backlog_task_keeps_project(gantt_data):
    result = filter_gantt_data(gantt_data, "analytics")

    assert _ids(result) == {
        "projects": [("p1", [], ["t4"])],
        "backlog_tasks": [],
    }


def test_top_level_backlog_is_filtered(gantt_data):
    result = filter_gantt_data(gantt_data, "certificates")

    assert _ids(result) == {"projects": [], "backlog_tasks": ["t6"]}


def test_no_match_gives_empty_hierarchy(gantt_data):
    assert filter_gantt_data(gantt_data, "nothing like this") == {
        "projects": [],
        "backlog_tasks": [],
    }


def test_filter_is_deterministic(gantt_data):
    assert filter_gantt_data(gantt_data, "a") == filter_gantt_data(gantt_data, "a")


def test_task_matches(make_task):
    task = make_task("t1", "Fix login bug", key="WEB-1", assignee=("a1", "Alice"))

    assert task_matches(task, "")
    assert task_matches(task, "login")
    assert task_matches(task, "web-1")
    assert task_matches(task, "ALICE")
    assert not task_matches(task, "bob")


def test_task_without_name_does_not_match(make_task):
    assert not task_matches(make_task("t1"), "bug")
