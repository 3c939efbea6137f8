"""Tests for expansion state snapshots."""

from ganttline.service.expansion import (
    EMPTY_EXPANSION_STATE,
    collapse,
    collapse_all,
    expand,
    expand_all,
    expandable_ids,
    is_expanded,
    prune,
    toggle,
)


def test_toggle_adds_then_removes():
    state = toggle(EMPTY_EXPANSION_STATE, "p1")
    assert is_expanded(state, "p1")

    state = toggle(state, "p1")
    assert not is_expanded(state, "p1")
    assert state == EMPTY_EXPANSION_STATE


def test_toggle_returns_new_snapshot():
    before = frozenset({"p1"})

    after = toggle(before, "s1")

    assert before == frozenset({"p1"})
    assert after == frozenset({"p1", "s1"})


def test_unknown_ids_are_tolerated():
    state = toggle(EMPTY_EXPANSION_STATE, "does-not-exist")

    assert is_expanded(state, "does-not-exist")
    assert collapse(state, ["also-missing"]) == state


def test_expand_and_collapse():
    state = expand(EMPTY_EXPANSION_STATE, ["p1", "s1"])
    assert state == frozenset({"p1", "s1"})

    assert collapse(state, ["s1"]) == frozenset({"p1"})


def test_expand_all_covers_projects_and_sprints(gantt_data):
    assert expand_all(gantt_data) == frozenset({"p1", "p2", "s1", "s2", "s3"})
    assert expandable_ids(gantt_data) == expand_all(gantt_data)


def test_collapse_all():
    assert collapse_all() == EMPTY_EXPANSION_STATE


def test_prune_drops_stale_ids(gantt_data):
    state = frozenset({"p1", "s3", "gone"})

    assert prune(state, gantt_data) == frozenset({"p1", "s3"})
