# SPDX-License-Identifier: MIT

from typing import Iterable, TypeAlias

from ganttline.model.entity_id import EntityId
from ganttline.model.gantt_data import GanttData

ExpansionState: TypeAlias = frozenset[EntityId]

EMPTY_EXPANSION_STATE: ExpansionState = frozenset()


def toggle(state: ExpansionState, node_id: EntityId) -> ExpansionState:
    """Expand a collapsed node or collapse an expanded one, as a new snapshot."""
    if node_id in state:
        return state - {node_id}
    return state | {node_id}


def expand(state: ExpansionState, node_ids: Iterable[EntityId]) -> ExpansionState:
    return state | frozenset(node_ids)


def collapse(state: ExpansionState, node_ids: Iterable[EntityId]) -> ExpansionState:
    return state - frozenset(node_ids)


def is_expanded(state: ExpansionState, node_id: EntityId) -> bool:
    return node_id in state


def expandable_ids(gantt_data: GanttData) -> frozenset[EntityId]:
    """Ids of every project and sprint, the only nodes that can be expanded."""
    ids: set[EntityId] = set()
    for project in gantt_data["projects"]:
        ids.add(project["id"])
        for sprint in project["sprints"]:
            ids.add(sprint["id"])
    return frozenset(ids)


def expand_all(gantt_data: GanttData) -> ExpansionState:
    return expandable_ids(gantt_data)


def collapse_all() -> ExpansionState:
    return EMPTY_EXPANSION_STATE


def prune(state: ExpansionState, gantt_data: GanttData) -> ExpansionState:
    """Drop ids of nodes that are no longer in the data."""
    return state & expandable_ids(gantt_data)
