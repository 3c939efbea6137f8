# SPDX-License-Identifier: MIT

from ganttline.model.entity_type import EntityType

ENTITY_COLORS = {
    EntityType.PROJECT: "dark_orange",
    EntityType.SPRINT: "plum1",
    EntityType.TASK: "cyan",
}

# Colors for the schedule-health badges
STATISTIC_COLORS = {
    "done": "green",
    "in_progress": "blue",
    "delay": "red",
    "at_risk": "yellow",
    "unplanned": "bright_black",
    "total": "white",
    "unrecognized_status": "magenta",
}

COMPLETED_TASK_COLOR = "bright_black"
