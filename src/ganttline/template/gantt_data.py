# SPDX-License-Identifier: MIT

from ganttline.model.gantt_data import GanttData


def get_gantt_data_template() -> GanttData:
    return {"projects": [], "backlog_tasks": []}
