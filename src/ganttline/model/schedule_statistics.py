# SPDX-License-Identifier: MIT

from typing import TypedDict


class ScheduleStatistics(TypedDict):
    done: int
    in_progress: int
    delay: int
    at_risk: int
    unplanned: int
    total: int
    unrecognized_status: int
