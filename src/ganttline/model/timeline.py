# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DateRange(TypedDict):
    start_date: pendulum.Date
    end_date: pendulum.Date


class TimelineColumn(TypedDict):
    label: str
    sublabel: str
    start: pendulum.Date
    end: pendulum.Date


class BarGeometry(TypedDict):
    left: str
    width: str
