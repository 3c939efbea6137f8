# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from ganttline import time
from ganttline.configuration import FALLBACK_HORIZON_MONTHS
from ganttline.model.gantt_data import GanttData
from ganttline.model.granularity_type import Granularity
from ganttline.model.task import Task, task_end
from ganttline.model.timeline import DateRange

logger = logging.getLogger(__name__)


def resolve_date_range(
    gantt_data: GanttData,
    today: Optional[pendulum.Date] = None,
    fallback_horizon_months: int = FALLBACK_HORIZON_MONTHS,
) -> DateRange:
    """
    Find the span of dates to show on the timeline.

    Start dates and end dates (due dates for tasks without an end date) of
    every project, sprint and task, backlog tasks included, are scanned and
    the earliest and latest are returned. When only one side has dates the
    other side takes the same value. When there are no dates at all, the
    range is ``today`` plus or minus ``fallback_horizon_months``.

    Args:
        gantt_data: The full hierarchy
        today: Reference date for the fallback range (defaults to the local date)
        fallback_horizon_months: Months either side of today for the fallback range

    Returns:
        DateRange with start_date <= end_date
    """
    start_dates: list[pendulum.Date] = []
    end_dates: list[pendulum.Date] = []

    def collect(start: Optional[pendulum.Date], end: Optional[pendulum.Date]) -> None:
        if start is not None:
            start_dates.append(start)
        if end is not None:
            end_dates.append(end)

    def collect_tasks(tasks: list[Task]) -> None:
        for task in tasks:
            collect(task["start_date"], task_end(task))

    for project in gantt_data["projects"]:
        collect(project["start_date"], project["end_date"])
        for sprint in project["sprints"]:
            collect(sprint["start_date"], sprint["end_date"])
            collect_tasks(sprint["tasks"])
        collect_tasks(project["backlog_tasks"])
    collect_tasks(gantt_data["backlog_tasks"])

    if not start_dates and not end_dates:
        reference = today if today is not None else time.today()
        logger.debug(
            "No dates in gantt data, using %d months around %s",
            fallback_horizon_months,
            reference,
        )
        return get_fallback_date_range(reference, fallback_horizon_months)

    all_dates = start_dates + end_dates
    start_date = min(start_dates) if start_dates else min(all_dates)
    end_date = max(end_dates) if end_dates else max(all_dates)

    # An end date earlier than every start date still has to give a usable range
    if end_date < start_date:
        start_date, end_date = min(all_dates), max(all_dates)

    return {"start_date": start_date, "end_date": end_date}


def get_fallback_date_range(
    today: pendulum.Date, fallback_horizon_months: int = FALLBACK_HORIZON_MONTHS
) -> DateRange:
    return {
        "start_date": time.subtract_clamped(today, months=fallback_horizon_months),
        "end_date": time.add_clamped(today, months=fallback_horizon_months),
    }


def pad_date_range(date_range: DateRange, granularity: Granularity | str) -> DateRange:
    """
    Widen a range so bars do not touch the edges of the timeline.

    Weeks get three weeks either side, months one month and years one year,
    stopping at the first and last representable dates.
    An unknown granularity returns the range unchanged.
    """
    start_date = date_range["start_date"]
    end_date = date_range["end_date"]

    match Granularity.from_str(str(granularity)):
        case Granularity.WEEKS:
            return {
                "start_date": time.subtract_clamped(start_date, weeks=3),
                "end_date": time.add_clamped(end_date, weeks=3),
            }
        case Granularity.MONTHS:
            return {
                "start_date": time.subtract_clamped(start_date, months=1),
                "end_date": time.add_clamped(end_date, months=1),
            }
        case Granularity.YEARS:
            return {
                "start_date": time.subtract_clamped(start_date, years=1),
                "end_date": time.add_clamped(end_date, years=1),
            }
    return {"start_date": start_date, "end_date": end_date}
