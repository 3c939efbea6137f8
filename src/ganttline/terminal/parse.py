# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from ganttline import time
from ganttline.model.entity_type import EntityType
from ganttline.model.granularity_type import Granularity


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    """
    Parse a date option.

    Accepts YYYY-MM-DD, today (t), yesterday (y), tomorrow (o) and a signed
    day offset from today such as 3 or -7.

    Raises:
        typer.BadParameter: If the value is none of these
    """
    if date_param is None:
        return None

    date_str = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}", date_str):
        parsed = time.date_from_value_optional(date_str)
        if parsed is None:
            raise typer.BadParameter(f"Invalid date: {date_str}")
        return parsed

    if re.match(r"^-?\d+$", date_str):
        try:
            return time.today().add(days=int(date_str))
        except (OverflowError, ValueError) as e:
            raise typer.BadParameter(f"Day offset out of range: {date_str}") from e

    if date_str in ("today", "t"):
        return time.today()
    if date_str in ("yesterday", "y"):
        return time.today().subtract(days=1)
    if date_str in ("tomorrow", "o"):
        return time.today().add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_granularity(granularity_param: Optional[str]) -> Optional[Granularity]:
    """
    Parse a granularity option such as weeks, month or y.

    Raises:
        typer.BadParameter: If the value is not a known granularity
    """
    if granularity_param is None:
        return None
    granularity = Granularity.from_str(granularity_param)
    if granularity is None:
        valid = ", ".join(g.value for g in Granularity)
        raise typer.BadParameter(
            f"Unknown granularity '{granularity_param}', expected one of: {valid}"
        )
    return granularity


def parse_group_by(group_by_param: Optional[str]) -> Optional[str]:
    """
    Parse a display level: project (p), sprint (s) or task (t).

    Raises:
        typer.BadParameter: If the value is not a known level
    """
    if group_by_param is None:
        return None
    match group_by_param.strip().lower():
        case "project" | "projects" | "p":
            return EntityType.PROJECT
        case "sprint" | "sprints" | "s":
            return EntityType.SPRINT
        case "task" | "tasks" | "t":
            return EntityType.TASK
    raise typer.BadParameter(
        f"Unknown level '{group_by_param}', expected project, sprint or task"
    )
