# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer

from ganttline import time
from ganttline.configuration import Configuration
from ganttline.model.gantt_data import GanttData
from ganttline.model.granularity_type import Granularity
from ganttline.model.timeline import TimelineColumn
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.service.date_range import pad_date_range, resolve_date_range
from ganttline.service.expansion import (
    EMPTY_EXPANSION_STATE,
    expand,
    expand_all,
    prune,
)
from ganttline.service.rows import ALL_LEVELS, visible_rows
from ganttline.service.search import filter_gantt_data
from ganttline.service.statistics import calculate_statistics
from ganttline.service.timeline import generate_timeline_columns
from ganttline.terminal.parse import parse_date, parse_granularity, parse_group_by
from ganttline.terminal.payload import load_gantt_data
from ganttline.view.view.views.columns import columns_view
from ganttline.view.view.views.gantt import gantt_view
from ganttline.view.view.views.statistics import statistics_view

PayloadArgument = Annotated[
    Path,
    typer.Argument(help="YAML or JSON file with projects, sprints and tasks"),
]
GranularityOption = Annotated[
    Optional[Granularity],
    typer.Option(
        "--granularity",
        "-g",
        parser=parse_granularity,
        help="Timeline granularity: weeks, months or years (defaults to the configured one)",
    ),
]
StartOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--start",
        "-s",
        parser=parse_date,
        help="Start date for timeline (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
    ),
]
EndOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--end",
        "-e",
        parser=parse_date,
        help="End date for timeline (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1)",
    ),
]
NowOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--now",
        parser=parse_date,
        help="Reference date for delayed and at risk tasks (defaults to today)",
    ),
]
SearchOption = Annotated[
    Optional[str],
    typer.Option(
        "--search", "-q", help="Only show items whose key, name or assignee match"
    ),
]
ProjectOption = Annotated[
    Optional[list[str]],
    typer.Option("--project", "-p", help="Only include projects with these ids"),
]
AssigneeOption = Annotated[
    Optional[list[str]],
    typer.Option("--assignee", "-a", help="Only include tasks of these assignee ids"),
]
UnassignedOption = Annotated[
    bool,
    typer.Option("--unassigned", help="Include unassigned tasks when selecting"),
]


def gantt(
    payload: PayloadArgument,
    granularity: GranularityOption = None,
    start: StartOption = None,
    end: EndOption = None,
    search: SearchOption = None,
    expand_ids: Annotated[
        Optional[list[str]],
        typer.Option("--expand", "-x", help="Expand the project or sprint with this id"),
    ] = None,
    group_by: Annotated[
        Optional[list[str]],
        typer.Option(
            "--group-by",
            "-gb",
            parser=parse_group_by,
            help="Levels to show: project, sprint, task (repeatable, defaults to all)",
        ),
    ] = None,
    expand_everything: Annotated[
        bool,
        typer.Option("--expand-all", "-X", help="Expand every project and sprint"),
    ] = False,
    project: ProjectOption = None,
    assignee: AssigneeOption = None,
    unassigned: UnassignedOption = False,
    now: NowOption = None,
    left_width: Annotated[
        Optional[int],
        typer.Option("--left-width", "-lw", help="Width of left column for item names"),
    ] = None,
    chart_width: Annotated[
        Optional[int],
        typer.Option(
            "--chart-width", "-cw", help="Width of the timeline in characters"
        ),
    ] = None,
) -> None:
    """Display projects, sprints and tasks on a gantt chart timeline."""
    config = CONFIGURATION_REPO.get_config()
    gantt_data = load_gantt_data(payload, project, assignee, unassigned)
    today = now if now is not None else time.today()

    granularity = _granularity_or_default(granularity, config)
    timeline_columns = _timeline_columns(
        gantt_data, granularity, start, end, today, config
    )

    statistics = calculate_statistics(gantt_data, today, config["at_risk_days"])

    filtered = filter_gantt_data(gantt_data, search)
    if expand_everything:
        expansion = expand_all(filtered)
    else:
        expansion = prune(expand(EMPTY_EXPANSION_STATE, expand_ids or []), filtered)

    gantt_view(
        payload.name,
        visible_rows(
            filtered, expansion, frozenset(group_by) if group_by else ALL_LEVELS
        ),
        timeline_columns,
        statistics,
        today,
        granularity,
        keyword=search,
        left_column_width=(
            left_width if left_width is not None else config["left_column_width"]
        ),
        chart_width=chart_width if chart_width is not None else config["chart_width"],
        at_risk_days=config["at_risk_days"],
    )


def columns(
    payload: PayloadArgument,
    granularity: GranularityOption = None,
    start: StartOption = None,
    end: EndOption = None,
    project: ProjectOption = None,
    assignee: AssigneeOption = None,
    unassigned: UnassignedOption = False,
    now: NowOption = None,
) -> None:
    """Display the timeline columns generated for a payload."""
    config = CONFIGURATION_REPO.get_config()
    gantt_data = load_gantt_data(payload, project, assignee, unassigned)
    today = now if now is not None else time.today()

    granularity = _granularity_or_default(granularity, config)
    timeline_columns = _timeline_columns(
        gantt_data, granularity, start, end, today, config
    )

    columns_view(payload.name, timeline_columns, granularity)


def stats(
    payload: PayloadArgument,
    now: NowOption = None,
    search: SearchOption = None,
    project: ProjectOption = None,
    assignee: AssigneeOption = None,
    unassigned: UnassignedOption = False,
) -> None:
    """Display schedule health counts for every task of a payload."""
    config = CONFIGURATION_REPO.get_config()
    gantt_data = load_gantt_data(payload, project, assignee, unassigned)
    today = now if now is not None else time.today()

    statistics = calculate_statistics(gantt_data, today, config["at_risk_days"])

    statistics_view(payload.name, statistics, keyword=search)


def _granularity_or_default(
    granularity: Optional[Granularity], config: Configuration
) -> Granularity:
    if granularity is not None:
        return granularity
    return Granularity.from_str(config["default_granularity"]) or Granularity.WEEKS


def _timeline_columns(
    gantt_data: GanttData,
    granularity: Granularity,
    start: Optional[pendulum.Date],
    end: Optional[pendulum.Date],
    today: pendulum.Date,
    config: Configuration,
) -> list[TimelineColumn]:
    """
    Build the timeline for the payload, or for the explicit start and end.

    A side that is not given comes from the payload's own date range, which
    is padded only when neither side is given.
    """
    if start is None or end is None:
        date_range = resolve_date_range(
            gantt_data,
            today=today,
            fallback_horizon_months=config["fallback_horizon_months"],
        )
        if start is None and end is None and config["pad_timeline"]:
            date_range = pad_date_range(date_range, granularity)
        start = start if start is not None else date_range["start_date"]
        end = end if end is not None else date_range["end_date"]

    return generate_timeline_columns(granularity, start, end, config["max_columns"])
