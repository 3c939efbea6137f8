# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ganttline import configuration
from ganttline.configuration import Configuration
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.terminal.custom_typer import AliasedTyperGroup
from ganttline.terminal.parse import parse_granularity

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _configuration_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("default_granularity", config["default_granularity"])
    table.add_row(
        "pad_timeline",
        "✓ Enabled" if config["pad_timeline"] else "✗ Disabled",
    )
    table.add_row("fallback_horizon_months", str(config["fallback_horizon_months"]))
    table.add_row("at_risk_days", str(config["at_risk_days"]))
    table.add_row("max_columns", str(config["max_columns"]))
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row(
        "chart_width",
        str(config["chart_width"])
        if config["chart_width"] is not None
        else "Terminal width",
    )
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config.get("log_level", "WARNING"))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        from yaml import Loader  # type: ignore[assignment] # noqa: F401

        yaml_library_type = "Python"

    console.print()
    console.print(f"Config path: {configuration.APP_CONFIG_PATH}")
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    default_granularity: Annotated[
        Optional[str],
        typer.Option(
            "--default-granularity",
            help="Granularity used when --granularity is not given: weeks, months or years",
        ),
    ] = None,
    pad_timeline: Annotated[
        Optional[bool],
        typer.Option(
            "--pad-timeline/--no-pad-timeline",
            help="Widen the timeline around the payload's dates",
        ),
    ] = None,
    fallback_horizon_months: Annotated[
        Optional[int],
        typer.Option(
            "--fallback-horizon-months",
            min=1,
            help="Months either side of today shown for a payload without dates",
        ),
    ] = None,
    at_risk_days: Annotated[
        Optional[int],
        typer.Option(
            "--at-risk-days",
            min=0,
            help="Days ahead of a deadline at which a task counts as at risk",
        ),
    ] = None,
    max_columns: Annotated[
        Optional[int],
        typer.Option(
            "--max-columns", min=1, help="Maximum number of timeline columns"
        ),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option(
            "--left-column-width", min=1, help="Width of left column for item names"
        ),
    ] = None,
    chart_width: Annotated[
        Optional[int],
        typer.Option(
            "--chart-width", min=1, help="Width of the timeline in characters"
        ),
    ] = None,
    remove_chart_width: Annotated[
        bool,
        typer.Option(
            "--remove-chart-width",
            help="Reset chart width to None (use the terminal width)",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the header above reports",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level", help="Logging level: DEBUG, INFO, WARNING or ERROR"
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if default_granularity is not None:
        default_granularity = str(parse_granularity(default_granularity))
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise typer.BadParameter(
                f"Unknown log level '{log_level}'", param_hint="--log-level"
            )

    CONFIGURATION_REPO.update_config(
        default_granularity=default_granularity,
        pad_timeline=pad_timeline,
        fallback_horizon_months=fallback_horizon_months,
        at_risk_days=at_risk_days,
        max_columns=max_columns,
        left_column_width=left_column_width,
        chart_width=chart_width,
        remove_chart_width=remove_chart_width,
        show_header=show_header,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, title="Updated Configuration"))
