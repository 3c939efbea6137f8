# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from ganttline.initialize import initialize
from ganttline.terminal import configuration
from ganttline.terminal.custom_typer import OrderedAliasedTyperGroup
from ganttline.terminal.gantt import columns, gantt, stats
from ganttline.terminal.search import search
from ganttline.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Ganttline - Gantt timelines and schedule health in the CLI",
    no_args_is_help=True,
)
app.command(name="gantt, g")(gantt)
app.command(name="columns, c")(columns)
app.command(name="stats, st")(stats)
app.command(name="search, s")(search)
app.add_typer(configuration.app, name="config, cf")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug messages to stderr"),
    ] = False,
) -> None:
    """
    Ganttline - Gantt timelines and schedule health in the CLI

    Global options that apply to all commands.
    """
    initialize("DEBUG" if verbose else None)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
