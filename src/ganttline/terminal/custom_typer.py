# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """Custom TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Override to resolve aliases to the full command name"""
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        """Find the full command name if default_name is an alias"""
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        """Override to prevent duplicate commands from being added"""
        if name is None:
            name = cmd.name

        existing_name = self._group_cmd_name(name or "")
        if existing_name in self.commands and existing_name != name:
            # This is an alias, don't add it again
            return

        super().add_command(cmd, name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """AliasedTyperGroup that lists commands in a fixed order"""

    desired_order = [
        "gantt, g",
        "columns, c",
        "stats, st",
        "search, s",
        "config, cf",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return commands in desired order (not insertion order due to Typer internals)"""
        result = [name for name in self.desired_order if name in self.commands]

        # Add any commands not in the desired order list
        for cmd_name in self.commands.keys():
            if cmd_name not in result:
                result.append(cmd_name)

        return result
