# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding
from rich.text import Text

from ganttline.view.state import get_show_header


def header(source_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application name, the payload being viewed and the report.

    Args:
        source_name: The name of the payload file, printed as plain text
        sub_header: Optional report name, may contain rich markup
    """
    if not get_show_header():
        return

    console = Console()
    title = Text.assemble(
        ("ganttline", "dark_orange"),
        ("  ", ""),
        (source_name, "plum1"),
    )
    console.print(Padding(title, (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
