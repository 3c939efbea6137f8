# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from ganttline import configuration
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.view import state as view_state


def initialize(log_level: Optional[str] = None) -> None:
    configuration.load_config_path_configuration()
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    CONFIGURATION_REPO.reset()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    configure_logging(log_level or config.get("log_level", "WARNING"))


def configure_logging(log_level: str) -> None:
    """Send ganttline's log records to stderr through rich."""
    package_logger = logging.getLogger("ganttline")
    package_logger.setLevel(log_level.upper())

    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, rich_tracebacks=True
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
        package_logger.propagate = False


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
