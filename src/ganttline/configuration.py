# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "ganttline"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

MAX_TIMELINE_COLUMNS = 200
AT_RISK_DAYS = 3
FALLBACK_HORIZON_MONTHS = 3


class Configuration(TypedDict):
    default_granularity: str
    pad_timeline: bool
    fallback_horizon_months: int
    at_risk_days: int
    max_columns: int
    left_column_width: int
    chart_width: Optional[int]
    show_header: bool
    log_level: NotRequired[str]


def get_default_configuration() -> Configuration:
    return {
        "default_granularity": "weeks",
        "pad_timeline": True,
        "fallback_horizon_months": FALLBACK_HORIZON_MONTHS,
        "at_risk_days": AT_RISK_DAYS,
        "max_columns": MAX_TIMELINE_COLUMNS,
        "left_column_width": 40,
        "chart_width": None,
        "show_header": True,
        "log_level": "WARNING",
    }


def load_config_path_configuration() -> None:
    """
    Set CONFIG_PATH from GANTTLINE_CONFIG_PATH, or the platform default.

    This must be called before the configuration repository is first read.
    """
    global CONFIG_PATH, APP_CONFIG_PATH

    config_path_setting = os.environ.get("GANTTLINE_CONFIG_PATH")
    if config_path_setting:
        CONFIG_PATH = Path(config_path_setting)
    else:
        CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
    APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
