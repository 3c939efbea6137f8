# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttline import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if not isinstance(self._config, dict):
            raise ValueError(
                f"Configuration file {configuration.APP_CONFIG_PATH} is not a mapping"
            )

        # Fill in settings added after the file was written
        for setting, value in configuration.get_default_configuration().items():
            if setting not in self._config:
                self._config[setting] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        """Drop the cached configuration so the next read goes to disk."""
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        default_granularity: Optional[str] = None,
        pad_timeline: Optional[bool] = None,
        fallback_horizon_months: Optional[int] = None,
        at_risk_days: Optional[int] = None,
        max_columns: Optional[int] = None,
        left_column_width: Optional[int] = None,
        chart_width: Optional[int] = None,
        remove_chart_width: bool = False,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if default_granularity is not None:
            self.config["default_granularity"] = default_granularity
        if pad_timeline is not None:
            self.config["pad_timeline"] = pad_timeline
        if fallback_horizon_months is not None:
            self.config["fallback_horizon_months"] = fallback_horizon_months
        if at_risk_days is not None:
            self.config["at_risk_days"] = at_risk_days
        if max_columns is not None:
            self.config["max_columns"] = max_columns
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if chart_width is not None:
            self.config["chart_width"] = chart_width
        if remove_chart_width:
            self.config["chart_width"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level


CONFIGURATION_REPO = ConfigurationRepository()
