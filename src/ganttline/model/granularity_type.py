# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional


class Granularity(StrEnum):
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def from_str(cls, value: Optional[str]) -> Optional["Granularity"]:
        """Map user input such as "week", "W" or "Months" to a granularity.

        Returns None when the value is not recognized.
        """
        if value is None:
            return None
        normalized = value.strip().lower()
        for granularity in cls:
            aliases = (granularity.value, granularity.value[:-1], granularity.value[0])
            if normalized in aliases:
                return granularity
        return None
