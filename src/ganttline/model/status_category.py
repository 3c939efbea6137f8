# SPDX-License-Identifier: MIT

import re
from enum import StrEnum
from typing import Optional

_SEPARATORS_P = re.compile(r"[\s_-]+")


class StatusCategory(StrEnum):
    TODO = "To Do"
    IN_PROGRESS = "In Progress"
    DONE = "Done"
    UNKNOWN = "Unknown"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "StatusCategory":
        """
        Map a persisted status category string to a StatusCategory.

        Matching ignores case, whitespace, "-" and "_", so "To Do", "todo" and
        "TO_DO" all map to TODO. Anything else, including None, maps to UNKNOWN.
        """
        if value is None:
            return cls.UNKNOWN
        normalized = _SEPARATORS_P.sub("", value).lower()
        for category in (cls.TODO, cls.IN_PROGRESS, cls.DONE):
            if normalized == _SEPARATORS_P.sub("", category.value).lower():
                return category
        return cls.UNKNOWN


class SprintStatus(StrEnum):
    NOT_STARTED = "not_started"
    STARTED = "started"
    COMPLETED = "completed"
    UNKNOWN = "unknown"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "SprintStatus":
        if value is None:
            return cls.UNKNOWN
        normalized = _SEPARATORS_P.sub("_", value.strip()).lower()
        for status in cls:
            if normalized == status.value:
                return status
        # "active" is what some boards call a started sprint
        if normalized == "active":
            return cls.STARTED
        return cls.UNKNOWN
