"""
Settings Model
==============

Tunable operating parameters of the ShiftDown service: how many workers
sample the process table, the CPU load above which a process counts as
overactive, how long a downgraded process stays downgraded, and which
processes are suspended or decreased outright.

Every field validates itself on construction and on assignment. Numbers that
fall outside their range are clamped to the nearest bound rather than
rejected; text is stored trimmed. The settings file can therefore only fail
to load when it is malformed, never because a value is out of range.
"""

import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

WORKERS = 5
PROCESS_LOAD_MAX_PERCENT = 25
NORMALIZATION_TIME_SECONDS = 5

WORKERS_RANGE = (1, 25)
PROCESS_LOAD_MAX_RANGE = (0, 100)
# no upper bound
NORMALIZATION_TIME_RANGE = (1, None)

_WHITESPACE = re.compile(r"\s+")


def clamp(value: int, lower: int, upper: Optional[int] = None) -> int:
    if upper is not None:
        value = min(value, upper)
    return max(value, lower)


def split_tokens(text: str) -> List[str]:
    """
    Split on runs of whitespace.

    An empty string gives `[""]`, not `[]`; consumers treat a single empty
    token as "nothing configured".
    """
    return _WHITESPACE.split(text)


class Settings(BaseModel):
    model_config = ConfigDict(
        validate_assignment=True,
        validate_default=True,
        populate_by_name=True,
    )

    workers: int = Field(default=WORKERS, alias="workers", strict=True)
    process_load_max: int = Field(
        default=PROCESS_LOAD_MAX_PERCENT, alias="processLoadMax", strict=True
    )
    normalization_time: int = Field(
        default=NORMALIZATION_TIME_SECONDS, alias="normalizationTime", strict=True
    )
    suspension: str = Field(default="", alias="suspensions")
    decrease: str = Field(default="", alias="decreases")

    @field_validator("workers")
    @classmethod
    def _clamp_workers(cls, value: int) -> int:
        return clamp(value, *WORKERS_RANGE)

    @field_validator("process_load_max")
    @classmethod
    def _clamp_process_load_max(cls, value: int) -> int:
        return clamp(value, *PROCESS_LOAD_MAX_RANGE)

    @field_validator("normalization_time")
    @classmethod
    def _clamp_normalization_time(cls, value: int) -> int:
        return clamp(value, *NORMALIZATION_TIME_RANGE)

    @field_validator("suspension", "decrease", mode="before")
    @classmethod
    def _trim(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def suspension_tokens(self) -> List[str]:
        """Process names to suspend, recomputed from `suspension` on each access."""
        return split_tokens(self.suspension)

    @property
    def decrease_tokens(self) -> List[str]:
        """Process names whose priority is always decreased."""
        return split_tokens(self.decrease)
