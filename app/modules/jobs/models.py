"""Domain models for the job catalog."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class JobType(str, Enum):
    STABLE = "STABLE"
    FREELANCE = "FREELANCE"


class JobFilter(str, Enum):
    ALL = "ALL"
    STABLE = "STABLE"
    FREELANCE = "FREELANCE"

    def job_type(self) -> Optional[JobType]:
        """The type to match, or None when every job matches."""
        if self is JobFilter.ALL:
            return None
        return JobType(self.value)


@dataclass(slots=True)
class Job:
    id: str
    title: str
    description: str
    type: JobType
    reward: int
    created_at: Optional[datetime] = None

    @property
    def is_stable(self) -> bool:
        return self.type is JobType.STABLE
