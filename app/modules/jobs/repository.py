"""Repository protocol for the job catalog."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Job, JobType


class JobRepository(Protocol):
    async def get_by_id(self, job_id: str) -> Job | None:
        ...

    async def list_jobs(self, job_type: JobType | None = None) -> Sequence[Job]:
        """Jobs newest first, optionally restricted to one type."""
        ...

    async def replace_all(self, jobs: Sequence[Job]) -> None:
        """Delete every application and job, then insert ``jobs``."""
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...
