"""Job catalog service: listing, lookup and the demo reseed."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.database.repositories.job_repository import SqlJobRepository

from .exceptions import JobStorageError
from .generator import generate_jobs
from .models import Job, JobFilter
from .repository import JobRepository

logger = logging.getLogger(__name__)

DEFAULT_RESEED_COUNT = 100


@dataclass(slots=True)
class JobCatalogService:
    repository: JobRepository
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def with_session(cls, session: AsyncSession, rng: Optional[random.Random] = None) -> "JobCatalogService":
        return cls(SqlJobRepository(session), rng=rng or random.Random())

    async def list_jobs(self, job_filter: JobFilter | str = JobFilter.ALL) -> list[Job]:
        job_filter = JobFilter(job_filter)
        try:
            return list(await self.repository.list_jobs(job_filter.job_type()))
        except SQLAlchemyError as exc:
            logger.exception("Error fetching jobs (filter=%s)", job_filter.value)
            raise JobStorageError("Failed to fetch jobs.") from exc

    async def get_job(self, job_id: str) -> Job | None:
        try:
            return await self.repository.get_by_id(job_id)
        except SQLAlchemyError as exc:
            logger.exception("Error fetching job %s", job_id)
            raise JobStorageError("Failed to fetch jobs.") from exc

    async def reseed(self, count: int = DEFAULT_RESEED_COUNT) -> list[Job]:
        """Replace the whole catalog, and every application, with ``count`` fresh jobs.

        Destructive and unscoped. Runs as a single transaction so readers never
        observe a half-cleared catalog.
        """
        jobs = generate_jobs(count, rng=self.rng)
        try:
            await self.repository.replace_all(jobs)
            await self.repository.commit()
        except SQLAlchemyError as exc:
            await self.repository.rollback()
            logger.exception("Error reseeding jobs")
            raise JobStorageError("Failed to seed jobs.") from exc
        logger.info("%d jobs seeded successfully.", len(jobs))
        return await self.list_jobs(JobFilter.ALL)
