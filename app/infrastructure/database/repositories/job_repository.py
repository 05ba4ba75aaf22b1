"""SQLAlchemy implementation of the job catalog repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, desc, insert, select

from app.db.models import Application as ApplicationModel, Job as JobModel
from app.modules.jobs.models import Job, JobType

from .base import SqlRepository


class SqlJobRepository(SqlRepository):
    async def get_by_id(self, job_id: str) -> Job | None:
        stmt = select(JobModel).where(JobModel.id == job_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_jobs(self, job_type: JobType | None = None) -> list[Job]:
        stmt = select(JobModel).order_by(desc(JobModel.created_at), desc(JobModel.id))
        if job_type is not None:
            stmt = stmt.where(JobModel.type == job_type.value)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def replace_all(self, jobs: Sequence[Job]) -> None:
        # applications reference jobs, so they go first
        await self._session.execute(delete(ApplicationModel))
        await self._session.execute(delete(JobModel))
        if jobs:
            await self._session.execute(
                insert(JobModel),
                [
                    {
                        "id": job.id,
                        "title": job.title,
                        "description": job.description,
                        "type": job.type.value,
                        "reward": job.reward,
                        "created_at": job.created_at,
                    }
                    for job in jobs
                ],
            )
        # bulk statements bypass the identity map
        self._session.expunge_all()

    @staticmethod
    def _to_domain(model: JobModel) -> Job:
        return Job(
            id=model.id,
            title=model.title,
            description=model.description,
            type=JobType(model.type),
            reward=model.reward,
            created_at=model.created_at,
        )
