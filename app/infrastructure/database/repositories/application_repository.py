"""SQLAlchemy implementation of the application ledger."""

from __future__ import annotations

from sqlalchemy import desc, func, select
from sqlalchemy.exc import IntegrityError

from app.db.models import Application as ApplicationModel
from app.modules.applications.exceptions import DuplicateApplicationError
from app.modules.applications.models import Application

from .base import SqlRepository


class SqlApplicationRepository(SqlRepository):
    async def exists(self, account_id: str, job_id: str) -> bool:
        stmt = select(func.count(ApplicationModel.id)).where(
            ApplicationModel.account_id == account_id,
            ApplicationModel.job_id == job_id,
        )
        result = await self._session.execute(stmt)
        return bool(result.scalar_one())

    async def create(self, account_id: str, job_id: str) -> Application:
        model = ApplicationModel(account_id=account_id, job_id=job_id)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            # The failed flush poisons the transaction; roll back before re-reading.
            # Only a row for the same pair makes this a duplicate, any other
            # integrity failure (e.g. a foreign key) propagates.
            await self._session.rollback()
            if await self.exists(account_id, job_id):
                raise DuplicateApplicationError(account_id, job_id) from exc
            raise
        await self._session.refresh(model)
        return self._to_domain(model)

    async def list_for_account(self, account_id: str) -> list[Application]:
        stmt = (
            select(ApplicationModel)
            .where(ApplicationModel.account_id == account_id)
            .order_by(desc(ApplicationModel.created_at), desc(ApplicationModel.id))
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: ApplicationModel) -> Application:
        return Application(
            id=model.id,
            account_id=model.account_id,
            job_id=model.job_id,
            created_at=model.created_at,
        )
