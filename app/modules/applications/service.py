"""The token-gated apply flow.

Applying to a job is a one-way transition per (account, job) pair. STABLE
jobs charge a fixed entry cost that is debited in the same transaction as
the application insert; FREELANCE jobs are free. Business refusals
(already applied, insufficient balance) come back as ``ApplyResult`` data,
only missing entities and storage faults raise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.infrastructure.database.repositories.account_repository import SqlAccountRepository
from app.infrastructure.database.repositories.application_repository import SqlApplicationRepository
from app.infrastructure.database.repositories.job_repository import SqlJobRepository
from app.modules.accounts.exceptions import AccountNotFoundError
from app.modules.accounts.models import Account
from app.modules.accounts.repository import AccountRepository
from app.modules.jobs.exceptions import JobNotFoundError
from app.modules.jobs.models import Job
from app.modules.jobs.repository import JobRepository

from .exceptions import ApplicationStorageError, DuplicateApplicationError
from .models import Application, ApplyResult
from .repository import ApplicationRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationService:
    """Orchestrates the balance check, debit and insert.

    All three repositories must share one session: ``commit``/``rollback``
    on the application repository ends the unit of work for the others too.
    """

    jobs: JobRepository
    accounts: AccountRepository
    applications: ApplicationRepository
    stable_cost: int

    @classmethod
    def with_session(cls, session: AsyncSession, stable_cost: int | None = None) -> "ApplicationService":
        if stable_cost is None:
            stable_cost = get_settings().stable_application_cost
        return cls(
            jobs=SqlJobRepository(session),
            accounts=SqlAccountRepository(session),
            applications=SqlApplicationRepository(session),
            stable_cost=stable_cost,
        )

    async def apply(self, account_id: str, job_id: str) -> ApplyResult:
        try:
            try:
                return await self._apply(account_id, job_id)
            except DuplicateApplicationError:
                # lost a race with a concurrent apply for the same pair
                logger.info("Concurrent duplicate application %s -> %s", account_id, job_id)
                return ApplyResult.already_applied(await self._current_balance(account_id))
        except SQLAlchemyError as exc:
            await self._safe_rollback()
            logger.exception("Error applying account %s to job %s", account_id, job_id)
            raise ApplicationStorageError("Failed to apply to job.") from exc

    async def _apply(self, account_id: str, job_id: str) -> ApplyResult:
        job, account = await self._load(account_id, job_id)
        if await self.applications.exists(account_id, job_id):
            return ApplyResult.already_applied(account.token_balance)

        if job.is_stable:
            result = await self._apply_stable(account, job)
        else:
            await self.applications.create(account_id, job_id)
            result = ApplyResult.applied(account.token_balance)

        if result.success:
            await self.applications.commit()
        return result

    async def _load(self, account_id: str, job_id: str) -> tuple[Job, Account]:
        job = await self.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError("Job not found.")
        account = await self.accounts.get_by_id(account_id)
        if account is None:
            raise AccountNotFoundError("User not found.")
        return job, account

    async def _apply_stable(self, account: Account, job: Job) -> ApplyResult:
        if not account.can_afford(self.stable_cost):
            return ApplyResult.insufficient_balance(account.token_balance)

        await self.applications.create(account.id, job.id)
        balance = await self.accounts.debit(account.id, self.stable_cost)
        if balance is None:
            # balance dropped below the cost since it was read
            await self.applications.rollback()
            return ApplyResult.insufficient_balance(await self._current_balance(account.id))
        return ApplyResult.applied(balance)

    async def _current_balance(self, account_id: str) -> int:
        account = await self.accounts.get_by_id(account_id)
        return account.token_balance if account else 0

    async def _safe_rollback(self) -> None:
        try:
            await self.applications.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback after failed apply also failed", exc_info=True)

    async def list_for_account(self, account_id: str) -> list[Application]:
        try:
            if await self.accounts.get_by_id(account_id) is None:
                raise AccountNotFoundError("User not found.")
            return list(await self.applications.list_for_account(account_id))
        except SQLAlchemyError as exc:
            logger.exception("Error listing applications for %s", account_id)
            raise ApplicationStorageError("Failed to fetch applications.") from exc
