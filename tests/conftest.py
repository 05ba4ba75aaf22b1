"""Pytest configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone

import pytest

os.environ.setdefault("ENVIRONMENT", "test")

from sqlalchemy import func, select  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from app.db.models import Account as AccountModel  # noqa: E402
from app.db.models import Application as ApplicationModel  # noqa: E402
from app.db.models import Job as JobModel  # noqa: E402
from app.infrastructure.database import build_engine, init_db  # noqa: E402
from app.modules.jobs.models import JobType  # noqa: E402

from .fakes import FakeEmailSender  # noqa: E402


@pytest.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_job(session_factory):
    """Insert a job row; later calls get later timestamps."""
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    async def _make_job(job_id: str, job_type: JobType = JobType.STABLE, reward: int = 1000) -> str:
        counter["n"] += 1
        async with session_factory() as session:
            session.add(
                JobModel(
                    id=job_id,
                    title=f"Backend Developer #{counter['n']}",
                    description="Seeking a Backend Developer to join a dynamic team.",
                    type=job_type.value,
                    reward=reward,
                    created_at=base + timedelta(minutes=counter["n"]),
                )
            )
            await session.commit()
        return job_id

    return _make_job


@pytest.fixture
def make_account(session_factory):
    """Insert an account with an arbitrary balance and return its id."""

    async def _make_account(wallet_address: str = "wallet-1", balance: int = 1000) -> str:
        async with session_factory() as session:
            model = AccountModel(wallet_address=wallet_address, token_balance=balance)
            session.add(model)
            await session.commit()
            return model.id

    return _make_account


@pytest.fixture
def read_balance(session_factory):
    async def _read_balance(account_id: str) -> int:
        async with session_factory() as session:
            result = await session.execute(
                select(AccountModel.token_balance).where(AccountModel.id == account_id)
            )
            return result.scalar_one()

    return _read_balance


@pytest.fixture
def count_applications(session_factory):
    async def _count(account_id: str | None = None, job_id: str | None = None) -> int:
        stmt = select(func.count(ApplicationModel.id))
        if account_id is not None:
            stmt = stmt.where(ApplicationModel.account_id == account_id)
        if job_id is not None:
            stmt = stmt.where(ApplicationModel.job_id == job_id)
        async with session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one()

    return _count


@pytest.fixture
def email_sender():
    return FakeEmailSender()
