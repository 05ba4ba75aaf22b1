"""SQLAlchemy storage for verification codes."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete

from app.db.models import VerificationCode as VerificationCodeModel

from .base import SqlRepository


class SqlVerificationCodeRepository(SqlRepository):
    async def store(self, email: str, code: str, expires_at: datetime) -> None:
        await self._session.execute(
            delete(VerificationCodeModel).where(VerificationCodeModel.email == email)
        )
        self._session.add(VerificationCodeModel(email=email, code=code, expires_at=expires_at))
        await self._session.flush()

    async def consume(self, email: str, code: str, now: datetime) -> bool:
        stmt = (
            delete(VerificationCodeModel)
            .where(
                VerificationCodeModel.email == email,
                VerificationCodeModel.code == code,
                VerificationCodeModel.expires_at > now,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def purge_expired(self, now: datetime) -> int:
        stmt = (
            delete(VerificationCodeModel)
            .where(VerificationCodeModel.expires_at <= now)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount or 0

    async def discard(self, email: str, code: str) -> None:
        await self._session.execute(
            delete(VerificationCodeModel)
            .where(VerificationCodeModel.email == email, VerificationCodeModel.code == code)
            .execution_options(synchronize_session=False)
        )
