"""Storage and delivery protocols for verification codes."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class VerificationCodeRepository(Protocol):
    async def store(self, email: str, code: str, expires_at: datetime) -> None:
        """Save ``code`` for ``email``, replacing any earlier one."""
        ...

    async def consume(self, email: str, code: str, now: datetime) -> bool:
        """Delete and report a matching unexpired code."""
        ...

    async def purge_expired(self, now: datetime) -> int:
        ...

    async def discard(self, email: str, code: str) -> None:
        """Drop ``code`` for ``email`` if it is still stored."""
        ...

    async def commit(self) -> None:
        ...


class EmailSender(Protocol):
    async def send(self, *, to: str, subject: str, body: str) -> None:
        ...
