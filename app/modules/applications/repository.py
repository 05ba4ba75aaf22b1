"""Repository protocol for the application ledger."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Application


class ApplicationRepository(Protocol):
    async def exists(self, account_id: str, job_id: str) -> bool:
        ...

    async def create(self, account_id: str, job_id: str) -> Application:
        """Insert the pair; raises DuplicateApplicationError if it already exists."""
        ...

    async def list_for_account(self, account_id: str) -> Sequence[Application]:
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...
