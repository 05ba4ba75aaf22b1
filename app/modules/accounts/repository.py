"""Repository protocol for accounts."""

from __future__ import annotations

from typing import Protocol

from .models import Account


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence."""

    async def get_by_id(self, account_id: str) -> Account | None:
        ...

    async def get_by_wallet_address(self, wallet_address: str) -> Account | None:
        ...

    async def get_or_create(self, wallet_address: str, *, starting_balance: int) -> Account:
        """Return the account for ``wallet_address``, inserting it atomically when absent."""
        ...

    async def debit(self, account_id: str, amount: int) -> int | None:
        """Subtract ``amount`` if the balance covers it; return the new balance or None."""
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...
