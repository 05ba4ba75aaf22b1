"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from typing import Any, Callable

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError

from app.db.models import Account as AccountModel, generate_uuid
from app.modules.accounts.models import Account

from .base import SqlRepository

# Dialects with INSERT ... ON CONFLICT DO NOTHING support.
_UPSERT_INSERTS: dict[str, Callable[..., Any]] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlAccountRepository(SqlRepository):
    """Account repository backed by SQLAlchemy models."""

    async def get_by_id(self, account_id: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_wallet_address(self, wallet_address: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.wallet_address == wallet_address)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_or_create(self, wallet_address: str, *, starting_balance: int) -> Account:
        insert = _UPSERT_INSERTS.get(self._session.get_bind().dialect.name)
        if insert is not None:
            stmt = (
                insert(AccountModel)
                .values(
                    id=generate_uuid(),
                    wallet_address=wallet_address,
                    token_balance=starting_balance,
                )
                .on_conflict_do_nothing(index_elements=["wallet_address"])
            )
            await self._session.execute(stmt)
        else:
            await self._create_or_reread(wallet_address, starting_balance)

        account = await self.get_by_wallet_address(wallet_address)
        if account is None:
            raise LookupError(f"account for {wallet_address} missing after upsert")
        return account

    async def _create_or_reread(self, wallet_address: str, starting_balance: int) -> None:
        if await self.get_by_wallet_address(wallet_address) is not None:
            return
        model = AccountModel(wallet_address=wallet_address, token_balance=starting_balance)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError:
            # a concurrent first contact inserted the row first
            await self._session.rollback()

    async def debit(self, account_id: str, amount: int) -> int | None:
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id, AccountModel.token_balance >= amount)
            .values(token_balance=AccountModel.token_balance - amount)
            .returning(AccountModel.token_balance)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=str(model.id),
            wallet_address=model.wallet_address,
            token_balance=int(model.token_balance),
            created_at=model.created_at,
        )
