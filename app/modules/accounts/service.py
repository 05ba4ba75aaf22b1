"""Domain services for the account ledger."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.infrastructure.database.repositories.account_repository import SqlAccountRepository

from .exceptions import AccountStorageError, InvalidWalletAddressError
from .models import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulates account use cases: connect a wallet and look accounts up."""

    def __init__(self, repository: AccountRepository, starting_balance: int | None = None) -> None:
        self._repository = repository
        if starting_balance is None:
            starting_balance = get_settings().starting_balance
        self._starting_balance = starting_balance

    @classmethod
    def with_session(cls, session: AsyncSession, starting_balance: int | None = None) -> "AccountService":
        return cls(SqlAccountRepository(session), starting_balance=starting_balance)

    async def connect(self, wallet_address: str) -> Account:
        # handles are matched exactly as given; only blank input is refused
        if not wallet_address or not wallet_address.strip():
            raise InvalidWalletAddressError("Wallet address is required.")
        try:
            account = await self._repository.get_or_create(wallet_address, starting_balance=self._starting_balance)
            await self._repository.commit()
        except (SQLAlchemyError, LookupError) as exc:
            logger.exception("Error connecting wallet %s", wallet_address)
            raise AccountStorageError("Failed to connect wallet.") from exc
        logger.debug("Wallet %s connected as account %s", wallet_address, account.id)
        return account

    async def get_by_id(self, account_id: str) -> Account | None:
        try:
            return await self._repository.get_by_id(account_id)
        except SQLAlchemyError as exc:
            logger.exception("Error fetching account %s", account_id)
            raise AccountStorageError("Failed to fetch user data.") from exc
