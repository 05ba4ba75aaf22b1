"""Tests for the account ledger."""

import asyncio

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.db.models import Account as AccountModel
from app.infrastructure.database.repositories import account_repository
from app.infrastructure.database.repositories.account_repository import SqlAccountRepository
from app.modules.accounts import AccountStorageError, InvalidWalletAddressError
from app.modules.accounts.service import AccountService


@pytest.fixture
def service(session):
    return AccountService.with_session(session, starting_balance=1000)


async def test_connect_creates_account_with_starting_balance(service):
    account = await service.connect("7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU")

    assert account.wallet_address == "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
    assert account.token_balance == 1000
    assert account.id
    assert account.created_at is not None


async def test_connect_is_idempotent(service, session_factory):
    first = await service.connect("wallet-a")
    second = await service.connect("wallet-a")

    assert first.id == second.id
    async with session_factory() as session:
        total = (await session.execute(select(func.count(AccountModel.id)))).scalar_one()
    assert total == 1


async def test_connect_returns_existing_balance(service, make_account):
    account_id = await make_account("wallet-b", balance=42)

    account = await service.connect("wallet-b")

    assert account.id == account_id
    assert account.token_balance == 42


async def test_connect_matches_handle_verbatim(service):
    padded = await service.connect("  wallet-c  ")
    plain = await service.connect("wallet-c")

    assert padded.wallet_address == "  wallet-c  "
    assert plain.id != padded.id


@pytest.mark.parametrize("handle", ["", "   "])
async def test_connect_rejects_blank_handle(service, handle):
    with pytest.raises(InvalidWalletAddressError):
        await service.connect(handle)


async def test_connect_storage_fault(session):
    class BrokenRepository(SqlAccountRepository):
        async def get_or_create(self, wallet_address, *, starting_balance):
            raise OperationalError("INSERT INTO accounts", {}, Exception("database is locked"))

    service = AccountService(BrokenRepository(session), starting_balance=1000)

    with pytest.raises(AccountStorageError, match="Failed to connect wallet."):
        await service.connect("wallet-d")


async def test_get_by_id(service):
    created = await service.connect("wallet-e")

    found = await service.get_by_id(created.id)

    assert found is not None
    assert found.wallet_address == "wallet-e"
    assert await service.get_by_id("missing") is None


async def test_debit_refuses_to_go_negative(session, make_account, read_balance):
    account_id = await make_account(balance=4)
    repository = SqlAccountRepository(session)

    assert await repository.debit(account_id, 5) is None
    assert await repository.debit(account_id, 4) == 0
    await repository.commit()

    assert await read_balance(account_id) == 0


async def test_concurrent_first_connect_creates_one_account(session_factory):
    async def connect_once():
        async with session_factory() as session:
            return await AccountService.with_session(session, starting_balance=1000).connect("wallet-f")

    accounts = await asyncio.gather(*(connect_once() for _ in range(6)))

    assert len({account.id for account in accounts}) == 1
    assert all(account.token_balance == 1000 for account in accounts)


async def test_concurrent_first_connect_without_upsert(session_factory, monkeypatch):
    monkeypatch.setattr(account_repository, "_UPSERT_INSERTS", {})

    async def connect_once():
        async with session_factory() as session:
            return await AccountService.with_session(session, starting_balance=1000).connect("wallet-g")

    accounts = await asyncio.gather(*(connect_once() for _ in range(4)))

    assert len({account.id for account in accounts}) == 1


async def test_insert_conflict_rereads_existing_account(session, make_account, monkeypatch):
    monkeypatch.setattr(account_repository, "_UPSERT_INSERTS", {})
    account_id = await make_account("wallet-h", balance=70)

    class LateRepository(SqlAccountRepository):
        """Misses the existing row on the first lookup, as a racing insert would."""

        def __init__(self, session):
            super().__init__(session)
            self._missed = False

        async def get_by_wallet_address(self, wallet_address):
            if not self._missed:
                self._missed = True
                return None
            return await super().get_by_wallet_address(wallet_address)

    account = await AccountService(LateRepository(session), starting_balance=1000).connect("wallet-h")

    assert account.id == account_id
    assert account.token_balance == 70
