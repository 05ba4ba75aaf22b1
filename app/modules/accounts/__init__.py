"""Account ledger: wallet-keyed identities and token balances."""

from .exceptions import (
    AccountError,
    AccountNotFoundError,
    AccountStorageError,
    InvalidWalletAddressError,
)
from .models import Account

__all__ = [
    "Account",
    "AccountError",
    "AccountNotFoundError",
    "AccountStorageError",
    "InvalidWalletAddressError",
]
