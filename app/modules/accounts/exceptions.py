"""Account domain specific exceptions."""


class AccountError(Exception):
    """Base class for account domain errors."""


class InvalidWalletAddressError(AccountError):
    """Raised when a wallet address is empty or blank."""


class AccountNotFoundError(AccountError):
    """Raised when the requested account cannot be found."""


class AccountStorageError(AccountError):
    """Raised when the account store fails; the message is safe to show callers."""
