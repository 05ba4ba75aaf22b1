"""Application ledger and the token-gated apply flow."""

from .exceptions import ApplicationError, ApplicationStorageError, DuplicateApplicationError
from .models import (
    ALREADY_APPLIED_MESSAGE,
    INSUFFICIENT_BALANCE_MESSAGE,
    Application,
    ApplyResult,
)

__all__ = [
    "ALREADY_APPLIED_MESSAGE",
    "INSUFFICIENT_BALANCE_MESSAGE",
    "Application",
    "ApplyResult",
    "ApplicationError",
    "ApplicationStorageError",
    "DuplicateApplicationError",
]
