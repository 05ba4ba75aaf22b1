"""Domain models for job applications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

ALREADY_APPLIED_MESSAGE = "You have already applied to this job."
INSUFFICIENT_BALANCE_MESSAGE = "Insufficient token balance."


@dataclass(slots=True)
class Application:
    id: str
    account_id: str
    job_id: str
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class ApplyResult:
    """Outcome of an apply call; soft failures carry a message and the unchanged balance."""

    success: bool
    balance_after: int
    message: Optional[str] = None

    @classmethod
    def applied(cls, balance: int) -> "ApplyResult":
        return cls(success=True, balance_after=balance)

    @classmethod
    def already_applied(cls, balance: int) -> "ApplyResult":
        return cls(success=False, balance_after=balance, message=ALREADY_APPLIED_MESSAGE)

    @classmethod
    def insufficient_balance(cls, balance: int) -> "ApplyResult":
        return cls(success=False, balance_after=balance, message=INSUFFICIENT_BALANCE_MESSAGE)
