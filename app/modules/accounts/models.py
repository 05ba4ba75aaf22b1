"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class Account:
    id: str
    wallet_address: str
    token_balance: int
    created_at: Optional[datetime] = None

    def can_afford(self, amount: int) -> bool:
        return self.token_balance >= amount
