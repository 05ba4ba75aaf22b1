"""Domain models for email verification codes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class IssuedCode:
    email: str
    code: str
    expires_at: datetime
