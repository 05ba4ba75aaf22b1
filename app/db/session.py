"""Backward-compatible database session helpers.

This module keeps the short import path (``app.db.session``) used by the
admin scripts while delegating to ``app.infrastructure.database``.
"""

from __future__ import annotations

from app.infrastructure.database import Base, get_session as get_db, init_db  # noqa: F401
from app.infrastructure.database import session as _db_session

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "get_engine",
]

get_engine = _db_session.get_engine
