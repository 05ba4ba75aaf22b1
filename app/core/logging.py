"""Process-wide logging setup."""

from __future__ import annotations

import logging

from app.core.config import Settings

_configured = False


def configure_logging(settings: Settings) -> None:
    """Install the root handler once; later calls only adjust the level."""
    global _configured
    level = logging.DEBUG if settings.debug else settings.logging.level.upper()
    if not _configured:
        logging.basicConfig(level=level, format=settings.logging.format)
        _configured = True
    logging.getLogger().setLevel(level)
    # SQL echo is controlled by database.echo, keep the engine logger quiet otherwise
    if not settings.database.echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
