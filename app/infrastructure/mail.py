"""Outbound mail over SMTP."""

from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from app.core.config import SmtpSettings

logger = logging.getLogger(__name__)


class SmtpEmailSender:
    """Sends plain-text mail; the blocking smtplib call runs in a worker thread.

    Delivery failures surface as ``OSError`` (``smtplib.SMTPException`` included).
    """

    def __init__(self, settings: SmtpSettings) -> None:
        self._settings = settings

    async def send(self, *, to: str, subject: str, body: str) -> None:
        message = EmailMessage()
        message["From"] = self._settings.username or "no-reply@localhost"
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)
        await asyncio.to_thread(self._deliver, message)
        logger.info("Mail '%s' sent to %s", subject, to)

    def _deliver(self, message: EmailMessage) -> None:
        settings = self._settings
        smtp_cls = smtplib.SMTP_SSL if settings.use_ssl else smtplib.SMTP
        with smtp_cls(settings.host, settings.port, timeout=settings.timeout) as client:
            if not settings.use_ssl:
                client.starttls()
            if settings.username and settings.password:
                client.login(settings.username, settings.password)
            client.send_message(message)


__all__ = ["SmtpEmailSender"]
