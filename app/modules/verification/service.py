"""Issue and check one-time email verification codes."""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.infrastructure.database.repositories.verification_repository import SqlVerificationCodeRepository
from app.infrastructure.mail import SmtpEmailSender

from .exceptions import InvalidEmailError, VerificationDeliveryError
from .models import IssuedCode
from .repository import EmailSender, VerificationCodeRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_code() -> str:
    """Six digits, never starting with zero."""
    return str(100000 + secrets.randbelow(900000))


@dataclass(slots=True)
class VerificationService:
    repository: VerificationCodeRepository
    sender: EmailSender
    ttl: timedelta = timedelta(minutes=10)
    subject: str = "Your VoSo Verification Code"
    clock: Callable[[], datetime] = field(default=_utcnow)

    @classmethod
    def with_session(cls, session: AsyncSession, sender: EmailSender | None = None) -> "VerificationService":
        settings = get_settings()
        return cls(
            repository=SqlVerificationCodeRepository(session),
            sender=sender or SmtpEmailSender(settings.smtp),
            ttl=timedelta(seconds=settings.verification.code_ttl_seconds),
            subject=settings.verification.subject,
        )

    async def send_code(self, email: str) -> IssuedCode:
        recipient = _normalize(email)
        issued = IssuedCode(email=recipient, code=generate_code(), expires_at=self.clock() + self.ttl)
        await self.repository.store(issued.email, issued.code, issued.expires_at)
        await self.repository.commit()

        try:
            await self.sender.send(
                to=recipient,
                subject=self.subject,
                body=f"Your verification code is: {issued.code}",
            )
        except OSError as exc:
            logger.exception("Failed to send verification code to %s", recipient)
            # the code never reached the recipient
            await self.repository.discard(issued.email, issued.code)
            await self.repository.commit()
            raise VerificationDeliveryError("Failed to send email") from exc
        return issued

    async def verify_code(self, email: str, code: str) -> bool:
        recipient = _normalize(email)
        now = self.clock()
        matched = await self.repository.consume(recipient, code.strip(), now)
        purged = await self.repository.purge_expired(now)
        await self.repository.commit()
        if purged:
            logger.debug("Purged %d expired verification codes", purged)
        return matched


def _normalize(email: str) -> str:
    recipient = (email or "").strip().lower()
    if not recipient:
        raise InvalidEmailError("Email is required")
    return recipient
