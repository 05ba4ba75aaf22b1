"""Service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.infrastructure.mail import SmtpEmailSender
from app.modules.accounts.service import AccountService
from app.modules.applications.service import ApplicationService
from app.modules.jobs.service import JobCatalogService
from app.modules.verification.repository import EmailSender
from app.modules.verification.service import VerificationService

from .database import get_db_session


def get_account_service(db: AsyncSession = Depends(get_db_session)) -> AccountService:
    return AccountService.with_session(db)


def get_job_catalog_service(db: AsyncSession = Depends(get_db_session)) -> JobCatalogService:
    return JobCatalogService.with_session(db)


def get_application_service(db: AsyncSession = Depends(get_db_session)) -> ApplicationService:
    return ApplicationService.with_session(db)


def get_email_sender(settings: Settings = Depends(get_settings)) -> EmailSender:
    return SmtpEmailSender(settings.smtp)


def get_verification_service(
    db: AsyncSession = Depends(get_db_session),
    sender: EmailSender = Depends(get_email_sender),
) -> VerificationService:
    return VerificationService.with_session(db, sender=sender)


__all__ = [
    "get_account_service",
    "get_application_service",
    "get_email_sender",
    "get_job_catalog_service",
    "get_verification_service",
]
