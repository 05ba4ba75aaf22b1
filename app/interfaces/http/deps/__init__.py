"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .services import (
    get_account_service,
    get_application_service,
    get_email_sender,
    get_job_catalog_service,
    get_verification_service,
)

__all__ = [
    "get_db_session",
    "get_account_service",
    "get_application_service",
    "get_email_sender",
    "get_job_catalog_service",
    "get_verification_service",
]
