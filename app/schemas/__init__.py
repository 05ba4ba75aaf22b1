"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.modules.jobs.models import JobType


class WalletConnectRequest(BaseModel):
    wallet_address: str = Field(..., min_length=1, max_length=128)


class AccountResponse(BaseModel):
    id: str
    wallet_address: str
    token_balance: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class JobResponse(BaseModel):
    id: str
    title: str
    description: str
    type: JobType
    reward: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ApplyRequest(BaseModel):
    account_id: str = Field(..., min_length=1)
    job_id: str = Field(..., min_length=1)


class ApplyResponse(BaseModel):
    success: bool
    balance_after: int
    message: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ApplicationResponse(BaseModel):
    id: str
    account_id: str
    job_id: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class VerificationSendRequest(BaseModel):
    email: EmailStr


class VerificationSendResponse(BaseModel):
    success: bool = True


class VerificationCheckRequest(BaseModel):
    email: EmailStr
    code: str = Field(..., min_length=6, max_length=6, pattern=r"^\d{6}$")


class VerificationCheckResponse(BaseModel):
    verified: bool


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
