"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("token_balance >= 0", name="ck_accounts_token_balance_non_negative"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    wallet_address = Column(String(128), unique=True, nullable=False, index=True)
    token_balance = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    applications = relationship("Application", back_populates="account")


class Job(Base):
    __tablename__ = "jobs"

    id = Column(String(64), primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String(20), nullable=False, index=True)  # STABLE, FREELANCE
    reward = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)

    applications = relationship("Application", back_populates="job")


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("account_id", "job_id", name="uq_applications_account_job"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    account_id = Column(String(36), ForeignKey("accounts.id"), nullable=False, index=True)
    job_id = Column(String(64), ForeignKey("jobs.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    account = relationship("Account", back_populates="applications")
    job = relationship("Job", back_populates="applications")


class VerificationCode(Base):
    __tablename__ = "verification_codes"

    email = Column(String(255), primary_key=True)
    code = Column(String(6), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
