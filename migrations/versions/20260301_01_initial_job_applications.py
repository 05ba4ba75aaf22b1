"""accounts, jobs, applications and verification codes

Revision ID: 5f2c9a1e7b30
Revises:
Create Date: 2026-03-01 10:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5f2c9a1e7b30"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("wallet_address", sa.String(length=128), nullable=False),
        sa.Column("token_balance", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("token_balance >= 0", name="ck_accounts_token_balance_non_negative"),
    )
    op.create_index("ix_accounts_wallet_address", "accounts", ["wallet_address"], unique=True)

    op.create_table(
        "jobs",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("reward", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_jobs_type", "jobs", ["type"])
    op.create_index("ix_jobs_created_at", "jobs", ["created_at"])

    op.create_table(
        "applications",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("account_id", sa.String(length=36), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("job_id", sa.String(length=64), sa.ForeignKey("jobs.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("account_id", "job_id", name="uq_applications_account_job"),
    )
    op.create_index("ix_applications_account_id", "applications", ["account_id"])
    op.create_index("ix_applications_job_id", "applications", ["job_id"])

    op.create_table(
        "verification_codes",
        sa.Column("email", sa.String(length=255), primary_key=True),
        sa.Column("code", sa.String(length=6), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("verification_codes")

    op.drop_index("ix_applications_job_id", table_name="applications")
    op.drop_index("ix_applications_account_id", table_name="applications")
    op.drop_table("applications")

    op.drop_index("ix_jobs_created_at", table_name="jobs")
    op.drop_index("ix_jobs_type", table_name="jobs")
    op.drop_table("jobs")

    op.drop_index("ix_accounts_wallet_address", table_name="accounts")
    op.drop_table("accounts")
