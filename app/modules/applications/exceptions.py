"""Application ledger exceptions."""


class ApplicationError(Exception):
    """Base class for application errors."""


class DuplicateApplicationError(ApplicationError):
    """Raised by repositories when the (account, job) pair already has an application."""

    def __init__(self, account_id: str, job_id: str) -> None:
        super().__init__(f"account {account_id} already applied to job {job_id}")
        self.account_id = account_id
        self.job_id = job_id


class ApplicationStorageError(ApplicationError):
    """Raised when the apply transaction fails; the message is safe to show callers."""
