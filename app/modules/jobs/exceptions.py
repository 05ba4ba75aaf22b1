"""Job catalog exceptions."""


class JobError(Exception):
    """Base class for job catalog errors."""


class JobNotFoundError(JobError):
    """Raised when the requested job does not exist."""


class JobStorageError(JobError):
    """Raised when the job store fails; the message is safe to show callers."""
