"""Job catalog: postings that accounts can apply to."""

from .exceptions import JobError, JobNotFoundError, JobStorageError
from .models import Job, JobFilter, JobType

__all__ = [
    "Job",
    "JobFilter",
    "JobType",
    "JobError",
    "JobNotFoundError",
    "JobStorageError",
]
