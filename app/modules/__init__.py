"""Domain modules and their public exports."""

from . import accounts, applications, jobs, verification

__all__ = [
    "accounts",
    "applications",
    "jobs",
    "verification",
]
