"""Email verification exceptions."""


class VerificationError(Exception):
    """Base class for verification errors."""


class InvalidEmailError(VerificationError):
    """Raised when no recipient address was given."""


class VerificationDeliveryError(VerificationError):
    """Raised when the code could not be mailed."""
