"""One-time email verification codes."""

from .exceptions import InvalidEmailError, VerificationDeliveryError, VerificationError
from .models import IssuedCode

__all__ = [
    "IssuedCode",
    "InvalidEmailError",
    "VerificationDeliveryError",
    "VerificationError",
]
