"""Custom exception classes."""
from typing import Dict, Optional


class ValidationError(Exception):
    """Raised when a registration form fails validation.

    ``errors`` maps each failing field name to a user-facing message so the
    form can highlight individual inputs.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__(", ".join(f"{k}: {v}" for k, v in self.errors.items()))


class StorageError(Exception):
    """Raised when a registration cannot be persisted."""
    pass


class ProcessingError(Exception):
    """Raised to the caller when a submission could not be processed."""
    pass


class NotificationError(Exception):
    """Raised inside the notification sender when an email is not accepted."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
