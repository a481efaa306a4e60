"""
errors.py
─────────
Errors raised by the reminder service.

Each error knows the HTTP status it maps to, so main.py can render every
one of them through a single exception handler.
"""

from typing import Any, Dict, Optional


class ReminderError(Exception):
    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        body = {"error": self.message}
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class ValidationError(ReminderError):
    """Client sent a malformed or incomplete body."""
    status_code = 400


class NotFoundError(ReminderError):
    """No reminder with the requested id."""
    status_code = 404


class StorageError(ReminderError):
    """The reminders file could not be rewritten."""
    status_code = 500
