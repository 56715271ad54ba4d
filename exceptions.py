# exceptions.py
"""
Custom exceptions for the Padel Scheduler.

This module defines domain-specific exceptions for better error handling
and debugging throughout the application.
"""


class PadelAppError(Exception):
    """Base exception for all application errors."""

    pass


class InputError(PadelAppError):
    """Raised when a roster or session setting cannot be scheduled.

    The message is meant to be shown to the user as-is.
    """

    def __init__(self, message, violation=None):
        super().__init__(message)
        self.violation = violation


class LedgerRangeError(PadelAppError, IndexError):
    """Raised when a ledger cell outside the current schedule is accessed."""

    pass


class SessionError(PadelAppError):
    """Raised when a session operation fails."""

    pass
