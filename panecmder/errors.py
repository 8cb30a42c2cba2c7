"""Exception taxonomy shared by adapters, the copy engine and action handlers.

Handlers catch :class:`CommanderError` at the branch or action boundary and
turn the message into a status line; none of these is process-fatal.
"""

from __future__ import annotations


class CommanderError(Exception):
    """Base class for all recoverable browser errors."""


class ValidationError(CommanderError):
    """Malformed or missing location, name or configuration."""


class AuthenticationRequired(ValidationError):
    """The backend needs a password before ``location`` can be listed."""

    def __init__(self, message: str, location=None) -> None:
        super().__init__(message)
        self.location = location


class TargetTypeConflictError(CommanderError):
    """Destination entry type is incompatible with the source item type."""


class BackendIOError(CommanderError):
    """A repository adapter or external program failed."""


class NotFoundError(CommanderError):
    """The requested entry does not exist."""


class UserCanceled(CommanderError):
    """The user canceled a dialog; the triggering action becomes a no-op."""


__all__ = [
    "AuthenticationRequired",
    "BackendIOError",
    "CommanderError",
    "NotFoundError",
    "TargetTypeConflictError",
    "UserCanceled",
    "ValidationError",
]
