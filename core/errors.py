"""
Error taxonomy shared by the repositories, the reply pipeline and the views.

Views catch ``AppError`` subclasses and show ``str(exc)`` in a SnackBar or an
inline message; nothing here is fatal to the app.
"""


class AppError(Exception):
    """Base class for every user-recoverable failure."""


class ValidationError(AppError):
    """Required field missing, bad pattern, or a constraint violation."""


class RepositoryError(AppError):
    """Transport, auth or database failure from the backing store."""


class NotFoundError(RepositoryError):
    """Row does not exist. Subclasses RepositoryError so generic handlers still catch it."""


class RelayError(AppError):
    """Mail relay rejected the send or could not be reached."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class AuthError(AppError):
    """Sign-in failed or no admin session is active."""


class PermissionDeniedError(AppError):
    """Action restricted to the super admin."""
