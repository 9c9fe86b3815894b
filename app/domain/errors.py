"""
User sync error taxonomy.

Each error carries the HTTP status it maps to and the fixed message shown
to the client. Internal details stay on the exception chain and in logs.
"""


class UserSyncError(Exception):
    """Base class for failures surfaced by the sync endpoint."""

    status_code: int = 500
    message: str = "Failed to sync user"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AuthenticationMissingError(UserSyncError):
    """No session subject could be resolved for the request."""

    status_code = 401
    message = "Unauthorized"


class ValidationFailureError(UserSyncError):
    """email, name or imageUrl missing from the request body."""

    status_code = 400
    message = "Email, name, and imageUrl are required!"


class StoreFailureError(UserSyncError):
    """The user store raised while upserting."""

    status_code = 500
    message = "Failed to sync user"
