"""Account errors raised by services and rendered as {"message": ...} responses."""

from fastapi import status


class AccountError(Exception):
    """Base error for a request that cannot complete; carries the HTTP status."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InputValidationError(AccountError):
    """Raised when the request body is malformed or a field fails validation."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AccountError):
    """Raised when registering an email that is already in the store."""

    status_code = status.HTTP_409_CONFLICT


class AuthError(AccountError):
    """Raised for an unknown identity or a wrong password (never distinguished)."""

    status_code = status.HTTP_401_UNAUTHORIZED
