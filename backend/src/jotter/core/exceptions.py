"""
Domain errors raised by the service layer.

Each error knows the HTTP status and the short message that goes back to
the client. Handlers in ``core.errors`` turn them into responses, so
services never build HTTP responses themselves.
"""

from typing import Optional, Sequence

from fastapi import status


class JotterError(Exception):
    """Base class for errors with a client-facing status and message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server Error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(JotterError):
    """Missing or empty required field."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Please provide all required fields"

    def __init__(self, message: Optional[str] = None, fields: Sequence[str] = ()):
        super().__init__(message)
        self.fields = list(fields)


class DuplicateAccount(JotterError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class InvalidCredentials(JotterError):
    """Wrong email or wrong password. Deliberately doesn't say which."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid Credentials"


class Unauthorized(JotterError):
    """Any failure to establish who the caller is."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authorized"


class NoToken(Unauthorized):
    message = "Not authorized, no token"


class InvalidToken(Unauthorized):
    message = "Not authorized, token failed (invalid)"


class ExpiredToken(InvalidToken):
    message = "Not authorized, token failed (expired)"


class UnknownSubject(Unauthorized):
    message = "Not authorized, user not found"


class NotFound(JotterError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Note not found"


class MalformedIdentifier(NotFound):
    """Identifier that can't be a note id. Reported as not found."""

    message = "Note not found (invalid ID format)"


class OwnershipViolation(JotterError):
    """Caller is authenticated but doesn't own the record."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authorized"


class ConfigurationError(JotterError):
    """Signing secret missing; tokens can't be minted or verified."""

    message = "Server Configuration Error"


class StoreUnavailable(JotterError):
    message = "Server Error"
