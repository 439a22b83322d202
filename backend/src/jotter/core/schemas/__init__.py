"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import Identity, LoginRequest, RegisterRequest, TokenResponse
from .common import ErrorResponse, HealthCheckResponse, MessageResponse
from .notes import NoteCreate, NoteDeleteResponse, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "Identity",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteDeleteResponse",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
    "MessageResponse",
]
