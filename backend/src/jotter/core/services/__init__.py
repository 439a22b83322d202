"""
Service layer: interfaces and their implementations.
"""

from .access_guard import AccessGuard
from .auth_service import AuthService
from .health_service import HealthService
from .interfaces import IAccessGuard, IAuthService, IHealthService, INoteService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IAuthService",
    "IAccessGuard",
    "INoteService",
    "IHealthService",
    # Implementations
    "AuthService",
    "AccessGuard",
    "NoteService",
    "HealthService",
]
