"""
Service interfaces for the Jotter application.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..schemas.auth import Identity, LoginRequest, RegisterRequest, TokenResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteCreate, NoteDeleteResponse, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Issues session tokens for new and returning accounts."""

    @abstractmethod
    async def register(self, request: RegisterRequest) -> TokenResponse:
        """Create an account and return a token for it."""
        pass

    @abstractmethod
    async def login(self, request: LoginRequest) -> TokenResponse:
        """Check credentials and return a token."""
        pass


class IAccessGuard(ABC):
    """Turns an Authorization header into an Identity."""

    @abstractmethod
    async def verify(self, authorization: Optional[str]) -> Identity:
        """Verify the bearer token and resolve its account."""
        pass


class INoteService(ABC):
    """Note CRUD scoped to the caller."""

    @abstractmethod
    async def create_note(self, identity: Identity, request: NoteCreate) -> NoteResponse:
        pass

    @abstractmethod
    async def list_notes(self, identity: Identity) -> List[NoteResponse]:
        """Caller's notes, newest first."""
        pass

    @abstractmethod
    async def get_note(self, identity: Identity, note_id: str) -> NoteResponse:
        pass

    @abstractmethod
    async def update_note(self, identity: Identity, note_id: str, request: NoteUpdate) -> NoteResponse:
        pass

    @abstractmethod
    async def delete_note(self, identity: Identity, note_id: str) -> NoteDeleteResponse:
        pass


class IHealthService(ABC):
    """Health checks."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        pass
