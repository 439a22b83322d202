"""Authentication dependency for protected routes."""

from fastapi import Depends, Request
from fastapi.security import HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.schemas.auth import Identity
from ..core.services.access_guard import AccessGuard
from ..database import get_db_session


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Registers the bearer scheme in OpenAPI but leaves header parsing to
    ``AccessGuard`` so every failure maps to the same 401 errors. A route
    using this dependency only runs once an Identity has been produced.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(
        self,
        request: Request,
        session: AsyncSession = Depends(get_db_session),
        settings: Settings = Depends(get_settings),
    ) -> Identity:
        guard = AccessGuard(session, settings)
        return await guard.verify(request.headers.get("Authorization"))


# Dependency for getting the caller's identity from the JWT
async def get_current_identity(identity: Identity = Depends(JWTBearer())) -> Identity:
    """Get current authenticated identity."""
    return identity
