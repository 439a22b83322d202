"""Access guard: bearer token verification."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings
from ...security import decode_access_token, get_user_id_from_payload
from ..exceptions import NoToken, Unauthorized, UnknownSubject
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.auth import Identity
from .interfaces import IAccessGuard

logger = get_logger("services.access_guard")

BEARER_SCHEME = "Bearer"


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Pull the token out of ``Bearer <token>``; anything else is ``NoToken``."""
    if not authorization:
        raise NoToken()

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme != BEARER_SCHEME or not token or " " in token:
        raise NoToken()
    return token


class AccessGuard(IAccessGuard):
    """Establishes who the caller is. Never decides what they may touch."""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.settings = settings
        self.user_repo = UserRepository(session)

    async def verify(self, authorization: Optional[str]) -> Identity:
        """Verify the Authorization header and resolve the account.

        Does exactly one store read, and only after the signature and expiry
        checked out.
        """
        try:
            token = extract_bearer_token(authorization)
            payload = decode_access_token(
                token, self.settings.secret_key, algorithm=self.settings.algorithm
            )
            user_id = get_user_id_from_payload(payload)

            user = await self.user_repo.get_by_id(user_id)
            if user is None:
                raise UnknownSubject()
        except Unauthorized as e:
            logger.info("Token rejected", extra={"reason": type(e).__name__})
            raise

        return Identity.model_validate(user)
