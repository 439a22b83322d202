"""Authentication service implementation."""

from datetime import timedelta
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings
from ...security import create_access_token, dummy_verify, hash_password, verify_password
from ..exceptions import DuplicateAccount, InvalidCredentials
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Registers accounts and authenticates logins.

    This is the only place tokens are minted. The signing settings come in
    through the constructor rather than being looked up globally.
    """

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.settings = settings
        self.user_repo = UserRepository(session)

    async def register(self, request: RegisterRequest) -> TokenResponse:
        """Register new user and return a token for it."""
        if await self.user_repo.is_email_taken(request.email):
            logger.info("Registration rejected: email already registered")
            raise DuplicateAccount()

        user = await self.user_repo.create_user(
            {
                "name": request.name,
                "email": request.email,
                "password_hash": hash_password(request.password),
            }
        )
        logger.info("User registered", extra={"user_id": str(user.id)})

        return self._issue_token(user.id)

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a token.

        Unknown email and wrong password raise the same error with the same
        message, so callers can't probe which emails are registered.
        """
        user = await self.user_repo.get_by_email(request.email, include_secret=True)
        if user is None:
            dummy_verify()
        if user is None or not verify_password(request.password, user.password_hash):
            logger.info("Login failed: invalid credentials")
            raise InvalidCredentials()

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return self._issue_token(user.id)

    def _issue_token(self, user_id: UUID) -> TokenResponse:
        ttl = self.settings.access_token_expire_seconds
        token = create_access_token(
            {"sub": str(user_id)},
            self.settings.secret_key,
            algorithm=self.settings.algorithm,
            expires_delta=timedelta(seconds=ttl),
        )
        return TokenResponse(token=token, token_type="bearer", expires_in=ttl)
