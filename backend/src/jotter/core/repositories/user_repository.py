"""User repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import undefer

from ..exceptions import DuplicateAccount
from ..models.user import User


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict) -> User:
        """Create new user.

        The unique index on email is the final word on duplicates, so a
        concurrent registration that slipped past the pre-check still fails
        as ``DuplicateAccount``.
        """
        user = User(**user_data)
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateAccount() from e
        return user

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID. The password hash is not loaded."""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str, include_secret: bool = False) -> Optional[User]:
        """Get user by email.

        ``include_secret`` loads the password hash as well; only the login
        path should ask for it.
        """
        stmt = select(User).where(User.email == email)
        if include_secret:
            stmt = stmt.options(undefer(User.password_hash))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_email_taken(self, email: str) -> bool:
        """Check if email is already registered."""
        stmt = select(User.id).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
