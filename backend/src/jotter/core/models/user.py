"""
User model for authentication.
"""

from sqlalchemy import CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """User account identified by a unique email."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)

    # Not part of the default projection; loads only when explicitly undeferred.
    # Touching it otherwise raises instead of issuing a hidden query.
    password_hash: Mapped[str] = mapped_column(
        String(255), nullable=False, deferred=True, deferred_raiseload=True
    )

    __table_args__ = (
        CheckConstraint("length(name) > 0", name="ck_users_name_not_empty"),
        CheckConstraint("length(email) > 0", name="ck_users_email_not_empty"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}')>"
