"""
Database models for the Jotter application.

SQLAlchemy ORM models for the two stored records:
    - User: account with a unique email and a salted password hash
    - Note: title/content record owned by exactly one user
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]
