# Note model for user content
import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Note(BaseModel):
    """Title/content note owned by one user."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # set once from the authenticated caller, never reassigned
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id"), nullable=False
    )

    __table_args__ = (
        Index("idx_notes_owner_id", "owner_id"),
        # listing is always "my notes, newest first"
        Index("idx_notes_owner_created", "owner_id", "created_at"),
        CheckConstraint("length(title) > 0", name="ck_notes_title_not_empty"),
        CheckConstraint("length(content) > 0", name="ck_notes_content_not_empty"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        """Check if this note is owned by the specified user."""
        return self.owner_id == user_id
