"""Note repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import utcnow
from ..models.note import Note


class NoteRepository:
    """Repository for note database operations.

    Ownership is not checked here; callers decide what a mismatch means.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID."""
        stmt = select(Note).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Apply field changes to a loaded note."""
        for key, value in update_data.items():
            setattr(note, key, value)
        # a save always counts as a modification, even with identical values
        note.updated_at = utcnow()

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note: Note) -> None:
        """Delete a loaded note. Permanent."""
        await self.session.delete(note)
        await self.session.commit()

    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """All notes owned by the user, newest first."""
        stmt = (
            select(Note)
            .where(Note.owner_id == user_id)
            # id breaks timestamp ties so the order is stable between calls
            .order_by(desc(Note.created_at), desc(Note.id))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())
