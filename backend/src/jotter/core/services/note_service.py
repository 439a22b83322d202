"""Note service implementation."""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import MalformedIdentifier, NotFound, OwnershipViolation
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..schemas.auth import Identity
from ..schemas.notes import NoteCreate, NoteDeleteResponse, NoteResponse, NoteUpdate
from .interfaces import INoteService

logger = get_logger("services.notes")


def parse_note_id(note_id: str) -> UUID:
    """Parse a path id. A malformed id is reported like a missing note."""
    try:
        return UUID(note_id)
    except (ValueError, TypeError) as e:
        raise MalformedIdentifier() from e


class NoteService(INoteService):
    """Note CRUD for the authenticated caller.

    The identity comes from the access guard; this layer owns the
    authorization decision: a note can only be read, changed or deleted by
    its owner. A non-owner gets 401, not 404, so existence of the id is
    visible to them.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def create_note(self, identity: Identity, request: NoteCreate) -> NoteResponse:
        """Create new note owned by the caller."""
        note = await self.note_repo.create_note(
            {
                "title": request.title,
                "content": request.content,
                "owner_id": identity.id,
            }
        )
        logger.info("Note created", extra={"note_id": str(note.id), "user_id": str(identity.id)})
        return NoteResponse.model_validate(note)

    async def list_notes(self, identity: Identity) -> List[NoteResponse]:
        """List the caller's notes, newest first."""
        notes = await self.note_repo.list_user_notes(identity.id)
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, identity: Identity, note_id: str) -> NoteResponse:
        """Get note by ID."""
        note = await self._get_owned_note(identity, note_id)
        return NoteResponse.model_validate(note)

    async def update_note(self, identity: Identity, note_id: str, request: NoteUpdate) -> NoteResponse:
        """Replace title and content of an owned note."""
        note = await self._get_owned_note(identity, note_id)
        note = await self.note_repo.update_note(
            note, {"title": request.title, "content": request.content}
        )
        logger.info("Note updated", extra={"note_id": str(note.id), "user_id": str(identity.id)})
        return NoteResponse.model_validate(note)

    async def delete_note(self, identity: Identity, note_id: str) -> NoteDeleteResponse:
        """Delete an owned note."""
        note = await self._get_owned_note(identity, note_id)
        deleted_id = note.id
        await self.note_repo.delete_note(note)
        logger.info("Note deleted", extra={"note_id": str(deleted_id), "user_id": str(identity.id)})
        return NoteDeleteResponse(msg="Note removed", id=deleted_id)

    async def _get_owned_note(self, identity: Identity, note_id: str) -> Note:
        """Resolve the id and enforce ownership.

        Order matters: bad id -> 404, no such note -> 404, someone else's
        note -> 401.
        """
        note = await self.note_repo.get_by_id(parse_note_id(note_id))
        if note is None:
            raise NotFound()

        if not note.is_owned_by(identity.id):
            logger.warning(
                "Ownership check failed",
                extra={"note_id": str(note.id), "user_id": str(identity.id)},
            )
            raise OwnershipViolation()
        return note
