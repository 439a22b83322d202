"""Unit tests for NoteService ownership and id handling."""

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from jotter.core.exceptions import MalformedIdentifier, NotFound, OwnershipViolation
from jotter.core.models.note import Note
from jotter.core.schemas.auth import Identity
from jotter.core.schemas.notes import NoteCreate, NoteUpdate
from jotter.core.services.note_service import NoteService, parse_note_id


class TestNoteServiceOwnership:
    """Ownership and lookup rules for single-note operations."""

    @pytest.fixture
    def owner(self):
        return Identity(id=uuid.uuid4(), name="Owner", email="owner@example.com")

    @pytest.fixture
    def stranger(self):
        return Identity(id=uuid.uuid4(), name="Stranger", email="stranger@example.com")

    @pytest.fixture
    def note(self, owner):
        now = datetime.now(timezone.utc)
        return Note(
            id=uuid.uuid4(),
            title="T",
            content="C",
            owner_id=owner.id,
            created_at=now,
            updated_at=now,
        )

    @pytest.fixture
    def note_service(self, note):
        service = NoteService(Mock())
        service.note_repo = AsyncMock()
        service.note_repo.get_by_id.return_value = note
        return service

    async def test_owner_can_read(self, note_service, owner, note):
        res = await note_service.get_note(owner, str(note.id))
        assert res.id == note.id
        assert res.owner == owner.id

    async def test_non_owner_gets_ownership_violation(self, note_service, stranger, note):
        with pytest.raises(OwnershipViolation):
            await note_service.get_note(stranger, str(note.id))
        with pytest.raises(OwnershipViolation):
            await note_service.update_note(stranger, str(note.id), NoteUpdate(title="X", content="Y"))
        with pytest.raises(OwnershipViolation):
            await note_service.delete_note(stranger, str(note.id))

        note_service.note_repo.update_note.assert_not_called()
        note_service.note_repo.delete_note.assert_not_called()

    async def test_missing_note(self, note_service, owner):
        note_service.note_repo.get_by_id.return_value = None
        with pytest.raises(NotFound) as exc:
            await note_service.get_note(owner, str(uuid.uuid4()))
        assert not isinstance(exc.value, MalformedIdentifier)

    async def test_malformed_id_never_hits_store(self, note_service, owner):
        with pytest.raises(MalformedIdentifier):
            await note_service.get_note(owner, "not-an-id")
        note_service.note_repo.get_by_id.assert_not_called()

    async def test_create_sets_owner_from_identity(self, note_service, owner, note):
        note_service.note_repo.create_note.return_value = note
        await note_service.create_note(owner, NoteCreate(title="T", content="C"))

        note_data = note_service.note_repo.create_note.call_args.args[0]
        assert note_data == {"title": "T", "content": "C", "owner_id": owner.id}

    async def test_delete_returns_removed_message(self, note_service, owner, note):
        res = await note_service.delete_note(owner, str(note.id))
        assert res.msg == "Note removed"
        assert res.id == note.id
        note_service.note_repo.delete_note.assert_awaited_once_with(note)


def test_malformed_identifier_is_not_found():
    # same status as a missing record
    assert issubclass(MalformedIdentifier, NotFound)
    assert MalformedIdentifier.status_code == NotFound.status_code == 404


def test_parse_note_id():
    uid = uuid.uuid4()
    assert parse_note_id(str(uid)) == uid
    with pytest.raises(MalformedIdentifier):
        parse_note_id("123")
