"""Notes API endpoints. Every route requires a bearer token."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import Identity
from ..core.schemas.common import ErrorResponse
from ..core.schemas.notes import NoteCreate, NoteDeleteResponse, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_identity

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={401: {"model": ErrorResponse}},
)

_by_id_responses = {404: {"model": ErrorResponse}}


# both "/api/notes" and "/api/notes/" are in use by clients
@router.get("", response_model=List[NoteResponse], include_in_schema=False)
@router.get("/", response_model=List[NoteResponse])
async def list_notes(
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's notes, newest first."""
    note_service = NoteService(session)
    return await note_service.list_notes(identity)


@router.post("", response_model=NoteResponse, status_code=201, include_in_schema=False)
@router.post("/", response_model=NoteResponse, status_code=201, responses={400: {"model": ErrorResponse}})
async def create_note(
    request: NoteCreate,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(identity, request)


@router.get("/{note_id}", response_model=NoteResponse, responses=_by_id_responses)
async def get_note(
    note_id: str,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(identity, note_id)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={400: {"model": ErrorResponse}, **_by_id_responses},
)
async def update_note(
    note_id: str,
    request: NoteUpdate,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note."""
    note_service = NoteService(session)
    return await note_service.update_note(identity, note_id, request)


@router.delete("/{note_id}", response_model=NoteDeleteResponse, responses=_by_id_responses)
async def delete_note(
    note_id: str,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    return await note_service.delete_note(identity, note_id)
