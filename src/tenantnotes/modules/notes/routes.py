"""Note API routes.

Every route is scoped to the caller's tenant through the verified
identity claim; none of them accepts a tenant id from the client.
"""

from fastapi import APIRouter, Response, status

from tenantnotes.modules.notes.schemas import NoteCreate, NoteResponse, NoteUpdate
from tenantnotes.modules.notes.services import NoteSvc


router = APIRouter(prefix="/notes", tags=["notes"])


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create note",
    description="Creates a note in the caller's tenant. Free plans are limited in how many notes they hold.",
)
async def create_note(data: NoteCreate, service: NoteSvc) -> NoteResponse:
    """Create a note."""
    note = await service.create(data)
    return NoteResponse.model_validate(note)


@router.get(
    "",
    response_model=list[NoteResponse],
    summary="List notes",
    description="Lists all notes of the caller's tenant.",
)
async def list_notes(service: NoteSvc) -> list[NoteResponse]:
    """List notes."""
    notes = await service.list_all()
    return [NoteResponse.model_validate(note) for note in notes]


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Get note",
)
async def get_note(note_id: str, service: NoteSvc) -> NoteResponse:
    """Get a note."""
    note = await service.get(note_id)
    return NoteResponse.model_validate(note)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Update note",
    description="Replaces only the supplied fields.",
)
async def update_note(note_id: str, data: NoteUpdate, service: NoteSvc) -> NoteResponse:
    """Update a note."""
    note = await service.update(note_id, data)
    return NoteResponse.model_validate(note)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete note",
)
async def delete_note(note_id: str, service: NoteSvc) -> Response:
    """Delete a note."""
    await service.delete(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
