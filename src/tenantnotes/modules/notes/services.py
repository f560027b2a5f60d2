"""Note service: tenant-scoped CRUD with quota enforcement."""

from typing import Annotated

import structlog
from fastapi import Depends

from tenantnotes.api.dependencies import DBSession
from tenantnotes.core.auth.dependencies import CurrentIdentity
from tenantnotes.core.constants import MAX_NOTE_ID
from tenantnotes.core.database.base import utcnow
from tenantnotes.core.database.locks import TenantLocks, tenant_locks
from tenantnotes.core.errors import NotFoundError, QuotaExceededError
from tenantnotes.modules.notes.models import Note
from tenantnotes.modules.notes.repos import NoteRepository
from tenantnotes.modules.notes.schemas import NoteCreate, NoteUpdate
from tenantnotes.modules.tenants.quota import may_create
from tenantnotes.modules.tenants.repos import TenantRepository


logger = structlog.get_logger()


def parse_note_id(raw: int | str) -> int:
    """Turn a note id from the request path into a storable integer.

    Anything that is not a decimal id in the range of the id column
    cannot name a note, so it is reported exactly like a missing one.

    Raises:
        NotFoundError: If the id is malformed or out of range
    """
    if isinstance(raw, str):
        if not (raw.isascii() and raw.isdigit()):
            raise NotFoundError("Note not found", resource="note")
        raw = int(raw)
    if not 1 <= raw <= MAX_NOTE_ID:
        raise NotFoundError("Note not found", resource="note")
    return raw


class NoteService:
    """Service for the caller's notes.

    The tenant is taken from the verified identity claim, never from
    request input, and the repository is bound to it.
    """

    locks: TenantLocks = tenant_locks

    def __init__(self, db: DBSession, identity: CurrentIdentity) -> None:
        self.db = db
        self.identity = identity
        self.repo = NoteRepository(db, identity.tenant_id)
        self.tenant_repo = TenantRepository(db)

    @property
    def tenant_id(self) -> str:
        return self.identity.tenant_id

    async def create(self, data: NoteCreate) -> Note:
        """Create a note if the tenant's plan allows one more.

        Counting, deciding, inserting and committing happen while holding
        the tenant's lock and its row lock, so concurrent creations cannot
        overshoot the limit.

        Raises:
            NotFoundError: If the caller's tenant no longer exists
            QuotaExceededError: If the plan's note limit is reached
        """
        async with self.locks.hold(self.tenant_id):
            tenant = await self.tenant_repo.get_for_update(self.tenant_id)
            if not tenant:
                raise NotFoundError("Tenant not found", resource="tenant")

            current_count = await self.repo.count()
            if not may_create(tenant, current_count):
                logger.info(
                    "note_quota_exceeded",
                    plan=tenant.plan,
                    note_count=current_count,
                )
                raise QuotaExceededError()

            note = Note(
                title=data.title,
                content=data.content,
                created_by=self.identity.user_id,
            )
            note = await self.repo.create(note)
            await self.db.commit()

        logger.info("note_created", note_id=note.id)
        return note

    async def list_all(self) -> list[Note]:
        """List the caller's notes."""
        return await self.repo.list_all()

    async def get(self, note_id: int | str) -> Note:
        """Get one of the caller's notes.

        Raises:
            NotFoundError: If no such note exists in the caller's tenant,
                including malformed and out-of-range ids
        """
        note = await self.repo.get(parse_note_id(note_id))
        if not note:
            raise NotFoundError("Note not found", resource="note")
        return note

    async def update(self, note_id: int | str, data: NoteUpdate) -> Note:
        """Apply a partial update to one of the caller's notes.

        Only supplied, non-empty fields are replaced; ``updated_at`` is
        refreshed on every call.

        Raises:
            NotFoundError: If no such note exists in the caller's tenant
        """
        note = await self.get(note_id)

        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value
        }
        for field, value in changes.items():
            setattr(note, field, value)
        note.updated_at = utcnow()

        note = await self.repo.update(note)
        logger.info("note_updated", note_id=note.id, fields=sorted(changes))
        return note

    async def delete(self, note_id: int | str) -> None:
        """Delete one of the caller's notes.

        Raises:
            NotFoundError: If no such note exists in the caller's tenant
        """
        note = await self.get(note_id)
        await self.repo.delete(note)
        logger.info("note_deleted", note_id=note.id)


# Type alias for dependency injection
NoteSvc = Annotated[NoteService, Depends(NoteService)]
