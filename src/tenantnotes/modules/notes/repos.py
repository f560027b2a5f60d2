"""Note repository for database operations."""

from sqlalchemy.ext.asyncio import AsyncSession

from tenantnotes.core.database.tenant import TenantSession
from tenantnotes.modules.notes.models import Note


class NoteRepository:
    """Repository for Note database operations.

    The repository is bound to one tenant at construction time and every
    statement it issues carries that tenant's id as a predicate. A note
    of another tenant can therefore never be returned, updated or
    deleted through it.
    """

    def __init__(self, session: AsyncSession, tenant_id: str) -> None:
        self.scope = TenantSession(session, tenant_id)

    @property
    def tenant_id(self) -> str:
        return self.scope.tenant_id

    async def count(self) -> int:
        """Count the tenant's notes."""
        return await self.scope.scalar(self.scope.count(Note))

    async def create(self, note: Note) -> Note:
        """Insert a note for the tenant.

        Args:
            note: Note instance to create; its tenant_id is overwritten

        Returns:
            The created note with its id populated
        """
        self.scope.add(note)
        await self.scope.flush()
        return note

    async def list_all(self) -> list[Note]:
        """List the tenant's notes in creation order."""
        return await self.scope.all(self.scope.select(Note).order_by(Note.id))

    async def get(self, note_id: int) -> Note | None:
        """Get a note of the tenant by id.

        Returns:
            Note if it exists in this tenant, None otherwise
        """
        return await self.scope.get(Note, note_id)

    async def update(self, note: Note) -> Note:
        """Persist changes made to a note of the tenant."""
        await self.scope.flush()
        return note

    async def delete(self, note: Note) -> None:
        """Delete a note of the tenant."""
        await self.scope.delete(note)
        await self.scope.flush()
