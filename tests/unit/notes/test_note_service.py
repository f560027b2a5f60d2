"""Unit tests for NoteService quota enforcement.

Repositories are replaced with in-memory fakes that yield to the event
loop between reading and writing, so unsynchronized creators would
interleave.
"""

import asyncio
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from tenantnotes.core.auth.schemas import IdentityClaim
from tenantnotes.core.database.locks import TenantLocks
from tenantnotes.core.errors import NotFoundError, QuotaExceededError
from tenantnotes.core.permissions.roles import Role
from tenantnotes.modules.notes.models import Note
from tenantnotes.modules.notes.schemas import NoteUpdate
from tenantnotes.core.constants import MAX_NOTE_ID
from tenantnotes.modules.notes.services import NoteService, parse_note_id
from tenantnotes.modules.tenants.models import Tenant, TenantPlan
from tests.factories.note import NoteCreateFactory


pytestmark = pytest.mark.unit


class FakeNoteRepository:
    """In-memory note storage for one tenant."""

    def __init__(self, tenant_id: str, existing: int = 0) -> None:
        self.tenant_id = tenant_id
        self.notes: list[Note] = []
        self.next_id = 1
        for _ in range(existing):
            self._store(Note(title="existing", content="existing"))

    def _store(self, note: Note) -> Note:
        note.id = self.next_id
        note.tenant_id = self.tenant_id
        self.next_id += 1
        self.notes.append(note)
        return note

    async def count(self) -> int:
        count = len(self.notes)
        await asyncio.sleep(0)
        return count

    async def create(self, note: Note) -> Note:
        await asyncio.sleep(0)
        return self._store(note)

    async def list_all(self) -> list[Note]:
        return list(self.notes)

    async def get(self, note_id: int) -> Note | None:
        return next((note for note in self.notes if note.id == note_id), None)

    async def update(self, note: Note) -> Note:
        return note

    async def delete(self, note: Note) -> None:
        self.notes.remove(note)


class FakeTenantRepository:
    def __init__(self, tenant: Tenant | None) -> None:
        self.tenant = tenant

    async def get_for_update(self, tenant_id: str) -> Tenant | None:
        await asyncio.sleep(0)
        if self.tenant and self.tenant.id == tenant_id:
            return self.tenant
        return None


def _identity(tenant_id: str = "acme") -> IdentityClaim:
    now = datetime.now(UTC)
    return IdentityClaim(
        user_id=1,
        email=f"user@{tenant_id}.test",
        role=Role.MEMBER,
        tenant_id=tenant_id,
        issued_at=now,
        expires_at=now + timedelta(hours=24),
    )


def _build_service(
    tenant: Tenant | None,
    existing: int = 0,
    identity: IdentityClaim | None = None,
) -> NoteService:
    identity = identity or _identity()
    service = NoteService.__new__(NoteService)
    service.db = AsyncMock()
    service.identity = identity
    service.repo = FakeNoteRepository(identity.tenant_id, existing)
    service.tenant_repo = FakeTenantRepository(tenant)
    service.locks = TenantLocks()
    return service


@pytest.fixture
def free_tenant() -> Tenant:
    return Tenant(id="acme", name="Acme Corporation", plan=TenantPlan.FREE, note_limit_value=3)


@pytest.fixture
def pro_tenant() -> Tenant:
    return Tenant(id="acme", name="Acme Corporation", plan=TenantPlan.PRO, note_limit_value=None)


class TestCreate:
    """Tests for NoteService.create."""

    async def test_creates_below_limit(self, free_tenant: Tenant):
        service = _build_service(free_tenant)
        data = NoteCreateFactory.build()

        note = await service.create(data)

        assert note.id == 1
        assert note.title == data.title
        assert note.tenant_id == "acme"
        assert note.created_by == 1
        service.db.commit.assert_awaited_once()

    async def test_refuses_at_limit(self, free_tenant: Tenant):
        service = _build_service(free_tenant, existing=3)

        with pytest.raises(QuotaExceededError) as exc_info:
            await service.create(NoteCreateFactory.build())

        assert exc_info.value.status_code == 403
        assert exc_info.value.details["upgrade_hint"]
        assert len(service.repo.notes) == 3
        service.db.commit.assert_not_awaited()

    async def test_pro_tenant_has_no_limit(self, pro_tenant: Tenant):
        service = _build_service(pro_tenant, existing=50)

        note = await service.create(NoteCreateFactory.build())

        assert note.id == 51

    async def test_missing_tenant(self):
        service = _build_service(None)

        with pytest.raises(NotFoundError):
            await service.create(NoteCreateFactory.build())

    async def test_concurrent_creates_at_last_slot_admit_exactly_one(
        self, free_tenant: Tenant
    ):
        service = _build_service(free_tenant, existing=2)

        results = await asyncio.gather(
            *(service.create(NoteCreateFactory.build()) for _ in range(5)),
            return_exceptions=True,
        )

        created = [result for result in results if isinstance(result, Note)]
        refused = [result for result in results if isinstance(result, QuotaExceededError)]
        assert len(created) == 1
        assert len(refused) == 4
        assert len(service.repo.notes) == 3

    async def test_concurrent_creates_from_empty_stop_at_limit(self, free_tenant: Tenant):
        service = _build_service(free_tenant)

        results = await asyncio.gather(
            *(service.create(NoteCreateFactory.build()) for _ in range(10)),
            return_exceptions=True,
        )

        assert sum(isinstance(result, Note) for result in results) == 3
        assert len(service.repo.notes) == 3


class TestReadUpdateDelete:
    """Tests for lookups and modifications."""

    async def test_get_unknown_note(self, free_tenant: Tenant):
        service = _build_service(free_tenant)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get(99)

        assert exc_info.value.message == "Note not found"

    async def test_partial_update_keeps_omitted_fields(self, free_tenant: Tenant):
        service = _build_service(free_tenant)
        note = await service.create(NoteCreateFactory.build(title="Old", content="Body"))
        before = note.updated_at

        updated = await service.update(note.id, NoteUpdate(title="New"))

        assert updated.title == "New"
        assert updated.content == "Body"
        assert before is None or updated.updated_at >= before

    async def test_null_fields_are_ignored(self, free_tenant: Tenant):
        service = _build_service(free_tenant)
        note = await service.create(NoteCreateFactory.build(title="Old", content="Body"))

        updated = await service.update(note.id, NoteUpdate(title=None, content="New body"))

        assert updated.title == "Old"
        assert updated.content == "New body"

    async def test_empty_fields_are_ignored(self, free_tenant: Tenant):
        service = _build_service(free_tenant)
        note = await service.create(NoteCreateFactory.build(title="Old", content="Body"))

        updated = await service.update(note.id, NoteUpdate(title="", content=""))

        assert updated.title == "Old"
        assert updated.content == "Body"
        assert updated.updated_at is not None

    @pytest.mark.parametrize(
        "note_id",
        ["abc", "1.5", "-1", "0", "", "\u00b2", str(MAX_NOTE_ID + 1), 0, -5],
    )
    async def test_unusable_ids_are_not_found(self, free_tenant: Tenant, note_id: int | str):
        service = _build_service(free_tenant)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get(note_id)

        assert exc_info.value.message == "Note not found"

    def test_parse_note_id_accepts_decimal_ids(self):
        assert parse_note_id("42") == 42
        assert parse_note_id("007") == 7
        assert parse_note_id(str(MAX_NOTE_ID)) == MAX_NOTE_ID
        assert parse_note_id(3) == 3

    async def test_delete_then_get_is_not_found(self, free_tenant: Tenant):
        service = _build_service(free_tenant)
        note = await service.create(NoteCreateFactory.build())

        await service.delete(note.id)

        with pytest.raises(NotFoundError):
            await service.get(note.id)
        assert await service.list_all() == []
