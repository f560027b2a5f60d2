"""Note database models."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tenantnotes.core.constants import MAX_TITLE_LENGTH
from tenantnotes.core.database.base import Base, TenantMixin, TimestampMixin


class Note(Base, TimestampMixin, TenantMixin):
    """A note owned by exactly one tenant.

    ``tenant_id`` is set from the creator's identity claim and never
    changes afterwards. Ids are never reused, even after deletion.

    Attributes:
        id: Monotonically assigned integer id
        title: Note title
        content: Note body
        created_by: Id of the user who created the note
    """

    __tablename__ = "notes"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(MAX_TITLE_LENGTH),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    created_by: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, tenant_id={self.tenant_id})>"
