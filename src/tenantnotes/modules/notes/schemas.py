"""Pydantic schemas for note operations."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tenantnotes.core.constants import MAX_TITLE_LENGTH


class NoteCreate(BaseModel):
    """Schema for creating a note.

    The tenant is never part of the payload; it comes from the caller's
    verified identity.
    """

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str = Field(..., min_length=1)


class NoteUpdate(BaseModel):
    """Schema for a partial note update.

    Omitted, null and empty fields leave the stored value unchanged.
    """

    title: str | None = Field(None, max_length=MAX_TITLE_LENGTH)
    content: str | None = None


class NoteResponse(BaseModel):
    """Schema for note response data."""

    id: int
    title: str
    content: str
    tenant_id: str
    created_by: int | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """SQLite hands back naive datetimes; they are stored as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)
