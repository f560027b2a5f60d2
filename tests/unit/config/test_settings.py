"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from tenantnotes.config import Settings
from tenantnotes.core.constants import DEFAULT_INSECURE_SECRET


pytestmark = pytest.mark.unit

SECRET = "a-secret-key-that-is-long-enough-for-tests"


def test_postgres_url_uses_asyncpg():
    settings = Settings(secret_key=SECRET, database_url="postgresql://u:p@db/notes")

    assert settings.async_database_url == "postgresql+asyncpg://u:p@db/notes"
    assert settings.is_sqlite is False


def test_sqlite_url_is_kept():
    settings = Settings(secret_key=SECRET, database_url="sqlite+aiosqlite:///./notes.db")

    assert settings.async_database_url == "sqlite+aiosqlite:///./notes.db"
    assert settings.is_sqlite is True


def test_short_secret_key_is_rejected():
    with pytest.raises(ValidationError):
        Settings(secret_key="short")


def test_insecure_default_is_refused_in_production():
    settings = Settings(secret_key=DEFAULT_INSECURE_SECRET, environment="production")

    with pytest.raises(ValueError, match="SECRET_KEY"):
        _ = settings.is_production


@pytest.mark.parametrize("limit", [0, -3])
def test_free_plan_limit_must_be_positive(limit: int):
    with pytest.raises(ValidationError):
        Settings(secret_key=SECRET, free_plan_note_limit=limit)


def test_defaults():
    settings = Settings(secret_key=SECRET)

    assert settings.access_token_expire_minutes == 24 * 60
    assert settings.jwt_algorithm == "HS256"
