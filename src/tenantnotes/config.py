"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tenantnotes.core.constants import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    BCRYPT_ROUNDS,
    DEFAULT_FREE_PLAN_NOTE_LIMIT,
    DEFAULT_INSECURE_SECRET,
    MIN_SECRET_KEY_LENGTH,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Tenant Notes"
    debug: bool = False
    environment: str = "development"  # development, staging, production
    secret_key: str = DEFAULT_INSECURE_SECRET

    # Database
    database_url: str = "sqlite+aiosqlite:///./tenantnotes.db"
    database_pool_size: int = 25
    database_max_overflow: int = 50
    database_echo: bool = False

    # CORS
    cors_origins: list[str] = []

    # API Documentation
    api_docs_base_url: str = "https://api.example.com"

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Reject short secret keys.

        The insecure default is tolerated here and refused later by
        ``is_production`` so that development can run without configuration.

        Raises:
            ValueError: If a custom secret key is too short
        """
        if v != DEFAULT_INSECURE_SECRET and len(v) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(
                f"SECRET_KEY must be at least {MIN_SECRET_KEY_LENGTH} characters. "
                "Generate one with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
            )
        return v

    # Auth
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES
    password_hash_rounds: int = BCRYPT_ROUNDS

    # Plans
    free_plan_note_limit: int = DEFAULT_FREE_PLAN_NOTE_LIMIT

    # Demo data (acme / globex tenants and their users)
    seed_demo_data: bool = True

    # Observability
    log_level: str = "INFO"

    @field_validator("free_plan_note_limit")
    @classmethod
    def validate_free_plan_note_limit(cls, v: int) -> int:
        """Free plans always carry a positive limit."""
        if v < 1:
            raise ValueError("FREE_PLAN_NOTE_LIMIT must be a positive integer")
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """Convert standard PostgreSQL URL to async version."""
        url = self.database_url
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite."""
        return self.async_database_url.startswith("sqlite")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment.

        Raises:
            ValueError: If using insecure secret key in production
        """
        is_prod = self.environment == "production"
        if is_prod and self.secret_key == DEFAULT_INSECURE_SECRET:
            raise ValueError(
                "SECRET_KEY must be set to a secure value in production. "
                "Generate one with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
            )
        return is_prod

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
