"""User database models."""

from typing import TYPE_CHECKING

from sqlalchemy import Enum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tenantnotes.core.constants import MAX_EMAIL_LENGTH, MAX_ROLE_LENGTH
from tenantnotes.core.database.base import Base, TenantMixin, TimestampMixin
from tenantnotes.core.permissions.roles import Role


if TYPE_CHECKING:
    from tenantnotes.modules.tenants.models import Tenant


class User(Base, TimestampMixin, TenantMixin):
    """User model representing an authenticated user.

    Every user belongs to exactly one tenant and holds one role in it.

    Attributes:
        id: Integer primary key
        email: Globally unique email address, matched exactly
        password_hash: Bcrypt-hashed password
        role: The user's role inside the tenant
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    role: Mapped[Role] = mapped_column(
        Enum(
            Role,
            native_enum=False,
            length=MAX_ROLE_LENGTH,
            values_callable=lambda roles: [role.value for role in roles],
        ),
        default=Role.MEMBER,
        nullable=False,
    )

    # Relationships
    tenant: Mapped["Tenant"] = relationship(
        "Tenant",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, tenant_id={self.tenant_id})>"
