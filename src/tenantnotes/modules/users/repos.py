"""User repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tenantnotes.modules.users.models import User


class UserRepository:
    """Repository for User database operations.

    Handles all database interactions for the User model.
    Request-time lookups are scoped to a tenant; the ``_system`` variants
    are only for the login flow, before any tenant is known.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User instance to create

        Returns:
            The created user with ID populated
        """
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_by_id(self, user_id: int, tenant_id: str) -> User | None:
        """Get a user by ID within a tenant.

        Args:
            user_id: The user's id
            tenant_id: The tenant the user must belong to

        Returns:
            User if found in that tenant, None otherwise
        """
        stmt = select(User).where(User.id == user_id, User.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email_system(self, email: str) -> User | None:
        """Get a user by exact email address across all tenants.

        Args:
            email: The user's email

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
