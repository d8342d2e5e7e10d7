"""User repository port."""

from typing import Protocol
from uuid import UUID

from tessera_identity.domain.user.aggregates.user import User


class UserRepository(Protocol):
    """Persistence port for User aggregates.

    Implementations are substitutable: the in-memory one backs unit tests,
    the SQLAlchemy one backs the running service.
    """

    async def save(self, user: User) -> User:
        """Persist a new user.

        Raises DuplicateIdentityError if the username or email is taken.
        """
        ...

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find a user by their ID."""
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find a user by their username."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find a user by their email address."""
        ...

    async def find_all(self) -> list[User]:
        """List all users."""
        ...

    async def update(self, user: User) -> User:
        """Persist changes to an existing user."""
        ...

    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID."""
        ...

    async def exists_by_username(self, username: str) -> bool:
        """Check if a user exists with the given username."""
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given email."""
        ...
