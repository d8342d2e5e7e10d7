"""In-memory implementation of the UserRepository port."""

import logging
from uuid import UUID

from tessera_identity.domain.user import DuplicateIdentityError, User

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """Dict-backed user store, used by unit tests and local runs."""

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}

    async def save(self, user: User) -> User:
        self._check_unique(user)
        self._users[user.id] = user
        logger.debug("Saved user: %s", user.id)
        return user

    async def find_by_id(self, user_id: UUID) -> User | None:
        return self._users.get(user_id)

    async def find_by_username(self, username: str) -> User | None:
        return next(
            (u for u in self._users.values() if u.username == username),
            None,
        )

    async def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    async def find_all(self) -> list[User]:
        return list(self._users.values())

    async def update(self, user: User) -> User:
        self._check_unique(user)
        self._users[user.id] = user
        return user

    async def delete(self, user_id: UUID) -> None:
        self._users.pop(user_id, None)

    async def exists_by_username(self, username: str) -> bool:
        return await self.find_by_username(username) is not None

    async def exists_by_email(self, email: str) -> bool:
        return await self.find_by_email(email) is not None

    def _check_unique(self, user: User) -> None:
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.username == user.username:
                raise DuplicateIdentityError("Username")
            if other.email == user.email:
                raise DuplicateIdentityError("Email")
