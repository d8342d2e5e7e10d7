"""SQLAlchemy implementation of the UserRepository port."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tessera_auth import PasswordHashingService
from tessera_identity.domain.user import DuplicateIdentityError, User
from tessera_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy:
    """SQLAlchemy implementation of the UserRepository port.

    Rows are turned back into aggregates with ``User.reconstitute`` so the
    stored hash is never hashed again. Changes are flushed, not committed;
    the caller owns the transaction.
    """

    def __init__(
        self,
        session: AsyncSession,
        password_service: PasswordHashingService | None = None,
    ) -> None:
        self._session = session
        self._password_service = password_service

    async def save(self, user: User) -> User:
        self._session.add(self._map_to_model(user))
        await self._flush_unique()
        logger.info("Created user: %s (username: %s)", user.id, user.username)
        return user

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)
        return self._map_to_domain(model) if model is not None else None

    async def find_by_username(self, username: str) -> User | None:
        stmt = select(UserModel).where(UserModel.username == username)
        return await self._find_one(stmt)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        return await self._find_one(stmt)

    async def find_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def update(self, user: User) -> User:
        model = await self._find_model_by_id(user.id)
        if model is None:
            return await self.save(user)

        model.username = user.username
        model.email = user.email
        model.password_hash = user.password_hash
        model.role = user.role.value
        model.updated_at = user.updated_at
        await self._flush_unique()
        logger.debug("Updated user: %s", user.id)
        return user

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def exists_by_username(self, username: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def _flush_unique(self) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            # SQLite names the column, PostgreSQL the unique index.
            message = str(e.orig).lower()
            if "unique" not in message and "duplicate" not in message:
                raise
            if "username" in message:
                raise DuplicateIdentityError("Username") from e
            if "email" in message:
                raise DuplicateIdentityError("Email") from e
            raise

    async def _find_one(self, stmt) -> User | None:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            role=model.role,
            created_at=model.created_at,
            updated_at=model.updated_at,
            hasher=self._password_service,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
