"""User aggregate: identity fields plus the password hash."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Union
from uuid import UUID, uuid4

from tessera_auth.services import PasswordHashingService
from tessera_identity.domain.shared.time import ensure_tz_aware, utc_now
from tessera_identity.domain.user.value_objects import UserRole

_ONE_MICROSECOND = timedelta(microseconds=1)


@dataclass(frozen=True)
class UserProfile:
    """The only projection of a User allowed to leave the process."""

    id: UUID
    username: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class User:
    """
    User aggregate root.

    Owns the password hash and delegates hashing and verification to a
    PasswordHashingService. Uniqueness of username and email is not checked
    here; registration does that against the repository.

    Use ``create`` for new users (hashes the plaintext) and ``reconstitute``
    when rebuilding from storage (takes the stored hash as-is).
    """

    def __init__(
        self,
        id: UUID,
        username: str,
        email: str,
        password_hash: str,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
        hasher: PasswordHashingService | None = None,
    ):
        self._id = id
        self._username = username
        self._email = email
        self._password_hash = password_hash
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = ensure_tz_aware(created_at)
        self._updated_at = ensure_tz_aware(updated_at)
        self._hasher = hasher or PasswordHashingService()

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
        hasher: PasswordHashingService | None = None,
    ) -> User:
        hasher = hasher or PasswordHashingService()
        now = utc_now()
        return cls(
            id=uuid4(),
            username=username,
            email=email,
            password_hash=hasher.hash(password),
            role=role,
            created_at=now,
            updated_at=now,
            hasher=hasher,
        )

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        username: str,
        email: str,
        password_hash: str,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
        hasher: PasswordHashingService | None = None,
    ) -> User:
        return cls(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
            hasher=hasher,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        """Stored hash, for persistence adapters only."""
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def validate_password(self, candidate: str) -> bool:
        return self._hasher.verify(candidate, self._password_hash)

    def update_password(self, new_password: str) -> None:
        # Tokens already issued stay valid until they expire.
        self._password_hash = self._hasher.hash(new_password)
        self._touch()

    def update_profile(
        self,
        username: str | None = None,
        email: str | None = None,
    ) -> None:
        """Change username and/or email.

        updated_at is bumped even when nothing is supplied.
        """
        if username:
            self._username = username
        if email:
            self._email = email
        self._touch()

    def to_profile(self) -> UserProfile:
        return UserProfile(
            id=self._id,
            username=self._username,
            email=self._email,
            role=self._role,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    def _touch(self) -> None:
        now = utc_now()
        # Keep updated_at strictly increasing even on coarse clocks.
        if now <= self._updated_at:
            now = self._updated_at + _ONE_MICROSECOND
        self._updated_at = now

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, username={self._username}, "
            f"role={self._role.value})"
        )
