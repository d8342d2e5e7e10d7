"""SQLAlchemy implementation for tessera_identity persistence.

Provides:
- Base: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from tessera_identity.infrastructure.persistence.sqlalchemy.base import Base
from tessera_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from tessera_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
