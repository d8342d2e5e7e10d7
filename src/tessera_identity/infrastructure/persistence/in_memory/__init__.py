from tessera_identity.infrastructure.persistence.in_memory.user_repository import (
    InMemoryUserRepository,
)

__all__ = ["InMemoryUserRepository"]
