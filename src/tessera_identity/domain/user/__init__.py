"""User domain manages user identity and credentials.

This domain handles:
- User aggregate (id, username, email, password hash, role)
- Password validation through the credential hasher
- The repository port used by the identity use cases
"""

from tessera_identity.domain.user.aggregates import User, UserProfile
from tessera_identity.domain.user.exceptions import DuplicateIdentityError
from tessera_identity.domain.user.repositories import UserRepository
from tessera_identity.domain.user.value_objects import UserRole

__all__ = [
    "DuplicateIdentityError",
    "User",
    "UserProfile",
    "UserRepository",
    "UserRole",
]
