"""Authentication services.

Provides password hashing, token encoding and token management.
"""

from tessera_auth.services.password_service import PasswordHashingService
from tessera_auth.services.token_codec import TokenCodec
from tessera_auth.services.token_service import TokenService

__all__ = [
    "PasswordHashingService",
    "TokenCodec",
    "TokenService",
]
