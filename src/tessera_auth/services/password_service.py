"""Password hashing service using bcrypt.

bcrypt salts every hash with fresh randomness and has an adaptive work
factor, so hashing the same password twice yields different digests that
both verify.
"""

from functools import lru_cache

import bcrypt

# bcrypt only looks at the first 72 bytes; longer passwords are refused.
BCRYPT_MAX_BYTES = 72


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    DEFAULT_ROUNDS = 12

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Tests use 4 to keep the suite fast.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        ValueError
            If the password is longer than 72 bytes in UTF-8
        """
        encoded = _encode(password)
        if len(encoded) > BCRYPT_MAX_BYTES:
            msg = f"Password cannot be longer than {BCRYPT_MAX_BYTES} bytes"
            raise ValueError(msg)

        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(encoded, salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        A corrupted or empty hash, or a candidate longer than 72 bytes,
        denies access instead of raising.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        encoded = _encode(password)
        if len(encoded) > BCRYPT_MAX_BYTES:
            return False

        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            # Invalid hash format
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend one full bcrypt check without a stored hash.

        Used when there is no user to check against, so an unknown
        username costs the same time as a wrong password. Always False.
        """
        candidate = _encode(password)[:BCRYPT_MAX_BYTES]
        bcrypt.checkpw(candidate, _dummy_hash(self._rounds))
        return False


def _encode(password: str) -> bytes:
    return password.encode("utf-8")


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"tessera-dummy-password", bcrypt.gensalt(rounds=rounds))
