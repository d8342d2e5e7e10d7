"""JWT token codec.

Signs claim mappings into compact HS256 tokens and verifies them again.
Knows nothing about users or token kinds; TokenService builds on it.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

import jwt

from tessera_auth.errors import TokenDecodeError


class TokenCodec:
    """Encode and decode signed, expiring tokens.

    Examples
    --------
    >>> codec = TokenCodec(secret_key="your-secret-key")
    >>> token = codec.encode({"sub": "42"}, timedelta(minutes=15))
    >>> codec.decode(token)["sub"]
    '42'
    """

    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "iat", "exp")

    def __init__(self, secret_key: str, algorithm: str = ALGORITHM):
        """Initialize the codec.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be identical on every
            instance that validates the same tokens.
        algorithm
            JWS algorithm, HS256 unless overridden
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm

    def encode(self, claims: Mapping[str, Any], expires_delta: timedelta) -> str:
        """Sign ``claims`` with fresh ``iat`` and ``exp`` timestamps.

        Parameters
        ----------
        claims
            Identity claims to embed
        expires_delta
            Time until the token expires; negative values mint an
            already expired token

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            **claims,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Verify signature and expiry, then return the payload.

        Raises
        ------
        TokenDecodeError
            If the token is expired, tampered with or malformed
        """
        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": list(self.REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenDecodeError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise TokenDecodeError(f"Invalid token: {e}") from e
