"""Password hashing and JWT creation/verification for authentication."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from accounts_api.core.config import Settings
from accounts_api.core.errors import ConfigError, HashingError, InternalError

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds). Static; not tunable per call.
BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72

# Tokens are valid for one day from issuance; there is no refresh.
TOKEN_TTL = timedelta(days=1)
TOKEN_CLAIMS = ("id", "email", "role")

# Used only when ALLOW_INSECURE_DEFAULT_SECRET is true and JWT_SECRET is unset.
INSECURE_DEFAULT_SECRET = "insecure-development-secret-do-not-use"

# Min/max lengths for input validation.
NAME_MIN_LEN = 1
NAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Salted bcrypt digests at a fixed cost factor."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self.rounds = rounds

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. Raises HashingError on failure."""
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")
        except (ValueError, TypeError, OSError) as e:
            raise HashingError() from e

    def verify(self, plain_password: str, hashed: str) -> bool:
        """
        Return True if the password matches the stored digest, False otherwise.

        A mismatch is never an error. A malformed digest raises HashingError.
        """
        try:
            return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
        except (ValueError, TypeError) as e:
            raise HashingError("Stored password digest is malformed") from e


class TokenIssuer:
    """Signs and verifies the session JWT carrying {id, email, role}."""

    def __init__(self, settings: Settings) -> None:
        self.algorithm = settings.JWT_ALGORITHM
        if settings.JWT_SECRET is not None:
            self._secret: str | None = settings.JWT_SECRET.get_secret_value()
        elif settings.ALLOW_INSECURE_DEFAULT_SECRET:
            logger.warning(
                "JWT_SECRET is not set; signing tokens with the insecure default secret "
                "(ALLOW_INSECURE_DEFAULT_SECRET=true). Never run this in production."
            )
            self._secret = INSECURE_DEFAULT_SECRET
        else:
            self._secret = None

    @property
    def configured(self) -> bool:
        return self._secret is not None

    def _require_secret(self) -> str:
        if self._secret is None:
            raise ConfigError(
                "JWT_SECRET is not set and ALLOW_INSECURE_DEFAULT_SECRET is false"
            )
        return self._secret

    def issue(self, claims: Mapping[str, Any], now: datetime | None = None) -> str:
        """Create a token with exactly the id, email and role claims plus iat and exp."""
        secret = self._require_secret()
        if set(claims) != set(TOKEN_CLAIMS):
            raise ValueError(f"Token claims must be exactly {TOKEN_CLAIMS}, got {sorted(claims)}")
        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "id": claims["id"],
            "email": claims["email"],
            "role": claims["role"],
            "iat": issued_at,
            "exp": issued_at + TOKEN_TTL,
        }
        try:
            return jwt.encode(payload, secret, algorithm=self.algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise InternalError("Token signing failed") from e

    def verify(self, token: str, now: datetime | None = None) -> dict[str, Any] | None:
        """
        Decode and validate a token; return its claims, or None if it is invalid.

        Expiry is checked against `now` (default: current time) so that
        validity can be evaluated at any instant.
        """
        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={
                    "require": ["exp", "iat", *TOKEN_CLAIMS],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.PyJWTError:
            return None
        current = now or datetime.now(UTC)
        if payload["exp"] <= current.timestamp():
            return None
        return payload
