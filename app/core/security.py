"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError

from app.core.config import Settings
from app.schemas.auth import Identity

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128

DEFAULT_BCRYPT_ROUNDS = 10


def hash_password(plain_password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenCodec:
    """
    Signs identity claims into bearer tokens and verifies them.

    Payload shape: {"user": {"id", "username", "role"}, "exp", "iat"}.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expire = timedelta(minutes=expire_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenCodec":
        return cls(
            secret=settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.JWT_EXPIRE_MINUTES,
        )

    def encode(self, identity: Identity) -> str:
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "user": identity.model_dump(),
            "exp": now + self._expire,
            "iat": now,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> Identity:
        """
        Verify signature and expiry, then return the embedded identity.
        Raises jwt.PyJWTError on invalid, expired or malformed tokens.
        """
        payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        claims = payload.get("user")
        if not isinstance(claims, dict):
            raise jwt.InvalidTokenError("Token payload has no user claims")
        try:
            return Identity.model_validate(claims)
        except ValidationError as e:
            raise jwt.InvalidTokenError(f"Invalid user claims: {e.error_count()} error(s)") from e
