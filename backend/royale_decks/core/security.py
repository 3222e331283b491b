"""Password hashing and JWT handling."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from jose import ExpiredSignatureError, JWTError, jwt

from royale_decks.core.config import Settings

logger = logging.getLogger(__name__)


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be decoded into a user id."""


class PasswordHasher:
    """Salted, deliberately slow password hashing backed by argon2."""

    def __init__(self, hasher: Argon2Hasher | None = None) -> None:
        self._hasher = hasher or Argon2Hasher()

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerifyMismatchError, InvalidHashError, VerificationError):
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        return self._hasher.check_needs_rehash(password_hash)


class TokenService:
    """Issue and decode HMAC-signed access tokens carrying only the user id."""

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=7),
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenService:
        return cls(
            settings.secret_key.get_secret_value(),
            algorithm=settings.jwt_algorithm,
            expires_in=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def create_access_token(self, user_id: int) -> tuple[str, datetime]:
        """
        Create a signed token for the user.

        Returns:
            Tuple of (token_string, expires_at_datetime)
        """
        now = datetime.now(timezone.utc)
        expires_at = now + self._expires_in
        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        logger.debug("Issued access token for user_id=%s", user_id)
        return token, expires_at

    def decode_user_id(self, token: str) -> int:
        """
        Decode a token and return the user id it was issued for.

        Raises:
            InvalidTokenError: signature, expiry, or subject is invalid
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except ExpiredSignatureError as exc:
            logger.info("Rejected expired access token")
            raise InvalidTokenError("Token expired") from exc
        except JWTError as exc:
            logger.info("Rejected invalid access token")
            raise InvalidTokenError("Invalid token") from exc

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError("Token contains malformed user identifier") from exc


__all__ = ["InvalidTokenError", "PasswordHasher", "TokenService"]
