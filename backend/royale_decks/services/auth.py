"""Registration, login and bearer-token verification."""

from __future__ import annotations

import asyncio
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.core.errors import (
    AuthenticationError,
    ConflictError,
    ErrorCode,
    ValidationError,
)
from royale_decks.core.security import InvalidTokenError, PasswordHasher, TokenService
from royale_decks.models.user import User
from royale_decks.repositories.user import UserRepository

logger = logging.getLogger("royale_decks.services.auth")

WRONG_CREDENTIALS_MESSAGE = "Wrong email or password"
INVALID_TOKEN_MESSAGE = "Invalid token"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class AuthService:
    """Coordinate user creation, credential checks and token issuance."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        *,
        password_min_length: int = 6,
    ) -> None:
        self.user_repo = user_repo
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.password_min_length = password_min_length

    @property
    def session(self) -> AsyncSession:
        """Expose shared session for transaction control."""
        return self.user_repo.session

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
    ) -> tuple[User, str]:
        """Create an account and return it with a fresh access token."""
        name = (name or "").strip()
        email = normalize_email(email or "")
        if not name or not email or not password:
            raise ValidationError("Need name, email and password")
        if len(password) < self.password_min_length:
            raise ValidationError(
                f"Password too short (min {self.password_min_length} chars)",
            )

        if await self.user_repo.get_by_email(email) is not None:
            raise ConflictError("Email already in use", code=ErrorCode.EMAIL_IN_USE)

        password_hash = await asyncio.to_thread(self.password_hasher.hash, password)
        try:
            user = await self.user_repo.create(
                name=name,
                email=email,
                password_hash=password_hash,
            )
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConflictError("Email already in use", code=ErrorCode.EMAIL_IN_USE) from exc

        token, _ = self.token_service.create_access_token(user.id)
        logger.info("User registered", extra={"user_id": user.id})
        return user, token

    async def login(self, email: str | None, password: str | None) -> tuple[User, str]:
        """Check credentials. Unknown email and wrong password fail identically."""
        email = normalize_email(email or "")
        if not email or not password:
            raise ValidationError("Need email and password")

        user = await self.user_repo.get_by_email(email)
        if user is None:
            logger.info("Login rejected: unknown email")
            raise AuthenticationError(
                WRONG_CREDENTIALS_MESSAGE,
                code=ErrorCode.INVALID_CREDENTIALS,
            )

        verified = await asyncio.to_thread(
            self.password_hasher.verify,
            user.password_hash,
            password,
        )
        if not verified:
            logger.info("Login rejected: password mismatch", extra={"user_id": user.id})
            raise AuthenticationError(
                WRONG_CREDENTIALS_MESSAGE,
                code=ErrorCode.INVALID_CREDENTIALS,
            )

        if self.password_hasher.needs_rehash(user.password_hash):
            new_hash = await asyncio.to_thread(self.password_hasher.hash, password)
            await self.user_repo.update_password_hash(user, new_hash)
            logger.info("Password hash upgraded", extra={"user_id": user.id})

        token, _ = self.token_service.create_access_token(user.id)
        return user, token

    async def verify_token(self, token: str) -> User:
        """Resolve a bearer token to the user it was issued for."""
        try:
            user_id = self.token_service.decode_user_id(token)
        except InvalidTokenError as exc:
            raise AuthenticationError(
                INVALID_TOKEN_MESSAGE,
                code=ErrorCode.INVALID_TOKEN,
            ) from exc

        user = await self.user_repo.get(user_id)
        if user is None:
            logger.info("Token references missing user", extra={"user_id": user_id})
            raise AuthenticationError(INVALID_TOKEN_MESSAGE, code=ErrorCode.INVALID_TOKEN)
        return user


__all__ = ["AuthService", "normalize_email"]
