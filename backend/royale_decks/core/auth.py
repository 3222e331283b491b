"""
Bearer-token dependencies for FastAPI routes.

This module implements:
1. AuthService construction from app-scoped hasher and token service
2. Current user dependency (token required)
3. Optional user dependency (token ignored when absent or unusable)
"""

from __future__ import annotations

import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from royale_decks.core.config import Settings
from royale_decks.core.db import get_session
from royale_decks.core.errors import AuthenticationError, ErrorCode
from royale_decks.core.security import PasswordHasher, TokenService
from royale_decks.models.user import User
from royale_decks.repositories.user import UserRepository
from royale_decks.services.auth import AuthService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def get_auth_service(
    request: Request,
    session: AsyncSession = Depends(get_session),  # noqa: B008
) -> AuthService:
    settings: Settings = request.app.state.settings
    password_hasher: PasswordHasher = request.app.state.password_hasher
    token_service: TokenService = request.app.state.token_service
    return AuthService(
        UserRepository(session),
        password_hasher,
        token_service,
        password_min_length=settings.password_min_length,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),  # noqa: B008
    auth_service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> User:
    """
    FastAPI dependency resolving the `Authorization: Bearer <token>` header.

    Raises:
        AuthenticationError: header missing, token invalid or expired, or the
            user no longer exists
    """
    if credentials is None:
        raise AuthenticationError("No token provided", code=ErrorCode.TOKEN_MISSING)
    return await auth_service.verify_token(credentials.credentials)


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),  # noqa: B008
    auth_service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> User | None:
    """Like get_current_user, but anonymous callers and bad tokens yield None."""
    if credentials is None:
        return None
    try:
        return await auth_service.verify_token(credentials.credentials)
    except AuthenticationError:
        logger.debug("Ignoring unusable bearer token on optional-auth route")
        return None


__all__ = ["get_auth_service", "get_current_user", "get_optional_user", "security"]
