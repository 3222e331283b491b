"""Authentication endpoints: register, login, current user."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from royale_decks.core.auth import get_auth_service, get_current_user
from royale_decks.models.user import User
from royale_decks.schemas.auth import (
    AuthData,
    AuthResponse,
    CurrentUserData,
    CurrentUserResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)
from royale_decks.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(user: User, token: str) -> AuthResponse:
    return AuthResponse(
        data=AuthData(user=UserResponse.model_validate(user), token=token),
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
)
async def register(
    payload: RegisterRequest,
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> AuthResponse:
    user, token = await service.register(payload.name, payload.email, payload.password)
    await service.session.commit()
    return _auth_response(user, token)


@router.post("/login", response_model=AuthResponse, summary="Exchange credentials for a token")
async def login(
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> AuthResponse:
    user, token = await service.login(payload.email, payload.password)
    await service.session.commit()
    return _auth_response(user, token)


@router.get("/me", response_model=CurrentUserResponse, summary="Current user profile")
async def me(user: User = Depends(get_current_user)) -> CurrentUserResponse:  # noqa: B008
    return CurrentUserResponse(data=CurrentUserData(user=UserResponse.model_validate(user)))


__all__ = ["router"]
