"""
Pydantic schemas for authentication endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, Field

from royale_decks.schemas.common import CamelModel, SuccessEnvelope


class RegisterRequest(CamelModel):
    """Request schema for POST /api/auth/register.

    Fields are optional at the schema level so that missing values surface as
    the service's own validation message rather than a generic 400.
    """

    name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    password: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "dev", "email": "dev@dev.com", "password": "devdev"}
        }
    )


class LoginRequest(CamelModel):
    """Request schema for POST /api/auth/login."""

    email: str | None = None
    password: str | None = None


class UserResponse(CamelModel):
    """Public user projection. Never includes the password hash."""

    id: int
    name: str
    email: str
    created_at: datetime


class AuthData(CamelModel):
    user: UserResponse
    token: str = Field(..., description="JWT access token")


class AuthResponse(SuccessEnvelope):
    """Response schema for register and login."""

    data: AuthData


class CurrentUserData(CamelModel):
    user: UserResponse


class CurrentUserResponse(SuccessEnvelope):
    """Response schema for GET /api/auth/me."""

    data: CurrentUserData


__all__ = [
    "AuthData",
    "AuthResponse",
    "CurrentUserData",
    "CurrentUserResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
]
