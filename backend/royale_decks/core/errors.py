"""Shared error primitives and FastAPI exception handlers."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from enum import StrEnum
from http import HTTPStatus
from typing import Any, Final, cast

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

ExceptionHandlerCallable = Callable[[Request, Exception], Awaitable[Response]]

logger = logging.getLogger("royale_decks.errors")


class ErrorKind(StrEnum):
    """Closed set of failure categories raised by the business layer."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class ErrorCode(StrEnum):
    """Machine-readable codes exposed in the error envelope."""

    # Authentication
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"  # noqa: S105
    TOKEN_MISSING = "TOKEN_MISSING"  # noqa: S105
    LOGIN_REQUIRED = "LOGIN_REQUIRED"

    # Validation
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CARD_COUNT = "INVALID_CARD_COUNT"
    DUPLICATE_CARDS = "DUPLICATE_CARDS"
    UNKNOWN_CARDS = "UNKNOWN_CARDS"
    ALREADY_LIKED = "ALREADY_LIKED"

    # Resources
    NOT_FOUND = "NOT_FOUND"
    CARD_NOT_FOUND = "CARD_NOT_FOUND"
    DECK_NOT_FOUND = "DECK_NOT_FOUND"

    # Conflicts
    CONFLICT = "CONFLICT"
    EMAIL_IN_USE = "EMAIL_IN_USE"
    SLOT_OCCUPIED = "SLOT_OCCUPIED"

    # Internal
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"

    # Transport
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"


STATUS_BY_KIND: Final[dict[ErrorKind, int]] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTHENTICATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ApplicationError(Exception):
    """Domain/business error that should be rendered in the public API."""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | str | None = None,
        details: object | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = str(code or self.default_code)
        self.details = details

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class ValidationError(ApplicationError):
    """Malformed, missing, or inconsistent input."""

    kind = ErrorKind.VALIDATION
    default_code = ErrorCode.VALIDATION_ERROR


class AuthenticationError(ApplicationError):
    """Bad credentials or an unusable bearer token."""

    kind = ErrorKind.AUTHENTICATION
    default_code = ErrorCode.AUTH_FAILED


class ConflictError(ApplicationError):
    """Unique-constraint violations such as duplicate email or occupied slot."""

    kind = ErrorKind.CONFLICT
    default_code = ErrorCode.CONFLICT


class NotFoundError(ApplicationError):
    """Missing resource, or one the caller may not see."""

    kind = ErrorKind.NOT_FOUND
    default_code = ErrorCode.NOT_FOUND


class InternalError(ApplicationError):
    """Unexpected store or infrastructure failure."""

    kind = ErrorKind.INTERNAL
    default_code = ErrorCode.INTERNAL_ERROR


_CODE_BY_STATUS: Final[dict[int, ErrorCode]] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.AUTH_FAILED,
    status.HTTP_403_FORBIDDEN: ErrorCode.AUTH_FAILED,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: ErrorCode.PAYLOAD_TOO_LARGE,
}

# Routing failures raised by Starlette itself carry the bare status phrase.
_ROUTING_STATUSES: Final[frozenset[int]] = frozenset(
    {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}
)

SERVER_ERROR_MESSAGE: Final[str] = "Something went wrong on the server"
_LOCATION_ROOTS: Final[frozenset[str]] = frozenset({"body", "query", "path", "header"})


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure, ours or the framework's, as the error envelope."""

    handlers: tuple[tuple[type[Exception], Callable[..., Awaitable[Response]]], ...] = (
        (ApplicationError, application_error_handler),
        (RequestValidationError, request_validation_exception_handler),
        (StarletteHTTPException, http_exception_handler),
        (SQLAlchemyError, database_exception_handler),
        (Exception, unexpected_exception_handler),
    )
    for exc_class, handler in handlers:
        app.add_exception_handler(exc_class, cast(ExceptionHandlerCallable, handler))


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    if exc.kind is ErrorKind.INTERNAL:
        logger.error("Internal application error: %s", exc.message, extra={"code": exc.code})
    else:
        logger.info(
            "Request rejected",
            extra={"kind": exc.kind.value, "code": exc.code, "http_path": request.url.path},
        )
    return error_response(
        status_code=exc.status_code,
        code=exc.code,
        message=exc.message,
        details=exc.details,
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    return error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        code=ErrorCode.VALIDATION_ERROR,
        message="Invalid request data",
        details=_field_errors(exc.errors()) or None,
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    phrase = HTTPStatus(exc.status_code).phrase
    if exc.status_code in _ROUTING_STATUSES and exc.detail == phrase:
        message = f"Route {request.url.path} not found"
    else:
        message = str(exc.detail or phrase)

    return error_response(
        status_code=exc.status_code,
        code=_CODE_BY_STATUS.get(exc.status_code, ErrorCode.INTERNAL_ERROR),
        message=message,
        headers=exc.headers,
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    return _server_error("Database failure during request", exc, ErrorCode.DATABASE_ERROR)


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return _server_error("Unhandled exception during request", exc, ErrorCode.INTERNAL_ERROR)


def _server_error(log_message: str, exc: Exception, code: ErrorCode) -> JSONResponse:
    logger.error(log_message, exc_info=(exc.__class__, exc, exc.__traceback__))
    return error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code=code,
        message=SERVER_ERROR_MESSAGE,
    )


def error_response(
    *,
    status_code: int,
    code: ErrorCode | str,
    message: str,
    details: object | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = build_error_payload(code=code, message=message, details=details)
    return JSONResponse(content=jsonable_encoder(body), status_code=status_code, headers=headers)


def build_error_payload(
    *,
    code: ErrorCode | str,
    message: str,
    details: object | None = None,
) -> dict[str, object]:
    """``{"status": "error", "message", "code"}`` plus ``details`` when given."""
    payload: dict[str, object] = {"status": "error", "message": message, "code": str(code)}
    if details is not None:
        payload["details"] = details
    return payload


def _field_errors(errors: Sequence[Mapping[str, Any]]) -> dict[str, str]:
    """Collapse pydantic errors to ``{"field.path": "msg; msg"}``."""
    fields: dict[str, list[str]] = {}
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_ROOTS]
        field = ".".join(location) or "_schema"
        fields.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return {field: "; ".join(messages) for field, messages in fields.items()}


__all__ = [
    "STATUS_BY_KIND",
    "ApplicationError",
    "AuthenticationError",
    "ConflictError",
    "ErrorCode",
    "ErrorKind",
    "InternalError",
    "NotFoundError",
    "ValidationError",
    "application_error_handler",
    "build_error_payload",
    "error_response",
    "http_exception_handler",
    "register_exception_handlers",
    "request_validation_exception_handler",
    "unexpected_exception_handler",
]
