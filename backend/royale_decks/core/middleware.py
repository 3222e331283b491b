"""HTTP middlewares: request correlation, access logging, headers, body limits."""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Iterable
from typing import Final
from uuid import uuid4

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from royale_decks.core.errors import ErrorCode, error_response
from royale_decks.core.logging import bind_request_id, reset_request_id

REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
_REQUEST_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9._-]{1,128}$")

_SECURITY_HEADERS: Final[dict[str, str]] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}
_HSTS_VALUE: Final[str] = "max-age=31536000; includeSubDomains"

_BODY_METHODS: Final[frozenset[str]] = frozenset({"POST", "PUT", "PATCH"})


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Reuse a well-formed caller X-Request-ID or mint one, and echo it back."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        request_id = incoming if _REQUEST_ID_PATTERN.match(incoming) else uuid4().hex
        request.state.request_id = request_id

        token = bind_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """One access record per request; server errors are logged at ERROR."""

    def __init__(
        self,
        app: ASGIApp,
        logger_name: str = "royale_decks.access",
        skip_paths: Iterable[str] = (),
    ) -> None:
        super().__init__(app)
        self.logger = logging.getLogger(logger_name)
        self.skip_paths = frozenset(skip_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in self.skip_paths:
            return await call_next(request)

        started = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            level = logging.ERROR if status_code >= 500 else logging.INFO
            self.logger.log(
                level,
                "%s %s %s",
                request.method,
                request.url.path,
                status_code,
                extra={
                    "event": "access",
                    "http_method": request.method,
                    "http_path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                    "client_ip": request.client.host if request.client else None,
                    "user_agent": request.headers.get("user-agent"),
                },
            )


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, enable_hsts: bool = False) -> None:
        super().__init__(app)
        self.headers = dict(_SECURITY_HEADERS)
        if enable_hsts:
            self.headers["Strict-Transport-Security"] = _HSTS_VALUE

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Answer 413 in the error envelope when a body exceeds ``max_request_bytes``.

    The declared Content-Length is checked first; bodies of write methods are
    measured as well since the header may be absent.
    """

    def __init__(self, app: ASGIApp, max_request_bytes: int) -> None:
        if max_request_bytes <= 0:
            raise ValueError("max_request_bytes must be greater than zero.")
        super().__init__(app)
        self.max_request_bytes = max_request_bytes

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        declared = request.headers.get("content-length", "")
        too_large = declared.isdigit() and int(declared) > self.max_request_bytes
        if not too_large and request.method in _BODY_METHODS:
            too_large = len(await request.body()) > self.max_request_bytes

        if too_large:
            return error_response(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                code=ErrorCode.PAYLOAD_TOO_LARGE,
                message="Request body is too large",
            )
        return await call_next(request)


__all__ = [
    "REQUEST_ID_HEADER",
    "AccessLogMiddleware",
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
]
