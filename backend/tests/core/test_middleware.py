from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI, status
from httpx import ASGITransport, AsyncClient

from royale_decks.core.middleware import (
    AccessLogMiddleware,
    RequestIDMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


@pytest.mark.asyncio
async def test_request_size_limit_rejects_large_payload() -> None:
    app = FastAPI()
    app.add_middleware(RequestSizeLimitMiddleware, max_request_bytes=64)

    @app.post("/echo")
    async def echo_endpoint() -> dict[str, str]:
        return {"status": "ok"}

    async with _client(app) as client:
        response = await client.post(
            "/echo", content="x" * 128, headers={"content-type": "text/plain"}
        )

    assert response.status_code == status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    payload = response.json()
    assert payload["status"] == "error"
    assert payload["code"] == "PAYLOAD_TOO_LARGE"


@pytest.mark.asyncio
async def test_request_size_limit_allows_small_payload() -> None:
    app = FastAPI()
    app.add_middleware(RequestSizeLimitMiddleware, max_request_bytes=256)

    @app.post("/echo")
    async def echo_endpoint() -> dict[str, str]:
        return {"status": "ok"}

    async with _client(app) as client:
        response = await client.post("/echo", json={"message": "ok"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_request_size_limit_requires_positive_bound() -> None:
    with pytest.raises(ValueError):
        RequestSizeLimitMiddleware(FastAPI(), max_request_bytes=0)


@pytest.mark.asyncio
async def test_security_headers_middleware_injects_headers() -> None:
    app = FastAPI()
    app.add_middleware(SecurityHeadersMiddleware, enable_hsts=True)

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        return {"status": "ok"}

    async with _client(app) as client:
        response = await client.get("/ping")

    headers = response.headers
    assert headers["X-Content-Type-Options"] == "nosniff"
    assert headers["X-Frame-Options"] == "DENY"
    assert headers["Referrer-Policy"] == "no-referrer"
    assert headers["Strict-Transport-Security"].startswith("max-age=")


@pytest.mark.asyncio
async def test_request_id_is_echoed_or_generated() -> None:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        return {"status": "ok"}

    async with _client(app) as client:
        echoed = await client.get("/ping", headers={"X-Request-ID": "abc-123"})
        generated = await client.get("/ping")

    assert echoed.headers["X-Request-ID"] == "abc-123"
    assert len(generated.headers["X-Request-ID"]) == 32


@pytest.mark.asyncio
async def test_access_log_records_request(caplog: pytest.LogCaptureFixture) -> None:
    app = FastAPI()
    app.add_middleware(AccessLogMiddleware)

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        return {"status": "ok"}

    with caplog.at_level(logging.INFO, logger="royale_decks.access"):
        async with _client(app) as client:
            await client.get("/ping")

    records = [record for record in caplog.records if record.name == "royale_decks.access"]
    assert len(records) == 1
    assert records[0].http_path == "/ping"
    assert records[0].status_code == 200


@pytest.mark.asyncio
async def test_malformed_request_id_is_replaced() -> None:
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        return {"status": "ok"}

    async with _client(app) as client:
        response = await client.get("/ping", headers={"X-Request-ID": "bad id with spaces"})

    assert response.headers["X-Request-ID"] != "bad id with spaces"
    assert len(response.headers["X-Request-ID"]) == 32


@pytest.mark.asyncio
async def test_access_log_skips_configured_paths(caplog: pytest.LogCaptureFixture) -> None:
    app = FastAPI()
    app.add_middleware(AccessLogMiddleware, skip_paths=["/health"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    with caplog.at_level(logging.INFO, logger="royale_decks.access"):
        async with _client(app) as client:
            await client.get("/health")

    assert not [record for record in caplog.records if record.name == "royale_decks.access"]
