"""Async HTTP client for the Royale Decks REST API."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from royale_decks.schemas.auth import UserResponse
from royale_decks.schemas.card import CardResponse
from royale_decks.schemas.deck import DeckResponse

logger = logging.getLogger("royale_decks.client")

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    """Error envelope returned by the API, or a non-JSON failure response."""

    def __init__(self, status_code: int, message: str, code: str | None = None) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.code = code


class DeckBuilderApiClient:
    """Thin wrapper over the REST surface that unwraps success envelopes.

    Pass an existing ``httpx.AsyncClient`` to share connection pools or to
    talk to an in-process app through ``httpx.ASGITransport``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:4000",
        *,
        token: str | None = None,
        api_prefix: str = "/api",
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.token = token
        self.api_prefix = api_prefix.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> DeckBuilderApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # Auth

    async def register(self, name: str, email: str, password: str) -> UserResponse:
        data = await self._request(
            "POST",
            "/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        return self._store_session(data)

    async def login(self, email: str, password: str) -> UserResponse:
        data = await self._request("POST", "/auth/login", json={"email": email, "password": password})
        return self._store_session(data)

    async def me(self) -> UserResponse:
        data = await self._request("GET", "/auth/me")
        return UserResponse.model_validate(data["user"])

    def logout(self) -> None:
        self.token = None

    # Cards

    async def list_cards(
        self,
        *,
        rarity: str | None = None,
        card_type: str | None = None,
        elixir: int | None = None,
    ) -> list[CardResponse]:
        params = {"rarity": rarity, "type": card_type, "elixir": elixir}
        data = await self._request(
            "GET",
            "/cards",
            params={key: value for key, value in params.items() if value is not None},
        )
        return [CardResponse.model_validate(item) for item in data["cards"]]

    # Decks

    async def list_my_decks(self) -> list[DeckResponse]:
        data = await self._request("GET", "/decks")
        return [DeckResponse.model_validate(item) for item in data]

    async def list_public_decks(self) -> list[DeckResponse]:
        data = await self._request("GET", "/decks", params={"onlyPublic": "true"})
        return [DeckResponse.model_validate(item) for item in data]

    async def get_shared_deck(self, deck_id: int) -> DeckResponse:
        data = await self._request("GET", f"/decks/shared/{deck_id}")
        return DeckResponse.model_validate(data)

    async def create_deck(self, payload: dict[str, Any]) -> DeckResponse:
        data = await self._request("POST", "/decks", json=payload)
        return DeckResponse.model_validate(data)

    async def update_deck(self, deck_id: int, payload: dict[str, Any]) -> DeckResponse:
        data = await self._request("PUT", f"/decks/{deck_id}", json=payload)
        return DeckResponse.model_validate(data)

    async def delete_deck(self, deck_id: int) -> None:
        await self._request("DELETE", f"/decks/{deck_id}")

    async def like_deck(self, deck_id: int) -> int:
        data = await self._request("POST", f"/decks/{deck_id}/like")
        return int(data["likes"])

    def _store_session(self, data: Any) -> UserResponse:
        self.token = data["token"]
        return UserResponse.model_validate(data["user"])

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        response = await self._client.request(
            method,
            f"{self.api_prefix}{path}",
            json=json,
            params=params,
            headers=headers,
        )

        if response.status_code == httpx.codes.NO_CONTENT:
            return None

        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError(response.status_code, response.text or response.reason_phrase) from exc

        if response.is_error or body.get("status") == "error":
            logger.debug(
                "API request failed",
                extra={"http_method": method, "http_path": path, "status_code": response.status_code},
            )
            raise ApiError(
                response.status_code,
                body.get("message", response.reason_phrase),
                body.get("code"),
            )
        return body.get("data")


__all__ = ["ApiError", "DeckBuilderApiClient"]
