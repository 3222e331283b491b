"""Router aggregations for public API endpoints."""

from fastapi import APIRouter

from royale_decks.api.routes import auth, cards, decks, health

# Health and index routers (no prefix)
root_router = APIRouter()
root_router.include_router(health.router)


def build_api_router(prefix: str = "/api") -> APIRouter:
    """Return the resource routers mounted under the API prefix."""
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(auth.router)
    api_router.include_router(cards.router)
    api_router.include_router(decks.router)
    return api_router


__all__ = ["build_api_router", "root_router"]
