"""Run the API with uvicorn: ``python -m royale_decks``."""

from __future__ import annotations

import uvicorn

from royale_decks.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "royale_decks.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "local" and settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
