"""Version reported by /health and the OpenAPI document."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Final

import tomllib

DISTRIBUTION_NAME: Final[str] = "royale-decks-backend"
FALLBACK_VERSION: Final[str] = "0.0.0"

# <repo>/pyproject.toml, two levels above backend/royale_decks/core
_PYPROJECT: Final[Path] = Path(__file__).resolve().parents[3] / "pyproject.toml"


def resolve_version(pyproject: Path = _PYPROJECT) -> str:
    """Installed distribution version, else the source checkout's pyproject."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pass

    if not pyproject.is_file():
        return FALLBACK_VERSION
    with pyproject.open("rb") as fp:
        project = tomllib.load(fp).get("project", {})
    value = project.get("version") if isinstance(project, dict) else None
    return value if isinstance(value, str) else FALLBACK_VERSION


APP_VERSION: Final[str] = resolve_version()

__all__ = ["APP_VERSION", "resolve_version"]
