"""JSON log output with request correlation and credential redaction."""

from __future__ import annotations

import json
import logging
import sys
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from typing import Any, Final

REQUEST_ID_CTX: Final[ContextVar[str | None]] = ContextVar("request_id", default=None)

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_STANDARD_ATTRS: Final[frozenset[str]] = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "request_id"}

SENSITIVE_KEYS: Final[frozenset[str]] = frozenset(
    {"password", "password_hash", "token", "authorization", "secret_key"}
)
REDACTED: Final[str] = "***"

_NOISY_LOGGERS: Final[tuple[str, ...]] = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "sqlalchemy.dialects",
    "aiosqlite",
)

_LOGGING_CONFIGURED: bool = False


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line: ts, level, logger, message, request_id, extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = get_request_id()
        if request_id:
            entry["request_id"] = request_id

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_") or value is None:
                continue
            entry[key] = REDACTED if key.lower() in SENSITIVE_KEYS else _jsonable(value)

        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info).replace("\n", " | ")
        if record.stack_info:
            entry["stack"] = self.formatStack(record.stack_info).replace("\n", " | ")

        return json.dumps(entry, ensure_ascii=True, separators=(",", ":"))


def _jsonable(value: object) -> object:
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, dict)):
        try:
            json.dumps(value)
        except TypeError:
            return str(value)
        return value
    return str(value)


def configure_logging(level_name: str, *, force: bool = False) -> None:
    """Install the JSON handler on the root logger.

    Later calls are no-ops unless ``force`` is set, so the app factory and the
    seed command can both call this safely.
    """

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(JsonLogFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(level_name))

    # SQL statements are logged through SQL_ECHO only
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    _LOGGING_CONFIGURED = True


def _resolve_level(level_name: str) -> int:
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    return level if level is not None else logging.INFO


def bind_request_id(request_id: str) -> Token[str | None]:
    return REQUEST_ID_CTX.set(request_id)


def get_request_id() -> str | None:
    return REQUEST_ID_CTX.get()


def reset_request_id(token: Token[str | None]) -> None:
    REQUEST_ID_CTX.reset(token)


__all__ = [
    "JsonLogFormatter",
    "bind_request_id",
    "configure_logging",
    "get_request_id",
    "reset_request_id",
]
