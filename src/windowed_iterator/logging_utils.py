"""Structured logging for window events.

Events are logged as ``{"event": ..., **fields}`` payloads. The payload is
also attached to the record as ``record.event`` and ``record.fields`` so
handlers can route on it without parsing the message.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional

JSON_LOGS_ENV = "WINDOWED_JSON_LOGS"

# mode chosen by the last configure_logging() call; None until configured
_json_logs: Optional[bool] = None


def _env_json_logs() -> bool:
    return os.getenv(JSON_LOGS_ENV, "false").lower() == "true"


def json_logs_enabled() -> bool:
    if _json_logs is not None:
        return _json_logs
    return _env_json_logs()


def configure_logging(level: str = "INFO", json_logs: bool | None = None) -> None:
    """Configure global logging and remember the event format.

    ``json_logs=None`` defers to the ``WINDOWED_JSON_LOGS`` environment variable.
    """

    global _json_logs
    _json_logs = _env_json_logs() if json_logs is None else json_logs

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s" if _json_logs else "%(levelname)s:%(name)s:%(message)s",
    )


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.INFO,
    json_logs: bool | None = None,
    **fields: Any,
) -> None:
    """Emit ``event`` with ``fields`` at ``level``, as JSON when enabled."""

    if not logger.isEnabledFor(level):
        return
    if json_logs is None:
        json_logs = json_logs_enabled()

    payload = {"event": event, **fields}
    message = json.dumps(payload, default=str) if json_logs else payload
    logger.log(level, message, extra={"event": event, "fields": fields})
