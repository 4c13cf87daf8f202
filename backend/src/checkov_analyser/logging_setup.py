from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

from pythonjsonlogger.json import JsonFormatter as BaseJsonFormatter


class JsonFormatter(BaseJsonFormatter):
    def add_fields(self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        if not log_record.get("timestamp"):
            log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Send `checkov_analyser.*` records to stdout as JSON lines."""
    logger = logging.getLogger("checkov_analyser")
    logger.setLevel(level)
    logger.propagate = False

    # Repeated calls (server reloads, tests) must not stack handlers.
    if not any(getattr(h, "_checkov_analyser", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter("%(timestamp)s %(level)s %(logger)s %(message)s"))
        handler._checkov_analyser = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
