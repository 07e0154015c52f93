"""JSON logging for catalog ingestion runs.

Processor context (processor name, location type, run id, counts) travels on
each record under a single ``catalog`` key, attached by ``CatalogLogAdapter``.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any


class CatalogLogAdapter(logging.LoggerAdapter):
    """Merge the adapter's context and any per-call ``extra`` into ``record.catalog``."""

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        context = dict(self.extra)
        context.update(kwargs.pop("extra", None) or {})
        kwargs["extra"] = {"catalog": context}
        return msg, kwargs

    def bind(self, **context: Any) -> "CatalogLogAdapter":
        """Return an adapter on the same logger with additional context."""
        return CatalogLogAdapter(self.logger, {**self.extra, **context})


def processor_logger(name: str, processor: str, **context: Any) -> CatalogLogAdapter:
    return CatalogLogAdapter(logging.getLogger(name), {"processor": processor, **context})


class JsonFormatter(logging.Formatter):
    """One JSON object per line: level, logger, message, then the catalog context."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        catalog = getattr(record, "catalog", None) or {}
        entry.update({k: v for k, v in catalog.items() if v is not None})
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: str = "INFO") -> None:
    """Route the ``ingestion`` logger tree to stderr as JSON lines. Unknown levels fall back to INFO."""
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"json": {"()": JsonFormatter}},
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json",
            },
        },
        "loggers": {
            "ingestion": {
                "level": level,
                "handlers": ["stderr"],
                "propagate": False,
            },
        },
    })
