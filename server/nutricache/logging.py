"""
JSON logging for the server process.

Cache and backend log calls pass structured fields through ``extra``
(``event``, ``cache_key``, ``method``, ``url``, ``status_code``); they are
emitted as top-level keys of the JSON line when present.
"""

import json
import logging
from typing import Any, Dict

EXTRA_FIELDS = ("event", "cache_key", "method", "url", "status_code")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO") -> None:
    """Install the JSON handler on the package logger once."""
    package_logger = logging.getLogger("nutricache")
    package_logger.setLevel(level.upper())
    if any(isinstance(h.formatter, JsonFormatter) for h in package_logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
