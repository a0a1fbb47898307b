"""Diagnostics for the registry itself.

Registry dumps own stdout; everything emitted here goes to stderr as one
JSON object per line. Lifecycle records carry their details (vocabulary,
entry counts, rejected tags) as ``extra=`` fields, which the formatter
gathers under ``"context"``.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any, Optional, TextIO

DIAGNOSTIC_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DIAGNOSTIC_HANDLER_NAME = "logregistry.diagnostics"

# Attributes every LogRecord has; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """Render a diagnostic record as compact JSON."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = {
            key: self._stringify(value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)

    @staticmethod
    def _stringify(value: Any) -> Any:
        if isinstance(value, (str, int, float, bool)) or value is None:
            return value
        return str(value)


def configure_logging(*, level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Install the stderr diagnostics handler on the root logger.

    Calling it again replaces the previous diagnostics handler, so a process
    that runs the driver repeatedly never stacks handlers.
    """

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        if handler.get_name() == DIAGNOSTIC_HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(DIAGNOSTIC_HANDLER_NAME)
    handler.setFormatter(JsonFormatter(DIAGNOSTIC_FORMAT))
    root.addHandler(handler)
    return root


__all__ = ["JsonFormatter", "configure_logging", "DIAGNOSTIC_FORMAT", "DIAGNOSTIC_HANDLER_NAME"]
