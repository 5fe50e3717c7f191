"""Logging helpers.

``FieldLogger`` attaches key/value fields to every record it emits, and
``configure_logging`` installs a text or JSON handler on the package logger.
Both formatters print timestamps as ``HH:MM:SS``.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

TIMESTAMP_FORMAT = "%H:%M:%S"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ROOT_LOGGER_NAME = "payloadgen"


class FieldLogger(logging.LoggerAdapter):
    """Logger adapter that carries structured fields.

    Example::

        log = FieldLogger(logging.getLogger("payloadgen.vu"))
        log.with_fields({"vu": 3, "iteration": 10}).info("payload sent")
    """

    def __init__(self, logger: logging.Logger, fields: Mapping[str, Any] | None = None):
        super().__init__(logger, {})
        self.fields: dict[str, Any] = dict(fields or {})

    def with_fields(self, fields: Mapping[str, Any]) -> "FieldLogger":
        """Return a new logger with *fields* merged over the current ones."""
        merged = dict(self.fields)
        merged.update(fields)
        return FieldLogger(self.logger, merged)

    def with_field(self, key: str, value: Any) -> "FieldLogger":
        return self.with_fields({key: value})

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        extra = dict(kwargs.get("extra") or {})
        fields = dict(self.fields)
        fields.update(extra.pop("fields", {}))
        extra["fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    return dict(getattr(record, "fields", None) or {})


class TextFormatter(logging.Formatter):
    """Plain text formatter that appends ``key=value`` fields."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT, datefmt=TIMESTAMP_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _record_fields(record)
        if fields:
            line += "".join(f" {key}={value}" for key, value in fields.items())
        return line


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self) -> None:
        super().__init__(datefmt=TIMESTAMP_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key, value in _record_fields(record).items():
            entry.setdefault(key, value)
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class PackageHandler(logging.StreamHandler):
    """Stream handler installed by ``configure_logging``."""


FORMATTERS: dict[str, type[logging.Formatter]] = {
    "text": TextFormatter,
    "json": JsonFormatter,
}


def configure_logging(level: str = "INFO", fmt: str = "text") -> logging.Logger:
    """Install a single stream handler on the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        fmt: Output format, "text" or "json"

    Returns:
        The configured package logger

    Raises:
        ValueError: If the format is unknown
    """
    if fmt not in FORMATTERS:
        raise ValueError(f"Unknown log format: {fmt!r}. Available: {sorted(FORMATTERS)}")

    root = logging.getLogger(ROOT_LOGGER_NAME)

    # Replace handlers from earlier calls instead of stacking them
    for handler in list(root.handlers):
        if isinstance(handler, PackageHandler):
            root.removeHandler(handler)

    handler = PackageHandler()
    handler.setFormatter(FORMATTERS[fmt]())
    root.addHandler(handler)
    root.setLevel(level.upper())
    return root
