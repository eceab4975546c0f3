"""Logging setup for catalog loads and exports."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers kept at WARNING
QUIET_LOGGERS = ("faker",)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    log_file: Path | None = None,
) -> None:
    """Route catalog logs to stdout, and optionally to a file.

    Parameters
    ----------
    level : str
        Level name; unknown names fall back to INFO.
    format_type : str
        ``"standard"`` for pipe-separated lines, ``"json"`` for one JSON
        object per line.
    log_file : Path | None
        Also append log lines to this file. Skipped-record warnings from a
        large load are easier to review there than on the console.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = _make_formatter(format_type)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger("prop_catalog").setLevel(numeric_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _make_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(fmt=STANDARD_FORMAT, datefmt=DATE_FORMAT)


class JsonFormatter(logging.Formatter):
    """One JSON object per log line.

    Keys: ``timestamp`` (UTC, from the record's creation time), ``level``,
    ``logger``, ``message``, ``exception`` when one is attached, and the
    items of a dict passed as ``extra={"extra": {...}}``.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            entry.update(extra)
        return json.dumps(entry, default=str)


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
