"""Centralised logging configuration for the hello service."""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

logger = logging.getLogger(__name__)

# Marks handlers installed here so a second call can replace them.
_HANDLER_TAG = "_hello_service_handler"


class _JSONFormatter(logging.Formatter):
    """One JSON object per record, stamped with the record's own creation time."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "location": f"{record.module}:{record.lineno}",
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack"] = self.formatStack(record.stack_info)
        return json.dumps(entry, ensure_ascii=False)


def resolve_level(name: str | None) -> int:
    level = getattr(logging, (name or "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def _tagged(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    setattr(handler, _HANDLER_TAG, True)
    return handler


def _drop_installed(target: logging.Logger) -> None:
    for handler in list(target.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            target.removeHandler(handler)
            handler.close()


def _open_log_file(log_dir: Path, level: int) -> RotatingFileHandler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        str(log_dir / "app.log"),
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(_JSONFormatter())
    return _tagged(handler, level)


def configure_logging(app):
    """Set up rotating file handler (JSON) and console handler."""
    log_dir = Path(os.getenv("LOG_DIR") or Path(app.root_path) / "logs")
    level = resolve_level(os.getenv("LOG_LEVEL", "INFO"))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    )
    _tagged(console_handler, level)

    file_error = None
    try:
        file_handler = _open_log_file(log_dir, level)
    except OSError as exc:
        file_handler = None
        file_error = exc

    root = logging.getLogger()
    _drop_installed(root)
    root.setLevel(level)
    root.addHandler(console_handler)
    if file_handler:
        root.addHandler(file_handler)

    # Flask's logger propagates to root; only its level needs setting
    app.logger.setLevel(level)

    if file_error is not None:
        logger.warning(
            "Cannot write to %s (%s), file logging disabled, using console only.",
            log_dir / "app.log",
            file_error,
        )
