from __future__ import annotations

import json
import logging
import os
import socket
import time as _time
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from codelock_watch.config import settings


_STANDARD_LOG_KEYS = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


_LOGGING_INITIALIZED = False


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        _dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if not settings.log_utc:
            _dt = _dt.astimezone()

        payload: dict[str, Any] = {
            "time": _dt.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "lineno": record.lineno,
            "func": record.funcName,
            "thread": record.threadName,
            "service": settings.app_name,
            "host": socket.gethostname(),
        }
        env_name = os.getenv("ENV") or os.getenv("ENVIRONMENT")
        if env_name:
            payload["environment"] = env_name
        # extras (actor_id, owner_id, ...)
        for k, v in record.__dict__.items():
            if k in _STANDARD_LOG_KEYS or k in payload:
                continue
            try:
                json.dumps(v)
                payload[k] = v
            except (TypeError, ValueError):
                payload[k] = str(v)

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _apply_formatter_to_logger(logger_name: str, formatter: logging.Formatter) -> None:
    for h in logging.getLogger(logger_name).handlers:
        h.setFormatter(formatter)


def init_logging() -> None:
    global _LOGGING_INITIALIZED
    if _LOGGING_INITIALIZED:
        return
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    # Console: human-readable text; File: JSON (if enabled)
    text_formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    text_formatter.converter = _time.gmtime if settings.log_utc else _time.localtime  # type: ignore[assignment]

    stream_handlers = [
        h for h in root.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    if not stream_handlers:
        sh = logging.StreamHandler()
        sh.setLevel(level)
        sh.setFormatter(text_formatter)
        root.addHandler(sh)
    else:
        # keep the first, drop duplicates to avoid double logs
        stream_handlers[0].setFormatter(text_formatter)
        for h in stream_handlers[1:]:
            root.removeHandler(h)

    if settings.log_file_enabled:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = os.fspath(log_dir / settings.log_file_name)
        if not any(getattr(h, "baseFilename", None) == log_path for h in root.handlers):
            fh = RotatingFileHandler(
                filename=log_path,
                maxBytes=int(settings.log_max_bytes),
                backupCount=int(settings.log_backup_count),
                encoding="utf-8",
            )
            fh.setLevel(level)
            fh.setFormatter(JsonFormatter())
            root.addHandler(fh)

    # Align uvicorn formatters with the console
    _apply_formatter_to_logger("uvicorn", text_formatter)
    _apply_formatter_to_logger("uvicorn.error", text_formatter)
    _apply_formatter_to_logger("uvicorn.access", text_formatter)

    _LOGGING_INITIALIZED = True
