import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import get_settings

request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

# Atributos propios de LogRecord; el resto viene de `extra=`
_RESERVED_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "extra_data"}


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        request_id = request_id_context.get()
        if request_id:
            log_data["request_id"] = request_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Campos pasados con extra={...}
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        request_id = request_id_context.get()
        request_id_str = f" [{request_id}]" if request_id else ""

        base_format = f"%(asctime)s - %(name)s - %(levelname)s{request_id_str} - %(message)s"
        formatter = logging.Formatter(base_format)
        return formatter.format(record)


def _formatter(log_format: str) -> logging.Formatter:
    return JSONFormatter() if log_format == "json" else TextFormatter()


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: Optional[Path] = None
) -> None:
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    root_logger.setLevel(getattr(logging, log_level.upper()))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(_formatter(log_format))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_formatter(log_format))
        root_logger.addHandler(file_handler)

    # Reducir verbosidad de librerías externas
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:

    return logging.getLogger(name)


def mask_lead_ref(lead_ref: Optional[str]) -> str:
    """
    Oculta el email o id LINE de un lead para los logs.

    owner@example.com -> o***@example.com, U1234567890 -> U123***
    """
    if not lead_ref:
        return ""
    if "@" in lead_ref:
        local, _, domain = lead_ref.partition("@")
        return f"{local[:1]}***@{domain}"
    return f"{lead_ref[:4]}***"


def log_with_request_id(
    logger: logging.Logger,
    level: str,
    message: str,
    extra_data: Optional[Dict[str, Any]] = None
) -> None:
    log_func = getattr(logger, level.lower())

    if extra_data:
        log_func(message, extra={"extra_data": extra_data})
    else:
        log_func(message)


settings = get_settings()
setup_logging(
    log_level=settings.log_level,
    log_format=settings.log_format,
    log_file=settings.log_full_path if settings.log_file else None
)
