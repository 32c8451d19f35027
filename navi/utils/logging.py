"""Logging del núcleo: loggers bajo el espacio `navi`, JSON o texto, con rotación."""

import logging
import json
from datetime import datetime, timezone
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from .config import Config


ROOT_LOGGER = "navi"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """Una línea JSON por registro; `extra_data` se funde en el objeto."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)


def _qualified(name: str) -> str:
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return name
    return f"{ROOT_LOGGER}.{name}"


def _resolve_log_file(log_file: Union[str, Path], config: Config) -> Path:
    # Un nombre suelto ("cli.log") va al directorio de reportes
    log_file = Path(log_file)
    if log_file.is_absolute() or log_file.parent != Path("."):
        return log_file
    return config.reports_dir / log_file


def setup_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: Optional[str] = None,
    format_type: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Configura un logger del núcleo.

    El nombre se cuelga de `navi` ("catalog.loader" -> "navi.catalog.loader").
    Nivel y formato salen de LOG_LEVEL / LOG_FORMAT si no se indican.

    Args:
        name: Nombre del logger
        log_file: Archivo de log; un nombre sin directorio se guarda en REPORTS_DIR
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: 'json' o 'text'
        max_bytes: Tamaño máximo del archivo antes de rotar
        backup_count: Número de backups a mantener

    Returns:
        Logger configurado
    """
    config = Config()
    level = (level or config.log_level).upper()
    format_type = format_type or config.log_format

    logger = logging.getLogger(_qualified(name))
    logger.setLevel(getattr(logging, level))
    # Los handlers son propios; no duplicar en el root que configura la API
    logger.propagate = False

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(_build_formatter(format_type))
    logger.addHandler(console_handler)

    if log_file:
        log_path = _resolve_log_file(log_file, config)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(getattr(logging, level))
        file_handler.setFormatter(_build_formatter(format_type))
        logger.addHandler(file_handler)

    return logger
