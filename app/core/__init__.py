"""Core components de la API."""

from .config import Settings, get_settings
from .logging import setup_logging, get_logger, request_id_context

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "request_id_context"
]
