"""Utilidades del proyecto."""

from .config import Config
from .logging import setup_logger
from .io import ensure_dir, load_json, save_json

__all__ = ["Config", "setup_logger", "ensure_dir", "load_json", "save_json"]
