"""Gestión de configuración desde .env"""

import os
from pathlib import Path
from typing import Any
from dotenv import load_dotenv


class Config:
    """Configuración del núcleo y del CLI (el API usa app.core.config)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        # Cargar .env desde la raíz del proyecto
        project_root = Path(__file__).parent.parent.parent
        env_path = project_root / ".env"

        if env_path.exists():
            load_dotenv(env_path)
        else:
            load_dotenv(project_root / ".env.example")

        self.project_root = project_root
        self._initialized = True

    def get(self, key: str, default: Any = None, cast_type: type = str) -> Any:
        """Obtiene una variable de configuración con cast opcional."""
        value = os.getenv(key, default)

        if value is None:
            return default

        if cast_type == bool:
            if isinstance(value, bool):
                return value
            return str(value).lower() in ("true", "1", "yes")
        elif cast_type == int:
            return int(value)
        elif cast_type == float:
            return float(value)
        elif cast_type == list:
            if isinstance(value, list):
                return value
            return [x.strip() for x in str(value).split(",") if x.strip()]

        return str(value)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Obtiene un booleano de configuración."""
        return self.get(key, default, bool)

    def get_path(self, key: str, default: str = "") -> Path:
        """Obtiene una ruta de configuración relativa a la raíz del proyecto."""
        value = Path(self.get(key, default))
        if value.is_absolute():
            return value
        return self.project_root / value

    # Propiedades de acceso rápido
    @property
    def catalog_dir(self) -> Path:
        return self.get_path("CATALOG_DIR", "data/catalog")

    @property
    def reports_dir(self) -> Path:
        return self.get_path("REPORTS_DIR", "reports")

    @property
    def strict_catalogs(self) -> bool:
        return self.get_bool("STRICT_CATALOGS", True)

    @property
    def log_level(self) -> str:
        return self.get("LOG_LEVEL", "INFO")

    @property
    def log_format(self) -> str:
        return self.get("LOG_FORMAT", "json")
