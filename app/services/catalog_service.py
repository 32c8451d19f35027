"""Servicio de catálogos: carga única por proceso, solo lectura."""

from pathlib import Path
from typing import Optional

from navi.catalog import Catalogs, load_catalogs

from app.core.config import get_settings
from app.core.exceptions import CatalogNotLoadedException
from app.core.logging import get_logger

logger = get_logger(__name__)
settings = get_settings()


class CatalogService:
    """Mantiene los catálogos cargados durante la vida del proceso."""

    def __init__(self, catalog_dir: Optional[Path] = None, strict: Optional[bool] = None):
        self.catalog_dir = catalog_dir or settings.catalog_full_path
        self.strict = settings.strict_catalogs if strict is None else strict
        self._catalogs: Optional[Catalogs] = None

    def load(self) -> Catalogs:
        """Carga (o recarga) los catálogos desde disco."""
        self._catalogs = load_catalogs(self.catalog_dir, strict=self.strict)
        logger.info(f"Catálogos disponibles desde {self.catalog_dir}")
        return self._catalogs

    def use(self, catalogs: Catalogs) -> None:
        """Inyecta catálogos ya construidos (tests, recargas en caliente)."""
        self._catalogs = catalogs

    def is_loaded(self) -> bool:
        return self._catalogs is not None

    @property
    def catalogs(self) -> Catalogs:
        if self._catalogs is None:
            raise CatalogNotLoadedException()
        return self._catalogs


_catalog_service_instance = None


def get_catalog_service() -> CatalogService:
    """Obtiene la instancia singleton del servicio de catálogos."""
    global _catalog_service_instance
    if _catalog_service_instance is None:
        _catalog_service_instance = CatalogService()
    return _catalog_service_instance
