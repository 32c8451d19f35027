"""Catálogos de referencia: sectores, categorías de subsidio y patrones."""

from .models import (
    AdoptionRateBand,
    AssetTag,
    Category,
    Difficulty,
    Industry,
    Pattern,
    derive_asset_tags,
)
from .loader import (
    CatalogIntegrityError,
    Catalogs,
    ValidationResult,
    build_catalogs,
    load_catalogs,
)

__all__ = [
    "AdoptionRateBand",
    "AssetTag",
    "Category",
    "Difficulty",
    "Industry",
    "Pattern",
    "derive_asset_tags",
    "CatalogIntegrityError",
    "Catalogs",
    "ValidationResult",
    "build_catalogs",
    "load_catalogs",
]
