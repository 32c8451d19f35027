"""Carga y validación de los catálogos estáticos (sectores, categorías, patrones)."""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union
from dataclasses import dataclass, field

from ..utils import Config, setup_logger, load_json
from .models import (
    AdoptionRateBand,
    AssetTag,
    Category,
    Difficulty,
    Industry,
    Pattern,
    as_tuple,
    derive_asset_tags,
)


config = Config()
logger = setup_logger("catalog.loader")

INDUSTRIES_FILE = "industries.json"
CATEGORIES_FILE = "categories.json"
PATTERNS_FILE = "patterns.json"


class CatalogIntegrityError(ValueError):
    """Los catálogos contienen referencias rotas o registros inválidos."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(
            f"Catálogos inválidos ({len(self.errors)} errores): " + "; ".join(self.errors)
        )


@dataclass
class ValidationResult:
    """Resultado de validación."""
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Añade un error."""
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str) -> None:
        """Añade una advertencia."""
        self.warnings.append(message)


@dataclass(frozen=True)
class Catalogs:
    """Los tres catálogos de referencia, de solo lectura durante todo el proceso."""
    industries: Tuple[Industry, ...]
    categories: Tuple[Category, ...]
    patterns: Tuple[Pattern, ...]

    def get_industry(self, industry_id: str) -> Optional[Industry]:
        for industry in self.industries:
            if industry.id == industry_id:
                return industry
        return None

    def industry_ids(self) -> List[str]:
        return [industry.id for industry in self.industries]

    def validate(self) -> ValidationResult:
        """
        Verifica la integridad referencial de los catálogos.

        Errores: catálogos vacíos, ids duplicados, categorías referenciadas por
        un sector que no existen y sectores referenciados por un patrón que
        no existen. Advertencias: bandas de adopción desconocidas (puntúan 0),
        patrones sin etiqueta de activo y assetTags explícitos que no coinciden
        con los derivados de la etiqueta.

        Returns:
            ValidationResult con errores y warnings
        """
        result = ValidationResult()

        for name, records in (
            ("industries", self.industries),
            ("categories", self.categories),
            ("patterns", self.patterns),
        ):
            if not records:
                result.add_error(f"Catálogo vacío: {name}")
            seen = set()
            for record in records:
                if record.id in seen:
                    result.add_error(f"Id duplicado en {name}: {record.id}")
                seen.add(record.id)

        category_ids = {c.id for c in self.categories}
        industry_ids = set(self.industry_ids())

        for industry in self.industries:
            for category_id in industry.recommended_category_ids:
                if category_id not in category_ids:
                    result.add_error(
                        f"Sector '{industry.id}' referencia categoría inexistente '{category_id}'"
                    )

        for pattern in self.patterns:
            for industry_id in pattern.from_industry_ids:
                if industry_id not in industry_ids:
                    result.add_error(
                        f"Patrón '{pattern.id}' referencia sector inexistente '{industry_id}'"
                    )
            if not AdoptionRateBand.is_known(pattern.adoption_rate_band):
                result.add_warning(
                    f"Patrón '{pattern.id}' tiene banda de adopción desconocida "
                    f"'{pattern.adoption_rate_band}' (puntúa 0)"
                )
            if not pattern.asset_tags:
                result.add_warning(f"Patrón '{pattern.id}' no usa ningún activo")

            derived = derive_asset_tags(pattern.to_pattern_label)
            if pattern.asset_tags != derived:
                result.add_warning(
                    f"Patrón '{pattern.id}' declara assetTags "
                    f"{sorted(t.value for t in pattern.asset_tags)} distintos de los de su "
                    f"etiqueta {sorted(t.value for t in derived)}: cambia el ranking"
                )

        return result


def parse_industry(record: Dict) -> Industry:
    return Industry(
        id=str(record["id"]),
        name=record["name"],
        base_adoption_rate=float(record.get("adoptionRate", 0)),
        recommended_category_ids=as_tuple(record.get("recommendedCategories")),
        tips=as_tuple(record.get("tips")),
        risks=as_tuple(record.get("risks")),
    )


def parse_category(record: Dict) -> Category:
    return Category(
        id=str(record["id"]),
        name=record["name"],
        adoption_rate=float(record["adoptionRate"]),
        description=record.get("description", ""),
        max_amount=record.get("maxAmount", ""),
        requirements=as_tuple(record.get("requirements")),
    )


def parse_pattern(record: Dict) -> Pattern:
    """
    Construye un Pattern desde su registro JSON.

    Si el registro declara `assetTags` se usan tal cual; si no, se derivan
    de las palabras clave de la etiqueta.
    """
    label = record["toPattern"]

    if "assetTags" in record:
        asset_tags = frozenset(AssetTag(tag) for tag in record["assetTags"])
    else:
        asset_tags = derive_asset_tags(label)

    return Pattern(
        id=str(record["id"]),
        from_industry_ids=as_tuple(record.get("fromIndustry")),
        to_pattern_label=label,
        difficulty=Difficulty(record["difficulty"]),
        adoption_rate_band=record.get("adoptionRate", ""),
        recommended_amount=record.get("recommendedAmount", ""),
        points=as_tuple(record.get("points")),
        cases=as_tuple(record.get("cases")),
        risks=as_tuple(record.get("risks")),
        asset_tags=asset_tags,
    )


def build_catalogs(
    industries: List[Dict],
    categories: List[Dict],
    patterns: List[Dict]
) -> Catalogs:
    """Construye Catalogs desde registros ya deserializados."""
    try:
        return Catalogs(
            industries=tuple(parse_industry(r) for r in industries),
            categories=tuple(parse_category(r) for r in categories),
            patterns=tuple(parse_pattern(r) for r in patterns),
        )
    except (KeyError, ValueError, TypeError) as e:
        raise CatalogIntegrityError([f"Registro inválido: {e!r}"]) from e


def load_catalogs(
    data_dir: Optional[Union[str, Path]] = None,
    strict: Optional[bool] = None
) -> Catalogs:
    """
    Carga los tres catálogos desde un directorio de JSON.

    Args:
        data_dir: Directorio con industries.json, categories.json y patterns.json.
            Default: config.catalog_dir
        strict: Si True, los errores de integridad lanzan CatalogIntegrityError.
            Default: config.strict_catalogs

    Returns:
        Catalogs validados
    """
    data_dir = Path(data_dir) if data_dir is not None else config.catalog_dir
    strict = config.strict_catalogs if strict is None else strict

    logger.info(f"Cargando catálogos desde {data_dir}")

    for filename in (INDUSTRIES_FILE, CATEGORIES_FILE, PATTERNS_FILE):
        if not (data_dir / filename).exists():
            logger.error(f"No se encontró {data_dir / filename}")
            raise FileNotFoundError(f"Catálogo no encontrado: {data_dir / filename}")

    catalogs = build_catalogs(
        load_json(data_dir / INDUSTRIES_FILE),
        load_json(data_dir / CATEGORIES_FILE),
        load_json(data_dir / PATTERNS_FILE),
    )

    validation = catalogs.validate()
    for warning in validation.warnings:
        logger.warning(warning)

    if not validation.valid:
        for error in validation.errors:
            logger.error(error)
        if strict:
            raise CatalogIntegrityError(validation.errors)

    logger.info(
        f"Catálogos cargados: {len(catalogs.industries)} sectores, "
        f"{len(catalogs.categories)} categorías, {len(catalogs.patterns)} patrones"
    )
    return catalogs
