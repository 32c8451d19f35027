"""Registros inmutables de los catálogos de referencia."""

from enum import Enum
from typing import Dict, FrozenSet, Iterable, Tuple
from dataclasses import dataclass, field


class Difficulty(str, Enum):
    """Dificultad de ejecución de un patrón de transformación."""
    BAJA = "低"
    MEDIA = "中"
    ALTA = "高"


class AdoptionRateBand(str, Enum):
    """Bandas de tasa de adopción ordenadas de menor a mayor."""
    BAJA = "低"
    MEDIA = "中"
    MEDIA_ALTA = "中〜高"
    ALTA = "高"

    @property
    def rank(self) -> int:
        """Retorna el ordinal usado en el ranking de patrones."""
        return {"低": 0, "中": 1, "中〜高": 2, "高": 3}[self.value]

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in cls._value2member_map_

    @classmethod
    def rank_of(cls, value: str) -> int:
        """Ordinal de una banda en texto; las bandas desconocidas valen 0."""
        if not cls.is_known(value):
            return 0
        return cls(value).rank


class AssetTag(str, Enum):
    """Activos del solicitante que un patrón aprovecha."""
    REAL_ESTATE = "real_estate"
    ECOMMERCE = "ecommerce"
    TECHNOLOGY = "technology"


# Palabras clave de las etiquetas de patrón por activo
# (espacio de alquiler / alojamiento / workation, EC / online,
# manufactura / procesamiento / medio ambiente)
ASSET_KEYWORDS: Dict[AssetTag, Tuple[str, ...]] = {
    AssetTag.REAL_ESTATE: ("レンタル", "民泊", "ワーケーション"),
    AssetTag.ECOMMERCE: ("EC", "オンライン"),
    AssetTag.TECHNOLOGY: ("製造", "加工", "環境"),
}


def derive_asset_tags(label: str) -> FrozenSet[AssetTag]:
    """
    Deriva las etiquetas de activo a partir del texto de la etiqueta.

    Args:
        label: Etiqueta visible del patrón (toPattern)

    Returns:
        Conjunto de AssetTag cuyas palabras clave aparecen en la etiqueta
    """
    return frozenset(
        tag for tag, keywords in ASSET_KEYWORDS.items()
        if any(keyword in label for keyword in keywords)
    )


@dataclass(frozen=True)
class Industry:
    """Sector de negocio que determina las categorías y patrones elegibles."""
    id: str
    name: str
    base_adoption_rate: float
    recommended_category_ids: Tuple[str, ...] = ()
    tips: Tuple[str, ...] = ()
    risks: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Category:
    """Marco de solicitud de subsidio con su tasa histórica de adopción."""
    id: str
    name: str
    adoption_rate: float
    description: str = ""
    max_amount: str = ""
    requirements: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Pattern:
    """Patrón de transformación de negocio aplicable desde ciertos sectores."""
    id: str
    from_industry_ids: Tuple[str, ...]
    to_pattern_label: str
    difficulty: Difficulty
    adoption_rate_band: str
    recommended_amount: str = ""
    points: Tuple[str, ...] = ()
    cases: Tuple[str, ...] = ()
    risks: Tuple[str, ...] = ()
    asset_tags: FrozenSet[AssetTag] = field(default_factory=frozenset)

    @property
    def band_rank(self) -> int:
        return AdoptionRateBand.rank_of(self.adoption_rate_band)

    def applies_to(self, industry_id: str) -> bool:
        return industry_id in self.from_industry_ids

    def uses(self, tag: AssetTag) -> bool:
        return tag in self.asset_tags


def as_tuple(values: Iterable[str]) -> Tuple[str, ...]:
    """Convierte una secuencia JSON en tupla inmutable de strings."""
    return tuple(str(v) for v in (values or ()))
