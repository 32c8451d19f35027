"""Reglas de puntuación de patrones de transformación."""

from typing import FrozenSet, Iterable, List, Tuple
from dataclasses import dataclass

from ..catalog.models import AssetTag, Pattern


ASSET_BONUS = 2
MAX_RECOMMENDED_PATTERNS = 5


@dataclass(frozen=True)
class AssetProfile:
    """Activos declarados por el solicitante; todos opcionales."""
    has_real_estate: bool = False
    has_ec_web: bool = False
    has_technology: bool = False

    @property
    def enabled_tags(self) -> FrozenSet[AssetTag]:
        """Etiquetas de activo que otorgan bonificación."""
        flags = (
            (AssetTag.REAL_ESTATE, self.has_real_estate),
            (AssetTag.ECOMMERCE, self.has_ec_web),
            (AssetTag.TECHNOLOGY, self.has_technology),
        )
        return frozenset(tag for tag, enabled in flags if enabled)


class PatternScorer:
    """
    Puntuación compuesta de un patrón para un perfil de activos.

    Reglas:
    1. Inmuebles/activos ociosos + patrón de alquiler/alojamiento/workation → +2
    2. Base EC/Web + patrón EC/online → +2
    3. Tecnología/certificaciones + patrón de manufactura/procesamiento/ambiental → +2
    4. Banda de adopción del patrón: 高=3, 中〜高=2, 中=1, 低=0 (desconocida=0)

    La puntuación depende del perfil de activos, así que el ranking se
    recalcula en cada diagnóstico.
    """

    def __init__(self, asset_bonus: int = ASSET_BONUS):
        self.asset_bonus = asset_bonus

    def asset_score(self, pattern: Pattern, assets: AssetProfile) -> int:
        matched = pattern.asset_tags & assets.enabled_tags
        return self.asset_bonus * len(matched)

    def score(self, pattern: Pattern, assets: AssetProfile) -> int:
        """
        Calcula la puntuación compuesta de un patrón.

        Args:
            pattern: Patrón a evaluar
            assets: Activos del solicitante

        Returns:
            Suma de bonificaciones por activo y ordinal de la banda de adopción
        """
        return self.asset_score(pattern, assets) + pattern.band_rank

    def triggered_rules(self, pattern: Pattern, assets: AssetProfile) -> List[str]:
        """Describe las reglas que aportaron puntos al patrón."""
        rules = []
        for tag in AssetTag:
            if tag in assets.enabled_tags and pattern.uses(tag):
                rules.append(f"ASSET_{tag.name}: +{self.asset_bonus}")
        if pattern.band_rank:
            rules.append(
                f"ADOPTION_BAND: {pattern.adoption_rate_band} +{pattern.band_rank}"
            )
        return rules

    def rank(
        self,
        patterns: Iterable[Pattern],
        assets: AssetProfile,
        limit: int = MAX_RECOMMENDED_PATTERNS
    ) -> List[Tuple[Pattern, int]]:
        """
        Ordena patrones por puntuación descendente y trunca.

        El orden es estable: a igual puntuación se conserva el orden de
        entrada (el del catálogo).

        Args:
            patterns: Patrones ya filtrados por sector, en orden de catálogo
            assets: Activos del solicitante
            limit: Máximo de patrones retornados

        Returns:
            Lista de (patrón, puntuación)
        """
        scored = [(pattern, self.score(pattern, assets)) for pattern in patterns]
        scored = sorted(scored, key=lambda item: item[1], reverse=True)
        return scored[:limit]
