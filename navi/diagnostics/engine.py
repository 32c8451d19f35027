"""Motor de diagnóstico: recomienda categorías de subsidio y patrones de transformación."""

from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from ..catalog.loader import Catalogs
from ..catalog.models import Category, Industry, Pattern
from .recommender import build_tips
from .rules import AssetProfile, PatternScorer, MAX_RECOMMENDED_PATTERNS


class IndustryNotFoundError(LookupError):
    """El sector solicitado no existe en el catálogo."""

    def __init__(self, industry_id: str):
        self.industry_id = industry_id
        super().__init__(f"業種が見つかりません: {industry_id}")


@dataclass(frozen=True)
class DiagnosisInput:
    """Entrada de un diagnóstico."""
    industry_id: str
    business_description: Optional[str] = None
    assets: AssetProfile = field(default_factory=AssetProfile)


@dataclass(frozen=True)
class DiagnosisResult:
    """Resultado de diagnóstico para una solicitud."""
    industry: Industry
    recommended_categories: Tuple[Category, ...]
    recommended_patterns: Tuple[Pattern, ...]
    tips: Tuple[str, ...]
    risks: Tuple[str, ...]

    def to_dict(self) -> Dict:
        """Convierte el resultado a un diccionario serializable en JSON."""
        return {
            "industry": {
                "id": self.industry.id,
                "name": self.industry.name,
                "base_adoption_rate": self.industry.base_adoption_rate,
                "recommended_category_ids": list(self.industry.recommended_category_ids),
                "tips": list(self.industry.tips),
                "risks": list(self.industry.risks),
            },
            "recommended_categories": [
                {
                    "id": c.id,
                    "name": c.name,
                    "adoption_rate": c.adoption_rate,
                    "description": c.description,
                    "max_amount": c.max_amount,
                    "requirements": list(c.requirements),
                }
                for c in self.recommended_categories
            ],
            "recommended_patterns": [
                {
                    "id": p.id,
                    "from_industry_ids": list(p.from_industry_ids),
                    "to_pattern_label": p.to_pattern_label,
                    "difficulty": p.difficulty.value,
                    "adoption_rate_band": p.adoption_rate_band,
                    "recommended_amount": p.recommended_amount,
                    "points": list(p.points),
                    "cases": list(p.cases),
                    "risks": list(p.risks),
                    "asset_tags": sorted(tag.value for tag in p.asset_tags),
                }
                for p in self.recommended_patterns
            ],
            "tips": list(self.tips),
            "risks": list(self.risks),
        }


class DiagnosisEngine:
    """
    Motor de diagnóstico basado en reglas.

    Pasos:
    1. Resolver el sector (IndustryNotFoundError si no existe)
    2. Categorías recomendadas por el sector, ordenadas por tasa de adopción
    3. Patrones aplicables al sector, puntuados por activos y banda, top 5
    4. Consejos del sector + consejos por activo + consejos de cierre
    5. Riesgos del sector sin modificar

    Función pura sobre catálogos inmutables: no guarda estado entre llamadas.
    """

    def __init__(
        self,
        catalogs: Catalogs,
        scorer: Optional[PatternScorer] = None,
        max_patterns: int = MAX_RECOMMENDED_PATTERNS
    ):
        self.catalogs = catalogs
        self.scorer = scorer or PatternScorer()
        self.max_patterns = max_patterns

    def resolve_industry(self, industry_id: str) -> Industry:
        industry = self.catalogs.get_industry(industry_id)
        if industry is None:
            raise IndustryNotFoundError(industry_id)
        return industry

    def select_categories(self, industry: Industry) -> List[Category]:
        """Categorías del sector ordenadas por tasa de adopción (estable)."""
        selected = [
            c for c in self.catalogs.categories
            if c.id in industry.recommended_category_ids
        ]
        return sorted(selected, key=lambda c: c.adoption_rate, reverse=True)

    def select_patterns(self, industry_id: str, assets: AssetProfile) -> List[Pattern]:
        """Patrones del sector ordenados por puntuación compuesta y truncados."""
        candidates = [p for p in self.catalogs.patterns if p.applies_to(industry_id)]
        ranked = self.scorer.rank(candidates, assets, limit=self.max_patterns)
        return [pattern for pattern, _ in ranked]

    def diagnose(self, diagnosis_input: DiagnosisInput) -> DiagnosisResult:
        """
        Ejecuta el diagnóstico de una solicitud.

        Args:
            diagnosis_input: Sector y activos del solicitante

        Returns:
            DiagnosisResult con categorías, patrones, consejos y riesgos

        Raises:
            IndustryNotFoundError: si industry_id no está en el catálogo
        """
        industry = self.resolve_industry(diagnosis_input.industry_id)
        assets = diagnosis_input.assets

        return DiagnosisResult(
            industry=industry,
            recommended_categories=tuple(self.select_categories(industry)),
            recommended_patterns=tuple(self.select_patterns(industry.id, assets)),
            tips=tuple(build_tips(industry, assets)),
            risks=industry.risks,
        )


def diagnose(diagnosis_input: DiagnosisInput, catalogs: Catalogs) -> DiagnosisResult:
    """Atajo funcional de DiagnosisEngine(catalogs).diagnose(diagnosis_input)."""
    return DiagnosisEngine(catalogs).diagnose(diagnosis_input)
