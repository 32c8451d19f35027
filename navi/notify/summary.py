"""Resumen del diagnóstico para el webhook de marketing."""

from typing import List, Optional, Tuple
from dataclasses import dataclass

from ..diagnostics.engine import DiagnosisResult


SUMMARY_TIPS_LIMIT = 3


@dataclass(frozen=True)
class CategorySummary:
    name: str
    adoption_rate: float
    max_amount: str


@dataclass(frozen=True)
class PatternSummary:
    to_pattern_label: str
    adoption_rate_band: str
    recommended_amount: str
    points: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LeadSummary:
    """Subconjunto del resultado que viaja con el registro del lead."""
    industry_name: str
    categories: Tuple[CategorySummary, ...] = ()
    patterns: Tuple[PatternSummary, ...] = ()
    tips: Tuple[str, ...] = ()

    @classmethod
    def from_result(cls, result: DiagnosisResult) -> "LeadSummary":
        return cls(
            industry_name=result.industry.name,
            categories=tuple(
                CategorySummary(c.name, c.adoption_rate, c.max_amount)
                for c in result.recommended_categories
            ),
            patterns=tuple(
                PatternSummary(
                    p.to_pattern_label,
                    p.adoption_rate_band,
                    p.recommended_amount,
                    tuple(p.points)
                )
                for p in result.recommended_patterns
            ),
            tips=tuple(result.tips),
        )


def format_rate(rate: float) -> str:
    """70.0 -> '70', 62.5 -> '62.5'."""
    if float(rate).is_integer():
        return str(int(rate))
    return str(rate)


def build_summary_text(summary: LeadSummary) -> str:
    """
    Genera el texto resumen del diagnóstico.

    Formato:
        【おすすめ申請枠】<categoría（採択率N%）、...>
        【おすすめ転換パターン】<patrón（採択率banda）、...>
        【採択ポイント】<primeros 3 consejos、...>
    """
    categories = "、".join(
        f"{c.name}（採択率{format_rate(c.adoption_rate)}%）" for c in summary.categories
    )
    patterns = "、".join(
        f"{p.to_pattern_label}（採択率{p.adoption_rate_band}）" for p in summary.patterns
    )
    tips = "、".join(summary.tips[:SUMMARY_TIPS_LIMIT])

    return f"【おすすめ申請枠】{categories}\n【おすすめ転換パターン】{patterns}\n【採択ポイント】{tips}"


def build_email_form(email: str, summary: LeadSummary) -> List[Tuple[str, str]]:
    """Campos del formulario del webhook para un registro por email."""
    return [
        ("mail", email),
        ("rid", ""),
        ("free1", summary.industry_name),
        ("free2", build_summary_text(summary)),
    ]


def build_line_form(
    line_user_id: str,
    summary: LeadSummary,
    display_name: Optional[str] = None
) -> List[Tuple[str, str]]:
    """Campos del formulario del webhook para un registro por LINE."""
    fields = [
        ("line_id", line_user_id),
        ("rid", ""),
        ("free1", summary.industry_name),
        ("free2", build_summary_text(summary)),
    ]
    if display_name:
        fields.append(("name1", display_name))
    return fields
