"""Generador de consejos de solicitud según el sector y los activos."""

from typing import List, Tuple

from ..catalog.models import AssetTag, Industry
from .rules import AssetProfile


# Consejos por activo, en el orden en que se añaden
ASSET_TIPS: Tuple[Tuple[AssetTag, str], ...] = (
    (AssetTag.REAL_ESTATE, "不動産・遊休資産の活用は採択率が高い傾向にあります"),
    (AssetTag.ECOMMERCE, "既存のEC・Web基盤を活用した展開は実現可能性をアピールしやすいです"),
    (AssetTag.TECHNOLOGY, "専門技術・資格を活かした事業転換は差別化ポイントになります"),
)

# Consejos de cierre: rango de solicitud óptimo y banco regional como
# institución de apoyo certificada
CLOSING_TIPS: Tuple[str, ...] = (
    "申請額は1,500〜3,000万円が採択されやすい傾向にあります",
    "地方銀行を認定支援機関にすると採択率が約56%に上がります",
)


def asset_tips(assets: AssetProfile) -> List[str]:
    """Consejos condicionados a los activos declarados."""
    enabled = assets.enabled_tags
    return [tip for tag, tip in ASSET_TIPS if tag in enabled]


def build_tips(industry: Industry, assets: AssetProfile) -> List[str]:
    """
    Compone la lista de consejos del diagnóstico.

    Consejos del sector, luego los de cada activo declarado y al final los
    dos consejos fijos. Sin deduplicar ni reordenar.

    Args:
        industry: Sector resuelto
        assets: Activos del solicitante

    Returns:
        Lista de consejos
    """
    return [*industry.tips, *asset_tips(assets), *CLOSING_TIPS]
