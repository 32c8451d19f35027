"""Módulo de diagnósticos y recomendaciones."""

from .rules import AssetProfile, PatternScorer, ASSET_BONUS, MAX_RECOMMENDED_PATTERNS
from .recommender import ASSET_TIPS, CLOSING_TIPS, build_tips
from .engine import (
    DiagnosisEngine,
    DiagnosisInput,
    DiagnosisResult,
    IndustryNotFoundError,
    diagnose
)

__all__ = [
    "AssetProfile",
    "PatternScorer",
    "ASSET_BONUS",
    "MAX_RECOMMENDED_PATTERNS",
    "ASSET_TIPS",
    "CLOSING_TIPS",
    "build_tips",
    "DiagnosisEngine",
    "DiagnosisInput",
    "DiagnosisResult",
    "IndustryNotFoundError",
    "diagnose"
]
