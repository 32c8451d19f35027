"""Schemas Pydantic v2 para request/response."""

from .health import HealthResponse, CatalogStatus
from .catalog import (
    IndustrySchema,
    CategorySchema,
    PatternSchema,
    IndustryListResponse,
    CategoryListResponse,
    PatternListResponse
)
from .diagnosis import AssetsSchema, DiagnosisRequest, DiagnosisResponse
from .registration import (
    LeadSummarySchema,
    RegisterRequest,
    LiffRegisterRequest,
    RegisterResponse
)
from .metrics import MetricsResponse

__all__ = [
    "HealthResponse",
    "CatalogStatus",
    "IndustrySchema",
    "CategorySchema",
    "PatternSchema",
    "IndustryListResponse",
    "CategoryListResponse",
    "PatternListResponse",
    "AssetsSchema",
    "DiagnosisRequest",
    "DiagnosisResponse",
    "LeadSummarySchema",
    "RegisterRequest",
    "LiffRegisterRequest",
    "RegisterResponse",
    "MetricsResponse"
]
