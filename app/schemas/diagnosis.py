from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .catalog import CategorySchema, IndustrySchema, PatternSchema
from .registration import LeadSummarySchema


class AssetsSchema(BaseModel):
    has_real_estate: bool = Field(default=False, description="Inmuebles o activos ociosos")
    has_ec_web: bool = Field(default=False, description="Base EC/Web existente")
    has_technology: bool = Field(default=False, description="Tecnología especializada o certificaciones")


class DiagnosisRequest(BaseModel):
    industry_id: str = Field(min_length=1, description="Id del sector")
    business_description: Optional[str] = Field(
        default=None,
        description="Descripción libre del negocio (no afecta al diagnóstico)"
    )
    assets: AssetsSchema = Field(default_factory=AssetsSchema, description="Activos del solicitante")

    model_config = {
        "json_schema_extra": {
            "example": {
                "industry_id": "restaurant",
                "business_description": "駅前で和食店を経営",
                "assets": {
                    "has_real_estate": True,
                    "has_ec_web": False,
                    "has_technology": False
                }
            }
        }
    }


class DiagnosisResponse(BaseModel):
    industry: IndustrySchema = Field(description="Sector resuelto")
    recommended_categories: List[CategorySchema] = Field(description="Categorías ordenadas por tasa de adopción")
    recommended_patterns: List[PatternSchema] = Field(description="Hasta 5 patrones ordenados por puntuación")
    tips: List[str] = Field(description="Consejos de solicitud")
    risks: List[str] = Field(description="Riesgos del sector")
    lead_summary: LeadSummarySchema = Field(description="Resumen para el registro del lead")
    timestamp: datetime = Field(description="Timestamp del diagnóstico")
