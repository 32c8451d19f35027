from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from navi.catalog import AssetTag, Difficulty


class IndustrySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="Id del sector")
    name: str = Field(description="Nombre del sector")
    base_adoption_rate: float = Field(description="Tasa de adopción base del sector (%)")
    recommended_category_ids: List[str] = Field(description="Categorías recomendadas")
    tips: List[str] = Field(description="Consejos del sector")
    risks: List[str] = Field(description="Riesgos del sector")


class CategorySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="Id de la categoría")
    name: str = Field(description="Nombre del marco de solicitud")
    adoption_rate: float = Field(description="Tasa histórica de adopción (%)")
    description: str = Field(description="Descripción")
    max_amount: str = Field(description="Monto máximo (texto)")
    requirements: List[str] = Field(description="Requisitos")


class PatternSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="Id del patrón")
    from_industry_ids: List[str] = Field(description="Sectores desde los que aplica")
    to_pattern_label: str = Field(description="Etiqueta del patrón de transformación")
    difficulty: Difficulty = Field(description="Dificultad (低, 中, 高)")
    adoption_rate_band: str = Field(description="Banda de adopción (低, 中, 中〜高, 高)")
    recommended_amount: str = Field(description="Monto recomendado (texto)")
    points: List[str] = Field(description="Puntos clave")
    cases: List[str] = Field(description="Casos de ejemplo")
    risks: List[str] = Field(description="Riesgos")
    asset_tags: List[AssetTag] = Field(description="Activos que aprovecha el patrón")

    @field_validator("asset_tags", mode="before")
    @classmethod
    def sort_asset_tags(cls, v):
        """Orden estable para las etiquetas (vienen como frozenset)."""
        return sorted(v, key=lambda tag: getattr(tag, "value", tag))


class IndustryListResponse(BaseModel):
    industries: List[IndustrySchema]
    total: int


class CategoryListResponse(BaseModel):
    categories: List[CategorySchema]
    total: int


class PatternListResponse(BaseModel):
    patterns: List[PatternSchema]
    total: int
