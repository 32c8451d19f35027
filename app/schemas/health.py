from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class CatalogStatus(str, Enum):
    LOADED = "loaded"
    NOT_LOADED = "not_loaded"


class HealthResponse(BaseModel):
    status: str = Field(description="Estado general del servicio")
    timestamp: datetime = Field(description="Timestamp del health check")
    version: str = Field(description="Versión de la API")
    catalog_status: CatalogStatus = Field(description="Estado de los catálogos")
    industries: int = Field(default=0, description="Sectores cargados")
    categories: int = Field(default=0, description="Categorías cargadas")
    patterns: int = Field(default=0, description="Patrones cargados")
    webhook_enabled: bool = Field(description="Webhook de marketing configurado")
    email_enabled: bool = Field(description="Envío de correo configurado")
    uptime_seconds: float = Field(description="Tiempo de uptime en segundos")

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "healthy",
                "timestamp": "2025-01-15T10:30:00Z",
                "version": "1.0.0",
                "catalog_status": "loaded",
                "industries": 6,
                "categories": 5,
                "patterns": 14,
                "webhook_enabled": True,
                "email_enabled": False,
                "uptime_seconds": 1800.5
            }
        }
    }
