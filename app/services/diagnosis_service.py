"""Servicio de diagnóstico basado en reglas."""

import time
from typing import Optional, Tuple

from navi.diagnostics import (
    AssetProfile,
    DiagnosisEngine,
    DiagnosisInput,
    DiagnosisResult,
    IndustryNotFoundError
)

from app.core.exceptions import industry_not_found
from app.core.logging import get_logger
from app.schemas.diagnosis import DiagnosisRequest
from app.services.catalog_service import CatalogService, get_catalog_service

logger = get_logger(__name__)


class DiagnosisService:
    """Adapta las peticiones HTTP al motor de diagnóstico."""

    def __init__(self, catalog_service: Optional[CatalogService] = None):
        self.catalog_service = catalog_service or get_catalog_service()

    @staticmethod
    def to_input(request: DiagnosisRequest) -> DiagnosisInput:
        return DiagnosisInput(
            industry_id=request.industry_id,
            business_description=request.business_description,
            assets=AssetProfile(
                has_real_estate=request.assets.has_real_estate,
                has_ec_web=request.assets.has_ec_web,
                has_technology=request.assets.has_technology
            )
        )

    def diagnose(self, request: DiagnosisRequest) -> Tuple[DiagnosisResult, float]:
        """
        Ejecuta el diagnóstico de una petición.

        Args:
            request: Sector y activos del solicitante

        Returns:
            Tuple (resultado, latencia_ms)

        Raises:
            ResourceNotFoundException: si el sector no existe
        """
        start = time.perf_counter()
        engine = DiagnosisEngine(self.catalog_service.catalogs)

        try:
            result = engine.diagnose(self.to_input(request))
        except IndustryNotFoundError as e:
            logger.warning(f"Sector desconocido: {e.industry_id}")
            raise industry_not_found(e) from e

        latency_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Diagnóstico: {result.industry.id} "
            f"({len(result.recommended_categories)} categorías, "
            f"{len(result.recommended_patterns)} patrones)"
        )
        return result, latency_ms
