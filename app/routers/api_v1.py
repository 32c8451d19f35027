"""Router principal v1 con todos los endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from navi.notify import LeadSummary

from app.core.config import get_settings
from app.core.logging import get_logger
from app.schemas.catalog import (
    CategoryListResponse,
    CategorySchema,
    IndustryListResponse,
    IndustrySchema,
    PatternListResponse,
    PatternSchema
)
from app.schemas.diagnosis import DiagnosisRequest, DiagnosisResponse
from app.schemas.health import CatalogStatus, HealthResponse
from app.schemas.metrics import ErrorMetrics, MetricsResponse, NotificationMetrics, OnlineMetrics
from app.schemas.registration import (
    LeadSummarySchema,
    LiffRegisterRequest,
    RegisterRequest,
    RegisterResponse
)
from app.services.catalog_service import CatalogService, get_catalog_service
from app.services.diagnosis_service import DiagnosisService
from app.services.metrics_service import MetricsService, get_metrics_service
from app.services.registration_service import RegistrationService, get_registration_service

logger = get_logger(__name__)
settings = get_settings()
router = APIRouter()


def get_diagnosis_service(
    catalog_service: CatalogService = Depends(get_catalog_service)
) -> DiagnosisService:
    return DiagnosisService(catalog_service)


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(
    catalog_service: CatalogService = Depends(get_catalog_service),
    metrics_service: MetricsService = Depends(get_metrics_service)
):
    """
    Health check endpoint.

    Verifica el estado del servicio y de los catálogos.
    """
    loaded = catalog_service.is_loaded()
    counts = {}
    if loaded:
        catalogs = catalog_service.catalogs
        counts = {
            "industries": len(catalogs.industries),
            "categories": len(catalogs.categories),
            "patterns": len(catalogs.patterns)
        }

    return HealthResponse(
        status="healthy" if loaded else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=settings.api_version,
        catalog_status=CatalogStatus.LOADED if loaded else CatalogStatus.NOT_LOADED,
        webhook_enabled=settings.webhook_enabled,
        email_enabled=settings.email_enabled,
        uptime_seconds=metrics_service.get_uptime(),
        **counts
    )


@router.get("/industries", response_model=IndustryListResponse, tags=["Catalog"])
async def list_industries(catalog_service: CatalogService = Depends(get_catalog_service)):
    """Lista los sectores disponibles para el diagnóstico."""
    industries = catalog_service.catalogs.industries
    return IndustryListResponse(
        industries=[IndustrySchema.model_validate(i) for i in industries],
        total=len(industries)
    )


@router.get("/categories", response_model=CategoryListResponse, tags=["Catalog"])
async def list_categories(catalog_service: CatalogService = Depends(get_catalog_service)):
    """Lista los marcos de solicitud de subsidio."""
    categories = catalog_service.catalogs.categories
    return CategoryListResponse(
        categories=[CategorySchema.model_validate(c) for c in categories],
        total=len(categories)
    )


@router.get("/patterns", response_model=PatternListResponse, tags=["Catalog"])
async def list_patterns(catalog_service: CatalogService = Depends(get_catalog_service)):
    """Lista los patrones de transformación de negocio."""
    patterns = catalog_service.catalogs.patterns
    return PatternListResponse(
        patterns=[PatternSchema.model_validate(p) for p in patterns],
        total=len(patterns)
    )


@router.post("/diagnosis", response_model=DiagnosisResponse, tags=["Diagnosis"])
async def diagnosis(
    request: DiagnosisRequest,
    diagnosis_service: DiagnosisService = Depends(get_diagnosis_service),
    metrics_service: MetricsService = Depends(get_metrics_service)
):
    """
    Diagnóstico basado en reglas.

    Recomienda categorías de subsidio y patrones de transformación según
    el sector y los activos del solicitante. Sector desconocido → 404.
    """
    try:
        result, latency_ms = diagnosis_service.diagnose(request)
    except Exception:
        metrics_service.record_error("diagnosis_error")
        raise

    metrics_service.record_diagnosis(latency_ms)

    return DiagnosisResponse(
        **result.to_dict(),
        lead_summary=LeadSummarySchema.model_validate(LeadSummary.from_result(result)),
        timestamp=datetime.now(timezone.utc)
    )


@router.post("/register", response_model=RegisterResponse, tags=["Registration"])
async def register(
    request: RegisterRequest,
    registration_service: RegistrationService = Depends(get_registration_service),
    metrics_service: MetricsService = Depends(get_metrics_service)
):
    """
    Registra un lead por email.

    Envía el lead al webhook de marketing (los fallos se ignoran) y el
    informe del diagnóstico por correo (los fallos devuelven 500).
    """
    try:
        return registration_service.register_email(request)
    except Exception:
        metrics_service.record_error("register_error")
        raise


@router.post("/liff-register", response_model=RegisterResponse, tags=["Registration"])
async def liff_register(
    request: LiffRegisterRequest,
    registration_service: RegistrationService = Depends(get_registration_service),
    metrics_service: MetricsService = Depends(get_metrics_service)
):
    """Registra un lead desde la mini app de LINE (solo webhook)."""
    try:
        return registration_service.register_line(request)
    except Exception:
        metrics_service.record_error("liff_register_error")
        raise


@router.get("/metrics", response_model=MetricsResponse, tags=["Metrics"])
async def get_metrics(metrics_service: MetricsService = Depends(get_metrics_service)):
    """
    Obtiene métricas del servicio.

    Incluye diagnósticos, registros por canal, resultados de
    notificaciones y errores.
    """
    metrics_data = metrics_service.get_metrics()

    return MetricsResponse(
        timestamp=metrics_data["timestamp"],
        online_metrics=OnlineMetrics(**metrics_data["online_metrics"]),
        notification_metrics=NotificationMetrics(**metrics_data["notification_metrics"]),
        error_metrics=ErrorMetrics(**metrics_data["error_metrics"]),
        uptime_seconds=metrics_data["uptime_seconds"]
    )
