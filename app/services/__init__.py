"""Servicios de la aplicación."""

from .catalog_service import CatalogService
from .diagnosis_service import DiagnosisService
from .webhook_service import WebhookService
from .email_service import EmailService
from .registration_service import RegistrationService
from .metrics_service import MetricsService

__all__ = [
    "CatalogService",
    "DiagnosisService",
    "WebhookService",
    "EmailService",
    "RegistrationService",
    "MetricsService"
]
