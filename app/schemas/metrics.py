from datetime import datetime
from typing import Dict

from pydantic import BaseModel, Field


class OnlineMetrics(BaseModel):
    total_diagnoses: int = Field(description="Total de diagnósticos")
    total_registrations: int = Field(description="Total de registros de leads")
    registrations_by_channel: Dict[str, int] = Field(description="Registros por canal (email, line)")
    avg_diagnosis_latency_ms: float = Field(description="Latencia promedio de diagnóstico")
    p95_diagnosis_latency_ms: float = Field(description="Latencia P95 de diagnóstico")


class NotificationMetrics(BaseModel):
    webhook_sent: int = Field(description="Leads enviados al webhook")
    webhook_failures: int = Field(description="Fallos del webhook (ignorados)")
    emails_sent: int = Field(description="Correos enviados")
    email_failures: int = Field(description="Fallos de envío de correo")


class ErrorMetrics(BaseModel):
    total_errors: int = Field(description="Total de errores")
    error_rate: float = Field(description="Tasa de error (%)")
    errors_by_type: Dict[str, int] = Field(description="Errores por tipo")


class MetricsResponse(BaseModel):
    timestamp: datetime = Field(description="Timestamp de las métricas")
    online_metrics: OnlineMetrics = Field(description="Métricas online")
    notification_metrics: NotificationMetrics = Field(description="Métricas de notificaciones")
    error_metrics: ErrorMetrics = Field(description="Métricas de errores")
    uptime_seconds: float = Field(description="Tiempo de uptime")
