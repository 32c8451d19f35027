"""Servicio de métricas."""

import time
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List

import numpy as np

from app.core.logging import get_logger

logger = get_logger(__name__)


class MetricsService:
    """Servicio singleton de métricas."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.reset()
        self._initialized = True
        logger.info("MetricsService inicializado")

    def reset(self):
        """Reinicia todos los contadores."""
        self.start_time = time.time()
        self.total_diagnoses = 0
        self.diagnosis_latencies: List[float] = []
        self.registrations_by_channel: Dict[str, int] = defaultdict(int)
        self.webhook_sent = 0
        self.webhook_failures = 0
        self.emails_sent = 0
        self.email_failures = 0
        self.total_errors = 0
        self.errors_by_type: Dict[str, int] = defaultdict(int)

    def record_diagnosis(self, latency_ms: float):
        """Registra un diagnóstico."""
        self.total_diagnoses += 1
        self.diagnosis_latencies.append(latency_ms)

        # Mantener solo últimas 1000
        if len(self.diagnosis_latencies) > 1000:
            self.diagnosis_latencies = self.diagnosis_latencies[-1000:]

    def record_registration(self, channel: str):
        """Registra un lead por canal (email, line)."""
        self.registrations_by_channel[channel] += 1

    def record_webhook(self, success: bool):
        if success:
            self.webhook_sent += 1
        else:
            self.webhook_failures += 1

    def record_email(self, success: bool):
        if success:
            self.emails_sent += 1
        else:
            self.email_failures += 1

    def record_error(self, error_type: str):
        """Registra un error."""
        self.total_errors += 1
        self.errors_by_type[error_type] += 1

    def get_uptime(self) -> float:
        """Retorna uptime en segundos."""
        return time.time() - self.start_time

    def get_metrics(self) -> dict:
        """Retorna todas las métricas."""
        avg_latency = (
            np.mean(self.diagnosis_latencies)
            if self.diagnosis_latencies else 0.0
        )
        p95_latency = (
            np.percentile(self.diagnosis_latencies, 95)
            if self.diagnosis_latencies else 0.0
        )

        total_registrations = sum(self.registrations_by_channel.values())
        total_requests = self.total_diagnoses + total_registrations
        error_rate = (self.total_errors / total_requests * 100) if total_requests > 0 else 0.0

        return {
            "timestamp": datetime.now(timezone.utc),
            "online_metrics": {
                "total_diagnoses": self.total_diagnoses,
                "total_registrations": total_registrations,
                "registrations_by_channel": dict(self.registrations_by_channel),
                "avg_diagnosis_latency_ms": float(avg_latency),
                "p95_diagnosis_latency_ms": float(p95_latency)
            },
            "notification_metrics": {
                "webhook_sent": self.webhook_sent,
                "webhook_failures": self.webhook_failures,
                "emails_sent": self.emails_sent,
                "email_failures": self.email_failures
            },
            "error_metrics": {
                "total_errors": self.total_errors,
                "error_rate": float(error_rate),
                "errors_by_type": dict(self.errors_by_type)
            },
            "uptime_seconds": self.get_uptime()
        }


def get_metrics_service() -> MetricsService:
    """Factory function para obtener MetricsService singleton."""
    return MetricsService()
