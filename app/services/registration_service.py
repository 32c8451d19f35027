"""Registro de leads por email o LINE."""

from typing import Optional

from navi.notify import build_email_form, build_line_form

from app.core.exceptions import BadRequestException, NotificationException
from app.core.logging import get_logger, log_with_request_id
from app.schemas.registration import LiffRegisterRequest, RegisterRequest, RegisterResponse
from app.services.email_service import EmailService
from app.services.metrics_service import MetricsService, get_metrics_service
from app.services.webhook_service import WebhookService

logger = get_logger(__name__)


class RegistrationService:
    """Orquesta webhook de marketing y correo para cada lead."""

    def __init__(
        self,
        webhook_service: Optional[WebhookService] = None,
        email_service: Optional[EmailService] = None,
        metrics_service: Optional[MetricsService] = None
    ):
        self.webhook_service = webhook_service or WebhookService()
        self.email_service = email_service or EmailService()
        self.metrics_service = metrics_service or get_metrics_service()

    @staticmethod
    def validate_email(email: str) -> None:
        if not email or "@" not in email:
            raise BadRequestException("有効なメールアドレスを入力してください")

    def _post_webhook(self, fields, lead_ref: str) -> bool:
        if not self.webhook_service.enabled:
            return False
        sent = self.webhook_service.post_lead(fields, lead_ref)
        self.metrics_service.record_webhook(sent)
        return sent

    def register_email(self, request: RegisterRequest) -> RegisterResponse:
        """
        Registra un lead por email.

        1. Webhook (si está configurado); los fallos se ignoran
        2. Correo con el informe (si Resend está configurado); los fallos
           se propagan como NotificationException
        """
        self.validate_email(request.email)
        summary = request.diagnosis_result.to_summary()

        webhook_sent = self._post_webhook(
            build_email_form(request.email, summary),
            request.email
        )

        try:
            email_sent = self.email_service.send_report(
                request.email,
                summary,
                contact_name=request.contact_name
            )
        except NotificationException:
            self.metrics_service.record_email(False)
            raise
        if email_sent:
            self.metrics_service.record_email(True)

        self.metrics_service.record_registration("email")
        log_with_request_id(
            logger,
            "info",
            "Lead registrado por email",
            extra_data={
                "channel": "email",
                "industry": summary.industry_name,
                "webhook_sent": webhook_sent,
                "email_sent": email_sent
            }
        )
        return RegisterResponse(success=True, webhook_sent=webhook_sent, email_sent=email_sent)

    def register_line(self, request: LiffRegisterRequest) -> RegisterResponse:
        """Registra un lead desde la mini app de LINE (solo webhook)."""
        summary = request.diagnosis_result.to_summary()

        webhook_sent = self._post_webhook(
            build_line_form(request.line_user_id, summary, request.display_name),
            request.line_user_id
        )

        self.metrics_service.record_registration("line")
        log_with_request_id(
            logger,
            "info",
            "Lead registrado por LINE",
            extra_data={
                "channel": "line",
                "industry": summary.industry_name,
                "webhook_sent": webhook_sent
            }
        )
        return RegisterResponse(success=True, webhook_sent=webhook_sent)


_registration_service_instance = None


def get_registration_service() -> RegistrationService:
    """Obtiene la instancia singleton del servicio de registro."""
    global _registration_service_instance
    if _registration_service_instance is None:
        _registration_service_instance = RegistrationService()
    return _registration_service_instance
