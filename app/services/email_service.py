"""Envío del informe de diagnóstico por correo (API HTTP de Resend)."""

from typing import Optional

import requests

from navi.notify import EMAIL_SUBJECT, LeadSummary, render_report_email

from app.core.config import Settings, get_settings
from app.core.exceptions import NotificationException
from app.core.logging import get_logger, mask_lead_ref

logger = get_logger(__name__)


class EmailService:
    """Cliente mínimo de Resend: un POST JSON con token Bearer."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None
    ):
        self.settings = settings or get_settings()
        self.session = session or requests.Session()

    @property
    def enabled(self) -> bool:
        return self.settings.email_enabled

    def send_report(
        self,
        to: str,
        summary: LeadSummary,
        contact_name: Optional[str] = None
    ) -> bool:
        """
        Envía el informe HTML al lead.

        Args:
            to: Email del destinatario
            summary: Resumen del diagnóstico
            contact_name: Nombre para el saludo (opcional)

        Returns:
            True si se envió, False si el envío está desactivado

        Raises:
            NotificationException: si Resend rechaza el envío o no responde
        """
        if not self.enabled:
            logger.info("Resend API key no configurada, se omite el correo")
            return False

        payload = {
            "from": self.settings.resend_from_email,
            "to": to,
            "subject": EMAIL_SUBJECT,
            "html": render_report_email(
                summary,
                contact_name=contact_name,
                contact_url=self.settings.contact_url
            ),
        }

        try:
            response = self.session.post(
                self.settings.resend_api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self.settings.resend_api_key}"},
                timeout=self.settings.email_timeout_seconds
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Error de Resend enviando a {mask_lead_ref(to)}: {e}")
            raise NotificationException(
                "メール送信に失敗しました",
                details={"provider": "resend"}
            ) from e

        logger.info(f"Informe enviado por correo a {mask_lead_ref(to)}")
        return True
