"""Envío de leads al webhook de marketing (UTAGE)."""

from typing import List, Optional, Tuple

import requests

from app.core.config import Settings, get_settings
from app.core.logging import get_logger, mask_lead_ref

logger = get_logger(__name__)


class WebhookService:
    """
    Publica leads como formulario application/x-www-form-urlencoded.

    Los fallos se registran y no se propagan: un webhook caído no debe
    impedir el registro del lead.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None
    ):
        self.settings = settings or get_settings()
        self.session = session or requests.Session()

    @property
    def enabled(self) -> bool:
        return self.settings.webhook_enabled

    def post_lead(self, fields: List[Tuple[str, str]], lead_ref: str) -> bool:
        """
        Envía los campos del lead al webhook.

        Args:
            fields: Campos ordenados del formulario
            lead_ref: Email o id LINE, solo para logs

        Returns:
            True si el webhook respondió 2xx
        """
        if not self.enabled:
            logger.info("Webhook no configurado, se omite el envío")
            return False

        try:
            response = self.session.post(
                self.settings.utage_webhook_url,
                data=fields,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.settings.webhook_timeout_seconds
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Error enviando lead al webhook ({mask_lead_ref(lead_ref)}): {e}")
            return False

        logger.info(f"Lead enviado al webhook: {mask_lead_ref(lead_ref)}")
        return True
