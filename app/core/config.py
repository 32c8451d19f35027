from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    api_title: str = "Restructuring Navi API"
    api_version: str = "1.0.0"
    api_description: str = "API de diagnóstico de subsidios de reestructuración y registro de leads"
    api_prefix: str = "/api/v1"
    debug: bool = Field(default=False)

    allowed_origins: str = Field(default="*")

    catalog_dir: str = Field(default="data/catalog")
    strict_catalogs: bool = Field(default=True)

    # Webhook de marketing (UTAGE); vacío = desactivado
    utage_webhook_url: Optional[str] = Field(default=None)
    webhook_timeout_seconds: float = Field(default=10.0)

    # Envío de correo (Resend); sin API key = desactivado
    resend_api_key: Optional[str] = Field(default=None)
    resend_api_url: str = Field(default="https://api.resend.com/emails")
    resend_from_email: str = Field(default="onboarding@resend.dev")
    email_timeout_seconds: float = Field(default=10.0)
    contact_url: str = Field(default="https://example.com/contact")

    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    log_file: str = Field(default="reports/api.log")

    @property
    def project_root(self) -> Path:
        return Path(__file__).parent.parent.parent

    @property
    def catalog_full_path(self) -> Path:
        path = Path(self.catalog_dir)
        return path if path.is_absolute() else self.project_root / path

    @property
    def log_full_path(self) -> Path:
        return self.project_root / self.log_file

    @property
    def webhook_enabled(self) -> bool:
        return bool(self.utage_webhook_url)

    @property
    def email_enabled(self) -> bool:
        return bool(self.resend_api_key)


@lru_cache()
def get_settings() -> Settings:

    return Settings()
