"""Fixtures compartidos: catálogos sintéticos y cliente de la API."""

from typing import Dict, List
from unittest.mock import Mock

import pytest
import requests
from fastapi.testclient import TestClient

from navi.catalog import Catalogs, build_catalogs, load_catalogs

from app.core.config import Settings
from app.services.catalog_service import CatalogService, get_catalog_service
from app.services.email_service import EmailService
from app.services.metrics_service import get_metrics_service
from app.services.registration_service import RegistrationService, get_registration_service
from app.services.webhook_service import WebhookService

from .factories import RESEND_URL, SHIPPED_CATALOG_DIR, WEBHOOK_URL, category, industry, pattern


@pytest.fixture
def make_catalogs():
    """Construye Catalogs desde registros JSON en memoria."""
    def _make(industries: List[Dict], categories: List[Dict], patterns: List[Dict]) -> Catalogs:
        return build_catalogs(industries, categories, patterns)
    return _make


@pytest.fixture
def izakaya_catalogs(make_catalogs) -> Catalogs:
    return make_catalogs(
        [industry("izakaya", ["catA", "catB"], tips=["t1"], risks=["r1"], name="居酒屋")],
        [category("catB", 40), category("catA", 70)],
        [pattern("p1", ["izakaya"], "昼間の業態転換", band="高")],
    )


@pytest.fixture
def restaurant_catalogs(make_catalogs) -> Catalogs:
    """Sector con siete patrones: varios por activo y bandas mezcladas."""
    return make_catalogs(
        [
            industry("restaurant", ["growth", "recovery", "wage"], tips=["Tip A"], risks=["Risk A"]),
            industry("retail", ["growth"]),
        ],
        [
            category("growth", 48),
            category("recovery", 59),
            category("wage", 64),
            category("supply", 36),
        ],
        [
            pattern("ec", ["restaurant"], "冷凍食品のEC販売", band="中"),
            pattern("rental", ["restaurant"], "レンタルスペース運営", band="低"),
            pattern("factory", ["restaurant"], "食品製造・卸売", band="中〜高"),
            pattern("school", ["restaurant", "retail"], "オンライン料理教室", band="低"),
            pattern("catering", ["restaurant"], "ケータリング事業", band="高"),
            pattern("minpaku", ["restaurant"], "民泊運営", band="中"),
            pattern("green", ["restaurant"], "環境配慮型の食品加工", band="低"),
            pattern("retail-only", ["retail"], "自社ブランド開発", band="高"),
        ],
    )


@pytest.fixture(scope="session")
def shipped_catalogs() -> Catalogs:
    return load_catalogs(SHIPPED_CATALOG_DIR, strict=True)


# ============================================================================
# API
# ============================================================================

@pytest.fixture
def notify_settings() -> Settings:
    """Settings con webhook y correo activados, sin leer .env."""
    return Settings(
        _env_file=None,
        utage_webhook_url=WEBHOOK_URL,
        resend_api_key="re_test_key",
        resend_api_url=RESEND_URL,
    )


@pytest.fixture
def ok_session():
    """Sesión HTTP falsa que responde 2xx."""
    session = Mock(spec=requests.Session)
    session.post.return_value = Mock(status_code=200)
    return session


@pytest.fixture
def failing_session():
    """Sesión HTTP falsa cuyo POST no llega al servidor."""
    session = Mock(spec=requests.Session)
    session.post.side_effect = requests.exceptions.ConnectionError("connection refused")
    return session


@pytest.fixture
def metrics_service():
    service = get_metrics_service()
    service.reset()
    yield service
    service.reset()


@pytest.fixture
def make_registration_service(notify_settings, metrics_service):
    """Construye un RegistrationService con sesiones HTTP inyectadas."""
    def _make(webhook_session, email_session, settings: Settings = None) -> RegistrationService:
        settings = settings or notify_settings
        return RegistrationService(
            webhook_service=WebhookService(settings, session=webhook_session),
            email_service=EmailService(settings, session=email_session),
            metrics_service=metrics_service
        )
    return _make


@pytest.fixture
def registration_service(make_registration_service, ok_session):
    return make_registration_service(ok_session, ok_session)


@pytest.fixture
def client(izakaya_catalogs, registration_service, metrics_service):
    """TestClient con catálogos del escenario izakaya y notificaciones falsas."""
    from app.main import app

    catalog_service = CatalogService()
    catalog_service.use(izakaya_catalogs)

    app.dependency_overrides[get_catalog_service] = lambda: catalog_service
    app.dependency_overrides[get_registration_service] = lambda: registration_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
