"""Tests de utilidades: configuración, logging y JSON."""

import json
import logging

import pytest

from navi.utils import Config, load_json, save_json, setup_logger
from navi.utils.logging import JsonFormatter


class TestConfig:

    def test_singleton(self):
        assert Config() is Config()

    def test_casts(self, monkeypatch):
        monkeypatch.setenv("NAVI_TEST_INT", "7")
        monkeypatch.setenv("NAVI_TEST_BOOL", "yes")
        monkeypatch.setenv("NAVI_TEST_LIST", "a, b,,c")
        config = Config()

        assert config.get("NAVI_TEST_INT", cast_type=int) == 7
        assert config.get_bool("NAVI_TEST_BOOL") is True
        assert config.get("NAVI_TEST_LIST", cast_type=list) == ["a", "b", "c"]
        assert config.get("NAVI_TEST_MISSING", "fallback") == "fallback"

    def test_catalog_dir(self, monkeypatch, tmp_path):
        config = Config()
        monkeypatch.setenv("CATALOG_DIR", str(tmp_path))
        assert config.catalog_dir == tmp_path

        monkeypatch.setenv("CATALOG_DIR", "data/catalog")
        assert config.catalog_dir == config.project_root / "data" / "catalog"

    def test_strict_catalogs(self, monkeypatch):
        monkeypatch.setenv("STRICT_CATALOGS", "false")
        assert Config().strict_catalogs is False

    def test_typed_getters(self):
        # int y list se piden con get(cast_type=...); solo bool y path tienen atajo
        getters = sorted(name for name in dir(Config) if name.startswith("get_"))
        assert getters == ["get_bool", "get_path"]


class TestSettings:

    def test_log_path_hangs_from_project_root(self):
        from app.core.config import Settings

        settings = Settings(_env_file=None, log_file="reports/api.log")
        assert settings.log_full_path == settings.project_root / "reports" / "api.log"
        # el directorio de reportes lo define log_file, no una propiedad aparte
        assert not hasattr(settings, "reports_dir")


class TestLogging:

    def test_json_formatter_includes_extra_data(self):
        record = logging.LogRecord("navi", logging.INFO, __file__, 1, "hola", None, None)
        record.extra_data = {"industry": "居酒屋"}

        data = json.loads(JsonFormatter().format(record))

        assert data["message"] == "hola"
        assert data["level"] == "INFO"
        assert data["industry"] == "居酒屋"

    def test_setup_logger_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "navi.log"
        logger = setup_logger("navi.test.file", log_file=log_file)
        logger.info("catálogo cargado")

        for handler in logger.handlers:
            handler.flush()
        assert "catálogo cargado" in log_file.read_text(encoding="utf-8")

    def test_names_hang_from_navi(self):
        assert setup_logger("test.child").name == "navi.test.child"
        assert setup_logger("navi.test.child").name == "navi.test.child"

    def test_bare_file_name_goes_to_reports_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("REPORTS_DIR", str(tmp_path))
        logger = setup_logger("test.reports", log_file="navi-test.log")
        logger.warning("sin catálogo")

        for handler in logger.handlers:
            handler.flush()
        assert (tmp_path / "navi-test.log").exists()

    def test_level_from_config(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        assert setup_logger("test.level").level == logging.WARNING

    def test_setup_logger_is_idempotent(self):
        logger = setup_logger("navi.test.idempotent")
        assert setup_logger("navi.test.idempotent").handlers == logger.handlers


class TestJsonIO:

    def test_save_keeps_unicode(self, tmp_path):
        path = save_json({"name": "居酒屋"}, tmp_path / "nested" / "data.json")
        assert "居酒屋" in path.read_text(encoding="utf-8")
        assert load_json(path) == {"name": "居酒屋"}

    def test_load_rejects_other_formats(self, tmp_path):
        with pytest.raises(ValueError):
            load_json(tmp_path / "data.yaml")


class TestLeadMasking:

    def test_mask_email(self):
        from app.core.logging import mask_lead_ref

        assert mask_lead_ref("owner@example.com") == "o***@example.com"

    def test_mask_line_id(self):
        from app.core.logging import mask_lead_ref

        assert mask_lead_ref("U1234567890") == "U123***"
        assert mask_lead_ref(None) == ""
