"""
Tests unitaires pour la configuration, le logging et le container DI.
"""

import os
from pathlib import Path

import pytest
from loguru import logger

from yachk.adapters.api.catalog_client import CatalogClient
from yachk.adapters.probe.ffmpeg_runner import FFmpegProbeRunner
from yachk.config import Settings
from yachk.container import Container
from yachk.logging_config import configure_logging
from yachk.main import _log_level
from yachk.services.checker import FileNameChecker


@pytest.fixture
def clean_env(monkeypatch):
    """Retire les variables YACHK_ de l'environnement du test."""
    for name in list(os.environ):
        if name.upper().startswith("YACHK_"):
            monkeypatch.delenv(name)
    return monkeypatch


class TestSettings:
    """Tests pour Settings."""

    def test_defaults(self, clean_env) -> None:
        settings = Settings()

        assert settings.catalog_api_url is None
        assert settings.catalog_enabled is False
        assert settings.ffmpeg_binary == "ffmpeg"
        assert settings.probe_timeout == 120
        assert settings.log_level == "WARNING"
        assert settings.log_file is None

    def test_environment_overrides(self, clean_env) -> None:
        clean_env.setenv("YACHK_CATALOG_API_URL", "https://catalog.example.com/api/films/")
        clean_env.setenv("YACHK_CATALOG_CLIENT_ID", "abc")
        clean_env.setenv("YACHK_LOG_LEVEL", "debug")
        clean_env.setenv("yachk_probe_timeout", "10")

        settings = Settings()

        assert settings.catalog_enabled is True
        assert settings.log_level == "DEBUG"
        assert settings.probe_timeout == 10

    def test_log_file_expands_home(self, clean_env) -> None:
        settings = Settings(log_file="~/logs/yachk.log")

        assert settings.log_file == Path.home() / "logs" / "yachk.log"

    def test_empty_log_file_is_none(self, clean_env) -> None:
        assert Settings(log_file="").log_file is None

    def test_invalid_timeout_is_rejected(self, clean_env) -> None:
        with pytest.raises(ValueError):
            Settings(catalog_timeout=0)


class TestLogLevel:
    """Tests du niveau console selon -v / -q."""

    @pytest.mark.parametrize(
        "verbose, quiet, expected",
        [(0, False, "WARNING"), (1, False, "INFO"), (2, False, "DEBUG"), (3, True, "ERROR")],
    )
    def test_log_level(self, clean_env, verbose, quiet, expected) -> None:
        assert _log_level(Settings(), verbose, quiet) == expected


class TestConfigureLogging:
    """Tests pour configure_logging()."""

    def test_json_file_handler(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "yachk.log"

        configure_logging(log_level="ERROR", log_file=log_file)
        logger.info("Message de test", catalog_id="42")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert '"catalog_id": "42"' in content
        assert "Message de test" in content


class TestContainer:
    """Tests du cablage des dependances."""

    def test_wiring(self, test_settings) -> None:
        container = Container()
        container.config.override(test_settings)

        checker = container.checker()

        assert isinstance(checker, FileNameChecker)
        assert isinstance(container.probe_runner(), FFmpegProbeRunner)
        catalog_client = container.catalog_client()
        assert isinstance(catalog_client, CatalogClient)
        assert catalog_client.configured is True
        assert container.catalog_client() is catalog_client
