"""Environment-driven configuration."""
from __future__ import annotations

import pytest

from planner_backend.settings import get_settings, reset_settings
from planner_dashboard.data import api_client
from planner_dashboard.logging_config import configure_logging


class TestBackendSettings:
    def test_defaults(self) -> None:
        settings = get_settings()

        assert settings.storage_backend == "memory"
        assert settings.demo_user_id == 1
        assert settings.uses_sql is False

    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("STORAGE_BACKEND", " SQL ")
        monkeypatch.setenv("DEMO_USER_ID", "7")
        reset_settings()

        settings = get_settings()

        assert settings.uses_sql is True
        assert settings.demo_user_id == 7

    def test_unknown_backend_raises(self, monkeypatch) -> None:
        monkeypatch.setenv("STORAGE_BACKEND", "redis")
        reset_settings()

        with pytest.raises(ValueError):
            get_settings().normalized_storage_backend

    def test_settings_are_cached(self) -> None:
        assert get_settings() is get_settings()


class TestDashboardConfig:
    def test_api_base_url_prefers_secrets(self, monkeypatch) -> None:
        monkeypatch.setenv("API_BASE_URL", "http://env:8000")
        secrets = {("app", "API_BASE_URL"): "http://secret:8000"}
        api_client.configure(lambda path, default=None: secrets.get(tuple(path), default))
        try:
            assert api_client.api_base_url() == "http://secret:8000"
        finally:
            api_client.configure(None)

    def test_api_base_url_default(self, monkeypatch) -> None:
        monkeypatch.delenv("API_BASE_URL", raising=False)
        api_client.configure(None)

        assert api_client.api_base_url() == "http://localhost:8000"

    def test_log_level_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("DASHBOARD_LOG_LEVEL", "debug")

        assert configure_logging() == 10
