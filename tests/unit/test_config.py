"""
Tests for the configuration module.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError


class TestSettings:
    """Tests for Settings class."""

    def test_defaults(self, monkeypatch):
        """Defaults apply when no BODYFIT_ variables are set."""
        from bodyfit.config.settings import Settings

        for key in ("BODYFIT_STORE_BACKEND", "BODYFIT_LOG_LEVEL", "BODYFIT_ANALYSIS_DELAY_SEC"):
            monkeypatch.delenv(key, raising=False)

        settings = Settings(_env_file=None)

        assert settings.store_backend == "file"
        assert settings.log_level == "INFO"
        assert settings.analysis_delay_sec == 0.0
        assert settings.store_path.name == "store.json"

    def test_loads_from_env(self, monkeypatch, tmp_path):
        """Environment variables use the BODYFIT_ prefix."""
        from bodyfit.config.settings import Settings

        monkeypatch.setenv("BODYFIT_STORE_BACKEND", "memory")
        monkeypatch.setenv("BODYFIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("BODYFIT_STORE_PATH", str(tmp_path / "x.json"))

        settings = Settings(_env_file=None)

        assert settings.store_backend == "memory"
        assert settings.log_level == "DEBUG"
        assert settings.store_path == tmp_path / "x.json"

    def test_store_path_expands_user(self):
        from bodyfit.config.settings import get_settings_for_testing

        settings = get_settings_for_testing(store_path="~/fit.json")
        assert settings.store_path == Path.home() / "fit.json"

    def test_rejects_unknown_backend(self):
        from bodyfit.config.settings import get_settings_for_testing

        with pytest.raises(ValidationError):
            get_settings_for_testing(store_backend="redis")

    def test_rejects_unknown_log_level(self):
        from bodyfit.config.settings import get_settings_for_testing

        with pytest.raises(ValidationError):
            get_settings_for_testing(log_level="LOUD")

    def test_rejects_negative_delay(self):
        from bodyfit.config.settings import get_settings_for_testing

        with pytest.raises(ValidationError):
            get_settings_for_testing(analysis_delay_sec=-0.5)

    def test_debug_forces_debug_log_level(self):
        from bodyfit.config.settings import get_settings_for_testing

        assert get_settings_for_testing(log_level="WARNING").effective_log_level == "WARNING"
        assert get_settings_for_testing(log_level="WARNING", debug=True).effective_log_level == "DEBUG"


class TestGetSettings:

    def test_singleton(self):
        from bodyfit.config.settings import get_settings

        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()

    def test_testing_settings_bypass_cache(self):
        from bodyfit.config.settings import get_settings_for_testing

        a = get_settings_for_testing()
        b = get_settings_for_testing()
        assert a is not b
        assert a.store_backend == "memory"
