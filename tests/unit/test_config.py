import importlib
import pytest
from app.core import config

ENV_VARS = ["HOST", "PORT", "REQUEST_TIMEOUT", "USER_AGENT", "FOLLOW_REDIRECTS"]

@pytest.fixture
def reload_settings(monkeypatch):
    """Re-read settings from the environment, then put the original objects back"""
    original_class = config.Settings
    original_settings = config.settings
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config).settings

    yield _reload

    config.Settings = original_class
    config.settings = original_settings

class TestSettings:
    """Unit tests for environment-driven configuration"""

    def test_defaults(self, reload_settings):
        settings = reload_settings()

        assert settings.HOST == "0.0.0.0"
        assert settings.PORT == 3001
        assert settings.REQUEST_TIMEOUT is None
        assert settings.FOLLOW_REDIRECTS is True
        assert settings.USER_AGENT.startswith("Mozilla/5.0")

    def test_values_from_environment(self, reload_settings):
        settings = reload_settings(
            HOST="127.0.0.1",
            PORT="3099",
            REQUEST_TIMEOUT="2.5",
            USER_AGENT="FaleproxyTest/1.0",
            FOLLOW_REDIRECTS="0",
        )

        assert settings.HOST == "127.0.0.1"
        assert settings.PORT == 3099
        assert settings.REQUEST_TIMEOUT == 2.5
        assert settings.USER_AGENT == "FaleproxyTest/1.0"
        assert settings.FOLLOW_REDIRECTS is False

    @pytest.mark.parametrize("value", ["1", "true", "YES"])
    def test_follow_redirects_truthy(self, reload_settings, value):
        assert reload_settings(FOLLOW_REDIRECTS=value).FOLLOW_REDIRECTS is True

    def test_empty_timeout_uses_transport_default(self, reload_settings):
        assert reload_settings(REQUEST_TIMEOUT="").REQUEST_TIMEOUT is None

    def test_original_settings_restored(self):
        """Other modules keep the settings object created at import"""
        from app.fetch import scraper
        assert scraper.settings is config.settings
