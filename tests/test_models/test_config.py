"""Tests for environment-driven settings."""

from accept_language.models.config import Settings, get_settings, settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in (
            "ACCEPT_LANGUAGE_ENVIRONMENT",
            "ACCEPT_LANGUAGE_LOG_LEVEL",
            "ACCEPT_LANGUAGE_ALLOW_LEADING_DOT_QVALUE",
            "ACCEPT_LANGUAGE_PRIMARY_FALLBACK",
        ):
            monkeypatch.delenv(name, raising=False)

        config = Settings()
        assert config.ENVIRONMENT == "development"
        assert config.LOG_LEVEL is None
        assert config.ALLOW_LEADING_DOT_QVALUE is False
        assert config.PRIMARY_FALLBACK is False

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("ACCEPT_LANGUAGE_PRIMARY_FALLBACK", "true")
        monkeypatch.setenv("ACCEPT_LANGUAGE_ALLOW_LEADING_DOT_QVALUE", "1")
        monkeypatch.setenv("ACCEPT_LANGUAGE_ENVIRONMENT", "production")

        config = Settings()
        assert config.PRIMARY_FALLBACK is True
        assert config.ALLOW_LEADING_DOT_QVALUE is True
        assert config.ENVIRONMENT == "production"

    def test_unprefixed_variables_are_ignored(self, monkeypatch):
        monkeypatch.delenv("ACCEPT_LANGUAGE_PRIMARY_FALLBACK", raising=False)
        monkeypatch.setenv("PRIMARY_FALLBACK", "true")
        assert Settings().PRIMARY_FALLBACK is False

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("ACCEPT_LANGUAGE_LOG_LEVEL", " warning ")
        assert Settings().LOG_LEVEL == "WARNING"

    def test_blank_log_level_is_unset(self, monkeypatch):
        monkeypatch.setenv("ACCEPT_LANGUAGE_LOG_LEVEL", "")
        assert Settings().LOG_LEVEL is None

    def test_get_settings_returns_shared_instance(self):
        assert get_settings() is settings
