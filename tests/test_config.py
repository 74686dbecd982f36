"""Unit tests for Config properties and the configuration singleton."""

import logging

from recipe_tracker.utils.config import Config, get_config, get_database_url, reset_config


class TestConfig:
    def test_development_database_under_project_data(self):
        config = Config("development")
        assert config.is_development
        assert config.database_path.parent.name == "data"
        assert config.database_path.name == "recipe_tracker.db"

    def test_production_database_under_documents(self):
        config = Config("production")
        assert config.is_production
        assert config.database_path.parent.name == "RecipeTracker"

    def test_database_url_from_path(self, monkeypatch):
        monkeypatch.delenv("RECIPE_TRACKER_DATABASE_URL", raising=False)
        config = Config("development")
        assert config.database_url.startswith("sqlite:///")
        assert config.database_url.endswith("recipe_tracker.db")

    def test_database_url_override(self, monkeypatch):
        monkeypatch.setenv("RECIPE_TRACKER_DATABASE_URL", "sqlite:///:memory:")
        assert Config().database_url == "sqlite:///:memory:"

    def test_db_timeout_default(self, monkeypatch):
        monkeypatch.delenv("RECIPE_TRACKER_DB_TIMEOUT", raising=False)
        assert Config().db_timeout == 30

    def test_db_timeout_env_override(self, monkeypatch):
        monkeypatch.setenv("RECIPE_TRACKER_DB_TIMEOUT", "60")
        assert Config().db_timeout == 60

    def test_db_timeout_invalid_uses_default(self, monkeypatch, caplog):
        monkeypatch.setenv("RECIPE_TRACKER_DB_TIMEOUT", "invalid")
        with caplog.at_level(logging.WARNING):
            assert Config().db_timeout == 30
        assert "Invalid RECIPE_TRACKER_DB_TIMEOUT" in caplog.text

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("RECIPE_TRACKER_LOG_LEVEL", "debug")
        assert Config().log_level == "DEBUG"

    def test_log_level_invalid_uses_default(self, monkeypatch):
        monkeypatch.setenv("RECIPE_TRACKER_LOG_LEVEL", "chatty")
        assert Config().log_level == "WARNING"


class TestGetConfig:
    def test_singleton(self):
        assert get_config() is get_config()

    def test_environment_from_env_var(self, monkeypatch):
        monkeypatch.setenv("RECIPE_TRACKER_ENV", "development")
        assert get_config().environment == "development"

    def test_environment_not_switched(self, caplog):
        config = get_config("production")
        with caplog.at_level(logging.WARNING):
            assert get_config("development") is config
        assert "Returning existing singleton" in caplog.text

    def test_reset(self):
        first = get_config()
        reset_config()
        assert get_config() is not first

    def test_get_database_url(self, monkeypatch):
        monkeypatch.setenv("RECIPE_TRACKER_DATABASE_URL", "sqlite:///x.db")
        assert get_database_url() == "sqlite:///x.db"
