"""
Configuration management for the Recipe Tracker application.

This module handles:
- Database path and URL configuration
- Environment-specific configuration (development vs. production)
- Connection and logging settings read from environment variables
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DATABASE_FILENAME,
    DATABASE_VERSION,
)

logger = logging.getLogger(__name__)

ENV_VAR = "RECIPE_TRACKER_ENV"
DATABASE_URL_VAR = "RECIPE_TRACKER_DATABASE_URL"
DB_TIMEOUT_VAR = "RECIPE_TRACKER_DB_TIMEOUT"
LOG_LEVEL_VAR = "RECIPE_TRACKER_LOG_LEVEL"

DEFAULT_DB_TIMEOUT = 30
DEFAULT_LOG_LEVEL = "WARNING"


class Config:
    """
    Application configuration manager.

    Handles database location, connection settings and logging level.
    Values that come from environment variables are read when the
    property is accessed, so tests can override them with monkeypatch.
    """

    def __init__(self, environment: str = "production"):
        """
        Initialize configuration.

        Args:
            environment: Environment mode - 'production' or 'development'
        """
        self.environment = environment
        self._app_name = APP_NAME
        self._app_version = APP_VERSION
        self._database_version = DATABASE_VERSION

        if environment == "development":
            self._base_dir = self._get_project_data_dir()
        else:
            self._base_dir = self._get_user_documents_dir()

        self._database_dir = self._base_dir
        self._database_path = self._database_dir / DATABASE_FILENAME

    def _get_project_data_dir(self) -> Path:
        """Get the project's data/ directory for development."""
        project_root = Path(__file__).parent.parent.parent.parent
        return project_root / "data"

    def _get_user_documents_dir(self) -> Path:
        """Get the application folder under the user's Documents directory."""
        return Path.home() / "Documents" / "RecipeTracker"

    def ensure_directories(self) -> None:
        """Create the database directory if it doesn't exist."""
        self._database_dir.mkdir(parents=True, exist_ok=True)

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def database_version(self) -> str:
        """Database schema version."""
        return self._database_version

    @property
    def database_path(self) -> Path:
        """Full path to the SQLite database file."""
        return self._database_path

    @property
    def database_url(self) -> str:
        """
        SQLAlchemy database URL.

        RECIPE_TRACKER_DATABASE_URL takes precedence over the file path
        derived from the environment.
        """
        override = os.environ.get(DATABASE_URL_VAR)
        if override:
            return override

        # Use forward slashes for SQLite URL
        db_path_str = str(self._database_path).replace("\\", "/")
        return f"sqlite:///{db_path_str}"

    @property
    def db_timeout(self) -> int:
        """SQLite busy timeout in seconds."""
        raw = os.environ.get(DB_TIMEOUT_VAR)
        if raw is None:
            return DEFAULT_DB_TIMEOUT
        try:
            value = int(raw)
        except ValueError:
            logger.warning(
                f"Invalid {DB_TIMEOUT_VAR} value '{raw}', using default {DEFAULT_DB_TIMEOUT}"
            )
            return DEFAULT_DB_TIMEOUT
        if value <= 0:
            logger.warning(
                f"Invalid {DB_TIMEOUT_VAR} value '{raw}', using default {DEFAULT_DB_TIMEOUT}"
            )
            return DEFAULT_DB_TIMEOUT
        return value

    @property
    def log_level(self) -> str:
        """Logging level name for the command-line entry point."""
        raw = os.environ.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(raw), int):
            logger.warning(
                f"Invalid {LOG_LEVEL_VAR} value '{raw}', using default {DEFAULT_LOG_LEVEL}"
            )
            return DEFAULT_LOG_LEVEL
        return raw

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def database_exists(self) -> bool:
        """
        Check if database file exists.

        Returns:
            True if database file exists, False otherwise
        """
        return self._database_path.exists()

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(environment='{self.environment}', " f"database_path='{self._database_path}')"
        )


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(environment: Optional[str] = None) -> Config:
    """
    Get the global configuration instance.

    Once created, the singleton's environment cannot be changed by passing
    a different environment argument.

    Args:
        environment: Optional environment for initial creation. If None, uses
                    RECIPE_TRACKER_ENV or defaults to production. Ignored if
                    singleton already exists.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        if environment is None:
            environment = os.environ.get(ENV_VAR, "production")
        _config_instance = Config(environment)
    elif environment is not None and environment != _config_instance.environment:
        logger.warning(
            f"get_config() called with environment='{environment}' but singleton "
            f"already exists with environment='{_config_instance.environment}'. "
            f"Returning existing singleton."
        )

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None


def get_database_url() -> str:
    """Get the database URL of the global configuration."""
    return get_config().database_url
