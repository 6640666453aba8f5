# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv

from userapp.core.exceptions import ConfigurationError

# Levels uvicorn accepts; TRACE maps to DEBUG for the stdlib root logger
LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


def _int_env(name: str, default: str) -> int:
    """Read an integer environment variable, failing fast on garbage."""
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults,
    except MONGO_URI which has to be provided explicitly.
    """

    def __init__(self, env_file: Optional[str] = None) -> None:
        # An explicitly named .env file has to exist
        if env_file is not None and not os.path.isfile(env_file):
            raise ConfigurationError(f"env file not found: {env_file}")

        # Load environment variables from .env file (never overrides real env)
        load_dotenv(env_file)

        # Service Configuration
        self.app_name: Final[str] = os.getenv("APP_NAME", "userapp")
        self.host: Final[str] = os.getenv("APP_HOST", "0.0.0.0")
        self.port: Final[int] = _int_env("APP_PORT", "8080")
        log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        if log_level.lower() not in LOG_LEVELS:
            raise ConfigurationError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")
        self.log_level: Final[str] = log_level

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Berlin")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        mongo_uri = os.getenv("MONGO_URI", "").strip()
        if not mongo_uri:
            raise ConfigurationError("MONGO_URI not set. Please configure it in your environment or .env file.")
        self.mongo_uri: Final[str] = mongo_uri
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "userapp")
        self.mongo_server_selection_timeout_ms: Final[int] = _int_env(
            "MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000"
        )

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings(env_file: Optional[str] = None) -> Settings:
    """
    Get application settings (singleton pattern)

    Args:
        env_file: Optional path to a .env file, only honoured on first load

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings(env_file)
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
