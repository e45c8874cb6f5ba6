# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "guardwatch")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "10000")
        )
        self.mongo_connect_timeout_ms: Final[int] = int(
            os.getenv("MONGO_CONNECT_TIMEOUT_MS", "10000")
        )
        self.mongo_reconnect_delay_seconds: Final[float] = float(
            os.getenv("MONGO_RECONNECT_DELAY_SECONDS", "5")
        )
        self.store_operation_timeout_seconds: Final[float] = float(
            os.getenv("STORE_OPERATION_TIMEOUT_SECONDS", "30")
        )

        # HTTP Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.cors_allowed_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173")
        )

        # Realtime Configuration
        self.broadcast_send_timeout_seconds: Final[float] = float(
            os.getenv("BROADCAST_SEND_TIMEOUT_SECONDS", "5")
        )

        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
