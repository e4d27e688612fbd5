# Standard library imports
import os
from pathlib import Path
from typing import Final, List, Optional

# External package imports
from dotenv import load_dotenv

# Project-level .env, loaded before the first Settings() is built
_ENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"


def _split_csv(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Application metadata
        self.app_name: Final[str] = os.getenv("APP_NAME", "Users API")
        self.app_version: Final[str] = os.getenv("APP_VERSION", "1.0.0")
        
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "localhost")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.api_prefix: Final[str] = os.getenv("API_PREFIX", "/api")
        
        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        
        # CORS Configuration
        self.cors_allow_origins: Final[List[str]] = _split_csv(
            os.getenv(
                "CORS_ALLOW_ORIGINS",
                "http://localhost:3000,http://localhost:5173",
            )
        )


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
        load_dotenv(_ENV_PATH)
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
