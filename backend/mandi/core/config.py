"""
Application configuration using pydantic-settings.

WHAT: Centralized config from environment variables
WHY: Type-safe, validated config with sensible defaults
HOW: Pydantic BaseSettings reads from .env and environment
"""

from pydantic_settings import BaseSettings
from typing import Literal
from pathlib import Path


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App metadata
    APP_NAME: str = "Multilingual Mandi"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Negotiation
    DEFAULT_LANGUAGE: Literal["hi", "en", "ta", "te", "kn"] = "hi"
    CURRENCY_SYMBOL: str = "₹"

    # CORS - comma-separated origins
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:3001"

    def get_cors_origins_list(self) -> list[str]:
        """Split CORS_ORIGINS on commas, dropping blanks."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "./data/logs/app.log"

    class Config:
        # Project root .env first, then backend/.env
        env_file = [
            str(Path(__file__).parent.parent.parent.parent / ".env"),
            str(Path(__file__).parent.parent.parent / ".env"),
        ]
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# Singleton instance
settings = Settings()
