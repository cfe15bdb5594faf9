"""
Configuration module for Pistebin.
Loads environment variables and provides config objects.
"""
import os
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _as_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


class Settings:
    """Application settings loaded from environment variables."""

    DATABASE_PATH: str = os.getenv("DATABASE_PATH", "./pastes.sqlite")
    STATIC_DIR: str = os.getenv("STATIC_DIR", "public")
    COOKIE_NAME: str = os.getenv("COOKIE_NAME", "user_id")
    COOKIE_MAX_AGE: int = int(os.getenv("COOKIE_MAX_AGE", "86400"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    DEBUG: bool = _as_bool(os.getenv("DEBUG", "False"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def __init__(self, **overrides):
        for key, value in overrides.items():
            if not hasattr(type(self), key):
                raise TypeError(f"Unknown setting: {key}")
            setattr(self, key, value)

    @property
    def cors_origins(self) -> List[str]:
        """CORS_ORIGINS split into a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
