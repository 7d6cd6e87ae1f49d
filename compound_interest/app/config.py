"""
Application settings
Load from environment variables
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment"""

    SERVICE_NAME: str = "compound-interest-calculator"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    DEFAULT_LANGUAGE: str = "es"

    model_config = SettingsConfigDict(
        env_prefix="COMPOUND_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    return Settings()
