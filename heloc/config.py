"""
Configuration Management Module

Environment-based settings (prefix ``HELOC_``) via pydantic-settings.
"""

from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """HELOC calculator configuration"""

    model_config = SettingsConfigDict(
        env_prefix="HELOC_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Origins allowed to call /api/* (a separate frontend dev server)
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Presentation defaults
    default_language: Literal["en", "fr"] = "en"
    default_brand: str = "nesto"


settings = Settings()


def get_settings() -> Settings:
    return settings


def reload_settings() -> Settings:
    """Re-read configuration from the environment"""
    global settings
    settings = Settings()
    return settings
