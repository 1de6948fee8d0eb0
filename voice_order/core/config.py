"""Application configuration."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Parsing
    default_language: str = "de-CH"
    bind_modifications: bool = False

    # Menu matching
    fuzzy_match_threshold: float = 0.7
    alias_match_confidence: float = 0.9
    exact_match_confidence: float = 1.0

    # Catalog
    catalog_file: Optional[str] = None
    default_tenant: str = "default"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
