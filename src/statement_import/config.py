"""Runtime settings for statement parsing, loaded from the environment."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from ``STATEMENT_IMPORT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STATEMENT_IMPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    # CSV decoding
    csv_encoding: str = "utf-8-sig"
    csv_fallback_encoding: str = "latin-1"

    # Extraction
    max_total_installments: int = 72
    min_description_length: int = 3

    # Upload limits
    max_file_size_mb: int = 25


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
