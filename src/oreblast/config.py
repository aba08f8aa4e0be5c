"""Configuration management using Pydantic settings."""

import sys

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables (OREBLAST_*)."""

    model_config = SettingsConfigDict(
        env_prefix="OREBLAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Fallbacks used when neither the row nor the material table supplies a value
    default_hardness: int = Field(default=100, gt=0)
    default_value: int = Field(default=10, ge=0)

    # max_health = hardness * health_multiplier
    health_multiplier: float = Field(default=1.0, gt=0.0)

    # Ingestion
    delimiter: str = ","

    # Source files (GridSession.load_file)
    max_source_bytes: int = 10 * 1024 * 1024
    source_extensions: list[str] = [".csv", ".txt"]

    # Logging
    log_level: str = "INFO"

    @field_validator("delimiter")
    @classmethod
    def _single_char_delimiter(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("delimiter must be a single character")
        return v

    @field_validator("source_extensions")
    @classmethod
    def _normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.log_level).upper())
