"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Settings loaded from DICEPOOL_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DICEPOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Seeds the process-default random source. None = seeded by the OS.
    seed: int | None = None

    log_level: LogLevel = "WARNING"

    # CLI guard rails; the library itself accepts any size.
    max_count: int = Field(default=1000, gt=0)
    max_sides: int = Field(default=1000, gt=0)

    default_notation: str = "1d20"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        """Accept level names in any case (e.g. "debug")."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
