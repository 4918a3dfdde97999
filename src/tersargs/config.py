"""tersargs configuration settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings read from ``TERSARGS_*`` environment variables or ``.env``."""

    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False  # JSON renderer instead of the console renderer

    model_config = SettingsConfigDict(
        env_prefix="TERSARGS_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{v}'")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
