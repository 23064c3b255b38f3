"""Configuration settings for the Dev Blog site core."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Localization
    default_lang: str = "en"
    locale_dir: str | None = None
    strict_locales: bool = False

    # Tracing Configuration
    tracing_enabled: bool = True
    log_level: str = "INFO"

    @field_validator("default_lang")
    @classmethod
    def normalize_lang(cls, v: str) -> str:
        # Language codes are registered lowercase ("zh-cn")
        return v.strip().lower()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
