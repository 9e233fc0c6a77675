from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="LIFTGUARD_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="LIFTGUARD_LOG_FILE")
    taxonomy_path: str | None = Field(default=None, validation_alias="LIFTGUARD_TAXONOMY_PATH")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LIFTGUARD_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got: {value}"
            )
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from env and .env."""
    return Settings()
