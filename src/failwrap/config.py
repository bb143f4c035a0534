from __future__ import annotations

from functools import lru_cache

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    capture_stack: bool = Field(default=True, validation_alias="FAILWRAP_CAPTURE_STACK")
    log_level: str = Field(default="ERROR", validation_alias="FAILWRAP_LOG_LEVEL")
    ignorable_log_level: str = Field(
        default="INFO", validation_alias="FAILWRAP_IGNORABLE_LOG_LEVEL"
    )
    traceback_limit: int = Field(
        default=6, ge=1, validation_alias="FAILWRAP_TRACEBACK_LIMIT"
    )

    @field_validator("capture_stack", mode="before")
    @classmethod
    def _parse_capture_stack(cls, v: bool | str) -> bool | str:
        if v == "":
            return True
        return v

    @field_validator("log_level", "ignorable_log_level", mode="after")
    @classmethod
    def _known_level(cls, v: str) -> str:
        # raises ValueError for names loguru does not know
        return logger.level(v.upper()).name

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded on first use."""
    return Settings()
