"""
Configuration for planarvision.

Settings are read from environment variables prefixed with
PLANARVISION_, with nested sections separated by a double underscore,
for example PLANARVISION_SYSTEM__LOG_LEVEL=DEBUG.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from planarvision.core.constants import ResampleConstants, SystemConstants
from planarvision.core.enums import InterpolationMethod


class SystemSettings(BaseModel):
    """Logging and debug settings"""

    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT)
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


class ProcessingSettings(BaseModel):
    """Defaults applied by the processing service"""

    default_interpolation: InterpolationMethod = InterpolationMethod(
        ResampleConstants.DEFAULT_INTERPOLATION
    )
    clamp_after_shift: bool = False


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix=SystemConstants.ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
    )

    system: SystemSettings = Field(default_factory=SystemSettings)
    processing: ProcessingSettings = Field(default_factory=ProcessingSettings)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.system.log_level),
        format=SystemConstants.LOG_FORMAT,
    )
