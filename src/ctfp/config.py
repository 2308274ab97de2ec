"""Library settings from CTFP_* environment variables via pydantic-settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library-wide defaults.

    Attributes:
        check_types: Inspect arity and annotations when composing.
        law_samples: Maximum number of inputs drawn by each law check.
        log_level: Level applied to the "ctfp" logger by configure_logging().
    """

    model_config = SettingsConfigDict(env_prefix="CTFP_", frozen=True)

    check_types: bool = True
    law_samples: int = Field(default=100, gt=0)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


class CompositionSettings(BaseSettings):
    """The one setting compose() depends on.

    Read separately so a bad CTFP_LAW_SAMPLES or CTFP_LOG_LEVEL cannot
    break composition.
    """

    model_config = SettingsConfigDict(env_prefix="CTFP_", frozen=True)

    check_types: bool = True


@lru_cache
def get_settings() -> Settings:
    """Settings from the process environment, read once."""
    return Settings()


@lru_cache
def get_composition_settings() -> CompositionSettings:
    return CompositionSettings()


def reload_settings() -> None:
    """Forget cached settings so the next access re-reads the environment."""
    get_settings.cache_clear()
    get_composition_settings.cache_clear()


def configure_logging(level: str | int | None = None) -> None:
    """Set the level of the package logger (defaults to Settings.log_level)."""
    if level is None:
        level = get_settings().log_level
    elif isinstance(level, str):
        level = level.upper()
    logging.getLogger("ctfp").setLevel(level)
