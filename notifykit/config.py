"""Environment-driven settings (.env supported), validated with pydantic."""

import logging
import os
from functools import lru_cache
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

ENV_PREFIX = "NOTIFYKIT_"

DEFAULT_LOG_LEVEL = "INFO"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseModel):
    """Runtime settings for logging; read from NOTIFYKIT_* variables."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_stdout: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from environ (defaults to os.environ after loading .env).
    Invalid values fall back to the defaults with a warning.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ
    raw = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in environ.items()
        if key.startswith(ENV_PREFIX)
    }
    fields = {k: v for k, v in raw.items() if k in Settings.model_fields}
    try:
        return Settings(**fields)
    except ValidationError as e:
        # The package logger depends on settings, so report through the stdlib root.
        logging.getLogger("notifykit.config").warning(
            "invalid_settings",
            extra={"error": str(e), "fields": sorted(fields)},
        )
        return Settings()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, loaded once."""
    return load_settings()
