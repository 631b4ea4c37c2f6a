"""
Runtime configuration.

Values come from the environment (optionally a .env file):
- LPVET_WARN: issue warnings for unused variables (default: off)
- LPVET_LOG_LEVEL: logging level name (default: WARNING)

Command-line options override these.
"""

import logging
import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """lpvet settings."""

    issue_warnings: bool = Field(False, description="Report declared but unused variables")
    log_level: str = Field("WARNING", description="Logging level name")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUE_VALUES


def load_settings() -> Settings:
    """Load settings from a .env found from the working directory up, and the process environment."""
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        issue_warnings=_env_flag("LPVET_WARN"),
        log_level=os.environ.get("LPVET_LOG_LEVEL", "WARNING"),
    )
