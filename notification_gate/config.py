"""
Configuration for the Notification Gate service.
Values come from the environment (or a .env file), with defaults for local runs.
"""

import logging
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Environment-based settings, validated once at startup."""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # ── Server ─────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # ── Logging ────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")

    # ── Audit history ──────────────────────────────────────────────────
    history_limit: int = Field(default=50, ge=1, le=1000)          # default page size
    audit_max_entries: int = Field(default=10000, ge=1)            # oldest dropped first

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


settings = Settings()


def configure_logging(level: Optional[str] = None):
    """Set up root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
