"""
ppmodel Configuration

Centralized configuration management using pydantic-settings.
All environment variables use the PPMODEL_ prefix.

Usage:
    from ppmodel.config import settings

    workers = settings.parse_workers
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Program model settings"""

    model_config = SettingsConfigDict(
        env_prefix="PPMODEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Parsing
    source_encoding: str = "utf-8"
    strict_parse: bool = True  # ERROR/MISSING nodes count as a parse failure
    parse_workers: int = Field(default=1, ge=1)

    # Model
    include_static_blocks: bool = False


settings = Settings()
