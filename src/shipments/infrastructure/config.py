"""Runtime settings, read from ``SHIPMENTS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Files
    data_file: Path = Field(Path("shipments.txt"))
    report_file: Path = Field(Path("report.txt"))

    # Store
    initial_capacity: int = Field(10, ge=1)

    # Logging
    log_level: str = Field("WARNING")
    json_logs: bool = Field(False)

    model_config = SettingsConfigDict(
        env_prefix="SHIPMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance so the environment is parsed once."""
    return Settings()


__all__ = ["Settings", "get_settings"]
