"""Runtime configuration."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path.home() / ".local" / "share" / "codekata"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings, read from ``CODEKATA_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="CODEKATA_", env_file=".env", extra="ignore")

    db_path: Path = Field(default=DATA_DIR / "data.db")
    storage: Literal["sqlite", "memory"] = "sqlite"
    seed_on_empty: bool = True
    require_solution: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_dir: Path = Field(default=DATA_DIR / "logs")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value
