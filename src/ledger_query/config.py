from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    ledger_path: Optional[Path] = Field(default=None, alias="LEDGER_PATH")
    ledger_strict: bool = Field(default=False, alias="LEDGER_STRICT")

    def validate_required(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}")


@lru_cache
def load_settings() -> Settings:
    settings = Settings()
    settings.validate_required()
    return settings
