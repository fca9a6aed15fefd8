"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEARCHPRO_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    debounce_delay_ms: int = Field(
        default=300,
        ge=0,
        le=10_000,
        description="Quiet period after the last keystroke before filtering runs.",
    )
    cache_capacity: int = Field(default=10, ge=1, le=10_000)
    corpus_path: Path | None = Field(
        default=None,
        description="Optional JSON file holding a list of {id, name} items.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("corpus_path", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def debounce_delay(self) -> float:
        """Debounce delay in seconds."""

        return self.debounce_delay_ms / 1000


@lru_cache
def get_settings() -> SearchSettings:
    """Return cached settings instance."""

    return SearchSettings()


__all__ = ["SearchSettings", "get_settings"]
