"""Runtime settings for the scheduling core, read from the environment."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    business_start_hour: int = Field(default=8, ge=0, le=23)
    business_end_hour: int = Field(default=18, ge=1, le=24)

    # Alternative-slot suggestions
    slot_step_minutes: int = Field(default=30, ge=1)
    max_suggestions: int = Field(default=3, ge=1)

    # Free-time finder
    next_slot_minutes: int = Field(default=60, ge=1)
    pattern_min_free_days: int = Field(default=4, ge=1, le=7)

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CALENDAR_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _business_hours_ordered(self) -> Settings:
        if self.business_end_hour <= self.business_start_hour:
            raise ValueError("business_end_hour must be after business_start_hour")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
