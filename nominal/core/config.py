"""Environment configuration for the nominal interface registry."""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator

from nominal.core.tagging import DEFAULT_TAG_ATTRIBUTE

load_dotenv()

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppSettings(BaseModel):
    log_level: str = Field(
        default_factory=lambda: os.getenv("NOMINAL_LOG_LEVEL", "INFO").strip().upper()
        or "INFO"
    )

    @model_validator(mode="after")
    def _validate(self) -> "AppSettings":
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                "NOMINAL_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        return self


class TaggingSettings(BaseModel):
    attribute: str = Field(
        default_factory=lambda: os.getenv("NOMINAL_TAG_ATTRIBUTE", DEFAULT_TAG_ATTRIBUTE).strip()
        or DEFAULT_TAG_ATTRIBUTE
    )

    @model_validator(mode="after")
    def _validate(self) -> "TaggingSettings":
        if not self.attribute.isidentifier():
            raise ValueError("NOMINAL_TAG_ATTRIBUTE must be a valid Python identifier")
        return self


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    tagging: TaggingSettings = Field(default_factory=TaggingSettings)

    model_config = dict(extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
