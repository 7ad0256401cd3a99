# SPDX-License-Identifier: Apache-2.0
# Copyright 2024-2026 CAB Ingénierie / Christophe ABOULICAM
"""Flux settings using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Flux configuration settings.

    All settings can be overridden via environment variables prefixed with
    ``FLUX_`` (e.g. ``FLUX_COLLECTION_ENVELOPE=items``). The filter options
    below are defaults only; a TransformFilter may override each of them.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLUX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    # Observability
    enable_metrics: bool = True
    metrics_prefix: str = "flux"

    # Transformer resolution
    default_scope: str = "global"

    # Filter defaults
    fields_param: str = "fields"
    includes_param: str = "includes"
    excludes_param: str = "excludes"
    collection_envelope: str | None = "data"
    transform_empty: bool = False
    max_include_depth: int = 10

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper

    @field_validator("collection_envelope")
    @classmethod
    def empty_envelope_disables(cls, v: str | None) -> str | None:
        # An empty env value means "no envelope"
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("max_include_depth")
    @classmethod
    def depth_range(cls, v: int) -> int:
        if v < 1 or v > 32:
            raise ValueError("max_include_depth must be between 1 and 32")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
