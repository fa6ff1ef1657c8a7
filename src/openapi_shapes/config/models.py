"""Pydantic models for central YAML configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from openapi_shapes.constants import DEFAULT_OPENAPI_VERSION
from openapi_shapes.schemas.base import StrictSchemaModel
from openapi_shapes.schemas.enums import OpenApiVersion, normalize_openapi_version

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class OutputConfig(StrictSchemaModel):
    """Rendering controls for exported schema fragments."""

    indent: bool = True
    sort_keys: bool = False


class AppConfig(StrictSchemaModel):
    """Central application configuration."""

    openapi_version: OpenApiVersion = Field(
        default_factory=lambda: normalize_openapi_version(DEFAULT_OPENAPI_VERSION)
    )
    log_level: LogLevel = "WARNING"
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("openapi_version", mode="before")
    @classmethod
    def normalize_version(cls, value: str | float | OpenApiVersion) -> OpenApiVersion:
        return normalize_openapi_version(str(value) if isinstance(value, float) else value)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() if isinstance(value, str) else value
