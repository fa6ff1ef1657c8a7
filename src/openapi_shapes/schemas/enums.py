"""Enum definitions for canonical contracts."""

from __future__ import annotations

from enum import Enum


class SchemaKind(str, Enum):
    STRING = "string"
    BINARY = "binary"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


class RequiredMode(str, Enum):
    """How a shape family treats the ``required`` option."""

    BOTH = "both"
    ONLY_TRUE = "only_true"


class PresenceCheck(str, Enum):
    """How a shape family decides that an optional value was supplied."""

    TRUTHY = "truthy"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"


class OpenApiVersion(str, Enum):
    V3_0 = "3.0.3"
    V3_1 = "3.1.0"


LEGACY_OPENAPI_VERSION_MAP: dict[str, OpenApiVersion] = {
    "3": OpenApiVersion.V3_0,
    "3.0": OpenApiVersion.V3_0,
    "3.0.0": OpenApiVersion.V3_0,
    "3.0.1": OpenApiVersion.V3_0,
    "3.0.2": OpenApiVersion.V3_0,
    "3.0.3": OpenApiVersion.V3_0,
    "3.1": OpenApiVersion.V3_1,
    "3.1.0": OpenApiVersion.V3_1,
    "3.1.1": OpenApiVersion.V3_1,
}


def normalize_openapi_version(raw_value: str | OpenApiVersion) -> OpenApiVersion:
    """Normalize OpenAPI version labels into canonical enum values."""
    if isinstance(raw_value, OpenApiVersion):
        return raw_value
    normalized = LEGACY_OPENAPI_VERSION_MAP.get(str(raw_value).strip().lower().lstrip("v"))
    if normalized is None:
        raise ValueError(f"Unsupported OpenAPI version: {raw_value}")
    return normalized
