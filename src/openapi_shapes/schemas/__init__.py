"""Schema contract exports.

Shape descriptors live in ``openapi_shapes.schemas.parameters``; they depend
on the builder's node type and are imported from there directly.
"""

from openapi_shapes.schemas.base import DescriptorModel, StrictSchemaModel
from openapi_shapes.schemas.enums import (
    OpenApiVersion,
    PresenceCheck,
    RequiredMode,
    SchemaKind,
    normalize_openapi_version,
)

__all__ = [
    "DescriptorModel",
    "OpenApiVersion",
    "PresenceCheck",
    "RequiredMode",
    "SchemaKind",
    "StrictSchemaModel",
    "normalize_openapi_version",
]
