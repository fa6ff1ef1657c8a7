"""Schema builder facade exports."""

from openapi_shapes.builder.node import SchemaNode
from openapi_shapes.builder.options import OptionPolicy, apply_options
from openapi_shapes.builder.registry import (
    SHAPES,
    ShapeInfo,
    UnknownShapeError,
    build,
    describe_shapes,
    get_shape,
)
from openapi_shapes.builder.types import (
    Types,
    array,
    binary,
    boolean,
    byte,
    date,
    date_time,
    email,
    hostname,
    integer,
    integer_enum,
    ipv4,
    ipv6,
    number,
    number_enum,
    object_,
    password,
    string,
    string_enum,
    uri,
    uuid,
)

__all__ = [
    "OptionPolicy",
    "SHAPES",
    "SchemaNode",
    "ShapeInfo",
    "Types",
    "UnknownShapeError",
    "apply_options",
    "array",
    "binary",
    "boolean",
    "build",
    "byte",
    "date",
    "date_time",
    "describe_shapes",
    "email",
    "get_shape",
    "hostname",
    "integer",
    "integer_enum",
    "ipv4",
    "ipv6",
    "number",
    "number_enum",
    "object_",
    "password",
    "string",
    "string_enum",
    "uri",
    "uuid",
]
