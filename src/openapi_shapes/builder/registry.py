"""Shape registry and declarative node construction."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from openapi_shapes.builder import types
from openapi_shapes.builder.node import SchemaNode
from openapi_shapes.schemas.enums import SchemaKind

LOGGER = logging.getLogger(__name__)


class UnknownShapeError(KeyError):
    """Raised when a shape name is not registered."""


@dataclass(frozen=True)
class ShapeInfo:
    """Registry entry for one shape."""

    name: str
    factory: Callable[..., SchemaNode]
    kind: SchemaKind
    format_hint: str | None = None
    mandatory: tuple[str, ...] = ()


SHAPES: dict[str, ShapeInfo] = {
    info.name: info
    for info in (
        ShapeInfo("String", types.string, SchemaKind.STRING),
        ShapeInfo("StringEnum", types.string_enum, SchemaKind.STRING, mandatory=("values",)),
        ShapeInfo("Email", types.email, SchemaKind.STRING),
        ShapeInfo("Password", types.password, SchemaKind.STRING, "password"),
        ShapeInfo("Uuid", types.uuid, SchemaKind.STRING, "uuid"),
        ShapeInfo("Uri", types.uri, SchemaKind.STRING, "uri"),
        ShapeInfo("Hostname", types.hostname, SchemaKind.STRING, "hostname"),
        ShapeInfo("Ipv4", types.ipv4, SchemaKind.STRING, "ipv4"),
        ShapeInfo("Ipv6", types.ipv6, SchemaKind.STRING, "ipv6"),
        ShapeInfo("Binary", types.binary, SchemaKind.BINARY),
        ShapeInfo("Byte", types.byte, SchemaKind.BINARY),
        ShapeInfo("DateTime", types.date_time, SchemaKind.STRING),
        ShapeInfo("Date", types.date, SchemaKind.STRING, "date"),
        ShapeInfo("Number", types.number, SchemaKind.NUMBER),
        ShapeInfo("NumberEnum", types.number_enum, SchemaKind.NUMBER, mandatory=("values",)),
        ShapeInfo("Integer", types.integer, SchemaKind.INTEGER),
        ShapeInfo("IntegerEnum", types.integer_enum, SchemaKind.INTEGER, mandatory=("values",)),
        ShapeInfo("Boolean", types.boolean, SchemaKind.BOOLEAN),
        ShapeInfo("Object", types.object_, SchemaKind.OBJECT, mandatory=("properties",)),
        ShapeInfo("Array", types.array, SchemaKind.ARRAY, mandatory=("array_type",)),
    )
}

_LOOKUP: dict[str, ShapeInfo] = {
    name.lower(): info for name, info in SHAPES.items()
}


def _normalize(name: str) -> str:
    return name.strip().replace("_", "").replace("-", "").lower()


def get_shape(name: str) -> ShapeInfo:
    """Resolve a shape by name; ``date_time``, ``date-time`` and ``DateTime`` match."""
    info = _LOOKUP.get(_normalize(name))
    if info is None:
        raise UnknownShapeError(f"Unknown shape: {name}")
    return info


def build(definition: Mapping[str, Any]) -> SchemaNode:
    """Build a node from a plain mapping such as ``{"shape": "Uuid", "required": True}``.

    Nested ``properties`` values and ``array_type``/``arrayType`` may be
    mappings themselves and are built recursively.
    """
    payload = dict(definition)
    shape = payload.pop("shape", None)
    if not shape:
        raise ValueError("Shape definitions require a 'shape' entry")
    info = get_shape(str(shape))

    properties = payload.get("properties")
    if isinstance(properties, Mapping):
        payload["properties"] = {
            name: _resolve(value) for name, value in properties.items()
        }
    for key in ("array_type", "arrayType"):
        if key in payload:
            payload[key] = _resolve(payload[key])

    LOGGER.debug("Building %s node with options %s", info.name, sorted(payload))
    return info.factory(payload)


def _resolve(value: Any) -> Any:
    if isinstance(value, Mapping):
        return build(value)
    return value


def describe_shapes() -> list[ShapeInfo]:
    """Return registered shapes in declaration order."""
    return list(SHAPES.values())
