"""OpenAPI schema fragments for schema nodes.

pydantic emits JSON Schema 2020-12, which OpenAPI 3.1 embeds unchanged apart
from where component references point. OpenAPI 3.0 predates that alignment:
null is expressed with ``nullable`` and a single ``example`` replaces the
``examples`` list.
"""

from __future__ import annotations

import logging
from typing import Any

from openapi_shapes.builder.node import SchemaNode
from openapi_shapes.constants import COMPONENTS_REF_TEMPLATE
from openapi_shapes.schemas.enums import OpenApiVersion, normalize_openapi_version

LOGGER = logging.getLogger(__name__)

NULL_SCHEMA = {"type": "null"}
_NAMED_SCHEMA_MAPS = frozenset({"properties", "$defs", "patternProperties"})
_SCHEMA_LISTS = frozenset({"anyOf", "allOf", "oneOf", "prefixItems"})
_SCHEMA_VALUES = frozenset({"items", "additionalProperties", "not"})


def to_openapi_schema(
    node: SchemaNode,
    version: str | OpenApiVersion = OpenApiVersion.V3_1,
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return ``(schema, components)`` for ``node``.

    ``components`` holds the object schemas the fragment references through
    ``#/components/schemas/<name>``; it is empty for scalar nodes.
    """
    target = normalize_openapi_version(version)
    schema = node.json_schema(ref_template=COMPONENTS_REF_TEMPLATE)
    components: dict[str, Any] = schema.pop("$defs", {})
    if target is OpenApiVersion.V3_0:
        schema = downgrade_to_openapi_30(schema)
        components = {
            name: downgrade_to_openapi_30(component)
            for name, component in components.items()
        }
    LOGGER.debug(
        "Exported %s node for OpenAPI %s with %d component(s)",
        node.kind.value,
        target.value,
        len(components),
    )
    return schema, components


def downgrade_to_openapi_30(schema: dict[str, Any]) -> dict[str, Any]:
    """Rewrite a JSON Schema 2020-12 fragment into the OpenAPI 3.0 dialect."""
    converted: dict[str, Any] = {}
    for key, value in schema.items():
        if key in _NAMED_SCHEMA_MAPS and isinstance(value, dict):
            converted[key] = {
                name: downgrade_to_openapi_30(item) for name, item in value.items()
            }
        elif key in _SCHEMA_LISTS and isinstance(value, list):
            converted[key] = [downgrade_to_openapi_30(item) for item in value]
        elif key in _SCHEMA_VALUES and isinstance(value, dict):
            converted[key] = downgrade_to_openapi_30(value)
        else:
            converted[key] = value

    any_of = converted.get("anyOf")
    if isinstance(any_of, list) and NULL_SCHEMA in any_of:
        remaining = [item for item in any_of if item != NULL_SCHEMA]
        del converted["anyOf"]
        if len(remaining) == 1 and "$ref" in remaining[0]:
            converted["allOf"] = remaining
        elif len(remaining) == 1:
            converted = {**remaining[0], **converted}
        else:
            converted["anyOf"] = remaining
        converted["nullable"] = True

    examples = converted.get("examples")
    if isinstance(examples, list) and examples and "example" not in converted:
        converted["example"] = examples[0]
        del converted["examples"]
    return converted
