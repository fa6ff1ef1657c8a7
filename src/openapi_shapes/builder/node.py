"""Immutable schema nodes compiled into pydantic annotated types."""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass, replace
from functools import cached_property
from typing import Annotated, Any, Mapping, Optional

from annotated_types import Ge, Le, MaxLen, MinLen
from pydantic import (
    Base64Encoder,
    BaseModel,
    ConfigDict,
    EncodedBytes,
    Field,
    GetCoreSchemaHandler,
    Strict,
    TypeAdapter,
    create_model,
)
from pydantic.fields import FieldInfo
from pydantic.json_schema import DEFAULT_REF_TEMPLATE
from pydantic_core import PydanticUndefined, core_schema, to_jsonable_python

from openapi_shapes.builder.formats import SUPPORTED_FORMATS, format_annotations, membership_annotation
from openapi_shapes.schemas.enums import SchemaKind

LENGTH_KINDS = frozenset({SchemaKind.STRING, SchemaKind.BINARY, SchemaKind.ARRAY})
VALUE_KINDS = frozenset({SchemaKind.NUMBER, SchemaKind.INTEGER})
SUPPORTED_ENCODINGS = frozenset({"base64"})

_BASE_TYPES: dict[SchemaKind, type] = {
    SchemaKind.STRING: str,
    SchemaKind.BINARY: bytes,
    SchemaKind.NUMBER: float,
    SchemaKind.INTEGER: int,
    SchemaKind.BOOLEAN: bool,
}
_RESERVED_FIELD_NAMES = frozenset(dir(BaseModel))
_WORD_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


@dataclass(frozen=True, eq=False)
class SchemaNode:
    """A configured validator/documentation unit.

    Nodes never change after construction: every configuration method returns
    a new node. The pydantic artifacts (``annotation``, ``adapter``, ``model``)
    are compiled on first access and cached on the node.

    ``required`` is tri-state: ``True`` and ``False`` are explicit choices,
    ``None`` leaves pydantic's own rule in place (a property without a default
    is required, one with a default is optional).
    """

    kind: SchemaKind
    description: str | None = None
    required: bool | None = None
    nullable: bool = False
    default: Any = PydanticUndefined
    example: Any = PydanticUndefined
    lower: int | float | None = None
    upper: int | float | None = None
    formats: tuple[str, ...] = ()
    encoded_as: str | None = None
    allowed: tuple[Any, ...] | None = None
    tags: tuple[tuple[str, Any], ...] = ()
    strict_types: bool = False
    properties: tuple[tuple[str, SchemaNode], ...] | None = None
    items: SchemaNode | None = None
    title: str | None = None

    @classmethod
    def object_of(
        cls, properties: Mapping[str, SchemaNode], *, title: str | None = None
    ) -> SchemaNode:
        """Create an object node with a fixed property map."""
        return cls(SchemaKind.OBJECT, properties=tuple(properties.items()), title=title)

    @classmethod
    def array_of(cls, items: SchemaNode) -> SchemaNode:
        """Create an array node whose elements match ``items``."""
        return cls(SchemaKind.ARRAY, items=items)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.is_instance_schema(cls)

    # configuration

    def describe(self, text: str) -> SchemaNode:
        return replace(self, description=text)

    def mark_required(self) -> SchemaNode:
        return replace(self, required=True)

    def mark_optional(self) -> SchemaNode:
        return replace(self, required=False)

    def allow_null(self) -> SchemaNode:
        return replace(self, nullable=True)

    def min(self, limit: int | float) -> SchemaNode:
        """Set the lower length bound, or the lower value bound for numbers."""
        self._ensure_bounded("min")
        return replace(self, lower=limit)

    def max(self, limit: int | float) -> SchemaNode:
        """Set the upper length bound, or the upper value bound for numbers."""
        self._ensure_bounded("max")
        return replace(self, upper=limit)

    def with_default(self, value: Any) -> SchemaNode:
        return replace(self, default=value)

    def with_example(self, value: Any) -> SchemaNode:
        return replace(self, example=value)

    def valid(self, *values: Any) -> SchemaNode:
        """Restrict the node to exactly ``values``, keeping their order."""
        if not values:
            raise ValueError("valid() requires at least one value")
        return replace(self, allowed=tuple(values))

    def meta(self, **tags: Any) -> SchemaNode:
        merged = dict(self.tags)
        merged.update(tags)
        return replace(self, tags=tuple(merged.items()))

    def format(self, name: str) -> SchemaNode:
        """Add a string format check such as ``email`` or ``uuidv4``."""
        if self.kind is not SchemaKind.STRING:
            raise TypeError(f"Formats apply to string nodes, not {self.kind.value}")
        if name not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported format: {name}")
        if name in self.formats:
            return self
        return replace(self, formats=(*self.formats, name))

    def encoding(self, name: str) -> SchemaNode:
        if self.kind is not SchemaKind.BINARY:
            raise TypeError(f"Encodings apply to binary nodes, not {self.kind.value}")
        if name not in SUPPORTED_ENCODINGS:
            raise ValueError(f"Unsupported encoding: {name}")
        return replace(self, encoded_as=name)

    def integer(self) -> SchemaNode:
        if self.kind not in VALUE_KINDS:
            raise TypeError(f"integer() applies to numeric nodes, not {self.kind.value}")
        return replace(self, kind=SchemaKind.INTEGER)

    def strict(self) -> SchemaNode:
        """Disable pydantic's lax coercion for this node."""
        return replace(self, strict_types=True)

    def _ensure_bounded(self, method: str) -> None:
        if self.kind not in LENGTH_KINDS | VALUE_KINDS:
            raise TypeError(f"{method}() does not apply to {self.kind.value} nodes")

    # introspection

    @property
    def has_default(self) -> bool:
        return self.default is not PydanticUndefined

    @property
    def has_example(self) -> bool:
        return self.example is not PydanticUndefined

    @property
    def metadata(self) -> dict[str, Any]:
        return dict(self.tags)

    @property
    def format_hint(self) -> str | None:
        return self.metadata.get("format")

    # compilation

    @cached_property
    def model(self) -> type[BaseModel] | None:
        """Pydantic model backing an object node, ``None`` for other kinds."""
        if self.kind is not SchemaKind.OBJECT:
            return None
        title = self.title or "Object"
        properties = self.properties or ()
        taken = {name for name, _ in properties}
        fields: dict[str, Any] = {}
        for index, (name, node) in enumerate(properties):
            key = _field_key(name, index, taken)
            taken.add(key)
            suffix = _pascal_case(name) or f"Property{index}"
            nested = _with_model_name(node, f"{title}{suffix}")
            fields[key] = nested.field_definition(alias=name)
        return create_model(
            title,
            __config__=ConfigDict(extra="forbid"),
            **fields,
        )

    @cached_property
    def annotation(self) -> Any:
        """The node as an ``Annotated`` type usable anywhere pydantic accepts one."""
        inner = Annotated[(self._base_type(), *self._constraints())]
        outer = Optional[inner] if self.nullable else inner
        return Annotated[
            outer,
            Field(
                description=self.description,
                examples=[self.example] if self.has_example else None,
            ),
        ]

    @cached_property
    def adapter(self) -> TypeAdapter[Any]:
        return TypeAdapter(self.annotation)

    def field_definition(self, alias: str | None = None) -> tuple[Any, FieldInfo]:
        """Return the ``(annotation, FieldInfo)`` pair for use as a model property."""
        if self.required is True:
            info = Field(alias=alias)
        elif self.required is False:
            info = Field(default=self.default if self.has_default else None, alias=alias)
        elif self.has_default:
            info = Field(default=self.default, alias=alias)
        else:
            info = Field(alias=alias)
        return self.annotation, info

    def validate(self, value: Any) -> Any:
        """Validate a Python value; objects come back as model instances."""
        return self.adapter.validate_python(value)

    def validate_json(self, data: str | bytes) -> Any:
        return self.adapter.validate_json(data)

    def dump(self, value: Any) -> Any:
        """Serialize a validated value to JSON-compatible Python data."""
        return self.adapter.dump_python(value, mode="json", by_alias=True)

    def json_schema(self, *, ref_template: str = DEFAULT_REF_TEMPLATE) -> dict[str, Any]:
        schema = self.adapter.json_schema(by_alias=True, ref_template=ref_template)
        if self.has_default:
            schema.setdefault("default", to_jsonable_python(self.default))
        return schema

    def _base_type(self) -> Any:
        if self.kind is SchemaKind.OBJECT:
            return self.model
        if self.kind is SchemaKind.ARRAY:
            if self.items is None:
                raise ValueError("Array nodes require an element node")
            return list[self.items.annotation]
        return _BASE_TYPES[self.kind]

    def _constraints(self) -> list[Any]:
        constraints: list[Any] = []
        if self.strict_types:
            constraints.append(Strict())
        if self.encoded_as == "base64":
            constraints.append(EncodedBytes(encoder=Base64Encoder))
        if self.lower is not None:
            constraints.append(MinLen(self.lower) if self.kind in LENGTH_KINDS else Ge(self.lower))
        if self.upper is not None:
            constraints.append(MaxLen(self.upper) if self.kind in LENGTH_KINDS else Le(self.upper))
        for name in self.formats:
            constraints.extend(format_annotations(name))
        if self.allowed is not None:
            constraints.append(membership_annotation(self.allowed))
        constraints.append(Field(json_schema_extra=self._json_schema_extra() or None))
        return constraints

    def _json_schema_extra(self) -> dict[str, Any]:
        extra = self.metadata
        if self.allowed is not None:
            extra["enum"] = to_jsonable_python(list(self.allowed))
        return extra


def _field_key(name: str, index: int, taken: set[str]) -> str:
    if (
        name.isidentifier()
        and not keyword.iskeyword(name)
        and not name.startswith(("_", "model_"))
        and name not in _RESERVED_FIELD_NAMES
    ):
        return name
    key = f"property_{index}"
    while key in taken:
        key = f"{key}_"
    return key


def _pascal_case(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in _WORD_SEPARATORS.split(name) if part)


def _with_model_name(node: SchemaNode, name: str) -> SchemaNode:
    """Title untitled nested objects so sibling models get distinct names."""
    if node.kind is SchemaKind.OBJECT and node.title is None:
        return replace(node, title=name)
    if node.kind is SchemaKind.ARRAY and node.items is not None:
        items = _with_model_name(node.items, f"{name}Item")
        if items is not node.items:
            return replace(node, items=items)
    return node
