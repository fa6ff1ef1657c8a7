"""Shape descriptor contracts consumed by the builder facade."""

from __future__ import annotations

from typing import Any

from pydantic import Field, StrictFloat, StrictInt

from openapi_shapes.builder.node import SchemaNode
from openapi_shapes.schemas.base import DescriptorModel


class CommonParameters(DescriptorModel):
    """Options shared by every shape."""

    description: str | None = None
    required: bool | None = None
    nullable: bool | None = None


class StringParameters(CommonParameters):
    """Options for text shapes and raw byte shapes."""

    default: str | None = None
    example: str | None = None
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)


class StringEnumParameters(CommonParameters):
    """Options for text restricted to an exact set of values."""

    values: list[str] = Field(min_length=1)
    default: str | None = None
    example: str | None = None


class DateParameters(CommonParameters):
    """Options for ISO dates and date-times.

    Every field beyond the common ones is accepted for symmetry with the
    other text shapes and never applied.
    """

    default: Any = None
    example: Any = None
    min_length: Any = None
    max_length: Any = None


class NumberParameters(CommonParameters):
    """Options for numeric shapes.

    Bounds, ``default`` and ``example`` are applied only when they are real
    numbers; booleans, numeric strings and other values are ignored.
    """

    default: Any = None
    example: Any = None
    min_value: Any = None
    max_value: Any = None


class NumberEnumParameters(CommonParameters):
    """Options for numbers restricted to an exact set of values."""

    values: list[StrictInt | StrictFloat] = Field(min_length=1)
    default: Any = None
    example: Any = None


class BooleanParameters(CommonParameters):
    """Options for strict booleans; non-boolean defaults and examples are ignored."""

    default: Any = None
    example: Any = None


class ObjectParameters(CommonParameters):
    """Options for objects with a fixed property map."""

    properties: dict[str, SchemaNode]
    title: str | None = Field(default=None, min_length=1)
    default: dict[str, Any] | None = None
    example: dict[str, Any] | None = None


class ArrayParameters(CommonParameters):
    """Options for homogeneous arrays."""

    array_type: SchemaNode
    default: list[Any] | None = None
    example: list[Any] | None = None
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)


EmailParameters = StringParameters
UriParameters = StringParameters
HostnameParameters = StringParameters
PasswordParameters = StringParameters
UuidParameters = StringParameters
IpParameters = StringParameters
BinaryParameters = StringParameters
ByteParameters = StringParameters
IntegerParameters = NumberParameters
IntegerEnumParameters = NumberEnumParameters
