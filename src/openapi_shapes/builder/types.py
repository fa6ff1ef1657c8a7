"""Shape factories: one function per supported data shape.

Every factory accepts a descriptor instance, a plain mapping (snake_case or
camelCase keys), keyword options, or nothing at all, and returns a fresh
:class:`~openapi_shapes.builder.node.SchemaNode`.

    >>> node = uuid(description="Order id", required=True)
    >>> node.validate("3fa85f64-5717-4562-b3fc-2c963f66afa6")
    '3fa85f64-5717-4562-b3fc-2c963f66afa6'
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from openapi_shapes.builder.node import SchemaNode
from openapi_shapes.builder.options import (
    ARRAY_POLICY,
    BOOLEAN_POLICY,
    DATE_TIME_POLICY,
    NUMBER_POLICY,
    OBJECT_POLICY,
    TEXT_POLICY,
    apply_options,
)
from openapi_shapes.schemas.base import DescriptorModel
from openapi_shapes.schemas.enums import SchemaKind
from openapi_shapes.schemas.parameters import (
    ArrayParameters,
    BooleanParameters,
    DateParameters,
    NumberEnumParameters,
    NumberParameters,
    ObjectParameters,
    StringEnumParameters,
    StringParameters,
)

ParametersT = TypeVar("ParametersT", bound=DescriptorModel)
ParametersInput = DescriptorModel | Mapping[str, Any] | None


def parse_parameters(
    model: type[ParametersT],
    parameters: ParametersInput,
    options: Mapping[str, Any],
    *,
    mandatory: bool = False,
) -> ParametersT | None:
    """Validate factory input into a descriptor of type ``model``.

    Returns ``None`` for an omitted optional configuration. Shapes with
    mandatory fields always validate, so a missing ``values``, ``properties``
    or ``array_type`` raises ``pydantic.ValidationError``.
    """
    if parameters is None and not options:
        return model.model_validate({}) if mandatory else None
    if isinstance(parameters, model) and not options:
        return parameters

    payload: dict[str, Any] = {}
    if isinstance(parameters, DescriptorModel):
        payload.update(
            {name: getattr(parameters, name) for name in parameters.model_fields_set}
        )
    elif parameters is not None:
        payload.update(parameters)
    payload.update(options)
    return model.model_validate(payload)


def _string(parameters: StringParameters | StringEnumParameters | None) -> SchemaNode:
    return apply_options(SchemaNode(SchemaKind.STRING), parameters, TEXT_POLICY)


def _number(parameters: NumberParameters | NumberEnumParameters | None) -> SchemaNode:
    return apply_options(SchemaNode(SchemaKind.NUMBER), parameters, NUMBER_POLICY)


def string(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    return _string(parse_parameters(StringParameters, parameters, options))


def string_enum(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """Text restricted to ``values``."""
    params = parse_parameters(StringEnumParameters, parameters, options, mandatory=True)
    assert params is not None
    return _string(params).valid(*params.values)


def email(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    return string(parameters, **options).format("email")


def password(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """Plain text tagged as a password; no extra constraint."""
    return string(parameters, **options).meta(format="password")


def uuid(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """A version 4 UUID; the 36 character length overrides caller bounds."""
    return (
        string(parameters, **options)
        .format("uuidv4")
        .meta(format="uuid")
        .min(36)
        .max(36)
    )


def uri(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    return string(parameters, **options).format("uri").meta(format="uri")


def hostname(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    return string(parameters, **options).format("hostname").meta(format="hostname")


def ipv4(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    return string(parameters, **options).format("ipv4").meta(format="ipv4").min(7).max(15)


def ipv6(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    return string(parameters, **options).format("ipv6").meta(format="ipv6").min(3).max(45)


def binary(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    params = parse_parameters(StringParameters, parameters, options)
    return apply_options(SchemaNode(SchemaKind.BINARY), params, TEXT_POLICY)


def byte(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """Binary data expected as base64 text."""
    return binary(parameters, **options).encoding("base64")


def date_time(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """ISO 8601 date-time text of at most 24 characters.

    Only ``description``, ``required`` and ``nullable`` are honored here;
    ``default`` and ``example`` are accepted but not applied.
    """
    params = parse_parameters(DateParameters, parameters, options)
    node = SchemaNode(SchemaKind.STRING).format("iso_date").max(24)
    return apply_options(node, params, DATE_TIME_POLICY)


def date(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """ISO 8601 calendar date, exactly 10 characters."""
    return date_time(parameters, **options).meta(format="date").min(10).max(10)


def number(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """Any number.

    ``required=False`` is ignored: the node keeps the default requiredness,
    unlike text and boolean shapes where it marks the node optional.
    """
    return _number(parse_parameters(NumberParameters, parameters, options))


def number_enum(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    params = parse_parameters(NumberEnumParameters, parameters, options, mandatory=True)
    assert params is not None
    return _number(params).valid(*params.values)


def integer(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    return number(parameters, **options).integer()


def integer_enum(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    params = parse_parameters(NumberEnumParameters, parameters, options, mandatory=True)
    assert params is not None
    return _number(params).integer().valid(*params.values)


def boolean(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """A strict boolean: ``"true"``, ``1`` and friends are rejected."""
    params = parse_parameters(BooleanParameters, parameters, options)
    return apply_options(SchemaNode(SchemaKind.BOOLEAN).strict(), params, BOOLEAN_POLICY)


def object_(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """An object with exactly the given properties; unknown keys are rejected."""
    params = parse_parameters(ObjectParameters, parameters, options, mandatory=True)
    assert params is not None
    node = SchemaNode.object_of(params.properties, title=params.title)
    return apply_options(node, params, OBJECT_POLICY)


def array(parameters: ParametersInput = None, /, **options: Any) -> SchemaNode:
    """A list whose elements all match ``array_type``."""
    params = parse_parameters(ArrayParameters, parameters, options, mandatory=True)
    assert params is not None
    return apply_options(SchemaNode.array_of(params.array_type), params, ARRAY_POLICY)


class Types:
    """Shape factories under their OpenAPI-facing names."""

    String = staticmethod(string)
    StringEnum = staticmethod(string_enum)
    Email = staticmethod(email)
    Password = staticmethod(password)
    Uuid = staticmethod(uuid)
    Uri = staticmethod(uri)
    Hostname = staticmethod(hostname)
    Ipv4 = staticmethod(ipv4)
    Ipv6 = staticmethod(ipv6)
    Binary = staticmethod(binary)
    Byte = staticmethod(byte)
    DateTime = staticmethod(date_time)
    Date = staticmethod(date)
    Number = staticmethod(number)
    NumberEnum = staticmethod(number_enum)
    Integer = staticmethod(integer)
    IntegerEnum = staticmethod(integer_enum)
    Boolean = staticmethod(boolean)
    Object = staticmethod(object_)
    Array = staticmethod(array)
