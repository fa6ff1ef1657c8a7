"""Shape registry tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from openapi_shapes.builder import SHAPES, UnknownShapeError, build, describe_shapes, get_shape
from openapi_shapes.schemas.enums import SchemaKind

VALID_UUID = "3fa85f64-5717-4562-b3fc-2c963f66afa6"


def test_registry_covers_every_shape() -> None:
    """Every factory is registered under its shape name."""
    assert list(SHAPES) == [
        "String",
        "StringEnum",
        "Email",
        "Password",
        "Uuid",
        "Uri",
        "Hostname",
        "Ipv4",
        "Ipv6",
        "Binary",
        "Byte",
        "DateTime",
        "Date",
        "Number",
        "NumberEnum",
        "Integer",
        "IntegerEnum",
        "Boolean",
        "Object",
        "Array",
    ]


def test_registry_metadata_matches_bare_nodes() -> None:
    """Kind and format hint in the registry match what factories build."""
    for info in describe_shapes():
        if info.mandatory:
            continue
        node = info.factory()
        assert node.kind is info.kind, info.name
        assert node.format_hint == info.format_hint, info.name


def test_shape_lookup_is_lenient() -> None:
    """Shape names match regardless of case and separators."""
    assert get_shape("date-time").name == "DateTime"
    assert get_shape("integer_enum").name == "IntegerEnum"
    assert get_shape(" uuid ").name == "Uuid"


def test_unknown_shape_raises() -> None:
    """Unknown names raise a KeyError subclass."""
    with pytest.raises(UnknownShapeError):
        get_shape("Money")
    with pytest.raises(KeyError):
        build({"shape": "Money"})


def test_build_requires_shape_entry() -> None:
    """Definitions without a shape entry are rejected."""
    with pytest.raises(ValueError):
        build({"required": True})


def test_build_nested_definition() -> None:
    """Nested property and element definitions are built recursively."""
    node = build(
        {
            "shape": "Object",
            "title": "Basket",
            "properties": {
                "id": {"shape": "Uuid", "required": True},
                "quantities": {
                    "shape": "Array",
                    "arrayType": {"shape": "Integer", "minValue": 1},
                    "maxLength": 2,
                },
            },
        }
    )
    assert node.kind is SchemaKind.OBJECT
    payload = {"id": VALID_UUID, "quantities": [1, 2]}
    assert node.dump(node.validate(payload)) == payload
    with pytest.raises(ValidationError):
        node.validate({"id": VALID_UUID, "quantities": [0]})
    with pytest.raises(ValidationError):
        node.validate({"id": VALID_UUID, "quantities": [1, 2, 3]})


def test_build_surfaces_contract_violations() -> None:
    """Missing mandatory fields propagate as validation errors."""
    with pytest.raises(ValidationError):
        build({"shape": "StringEnum"})
