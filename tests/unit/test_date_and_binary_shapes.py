"""Date, date-time and byte shape tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from openapi_shapes.builder import binary, byte, date, date_time
from openapi_shapes.schemas.enums import SchemaKind


def test_date_time_accepts_iso_strings_up_to_24_chars() -> None:
    """DateTime validates ISO 8601 and caps length at 24."""
    node = date_time()
    assert node.upper == 24
    assert node.validate("2024-05-01T10:20:30Z") == "2024-05-01T10:20:30Z"
    with pytest.raises(ValidationError):
        node.validate("2024-05-01T10:20:30.123456+00:00")
    with pytest.raises(ValidationError):
        node.validate("yesterday")


def test_date_time_ignores_default_and_example() -> None:
    """Only description, required and nullable apply to DateTime."""
    node = date_time(
        description="Creation time",
        required=True,
        nullable=True,
        default="2024-01-01T00:00:00Z",
        example="2024-01-01T00:00:00Z",
    )
    assert node.description == "Creation time"
    assert node.required is True
    assert node.nullable is True
    assert node.has_default is False
    assert node.has_example is False


def test_date_time_ignores_length_options() -> None:
    """Length options are accepted by DateTime but never applied."""
    node = date_time(min_length=3, max_length=40)
    assert (node.lower, node.upper) == (None, 24)
    assert date(min_length=1, max_length=99).upper == 10


def test_date_is_exactly_ten_characters() -> None:
    """Date narrows DateTime to a 10 character ISO date."""
    node = date()
    assert node.format_hint == "date"
    assert (node.lower, node.upper) == (10, 10)
    assert node.validate("2024-05-01") == "2024-05-01"
    with pytest.raises(ValidationError):
        node.validate("2024-05-1")
    with pytest.raises(ValidationError):
        node.validate("2024-05-011")


def test_date_required_false_marks_optional() -> None:
    """Date inherits DateTime's two-sided required handling."""
    assert date(required=False).required is False


def test_binary_length_bounds() -> None:
    """Binary supports length constraints on raw bytes."""
    node = binary(min_length=2, max_length=3)
    assert node.kind is SchemaKind.BINARY
    assert node.validate(b"ab") == b"ab"
    with pytest.raises(ValidationError):
        node.validate(b"a")
    with pytest.raises(ValidationError):
        node.validate(b"abcd")


def test_byte_decodes_base64() -> None:
    """Byte expects base64 text and yields the decoded bytes."""
    node = byte()
    assert node.encoded_as == "base64"
    assert node.validate("aGVsbG8=") == b"hello"
    assert node.json_schema()["format"] == "base64"


def test_byte_bounds_apply_to_decoded_length() -> None:
    """Byte length bounds measure the decoded payload."""
    node = byte(min_length=5, max_length=5)
    assert node.validate("aGVsbG8=") == b"hello"
    with pytest.raises(ValidationError):
        node.validate("aGk=")
