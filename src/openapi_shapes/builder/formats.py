"""String format checks layered on top of pydantic's type validation.

Each check runs after the base ``str`` validation and returns the input
unchanged; formats only constrain, they never coerce.
"""

from __future__ import annotations

import ipaddress
import re
from datetime import datetime
from functools import partial
from ipaddress import IPv4Address, IPv6Address
from typing import Any, Callable, Sequence

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, AnyUrl, StringConstraints, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

UUID_V4_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}$"
)
# Used with fullmatch; ``$`` would also accept a trailing newline.
HOSTNAME_LABEL = re.compile(r"(?!-)[A-Za-z0-9-]{1,63}(?<!-)")
MAX_HOSTNAME_LENGTH = 253

_URI_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)
_IPV4_ADAPTER: TypeAdapter[IPv4Address] = TypeAdapter(IPv4Address)
_IPV6_ADAPTER: TypeAdapter[IPv6Address] = TypeAdapter(IPv6Address)


def _check_email(value: str) -> str:
    # Bare addresses only; "Name <addr>" forms are rejected.
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise PydanticCustomError(
            "email",
            "Input should be a valid email address: {reason}",
            {"reason": str(exc)},
        ) from exc
    return value


def _check_with_adapter(
    adapter: TypeAdapter[Any], error_type: str, message: str, value: str
) -> str:
    try:
        adapter.validate_python(value)
    except ValidationError as exc:
        raise PydanticCustomError(error_type, message) from exc
    return value


def _is_ip_address(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def _check_hostname(value: str) -> str:
    if _is_ip_address(value):
        return value
    candidate = value[:-1] if value.endswith(".") else value
    if 0 < len(candidate) <= MAX_HOSTNAME_LENGTH and all(
        HOSTNAME_LABEL.fullmatch(label) for label in candidate.split(".")
    ):
        return value
    raise PydanticCustomError("hostname", "Input should be a valid hostname")


def _check_iso_date(value: str) -> str:
    try:
        datetime.fromisoformat(value)
    except ValueError as exc:
        raise PydanticCustomError(
            "iso_date", "Input should be a valid ISO 8601 date"
        ) from exc
    return value


FORMAT_VALIDATORS: dict[str, Callable[[str], str]] = {
    "email": _check_email,
    "uri": partial(_check_with_adapter, _URI_ADAPTER, "uri", "Input should be a valid URI"),
    "hostname": _check_hostname,
    "ipv4": partial(
        _check_with_adapter, _IPV4_ADAPTER, "ipv4", "Input should be a valid IPv4 address"
    ),
    "ipv6": partial(
        _check_with_adapter, _IPV6_ADAPTER, "ipv6", "Input should be a valid IPv6 address"
    ),
    "iso_date": _check_iso_date,
}

FORMAT_PATTERNS: dict[str, str] = {
    "uuidv4": UUID_V4_PATTERN,
}

SUPPORTED_FORMATS = frozenset(FORMAT_VALIDATORS) | frozenset(FORMAT_PATTERNS)


def format_annotations(name: str) -> list[Any]:
    """Return the pydantic metadata enforcing the named format."""
    if name in FORMAT_PATTERNS:
        return [StringConstraints(pattern=FORMAT_PATTERNS[name])]
    if name in FORMAT_VALIDATORS:
        return [AfterValidator(FORMAT_VALIDATORS[name])]
    raise ValueError(f"Unsupported format: {name}")


def _check_membership(allowed: Sequence[Any], value: Any) -> Any:
    if value not in allowed:
        raise PydanticCustomError(
            "enum",
            "Input should be {expected}",
            {"expected": ", ".join(repr(item) for item in allowed)},
        )
    return value


def membership_annotation(allowed: Sequence[Any]) -> AfterValidator:
    """Return a validator accepting only the given values."""
    return AfterValidator(partial(_check_membership, tuple(allowed)))
