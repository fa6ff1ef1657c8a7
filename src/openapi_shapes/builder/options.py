"""Common option application shared by every shape factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from openapi_shapes.builder.node import SchemaNode
from openapi_shapes.schemas.enums import PresenceCheck, RequiredMode
from openapi_shapes.schemas.parameters import CommonParameters


@dataclass(frozen=True)
class OptionPolicy:
    """Which common options a shape family honors, and how.

    ``bounds`` names the descriptor attributes holding the lower and upper
    bound, or ``None`` when the family takes no bounds.
    """

    required_mode: RequiredMode = RequiredMode.BOTH
    presence: PresenceCheck = PresenceCheck.TRUTHY
    bounds: tuple[str, str] | None = None
    honors_default: bool = True
    honors_example: bool = True


TEXT_POLICY = OptionPolicy(bounds=("min_length", "max_length"))
NUMBER_POLICY = OptionPolicy(
    required_mode=RequiredMode.ONLY_TRUE,
    presence=PresenceCheck.NUMERIC,
    bounds=("min_value", "max_value"),
)
BOOLEAN_POLICY = OptionPolicy(presence=PresenceCheck.BOOLEAN)
OBJECT_POLICY = OptionPolicy()
ARRAY_POLICY = OptionPolicy(bounds=("min_length", "max_length"))
DATE_TIME_POLICY = OptionPolicy(honors_default=False, honors_example=False)


def is_present(value: Any, presence: PresenceCheck) -> bool:
    """Decide whether an optional descriptor value counts as supplied."""
    if presence is PresenceCheck.NUMERIC:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if presence is PresenceCheck.BOOLEAN:
        return isinstance(value, bool)
    return bool(value)


def apply_options(
    node: SchemaNode,
    parameters: CommonParameters | None,
    policy: OptionPolicy,
) -> SchemaNode:
    """Apply the descriptor's common options to ``node`` under ``policy``."""
    if parameters is None:
        return node

    if parameters.description:
        node = node.describe(parameters.description)

    if isinstance(parameters.required, bool):
        if parameters.required:
            node = node.mark_required()
        elif policy.required_mode is RequiredMode.BOTH:
            node = node.mark_optional()

    if parameters.nullable:
        node = node.allow_null()

    if policy.bounds is not None:
        lower_name, upper_name = policy.bounds
        lower = getattr(parameters, lower_name, None)
        upper = getattr(parameters, upper_name, None)
        if is_present(lower, policy.presence):
            node = node.min(lower)
        if is_present(upper, policy.presence):
            node = node.max(upper)

    default = getattr(parameters, "default", None)
    if policy.honors_default and is_present(default, policy.presence):
        node = node.with_default(default)

    example = getattr(parameters, "example", None)
    if policy.honors_example and is_present(example, policy.presence):
        node = node.with_example(example)

    return node
