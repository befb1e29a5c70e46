# src/graphload/core/model_utils.py
"""Lookups over a target's mappings."""

from __future__ import annotations

from collections.abc import Iterable

from graphload.contracts import FragmentType, RoleType, Target


def field_or_constants(
    target: Target,
    fragment_type: FragmentType,
    roles: Iterable[RoleType],
) -> list[str]:
    """Values resolved by the target's mappings for a fragment and role set.

    Mappings are visited in declaration order. A non-blank constant wins over
    the mapping's field; mappings carrying neither resolve to nothing.
    """
    wanted = frozenset(roles)
    values: list[str] = []
    for mapping in target.mappings:
        if mapping.fragment_type != fragment_type or mapping.role not in wanted:
            continue
        if mapping.constant and mapping.constant.strip():
            values.append(mapping.constant)
        elif mapping.field and mapping.field.strip():
            values.append(mapping.field)
    return values


def first_field_or_constant(
    target: Target,
    fragment_type: FragmentType,
    roles: Iterable[RoleType],
) -> str:
    """First value from field_or_constants(), or "" when none resolves."""
    values = field_or_constants(target, fragment_type, roles)
    return values[0] if values else ""


def field_is_mapped(target: Target, field_name: str | None) -> bool:
    """Whether some mapping of the target reads ``field_name``."""
    if field_name is None:
        return False
    return any(mapping.field == field_name for mapping in target.mappings)
