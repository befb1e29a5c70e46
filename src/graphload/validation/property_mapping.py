# src/graphload/validation/property_mapping.py
"""Per-property aggregation of mappings for cardinality checks.

A target property must be fed by exactly one source field and carry at most
one declared type. PropertyMapping collects every key/property mapping that
touches one property of one target and reports any fan-in.
"""

from __future__ import annotations

from collections.abc import Iterator

from graphload.contracts import Mapping, RoleType

# Label and type mappings name graph structure, not property values
_VALUE_ROLES = frozenset({RoleType.KEY, RoleType.PROPERTY})


class PropertyMapping:
    """Distinct source fields and declared types feeding one target property.

    Both collections are insertion-ordered sets (dict keys) so that reported
    lists follow first occurrence.
    """

    def __init__(self, target_name: str, property_name: str) -> None:
        self.target_name = target_name
        self.property_name = property_name
        self._source_fields: dict[str, None] = {}
        self._types: dict[str, None] = {}

    @property
    def source_fields(self) -> list[str]:
        return list(self._source_fields)

    @property
    def types(self) -> list[str]:
        return list(self._types)

    def add(self, mapping: Mapping) -> None:
        """Record a mapping. Repeats of the same field or type are absorbed."""
        if mapping.role not in _VALUE_ROLES:
            return
        if mapping.field is not None:
            self._source_fields[mapping.field] = None
        elif mapping.constant is not None:
            # Constants are listed quoted so they never collide with field names
            self._source_fields[f"'{mapping.constant}'"] = None
        if mapping.type is not None:
            self._types[mapping.type.value] = None

    def validate(self) -> Iterator[str]:
        """Yield one message per violated cardinality rule."""
        if len(self._source_fields) > 1:
            fields = ", ".join(self._source_fields)
            yield (
                f"Property {self.property_name} of target {self.target_name} "
                f"is mapped to too many source fields: {fields}"
            )
        if len(self._types) > 1:
            types = ", ".join(self._types)
            yield f"Property {self.property_name} of target {self.target_name} is mapped to too many types: {types}"
