"""Parsed job specification model.

These models are the in-memory form of a job-spec document after structural
(schema-level) validation. They are frozen: the validators read them and never
mutate them.

Example YAML:
    sources:
      - name: people
        query: "SELECT id, name, age FROM people"
    targets:
      - name: Person
        type: node
        source: people
        mappings:
          - {name: Person, constant: Person, fragment_type: node, role: label}
          - {name: id, field: id, fragment_type: node, role: key}
          - {name: age, field: age, fragment_type: node, role: property, type: integer}
    actions:
      - name: warm_cache
        type: cypher
        options:
          cypher: "CALL db.ping()"
"""

from typing import Any

from pydantic import BaseModel, Field

from graphload.contracts.enums import (
    ActionExecuteAfter,
    ActionType,
    EdgeNodesMatchMode,
    FragmentType,
    PropertyType,
    RoleType,
    SaveMode,
    TargetType,
)


class Source(BaseModel):
    """A named row provider, optionally defined by an extraction query."""

    model_config = {"frozen": True}

    name: str = Field(default="", description="Source identifier (unique within the job spec)")
    query: str | None = Field(default=None, description="Extraction query; must not order rows")


class Mapping(BaseModel):
    """Binding of one source field (or constant) to one target property."""

    model_config = {"frozen": True}

    name: str = Field(description="Target property name")
    field: str | None = Field(default=None, description="Source field feeding the property")
    constant: str | None = Field(default=None, description="Literal used instead of a source field")
    fragment_type: FragmentType = Field(description="Part of the node/relationship this mapping feeds")
    role: RoleType = Field(default=RoleType.PROPERTY, description="Semantic purpose of the mapped value")
    type: PropertyType | None = Field(default=None, description="Declared value type")
    indexed: bool = False
    unique: bool = False
    mandatory: bool = False


class Aggregation(BaseModel):
    """A field computed by a target's transform."""

    model_config = {"frozen": True}

    field: str | None = Field(default=None, description="Name of the computed field")
    expression: str = Field(default="", description="Aggregate expression, e.g. 'SUM(amount)'")


class Transform(BaseModel):
    """Optional reshaping applied to source rows before they reach a target.

    A transform whose fields all hold their defaults is a no-op.
    """

    model_config = {"frozen": True}

    sql: str | None = None
    group: bool = False
    aggregations: list[Aggregation] = Field(default_factory=list)
    order_by: str | None = None
    where: str | None = None
    limit: int = -1

    def is_default(self) -> bool:
        """Whether this transform leaves rows untouched."""
        return self == Transform()


class Target(BaseModel):
    """A node, relationship or custom-query write fed by one source."""

    model_config = {"frozen": True}

    name: str = Field(default="", description="Target identifier (unique among active targets)")
    active: bool = Field(default=True, description="Inactive targets are ignored entirely")
    type: TargetType = Field(description="Kind of graph construct written")
    source: str = Field(default="", description="Name of the source feeding this target")
    custom_query: str | None = Field(default=None, description="Hand-written query (custom_query targets)")
    mappings: list[Mapping] = Field(default_factory=list)
    transform: Transform = Field(default_factory=Transform)
    save_mode: SaveMode = SaveMode.APPEND
    edge_nodes_match_mode: EdgeNodesMatchMode = EdgeNodesMatchMode.MATCH


class Action(BaseModel):
    """A named side-effect run outside the main mapping flow."""

    model_config = {"frozen": True}

    name: str = Field(default="", description="Action identifier (unique within the job spec)")
    type: ActionType
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Type-specific options (cypher, url or sql)",
    )
    execute_after: ActionExecuteAfter | None = None
    execute_after_name: str | None = None


class JobSpec(BaseModel):
    """A complete import job: sources, targets and actions, in declaration order."""

    model_config = {"frozen": True}

    sources: list[Source] = Field(default_factory=list)
    targets: list[Target] = Field(default_factory=list)
    actions: list[Action] = Field(default_factory=list)

    def source_by_name(self, name: str) -> Source | None:
        """Return the first source called ``name``, or None."""
        for source in self.sources:
            if source.name == name:
                return source
        return None

    def active_targets(self) -> list[Target]:
        return [target for target in self.targets if target.active]
