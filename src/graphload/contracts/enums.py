"""Closed vocabularies used by the job specification model.

Every enum here mirrors a value set accepted by the job-spec schema. The
validators dispatch on these values, so adding a member here without teaching
the validators about it is a model drift bug (see UnknownTargetTypeError).
"""

from enum import StrEnum


class TargetType(StrEnum):
    """Kind of graph construct a target writes."""

    NODE = "node"
    EDGE = "edge"
    CUSTOM_QUERY = "custom_query"


class FragmentType(StrEnum):
    """Structural part of a node or relationship that a mapping feeds.

    - NODE: the node itself (node targets only)
    - SOURCE: the relationship's start node
    - TARGET: the relationship's end node
    - REL: the relationship body
    """

    NODE = "node"
    SOURCE = "source"
    TARGET = "target"
    REL = "rel"


class RoleType(StrEnum):
    """Semantic purpose of a mapped field."""

    KEY = "key"
    PROPERTY = "property"
    LABEL = "label"
    TYPE = "type"


class PropertyType(StrEnum):
    """Declared value type of a mapped property."""

    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    BIG_DECIMAL = "big_decimal"
    BOOLEAN = "boolean"
    BYTES = "bytes"
    DATE = "date"
    TIME = "time"
    LOCAL_TIME = "local_time"
    DATETIME = "datetime"
    LOCAL_DATETIME = "local_datetime"
    DURATION = "duration"
    POINT = "point"


class SaveMode(StrEnum):
    """How a target's rows are persisted relative to existing graph data."""

    APPEND = "append"
    MERGE = "merge"
    CREATE = "create"


class EdgeNodesMatchMode(StrEnum):
    """How a relationship target resolves its endpoint nodes."""

    MATCH = "match"
    MERGE = "merge"
    CREATE = "create"


class ActionType(StrEnum):
    """Kind of side-effect an action performs."""

    CYPHER = "cypher"
    HTTP_GET = "http_get"
    HTTP_POST = "http_post"
    BIGQUERY = "bigquery"


class ActionExecuteAfter(StrEnum):
    """What an action waits for before it runs.

    Phase values (START, SOURCES, NODES, ...) refer to a whole stage of the
    import. Item values (SOURCE, NODE, EDGE, CUSTOM_QUERY, ACTION) refer to one
    named item and require Action.execute_after_name.
    """

    START = "start"
    PRELOADS = "preloads"
    SOURCES = "sources"
    NODES = "nodes"
    EDGES = "edges"
    CUSTOM_QUERIES = "custom_queries"
    LOADS = "loads"
    SOURCE = "source"
    NODE = "node"
    EDGE = "edge"
    CUSTOM_QUERY = "custom_query"
    ACTION = "action"

    @property
    def names_single_item(self) -> bool:
        """Whether this value points at one named source, target or action."""
        return self in _SINGLE_ITEM_DEPENDENCIES


_SINGLE_ITEM_DEPENDENCIES = frozenset(
    {
        ActionExecuteAfter.SOURCE,
        ActionExecuteAfter.NODE,
        ActionExecuteAfter.EDGE,
        ActionExecuteAfter.CUSTOM_QUERY,
        ActionExecuteAfter.ACTION,
    }
)
