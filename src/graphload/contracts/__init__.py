"""Shared contracts: the parsed job-spec model, run options and their vocabularies.

Contracts are leaf modules. They import only pydantic and each other, never the
validators or the loaders.
"""

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
from graphload.contracts.job import (
    Action,
    Aggregation,
    JobSpec,
    Mapping,
    Source,
    Target,
    Transform,
)
from graphload.contracts.options import RunOptions

__all__ = [
    "Action",
    "ActionExecuteAfter",
    "ActionType",
    "Aggregation",
    "EdgeNodesMatchMode",
    "FragmentType",
    "JobSpec",
    "Mapping",
    "PropertyType",
    "RoleType",
    "RunOptions",
    "SaveMode",
    "Source",
    "Target",
    "TargetType",
    "Transform",
]
