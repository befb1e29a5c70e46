# tests/property/conftest.py
"""Shared Hypothesis strategies for job-spec property tests.

Usage:
    from tests.property.conftest import job_specs, names

    @given(spec=job_specs())
    def test_something(spec: JobSpec) -> None:
        ...
"""

from __future__ import annotations

from hypothesis import strategies as st

from graphload.contracts import (
    Action,
    ActionType,
    EdgeNodesMatchMode,
    FragmentType,
    JobSpec,
    Mapping,
    PropertyType,
    RoleType,
    SaveMode,
    Source,
    Target,
    TargetType,
)

# Short identifiers keep collisions (duplicates, fan-in) likely
names = st.text(alphabet="abcAB_ ", min_size=0, max_size=4)

queries = st.one_of(
    st.none(),
    st.sampled_from(
        [
            "SELECT * FROM t",
            "SELECT * FROM t ORDER BY id",
            "select * from t order   by id",
            "SELECT border FROM t",
        ]
    ),
)

mappings = st.builds(
    Mapping,
    name=names,
    field=st.one_of(st.none(), names),
    constant=st.one_of(st.none(), names),
    fragment_type=st.sampled_from(FragmentType),
    role=st.sampled_from(RoleType),
    type=st.one_of(st.none(), st.sampled_from(PropertyType)),
)

sources = st.builds(Source, name=names, query=queries)

targets = st.builds(
    Target,
    name=names,
    active=st.booleans(),
    type=st.sampled_from(TargetType),
    source=names,
    custom_query=st.one_of(st.none(), names),
    mappings=st.lists(mappings, max_size=6),
    save_mode=st.sampled_from(SaveMode),
    edge_nodes_match_mode=st.sampled_from(EdgeNodesMatchMode),
)

actions = st.builds(
    Action,
    name=names,
    type=st.sampled_from(ActionType),
    options=st.dictionaries(st.sampled_from(["cypher", "url", "sql", "other"]), st.text(max_size=3), max_size=3),
)


def job_specs() -> st.SearchStrategy[JobSpec]:
    return st.builds(
        JobSpec,
        sources=st.lists(sources, max_size=4),
        targets=st.lists(targets, max_size=4),
        actions=st.lists(actions, max_size=3),
    )
