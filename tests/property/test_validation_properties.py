# tests/property/test_validation_properties.py
"""Property tests for job-spec and run-options validation."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from graphload.contracts import (
    EdgeNodesMatchMode,
    FragmentType,
    JobSpec,
    RoleType,
    RunOptions,
    SaveMode,
    Source,
    Target,
)
from graphload.validation import PropertyMapping, validate_job_spec, validate_run_options
from tests.helpers.job_builders import edge_target, job_spec, mapping, node_target
from tests.property.conftest import job_specs, names
from tests.property.settings import DETERMINISM_SETTINGS, QUICK_SETTINGS, STANDARD_SETTINGS

NO_ACTIVE_TARGET = "The job spec must define at least 1 active target, none found"
INCOMPATIBLE = "uses incompatible save modes"


class TestJobSpecProperties:
    @given(spec=job_specs())
    @DETERMINISM_SETTINGS
    def test_validation_is_idempotent(self, spec: JobSpec) -> None:
        assert validate_job_spec(spec) == validate_job_spec(spec)

    @given(spec=job_specs())
    @STANDARD_SETTINGS
    def test_no_active_target_message_iff_none_active(self, spec: JobSpec) -> None:
        messages = validate_job_spec(spec)
        has_active = any(target.active for target in spec.targets)
        assert (NO_ACTIVE_TARGET in messages) is not has_active

    @given(source_names=st.lists(names, max_size=6))
    @STANDARD_SETTINGS
    def test_duplicate_sources_are_exact_match(self, source_names: list[str]) -> None:
        spec = job_spec(sources=[Source(name=name) for name in source_names], targets=[])
        duplicates = [m for m in validate_job_spec(spec) if m.startswith("Duplicate source name: ")]
        assert len(duplicates) == len(source_names) - len(set(source_names))

    @given(
        prefix=st.text(alphabet="abc ,*\n", max_size=8),
        spacing=st.text(alphabet=" \t\n", min_size=1, max_size=4),
        order=st.sampled_from(["ORDER", "order", "Order", "oRdEr"]),
        by=st.sampled_from(["BY", "by", "By"]),
    )
    @STANDARD_SETTINGS
    def test_order_by_detected_anywhere(self, prefix: str, spacing: str, order: str, by: str) -> None:
        query = f"SELECT {prefix} {order}{spacing}{by} x"
        spec = job_spec(sources=[Source(name="people", query=query)])
        assert validate_job_spec(spec) == ["Source people SQL contains ORDER BY which is not supported"]

    @given(save_mode=st.sampled_from(SaveMode), match_mode=st.sampled_from(EdgeNodesMatchMode))
    @QUICK_SETTINGS
    def test_edge_save_mode_conflict(self, save_mode: SaveMode, match_mode: EdgeNodesMatchMode) -> None:
        target = edge_target(save_mode=save_mode, edge_nodes_match_mode=match_mode)
        conflict = any(INCOMPATIBLE in m for m in validate_job_spec(job_spec(targets=[target])))
        assert conflict is (save_mode == SaveMode.MERGE and match_mode == EdgeNodesMatchMode.CREATE)

    @given(fields=st.lists(st.sampled_from(["a", "b", "c", "d"]), min_size=1, max_size=8))
    @STANDARD_SETTINGS
    def test_fan_in_lists_distinct_fields_in_first_seen_order(self, fields: list[str]) -> None:
        target = node_target(mappings=[*node_target().mappings, *(mapping("p", field=f) for f in fields)])
        messages = validate_job_spec(job_spec(targets=[target]))
        distinct = list(dict.fromkeys(fields))
        if len(distinct) > 1:
            assert messages == [
                f"Property p of target Person is mapped to too many source fields: {', '.join(distinct)}"
            ]
        else:
            assert messages == []

    @given(targets=st.lists(st.sampled_from([node_target(), edge_target()]), min_size=1, max_size=3))
    @QUICK_SETTINGS
    def test_no_state_carried_between_calls(self, targets: list[Target]) -> None:
        first = validate_job_spec(job_spec(targets=targets))
        validate_job_spec(job_spec(targets=[node_target(mappings=[mapping("id", field="x")])]))
        assert validate_job_spec(job_spec(targets=targets)) == first


class TestPropertyMappingProperties:
    @given(
        roles=st.lists(st.sampled_from([RoleType.LABEL, RoleType.TYPE]), max_size=5),
        field_names=st.lists(names, max_size=5),
    )
    @QUICK_SETTINGS
    def test_structural_roles_never_contribute(self, roles: list[RoleType], field_names: list[str]) -> None:
        aggregator = PropertyMapping("T", "p")
        for role, field in zip(roles, field_names, strict=False):
            aggregator.add(mapping("p", FragmentType.NODE, role, field=field))
        assert list(aggregator.validate()) == []


class TestRunOptionsProperties:
    @given(uri=st.sampled_from([None, "", "neo4j://h"]), with_secret=st.booleans())
    @QUICK_SETTINGS
    def test_exactly_one_connection_setting(self, uri: str | None, with_secret: bool) -> None:
        secret = "projects/p/secrets/s/versions/1" if with_secret else None
        messages = validate_run_options(RunOptions(connection_uri=uri, connection_secret_id=secret, job_spec_uri="j"))
        assert (messages == []) is (bool(uri) != with_secret)
        assert len(messages) <= 1
