"""Semantic validators for run options and job specs.

Both validators return plain lists of messages; an empty list means valid.
Callers run the options check first, then the job-spec check, and refuse to
start a pipeline if the combined list is non-empty.
"""

from __future__ import annotations

from graphload.contracts import JobSpec, RunOptions
from graphload.validation.job_spec import UnknownTargetTypeError, validate_job_spec
from graphload.validation.options import validate_run_options
from graphload.validation.property_mapping import PropertyMapping

__all__ = [
    "PropertyMapping",
    "UnknownTargetTypeError",
    "validate_job_spec",
    "validate_run",
    "validate_run_options",
]


def validate_run(options: RunOptions, job_spec: JobSpec | None) -> list[str]:
    """Options problems followed by job-spec problems (when a spec was loaded)."""
    errors = validate_run_options(options)
    if job_spec is not None:
        errors.extend(validate_job_spec(job_spec))
    return errors
