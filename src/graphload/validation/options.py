# src/graphload/validation/options.py
"""Validation of run options (connection settings and spec location)."""

from __future__ import annotations

from graphload.contracts import RunOptions
from graphload.core.secrets import is_secret_version


def validate_run_options(options: RunOptions) -> list[str]:
    """Check connection settings and spec location.

    Exactly one of connection URI / connection secret must be set, a secret
    must be a secret version reference, and the job spec location must be
    given. Malformed input is reported, never raised.

    Returns:
        List of validation error messages (empty if valid)
    """
    errors: list[str] = []

    uri = options.connection_uri
    secret = options.connection_secret_id

    if not uri and not secret:
        errors.append("Neither Neo4j connection URI nor Neo4j connection secret were provided.")
    if uri and secret:
        errors.append("Both Neo4j connection URI and Neo4j connection secret were provided: only one must be set.")
    if secret and not is_secret_version(secret):
        errors.append(
            "Neo4j connection secret must be in the form"
            " projects/{project}/secrets/{secret}/versions/{secret_version}"
        )
    if not options.job_spec_uri:
        errors.append("Job spec URI not provided.")

    return errors
