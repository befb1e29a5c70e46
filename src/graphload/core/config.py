# src/graphload/core/config.py
"""
Loading of run options and job-spec documents.

Run options come from Dynaconf (GRAPHLOAD_* environment variables, optionally
a settings file) with explicit arguments taking precedence. Job specs are YAML
or JSON documents parsed with PyYAML and validated into the frozen JobSpec
model by pydantic. Semantic checks happen later, in graphload.validation.
"""

from pathlib import Path
from typing import Any

import yaml

from graphload.contracts import JobSpec, RunOptions

ENVVAR_PREFIX = "GRAPHLOAD"

_RUN_OPTION_KEYS = frozenset(RunOptions.model_fields)


class JobSpecFormatError(ValueError):
    """Raised when a job-spec document is not a mapping at the top level."""


def load_job_spec(spec_path: Path) -> JobSpec:
    """Load a job spec from a YAML or JSON file.

    Args:
        spec_path: Path to the document

    Returns:
        Structurally valid JobSpec (semantic validation not yet applied)

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the document is not parseable
        JobSpecFormatError: If the document is not a mapping
        ValidationError: If the document fails structural validation
    """
    if not spec_path.exists():
        raise FileNotFoundError(f"Job spec not found: {spec_path}")

    raw = yaml.safe_load(spec_path.read_text(encoding="utf-8"))
    return parse_job_spec(raw, origin=str(spec_path))


def parse_job_spec(raw: Any, *, origin: str = "<memory>") -> JobSpec:
    """Validate an already-parsed document into a JobSpec.

    An empty document yields an empty JobSpec, which semantic validation will
    then reject for having no active target.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise JobSpecFormatError(f"Job spec {origin} must be a mapping, got {type(raw).__name__}")
    return JobSpec.model_validate(raw)


def load_run_options(
    *,
    connection_uri: str | None = None,
    connection_secret_id: str | None = None,
    job_spec_uri: str | None = None,
    settings_file: Path | None = None,
) -> RunOptions:
    """Assemble RunOptions from environment, settings file and arguments.

    Precedence (highest first):
    1. Explicit keyword arguments (None means "not given")
    2. Environment variables (GRAPHLOAD_CONNECTION_URI, ...)
    3. Settings file, when provided

    Raises:
        FileNotFoundError: If settings_file is given but doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if settings_file is not None and not settings_file.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_file}")

    dynaconf_settings = Dynaconf(
        envvar_prefix=ENVVAR_PREFIX,
        settings_files=[str(settings_file)] if settings_file is not None else [],
        environments=False,
        load_dotenv=False,
    )

    # Dynaconf upper-cases keys and carries its own internals; keep only ours
    raw: dict[str, Any] = {}
    for key, value in dynaconf_settings.as_dict().items():
        name = key.lower()
        if name in _RUN_OPTION_KEYS and value is not None:
            raw[name] = str(value)

    explicit = {
        "connection_uri": connection_uri,
        "connection_secret_id": connection_secret_id,
        "job_spec_uri": job_spec_uri,
    }
    raw.update({name: value for name, value in explicit.items() if value is not None})

    return RunOptions(**raw)
