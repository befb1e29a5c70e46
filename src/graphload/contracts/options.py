"""Run-level options handed to an import pipeline."""

from pydantic import BaseModel, Field


class RunOptions(BaseModel):
    """Connection and job-spec location for one import run.

    Exactly one of connection_uri / connection_secret_id must be set. Both are
    accepted here as given; the options validator reports any violation so the
    caller sees every problem at once instead of the first pydantic error.
    """

    model_config = {"frozen": True}

    connection_uri: str | None = Field(default=None, description="Direct graph database connection URI")
    connection_secret_id: str | None = Field(
        default=None,
        description="Secret version holding the connection settings (projects/.../versions/...)",
    )
    job_spec_uri: str | None = Field(default=None, description="Location of the job spec document")
