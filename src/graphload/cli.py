# src/graphload/cli.py
"""graphload command line interface.

Entry point for the graphload CLI tool.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

import typer
import yaml
from pydantic import ValidationError

from graphload import __version__
from graphload.contracts import JobSpec
from graphload.core.config import JobSpecFormatError, load_job_spec, load_run_options
from graphload.validation import validate_run

app = typer.Typer(
    name="graphload",
    help="graphload: validate data-to-graph import job specifications.",
    no_args_is_help=True,
)


class JobSpecLoadError(Exception):
    """Raised when the job spec named by the run options cannot be loaded.

    Carries an already formatted title/message/details triple for display.
    """

    def __init__(self, title: str, message: str, details: list[str] | None = None, hint: str | None = None) -> None:
        super().__init__(message)
        self.title = title
        self.message = message
        self.details = details
        self.hint = hint


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"graphload version {__version__}")
        raise typer.Exit()


def _load_dotenv(env_file: Path | None = None) -> bool:
    """Load GRAPHLOAD_* variables from a .env file.

    Args:
        env_file: Explicit .env path. If None, searches the current directory
                  and its parents.

    Returns:
        True if a .env file was found and loaded.

    Raises:
        typer.Exit: If an explicit env_file doesn't exist.
    """
    from dotenv import load_dotenv

    if env_file is not None:
        if not env_file.exists():
            typer.secho(
                f"Error: .env file not found: {env_file}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(1)
        return load_dotenv(env_file, override=False)

    return load_dotenv(override=False)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    no_dotenv: bool = typer.Option(
        False,
        "--no-dotenv",
        help="Skip loading .env file.",
    ),
    env_file: Path | None = typer.Option(
        None,
        "--env-file",
        help="Path to .env file (skips automatic search).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs.",
    ),
) -> None:
    """graphload: validate data-to-graph import job specifications."""
    from graphload.core.logging import configure_logging

    configure_logging(json_output=json_logs, level="DEBUG" if verbose else "WARNING")

    if not no_dotenv:
        _load_dotenv(env_file=env_file)
    elif env_file is not None:
        typer.secho(
            "Warning: --env-file ignored because --no-dotenv is set.",
            fg=typer.colors.YELLOW,
            err=True,
        )


def _format_validation_error(
    title: str,
    message: str,
    hint: str | None = None,
    details: list[str] | None = None,
) -> None:
    """Display a formatted error panel on stderr."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    console = Console(stderr=True)

    content = Text()
    content.append(message, style="white")

    if details:
        content.append("\n\n")
        for detail in details:
            content.append(f"  • {detail}\n", style="dim")

    if hint:
        content.append("\n")
        content.append("Hint: ", style="yellow bold")
        content.append(hint, style="yellow")

    console.print(
        Panel(
            content,
            title=f"[red bold]{title}[/]",
            border_style="red",
            padding=(0, 1),
        )
    )


def _load_spec_for_run(spec_uri: str) -> JobSpec:
    """Load the job spec named by the run options.

    Raises:
        JobSpecLoadError: With display-ready details for any loading failure
    """
    spec_path = Path(spec_uri).expanduser()
    try:
        return load_job_spec(spec_path)
    except FileNotFoundError:
        raise JobSpecLoadError(
            "File Not Found",
            f"Job spec does not exist: {spec_uri}",
            hint="Check the path and ensure the file exists.",
        ) from None
    except yaml.YAMLError as e:
        raise JobSpecLoadError(
            "Job Spec Syntax Error",
            f"Failed to parse {spec_path.name}",
            details=[str(getattr(e, "problem", None) or e)],
            hint="Check for unclosed brackets, incorrect indentation, or invalid characters.",
        ) from None
    except ValidationError as e:
        details = [f"{'.'.join(str(x) for x in error['loc'])}: {error['msg']}" for error in e.errors()]
        raise JobSpecLoadError(
            "Job Spec Structure Invalid",
            f"Invalid job spec in {spec_path.name}",
            details=details,
            hint="Check field names, types, and allowed values.",
        ) from None
    except JobSpecFormatError as e:
        raise JobSpecLoadError("Job Spec Structure Invalid", str(e)) from None


def _report_problems(problems: list[str], output_format: str) -> None:
    """Print validation results: JSON on stdout, or a console listing."""
    if output_format == "json":
        typer.echo(json.dumps({"valid": not problems, "problems": problems}))
    elif problems:
        typer.echo("Validation failed:", err=True)
        for problem in problems:
            typer.echo(f"  - {problem}", err=True)
    else:
        typer.echo("Job spec valid.")


@app.command()
def validate(
    job_spec: str | None = typer.Option(
        None,
        "--job-spec",
        "-j",
        help="Path to the job spec (YAML or JSON). Defaults to GRAPHLOAD_JOB_SPEC_URI.",
    ),
    connection_uri: str | None = typer.Option(
        None,
        "--connection-uri",
        help="Graph database connection URI. Defaults to GRAPHLOAD_CONNECTION_URI.",
    ),
    connection_secret: str | None = typer.Option(
        None,
        "--connection-secret",
        help="Secret version reference holding connection settings.",
    ),
    settings: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Optional settings file supplying run options.",
    ),
    output_format: Literal["console", "json"] = typer.Option(
        "console",
        "--format",
        "-f",
        help="Output format: 'console' (human-readable) or 'json' (structured JSON).",
    ),
) -> None:
    """Validate run options and job spec without running anything."""
    try:
        options = load_run_options(
            connection_uri=connection_uri,
            connection_secret_id=connection_secret,
            job_spec_uri=job_spec,
            settings_file=settings,
        )
    except FileNotFoundError as e:
        _format_validation_error(title="File Not Found", message=str(e))
        raise typer.Exit(1) from None

    spec: JobSpec | None = None
    load_error: JobSpecLoadError | None = None
    if options.job_spec_uri:
        try:
            spec = _load_spec_for_run(options.job_spec_uri)
        except JobSpecLoadError as e:
            load_error = e

    # Options problems are reported even when the spec could not be loaded
    problems = validate_run(options, spec)

    if load_error is not None:
        if output_format == "json":
            _report_problems([*problems, load_error.message], output_format)
        elif problems:
            _report_problems(problems, output_format)
        _format_validation_error(
            title=load_error.title,
            message=load_error.message,
            details=load_error.details,
            hint=load_error.hint,
        )
        raise typer.Exit(1)

    _report_problems(problems, output_format)
    if problems:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
