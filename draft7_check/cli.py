import json
import logging
import sys
from pathlib import Path

import typer

from draft7_check import __version__
from draft7_check.core import ManifestError
from draft7_check.fixtures import (
    DEFAULT_MANIFEST_PATH,
    DEFAULT_OUTPUT_DIR,
    generate_reference_fixtures,
)
from draft7_check.loggy import setup_logging
from draft7_check.pipeline import run_batch_validation, run_schema_validation
from draft7_check.utils.report import (
    echo_batch_report,
    echo_validation_result,
    exit_code,
)

logger = logging.getLogger(__name__)

PROG_NAME = "draft7-check"
# First arguments that are not a legacy schema path
RESERVED_ARGS = (
    "validate-schema",
    "validate-batch",
    "generate-fixtures",
    "--help",
    "-h",
    "--version",
    "-V",
)

app = typer.Typer(
    help="Validate JSON Schema Draft-7 specifications.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROG_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def configure(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Validate JSON Schema Draft-7 specifications."""


@app.command("validate-schema")
def validate_schema(
    schema: Path = typer.Option(
        ..., "--schema", "-s", help="Path to JSON schema file"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Path to output results file"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output result as JSON"),
    silent: bool = typer.Option(False, "--silent", help="Suppress console output"),
):
    """Validate a single JSON Schema Draft-7 specification."""
    if silent:
        setup_logging(logging.ERROR)
    else:
        setup_logging(logging.WARNING if json_output else logging.INFO)

    try:
        report = run_schema_validation(schema, output)
    except OSError as e:
        logger.error(f"Validation run failed: {e}", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(json.dumps(report.result.to_json_dict(), ensure_ascii=False))
    elif not silent:
        echo_validation_result(report.result)

    raise typer.Exit(code=exit_code(report))


@app.command("validate-batch")
def validate_batch(
    input_path: Path = typer.Option(
        ..., "--input", "-i", help="Path to batch config JSON file"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Path to output results file"
    ),
):
    """Run batch schema validation from a manifest file."""
    setup_logging()

    try:
        report = run_batch_validation(input_path, output)
    except (ManifestError, OSError) as e:
        logger.error(f"Batch validation failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    echo_batch_report(report)
    raise typer.Exit(code=exit_code(report))


@app.command("generate-fixtures")
def generate_fixtures(
    output_dir: Path = typer.Option(
        DEFAULT_OUTPUT_DIR, "--output-dir", help="Directory for generated fixtures"
    ),
    manifest: Path = typer.Option(
        DEFAULT_MANIFEST_PATH, "--manifest", help="Path of the batch manifest to write"
    ),
):
    """Generate reference Draft-7 fixtures and their batch manifest."""
    setup_logging()

    summary = generate_reference_fixtures(output_dir, manifest)
    typer.echo(
        f"✅ Generation complete: {len(summary.generated)} successful, "
        f"{len(summary.failed)} failed"
    )
    typer.echo(f"📝 Batch config written to: {summary.manifest_path}")
    raise typer.Exit(code=1 if summary.failed else 0)


def normalize_args(args: list[str]) -> list[str]:
    """
    Rewrite the legacy ``<schema-path> [<output-path>]`` form.

    Args:
        args (list[str]): Command line arguments without the program name.

    Returns:
        list[str]: Arguments for the typer app.
    """
    if not args or args[0] in RESERVED_ARGS or args[0].startswith("-"):
        return args
    legacy = ["validate-schema", "--schema", args[0]]
    if len(args) > 1:
        legacy += ["--output", args[1]]
    return legacy


def main() -> None:
    """Console entry point supporting the legacy positional form."""
    app(args=normalize_args(sys.argv[1:]), prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
