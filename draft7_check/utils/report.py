"""Report writing, human-readable output and the exit-code policy."""

import json
import logging
from pathlib import Path

import typer

from draft7_check.core import write_json_file
from draft7_check.schemas import (
    BatchReport,
    ReportModel,
    SchemaReport,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def write_report(report: ReportModel, output_path: Path) -> None:
    """Write a report to ``output_path`` as pretty-printed JSON."""
    write_json_file(output_path, report.to_json_dict())
    logger.info(f"Results written to {output_path}")


def exit_code(report: SchemaReport | BatchReport | ValidationResult) -> int:
    """
    Map a report to a process exit status.

    Returns:
        int: 0 when the result (or every batch entry) is valid, 1 otherwise.
    """
    if isinstance(report, BatchReport):
        return 0 if report.all_valid else 1
    if isinstance(report, SchemaReport):
        report = report.result
    return 0 if report.valid else 1


def summary_line(report: BatchReport) -> str:
    return (
        f"{report.valid_count}/{report.total_count} schemas are valid "
        "JSON Schema Draft-7"
    )


def format_errors(result: ValidationResult) -> str:
    errors = [error.to_json_dict() for error in result.errors]
    return json.dumps(errors, indent=2, ensure_ascii=False)


def echo_validation_result(result: ValidationResult) -> None:
    """Print a checkmark/cross line for one schema, with errors on failure."""
    if result.valid:
        typer.echo(f"✅ Schema {result.schema_name}: VALID JSON Schema Draft-7")
        return
    typer.echo(
        f"❌ Schema {result.schema_name}: INVALID JSON Schema Draft-7 "
        f"({result.validation_type})"
    )
    typer.echo(f"Errors: {format_errors(result)}")


def echo_batch_report(report: BatchReport) -> None:
    """Print one line per manifest entry followed by the summary."""
    for entry in report.schemas:
        echo_validation_result(entry.result)
    typer.echo(f"\n🎯 Summary: {summary_line(report)}")
