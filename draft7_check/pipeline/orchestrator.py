"""Single-schema and batch validation runs."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from draft7_check.core import load_manifest
from draft7_check.schemas import BatchEntryResult, BatchReport, Manifest, SchemaReport
from draft7_check.service import validate_schema_file
from draft7_check.utils.report import summary_line, write_report

logger = logging.getLogger(__name__)


def run_schema_validation(
    schema_path: Path, output_path: Path | None = None
) -> SchemaReport:
    """
    Validate one schema file and optionally write the report.

    Args:
        schema_path (Path): Schema file to validate.
        output_path (Path | None): Where to write the report, if anywhere.

    Returns:
        SchemaReport: Timestamped envelope around the validation result.
    """
    logger.info(f"Validating JSON Schema specification: {schema_path}")
    result = validate_schema_file(schema_path, Path(schema_path).name)
    report = SchemaReport(
        timestamp=datetime.now(timezone.utc),
        schema_path=str(schema_path),
        result=result,
    )
    if output_path is not None:
        write_report(report, output_path)
    return report


def validate_manifest(manifest: Manifest, config_path: str) -> BatchReport:
    """
    Validate every manifest entry in order, each in isolation.

    Args:
        manifest (Manifest): Entries to validate.
        config_path (str): Manifest location recorded in the report.

    Returns:
        BatchReport: One result per entry, in manifest order.
    """
    entries: list[BatchEntryResult] = []
    for entry in manifest.schemas:
        logger.info(f"Validating schema: {entry.name}")
        result = validate_schema_file(Path(entry.path), entry.name)
        logger.info(
            f"Schema {entry.name}: {'VALID' if result.valid else 'INVALID'}"
        )
        entries.append(
            BatchEntryResult(
                name=entry.name,
                description=entry.description or "",
                path=entry.path,
                result=result,
            )
        )

    return BatchReport(
        timestamp=datetime.now(timezone.utc),
        config_path=config_path,
        schemas=entries,
    )


def run_batch_validation(
    config_path: Path, output_path: Path | None = None
) -> BatchReport:
    """
    Run batch schema validation from a manifest file.

    Args:
        config_path (Path): Manifest listing the schemas to validate.
        output_path (Path | None): Where to write the batch report, if anywhere.

    Returns:
        BatchReport: Aggregated results.

    Raises:
        ManifestError: If the manifest itself cannot be loaded.
    """
    logger.info(f"Running batch schema validation from {config_path}")
    manifest = load_manifest(config_path)
    report = validate_manifest(manifest, str(config_path))

    if output_path is not None:
        write_report(report, output_path)

    logger.info(f"Summary: {summary_line(report)}")
    return report
