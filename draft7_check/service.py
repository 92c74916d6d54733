"""Single-schema validation service."""

import logging
from pathlib import Path
from typing import Any

from draft7_check.checks import CompilationError, check_conformance, compile_schema
from draft7_check.core import SchemaLoadError, load_json_file
from draft7_check.models import ValidationType
from draft7_check.schemas import ErrorDescriptor, ValidationResult

logger = logging.getLogger(__name__)


def validate_schema_specification(
    schema: Any, schema_name: str = "schema"
) -> ValidationResult:
    """
    Validate that a document is a legal, compilable JSON Schema Draft-7 schema.

    The meta-schema check runs first; compilation is only attempted when it
    passes. Never raises: unexpected failures become an ``error`` result.

    Args:
        schema (Any): Parsed schema document.
        schema_name (str): Label echoed back in the result.

    Returns:
        ValidationResult: The verdict and the phase that produced it.
    """
    try:
        conformance = check_conformance(schema)
        if not conformance.valid:
            return ValidationResult(
                valid=False,
                errors=conformance.errors
                or [
                    ErrorDescriptor(
                        message="Schema does not conform to JSON Schema Draft-7"
                    )
                ],
                schema_name=schema_name,
                schema_document=schema,
                validation_type=ValidationType.META_SCHEMA,
            )

        try:
            compile_schema(schema)
        except CompilationError as exc:
            return ValidationResult(
                valid=False,
                errors=[ErrorDescriptor(message=f"Schema compilation failed: {exc}")],
                schema_name=schema_name,
                schema_document=schema,
                validation_type=ValidationType.COMPILATION,
                compilation_error=True,
            )

        return ValidationResult(
            valid=True,
            errors=[],
            schema_name=schema_name,
            schema_document=schema,
            validation_type=ValidationType.COMPILATION,
        )
    except Exception as exc:
        logger.error(f"Unexpected error validating {schema_name}: {exc}", exc_info=True)
        return ValidationResult(
            valid=False,
            errors=[ErrorDescriptor(message=f"Schema validation error: {exc}")],
            schema_name=schema_name,
            schema_document=schema,
            validation_type=ValidationType.ERROR,
            validation_error=True,
        )


def validate_schema_file(path: Path, schema_name: str) -> ValidationResult:
    """
    Load a schema file and validate it.

    A file that cannot be read or parsed yields an ``error`` result instead of
    raising, so one bad file never aborts a batch.
    """
    try:
        schema = load_json_file(path)
    except SchemaLoadError as exc:
        logger.warning(str(exc))
        return ValidationResult(
            valid=False,
            errors=[ErrorDescriptor(message=str(exc))],
            schema_name=schema_name,
            validation_type=ValidationType.ERROR,
        )
    return validate_schema_specification(schema, schema_name)
