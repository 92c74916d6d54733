"""Draft-7 meta-schema conformance checks."""

import logging
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError
from pydantic import BaseModel, Field

from draft7_check.schemas import ErrorDescriptor

logger = logging.getLogger(__name__)

# Built once; no format checker, so regex validity is left to compilation.
META_SCHEMA_VALIDATOR = Draft7Validator(Draft7Validator.META_SCHEMA)


class ConformanceOutcome(BaseModel):
    """Outcome of a meta-schema check."""

    valid: bool
    errors: list[ErrorDescriptor] = Field(default_factory=list)


def json_pointer(parts) -> str:
    """Render path segments as a JSON pointer (``""`` for the root)."""
    escaped = (str(part).replace("~", "~0").replace("/", "~1") for part in parts)
    return "".join(f"/{part}" for part in escaped)


def _to_descriptor(error: ValidationError) -> ErrorDescriptor:
    return ErrorDescriptor(
        message=error.message,
        instance_path=json_pointer(error.absolute_path),
        schema_path="#" + json_pointer(error.absolute_schema_path),
        keyword=str(error.validator),
    )


def check_conformance(schema: Any) -> ConformanceOutcome:
    """
    Check a document against the Draft-7 meta-schema.

    Unknown keywords are tolerated: the meta-schema allows additional
    properties, so vendor extensions never fail this check.

    Args:
        schema (Any): The candidate schema document.

    Returns:
        ConformanceOutcome: Validity plus every meta-schema violation found,
            ordered by location in the document.
    """
    errors = sorted(
        META_SCHEMA_VALIDATOR.iter_errors(schema),
        key=lambda error: json_pointer(error.absolute_path),
    )
    if errors:
        logger.debug("Meta-schema check found %d violation(s)", len(errors))
    return ConformanceOutcome(
        valid=not errors,
        errors=[_to_descriptor(error) for error in errors],
    )
