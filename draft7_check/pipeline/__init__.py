"""Validation pipeline entrypoints."""

from .orchestrator import run_batch_validation, run_schema_validation, validate_manifest

__all__ = [
    "run_batch_validation",
    "run_schema_validation",
    "validate_manifest",
]
