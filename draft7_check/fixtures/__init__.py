"""Reference fixture generation."""

from .generator import (
    DEFAULT_MANIFEST_PATH,
    DEFAULT_OUTPUT_DIR,
    GenerationSummary,
    generate_reference_fixtures,
    to_draft7_schema,
)
from .reference import REFERENCE_CASES

__all__ = [
    "DEFAULT_MANIFEST_PATH",
    "DEFAULT_OUTPUT_DIR",
    "GenerationSummary",
    "REFERENCE_CASES",
    "generate_reference_fixtures",
    "to_draft7_schema",
]
