"""Draft-7 schema checks: meta-schema conformance, then compilability."""

from .compilability import CompilationError, compile_schema
from .conformance import ConformanceOutcome, check_conformance

__all__ = [
    "CompilationError",
    "ConformanceOutcome",
    "check_conformance",
    "compile_schema",
]
