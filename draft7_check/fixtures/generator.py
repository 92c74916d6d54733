"""Generate reference Draft-7 fixtures and the batch manifest that lists them."""

import logging
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, Field

from draft7_check.core import write_json_file
from draft7_check.fixtures.reference import REFERENCE_CASES
from draft7_check.service import validate_schema_specification

logger = logging.getLogger(__name__)

DRAFT7_SCHEMA_URI = "http://json-schema.org/draft-07/schema#"
DEFAULT_OUTPUT_DIR = Path("test-fixtures") / "reference-schemas"
DEFAULT_MANIFEST_PATH = Path("test-fixtures") / "reference-config.json"

DEFS_PREFIX = "#/$defs/"
DEFINITIONS_PREFIX = "#/definitions/"


class GenerationSummary(BaseModel):
    """Outcome of a fixture generation run."""

    generated: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)
    manifest_path: Path


def to_draft7_schema(schema: dict[str, Any]) -> dict[str, Any]:
    """
    Rewrite a pydantic JSON schema into a self-contained Draft-7 document.

    ``$defs`` references are inlined; a reference back into a definition that
    is still being inlined (a cycle) is kept as a ``#/definitions/`` reference
    and that definition is emitted under ``definitions``. Discriminator
    mappings point into the dropped ``$defs`` and are removed.

    Args:
        schema (dict[str, Any]): Schema as produced by pydantic.

    Returns:
        dict[str, Any]: Draft-7 schema with ``$schema`` set.
    """
    schema = dict(schema)
    defs = schema.pop("$defs", {})
    cyclic: list[str] = []

    def _resolve(node: Any, stack: frozenset[str]) -> Any:
        if isinstance(node, dict):
            ref = node.get("$ref")
            if isinstance(ref, str) and ref.startswith(DEFS_PREFIX):
                key = ref.removeprefix(DEFS_PREFIX)
                if key in stack:
                    if key not in cyclic:
                        cyclic.append(key)
                    return {"$ref": f"{DEFINITIONS_PREFIX}{key}"}
                siblings = {k: v for k, v in node.items() if k != "$ref"}
                merged = {**defs.get(key, {}), **siblings}
                return _resolve(merged, stack | {key})
            resolved = {k: _resolve(v, stack) for k, v in node.items()}
            discriminator = resolved.get("discriminator")
            if isinstance(discriminator, dict):
                discriminator.pop("mapping", None)
            return resolved
        if isinstance(node, list):
            return [_resolve(item, stack) for item in node]
        return node

    draft7 = {"$schema": DRAFT7_SCHEMA_URI, **_resolve(schema, frozenset())}

    definitions: dict[str, Any] = {}
    while len(definitions) < len(cyclic):
        for key in list(cyclic):
            if key not in definitions:
                definitions[key] = _resolve(defs[key], frozenset({key}))
    if definitions:
        draft7["definitions"] = definitions
    return draft7


def build_fixture(name: str, factory: Callable[[], dict[str, Any]]) -> dict[str, Any]:
    """
    Build one fixture and confirm it is a valid Draft-7 schema.

    Raises:
        ValueError: If the generated schema does not validate.
    """
    schema = to_draft7_schema(factory())
    result = validate_schema_specification(schema, name)
    if not result.valid:
        messages = "; ".join(error.message for error in result.errors)
        raise ValueError(f"generated schema is not valid Draft-7: {messages}")
    return schema


def generate_reference_fixtures(
    output_dir: Path = DEFAULT_OUTPUT_DIR,
    manifest_path: Path = DEFAULT_MANIFEST_PATH,
    cases: dict[str, Callable[[], dict[str, Any]]] | None = None,
) -> GenerationSummary:
    """
    Write every reference case to ``<output_dir>/<name>.json`` plus a manifest.

    A case that fails to build or validate is logged and skipped; it never
    stops the remaining cases.

    Args:
        output_dir (Path): Directory receiving the fixture files.
        manifest_path (Path): Where to write the batch manifest.
        cases (dict | None): Cases to generate; defaults to ``REFERENCE_CASES``.

    Returns:
        GenerationSummary: Generated and failed case names.
    """
    cases = REFERENCE_CASES if cases is None else cases
    summary = GenerationSummary(manifest_path=manifest_path)
    manifest_entries: list[dict[str, str]] = []

    for name, factory in cases.items():
        try:
            schema = build_fixture(name, factory)
        except Exception as exc:
            logger.error(f"Failed: {name}: {exc}")
            summary.failed.append(name)
            continue

        fixture_path = Path(output_dir) / f"{name}.json"
        write_json_file(fixture_path, schema)
        logger.info(f"Generated: {fixture_path}")
        summary.generated.append(name)
        manifest_entries.append(
            {
                "name": name,
                "path": fixture_path.as_posix(),
                "description": f"Reference fixture for {name.replace('-', ' ')}",
            }
        )

    write_json_file(manifest_path, {"schemas": manifest_entries})
    logger.info(
        f"Generation complete: {len(summary.generated)} successful, "
        f"{len(summary.failed)} failed; manifest written to {manifest_path}"
    )
    return summary
