"""Core file helpers: JSON loading, manifest loading and report writing."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from draft7_check.schemas import Manifest

logger = logging.getLogger(__name__)


class SchemaLoadError(Exception):
    """Raised when a JSON document cannot be read or parsed."""


class ManifestError(Exception):
    """Raised when a batch manifest is missing, unparseable or malformed."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected non-standard JSON constant {name}")


def load_json_file(path: Path) -> Any:
    """
    Read and parse a JSON document.

    Args:
        path (Path): File to read.

    Returns:
        Any: The parsed JSON value.

    Raises:
        SchemaLoadError: If the file is unreadable or not valid JSON.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
        return json.loads(content, parse_constant=_reject_constant)
    except (OSError, ValueError) as exc:
        raise SchemaLoadError(f"Failed to load {path}: {exc}") from exc


def load_manifest(path: Path) -> Manifest:
    """
    Load a batch manifest of the form ``{"schemas": [{name, path, description?}]}``.

    Args:
        path (Path): Manifest file.

    Returns:
        Manifest: Parsed manifest with entries in file order.

    Raises:
        ManifestError: If the manifest cannot be loaded or has the wrong shape.
    """
    try:
        payload = load_json_file(path)
    except SchemaLoadError as exc:
        raise ManifestError(str(exc)) from exc

    try:
        manifest = Manifest.model_validate(payload)
    except ValidationError as exc:
        raise ManifestError(f"Invalid manifest {path}: {exc}") from exc

    logger.debug("Loaded manifest %s with %d entries", path, len(manifest.schemas))
    return manifest


def write_json_file(path: Path, payload: Any) -> None:
    """Write a JSON payload pretty-printed with 2-space indentation."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    path.write_text(text + "\n", encoding="utf-8")

