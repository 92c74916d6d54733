"""Tests for single and batch validation runs."""

import json
from pathlib import Path

import pytest

from draft7_check.core import ManifestError
from draft7_check.models import ValidationType
from draft7_check.pipeline import orchestrator
from draft7_check.schemas import Manifest, ManifestEntry
from draft7_check.service import validate_schema_file


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload))
    return path


def _write_manifest(tmp_path: Path, entries: list[dict]) -> Path:
    return _write(tmp_path / "manifest.json", {"schemas": entries})


def test_batch_isolates_missing_file(tmp_path: Path) -> None:
    """A missing second file only affects its own entry."""
    first = _write(tmp_path / "first.json", {"type": "string"})
    third = _write(tmp_path / "third.json", {"type": "integer"})
    config = _write_manifest(
        tmp_path,
        [
            {"name": "first", "path": str(first), "description": "one"},
            {"name": "second", "path": str(tmp_path / "missing.json")},
            {"name": "third", "path": str(third)},
        ],
    )

    report = orchestrator.run_batch_validation(config)

    assert [entry.name for entry in report.schemas] == ["first", "second", "third"]
    assert report.schemas[0].result.valid
    assert report.schemas[1].result.validation_type == ValidationType.ERROR
    assert not report.schemas[1].result.valid
    assert report.schemas[2].result.valid
    assert report.schemas[0].description == "one"
    assert report.schemas[1].description == ""
    assert report.valid_count == 2
    assert not report.all_valid


def test_batch_results_match_standalone_validation(tmp_path: Path) -> None:
    """An invalid sibling never changes another entry's outcome."""
    good = _write(tmp_path / "good.json", {"type": "object"})
    bad = _write(tmp_path / "bad.json", {"type": "bogus-type"})
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    manifest = Manifest(
        schemas=[
            ManifestEntry(name="bad", path=str(bad)),
            ManifestEntry(name="good", path=str(good)),
            ManifestEntry(name="broken", path=str(broken)),
        ]
    )

    report = orchestrator.validate_manifest(manifest, "inline")

    assert report.schemas[1].result == validate_schema_file(good, "good")
    assert report.schemas[0].result.validation_type == ValidationType.META_SCHEMA
    assert report.schemas[2].result.validation_type == ValidationType.ERROR
    assert report.config_path == "inline"


def test_batch_keeps_duplicates_and_order(tmp_path: Path) -> None:
    """Duplicate names produce independent results in manifest order."""
    schema = _write(tmp_path / "s.json", {"type": "boolean"})
    config = _write_manifest(
        tmp_path,
        [
            {"name": "dup", "path": str(schema)},
            {"name": "zeta", "path": str(schema)},
            {"name": "dup", "path": str(schema)},
        ],
    )

    report = orchestrator.run_batch_validation(config)

    assert [entry.name for entry in report.schemas] == ["dup", "zeta", "dup"]
    assert report.all_valid
    assert report.valid_count == report.total_count == 3


def test_batch_writes_report(tmp_path: Path) -> None:
    """The batch report is written with camelCase keys."""
    schema = _write(tmp_path / "s.json", {"type": "string"})
    config = _write_manifest(tmp_path, [{"name": "s", "path": str(schema)}])
    output = tmp_path / "out" / "results.json"

    orchestrator.run_batch_validation(config, output)

    written = json.loads(output.read_text())
    assert written["configPath"] == str(config)
    assert "timestamp" in written
    assert written["schemas"][0]["name"] == "s"
    assert written["schemas"][0]["result"]["validationType"] == "compilation"


def test_batch_missing_manifest_aborts(tmp_path: Path) -> None:
    """A missing manifest is a configuration error, not a result."""
    with pytest.raises(ManifestError):
        orchestrator.run_batch_validation(tmp_path / "absent.json")


def test_schema_run_uses_file_name(tmp_path: Path) -> None:
    """Single runs label the result with the file's base name."""
    schema = _write(tmp_path / "user.schema.json", {"type": "object"})
    output = tmp_path / "result.json"

    report = orchestrator.run_schema_validation(schema, output)

    assert report.result.schema_name == "user.schema.json"
    assert report.schema_path == str(schema)
    written = json.loads(output.read_text())
    assert written["schemaPath"] == str(schema)
    assert written["result"]["valid"] is True


def test_schema_run_reports_load_error(tmp_path: Path) -> None:
    """An unreadable schema file yields an error result."""
    report = orchestrator.run_schema_validation(tmp_path / "nope.json")
    assert report.result.validation_type == ValidationType.ERROR
