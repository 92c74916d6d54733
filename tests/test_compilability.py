"""Tests for compiling conforming schemas into validators."""

import pytest
from jsonschema import Draft7Validator

from draft7_check.checks import CompilationError, compile_schema


def test_compiles_into_draft7_validator() -> None:
    """A well-formed schema compiles into a working validator."""
    validator = compile_schema({"type": "string", "pattern": "^[A-Z][a-z]+"})
    assert isinstance(validator, Draft7Validator)
    assert validator.is_valid("Hello")
    assert not validator.is_valid("hello")


def test_malformed_pattern_fails() -> None:
    """An invalid regular expression cannot compile."""
    with pytest.raises(CompilationError, match="not a valid regular expression"):
        compile_schema({"type": "string", "pattern": "["})


def test_malformed_pattern_property_fails() -> None:
    """patternProperties keys are regular expressions too."""
    with pytest.raises(CompilationError, match="#/patternProperties"):
        compile_schema({"patternProperties": {"(": {"type": "string"}}})


def test_nested_pattern_failure_names_pointer() -> None:
    """The error message points at the offending subschema."""
    schema = {"items": [{"type": "string"}, {"pattern": "(unclosed"}]}
    with pytest.raises(CompilationError, match="#/items/1"):
        compile_schema(schema)


def test_unresolvable_local_reference_fails() -> None:
    """A $ref into a missing definition cannot compile."""
    with pytest.raises(CompilationError, match="can't resolve reference"):
        compile_schema({"properties": {"a": {"$ref": "#/definitions/missing"}}})


def test_remote_reference_is_not_fetched() -> None:
    """Remote documents are never retrieved."""
    with pytest.raises(CompilationError, match="https://example.com/other.json"):
        compile_schema({"$ref": "https://example.com/other.json"})


def test_local_and_id_scoped_references_resolve() -> None:
    """Definitions resolve both with and without a root $id."""
    definitions = {"positive": {"type": "integer", "minimum": 1}}
    properties = {"count": {"$ref": "#/definitions/positive"}}
    compile_schema({"definitions": definitions, "properties": properties})
    compile_schema(
        {
            "$id": "http://example.com/root.json",
            "definitions": definitions,
            "properties": properties,
        }
    )


def test_draft7_meta_schema_reference_resolves() -> None:
    """The bundled Draft-7 meta-schema is available by URI."""
    compile_schema({"$ref": "http://json-schema.org/draft-07/schema#"})


@pytest.mark.parametrize(
    "schema",
    [
        {"minimum": 10, "maximum": 1},
        {"minLength": 5, "maxLength": 2},
        {"minItems": 3, "maxItems": 0},
        {"properties": {"a": {"minProperties": 2, "maxProperties": 1}}},
    ],
)
def test_contradictory_bounds_fail(schema: dict) -> None:
    """A lower bound above its upper bound cannot compile."""
    with pytest.raises(CompilationError, match="is greater than"):
        compile_schema(schema)


def test_equal_bounds_compile() -> None:
    """Equal bounds are satisfiable."""
    compile_schema({"minLength": 16, "maxLength": 16})


def test_data_keywords_are_not_walked() -> None:
    """Values under enum, const and default are data, not schemas."""
    compile_schema(
        {
            "enum": [{"$ref": "#/nowhere"}],
            "const": {"pattern": "["},
            "default": {"minimum": 5, "maximum": 1},
        }
    )


def test_array_dependencies_are_property_lists() -> None:
    """Array-valued dependencies are not schemas."""
    compile_schema({"dependencies": {"card": ["billing"], "a": {"required": ["b"]}}})


def test_referenced_definition_with_bad_pattern_fails() -> None:
    """Definitions beside a root $ref are still compiled."""
    schema = {
        "$ref": "#/definitions/a",
        "definitions": {"a": {"type": "string", "pattern": "["}},
    }
    with pytest.raises(CompilationError, match="#/definitions/a"):
        compile_schema(schema)


def test_referenced_definition_with_contradictory_bounds_fails() -> None:
    """Bounds inside definitions beside a root $ref are checked."""
    schema = {
        "$ref": "#/definitions/a",
        "definitions": {"a": {"minimum": 5, "maximum": 1}},
    }
    with pytest.raises(CompilationError, match="is greater than"):
        compile_schema(schema)


@pytest.mark.parametrize(
    "pattern",
    [r"^\p{L}+$", r"(?<year>\d{4})-(?<month>\d{2})", r"^[A-Z][a-z]+"],
)
def test_ecma_patterns_compile(pattern: str) -> None:
    """Unicode property escapes and named groups are valid ECMA-262."""
    compile_schema({"type": "string", "pattern": pattern})


@pytest.mark.parametrize("pattern", [r"(?P<y>\d)", r"(?P=name)"])
def test_python_only_patterns_fail(pattern: str) -> None:
    """Python-specific regex syntax is not a Draft-7 pattern."""
    with pytest.raises(CompilationError, match="not a valid regular expression"):
        compile_schema({"type": "string", "pattern": pattern})
