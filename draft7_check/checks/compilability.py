"""Compile a meta-schema-valid document into an executable Draft-7 validator."""

import logging
from typing import Any

import regress
from jsonschema import Draft7Validator
from jsonschema_specifications import REGISTRY as SPECIFICATIONS
from referencing.exceptions import Unresolvable
from referencing.jsonschema import DRAFT7

from draft7_check.checks.conformance import json_pointer

logger = logging.getLogger(__name__)

# Shared format registration, never mutated after import
FORMAT_CHECKER = Draft7Validator.FORMAT_CHECKER

SUBSCHEMA_KEYWORDS = (
    "additionalItems",
    "additionalProperties",
    "contains",
    "propertyNames",
    "if",
    "then",
    "else",
    "not",
)
SUBSCHEMA_ARRAY_KEYWORDS = ("allOf", "anyOf", "oneOf")
SUBSCHEMA_MAP_KEYWORDS = ("properties", "patternProperties")
BOUND_PAIRS = (
    ("minimum", "maximum"),
    ("minLength", "maxLength"),
    ("minItems", "maxItems"),
    ("minProperties", "maxProperties"),
)


class CompilationError(Exception):
    """Raised when a schema cannot be turned into a working validator."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _compile_pattern(pattern: str, pointer: str) -> None:
    # ECMA-262 syntax in unicode mode, as Draft-7 patterns are written
    try:
        regress.Regex(pattern, "u")
    except regress.RegressError as exc:
        raise CompilationError(
            f'pattern "{pattern}" at {pointer} is not a valid regular expression: '
            f"{exc}"
        ) from exc


def _check_bounds(node: dict[str, Any], pointer: str) -> None:
    for lower_key, upper_key in BOUND_PAIRS:
        lower, upper = node.get(lower_key), node.get(upper_key)
        if _is_number(lower) and _is_number(upper) and lower > upper:
            raise CompilationError(
                f"{lower_key} ({lower}) is greater than {upper_key} ({upper}) "
                f"at {pointer}"
            )


def _check_definitions(node: dict[str, Any], resolver, path: tuple) -> None:
    definitions = node.get("definitions")
    if isinstance(definitions, dict):
        for name, subschema in definitions.items():
            _check_node(subschema, resolver, path + ("definitions", name))


def _check_node(node: Any, resolver, path: tuple) -> None:
    if not isinstance(node, dict):
        return

    pointer = "#" + json_pointer(path)
    if isinstance(node.get("$id"), str):
        resolver = resolver.in_subresource(DRAFT7.create_resource(node))

    ref = node.get("$ref")
    if isinstance(ref, str):
        try:
            resolver.lookup(ref)
        except Unresolvable as exc:
            raise CompilationError(
                f"can't resolve reference {ref} at {pointer}"
            ) from exc
        # Draft-7 ignores every sibling of $ref except the definitions it targets
        _check_definitions(node, resolver, path)
        return

    if isinstance(node.get("pattern"), str):
        _compile_pattern(node["pattern"], pointer)
    patterns = node.get("patternProperties")
    if isinstance(patterns, dict):
        for pattern in patterns:
            _compile_pattern(pattern, f"{pointer}/patternProperties")
    _check_bounds(node, pointer)

    for keyword in SUBSCHEMA_KEYWORDS:
        if keyword in node:
            _check_node(node[keyword], resolver, path + (keyword,))

    for keyword in SUBSCHEMA_ARRAY_KEYWORDS:
        for index, subschema in enumerate(node.get(keyword) or []):
            _check_node(subschema, resolver, path + (keyword, index))

    for keyword in SUBSCHEMA_MAP_KEYWORDS:
        for name, subschema in (node.get(keyword) or {}).items():
            _check_node(subschema, resolver, path + (keyword, name))
    _check_definitions(node, resolver, path)

    items = node.get("items")
    if isinstance(items, list):
        for index, subschema in enumerate(items):
            _check_node(subschema, resolver, path + ("items", index))
    else:
        _check_node(items, resolver, path + ("items",))

    dependencies = node.get("dependencies")
    if isinstance(dependencies, dict):
        for name, dependency in dependencies.items():
            # Array values list required property names, not schemas
            _check_node(dependency, resolver, path + ("dependencies", name))


def compile_schema(schema: Any) -> Draft7Validator:
    """
    Build an executable validator for a schema that passed the meta-schema check.

    Walks every subschema position and rejects what only a compilation attempt
    surfaces: malformed regular expressions, unresolvable ``$ref`` targets and
    contradictory lower/upper bounds. Remote documents are never fetched.

    Args:
        schema (Any): A document already known to conform to the Draft-7 meta-schema.

    Returns:
        Draft7Validator: Validator ready to check instances.

    Raises:
        CompilationError: If the schema cannot be compiled.
    """
    resource = DRAFT7.create_resource(schema)
    registry = SPECIFICATIONS.with_resource(resource.id() or "", resource)
    resolver = registry.resolver_with_root(resource)
    _check_node(schema, resolver, ())

    validator = Draft7Validator(
        schema, registry=registry, format_checker=FORMAT_CHECKER
    )
    logger.debug("Compiled schema into %s", type(validator).__name__)
    return validator
