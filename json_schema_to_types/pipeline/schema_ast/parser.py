"""
JSON Schema parser that builds the schema document model.

Phase 1 of the pipeline: turn a deserialized JSON document into JsonSchema
nodes without resolving references or doing language-specific processing.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import DEFAULT_MAX_DEPTH
from ..errors import SchemaParseError
from .nodes import KEYWORD_ATTRIBUTES, JsonSchema

logger = logging.getLogger(__name__)


class SchemaParser:
    """Parses a JSON Schema dictionary into JsonSchema nodes."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the parser.

        Args:
            max_depth: Maximum nesting depth of schema objects; every nested
                schema (property, item, oneOf branch, definition) is one level
        """
        self.max_depth = max_depth

    def parse(self, schema: dict[str, Any]) -> JsonSchema:
        """
        Parse a JSON Schema document.

        Args:
            schema: The JSON Schema dictionary (e.g. from json.load)

        Returns:
            The root JsonSchema node
        """
        return self._parse_schema_node(schema, "#", 0)

    def _parse_schema_node(self, schema: Any, path: str, depth: int) -> JsonSchema:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema dictionary
            path: Current path in schema (for error messages)
            depth: Nesting depth of this node, 0 for the document

        Returns:
            The parsed JsonSchema
        """
        if depth > self.max_depth:
            raise SchemaParseError(f"Schema nesting exceeds maximum depth of {self.max_depth}", path)

        if not isinstance(schema, dict):
            raise SchemaParseError(f"Expected a schema object, got {type(schema).__name__}", path)

        ignored = [key for key in schema if key not in KEYWORD_ATTRIBUTES and key != "$id"]
        if ignored:
            logger.debug("Ignoring unsupported keywords %s at %s", ignored, path)

        node = JsonSchema(
            id=self._get_string(schema, "id", path),
            schema_uri=self._get_string(schema, "$schema", path),
            description=self._get_string(schema, "description", path),
            type=self._parse_type(schema, path),
            required=self._parse_required(schema, path),
            ref=self._get_string(schema, "$ref", path),
            additional_properties=self._parse_additional_properties(schema, path),
            source_path=path,
        )

        # Draft 6+ spelling of "id"
        if node.id is None and "$id" in schema:
            node.id = self._get_string(schema, "$id", path)

        if "properties" in schema:
            node.properties = self._parse_schema_map(schema["properties"], f"{path}/properties", depth + 1)

        if "definitions" in schema:
            node.definitions = self._parse_schema_map(schema["definitions"], f"{path}/definitions", depth + 1)

        if "patternProperties" in schema:
            node.pattern_properties = self._parse_schema_map(
                schema["patternProperties"], f"{path}/patternProperties", depth + 1
            )

        if "items" in schema:
            node.items = self._parse_schema_node(schema["items"], f"{path}/items", depth + 1)

        if "oneOf" in schema:
            node.one_of = self._parse_one_of(schema["oneOf"], f"{path}/oneOf", depth + 1)

        return node

    def _get_string(self, schema: dict[str, Any], key: str, path: str) -> str | None:
        value = schema.get(key)
        if value is not None and not isinstance(value, str):
            raise SchemaParseError(f"'{key}' must be a string", path)
        return value

    def _parse_type(self, schema: dict[str, Any], path: str) -> str | None:
        """Parse the "type" keyword, collapsing single-element type arrays."""
        type_value = schema.get("type")
        if isinstance(type_value, list):
            if len(type_value) != 1:
                raise SchemaParseError(f"Type arrays are not supported: {type_value}", path)
            type_value = type_value[0]

        if type_value is not None and not isinstance(type_value, str):
            raise SchemaParseError("'type' must be a string", path)
        return type_value

    def _parse_required(self, schema: dict[str, Any], path: str) -> list[str] | None:
        if "required" not in schema:
            return None

        required = schema["required"]
        if not isinstance(required, list) or not all(isinstance(name, str) for name in required):
            raise SchemaParseError("'required' must be a list of property names", path)
        return list(required)

    def _parse_additional_properties(self, schema: dict[str, Any], path: str) -> bool:
        value = schema.get("additionalProperties", False)
        if isinstance(value, bool):
            return value
        if isinstance(value, dict):
            # A schema object allows additional properties
            return True
        raise SchemaParseError("'additionalProperties' must be a boolean or a schema", path)

    def _parse_schema_map(self, value: Any, path: str, depth: int) -> dict[str, JsonSchema]:
        """Parse a name -> schema mapping, keeping declaration order."""
        if not isinstance(value, dict):
            raise SchemaParseError("Expected an object mapping names to schemas", path)

        result = {}
        for name, sub_schema in value.items():
            # Skip comment entries
            if name.startswith("_comment") and isinstance(sub_schema, str):
                logger.debug("Skipping comment entry %s at %s", name, path)
                continue
            result[name] = self._parse_schema_node(sub_schema, f"{path}/{name}", depth)
        return result

    def _parse_one_of(self, value: Any, path: str, depth: int) -> list[JsonSchema]:
        if not isinstance(value, list):
            raise SchemaParseError("'oneOf' must be a list of schemas", path)
        return [self._parse_schema_node(branch, f"{path}/{i}", depth) for i, branch in enumerate(value)]


def parse_schema(schema: dict[str, Any], max_depth: int = DEFAULT_MAX_DEPTH) -> JsonSchema:
    """Parse a JSON Schema dictionary into the schema document model."""
    return SchemaParser(max_depth).parse(schema)
