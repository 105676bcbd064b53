"""
Schema document model.

A JsonSchema holds the subset of JSON Schema keywords the resolver
interprets. Every other keyword in the source document is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# JSON keyword -> attribute name
KEYWORD_ATTRIBUTES = {
    "id": "id",
    "$schema": "schema_uri",
    "description": "description",
    "type": "type",
    "properties": "properties",
    "required": "required",
    "definitions": "definitions",
    "items": "items",
    "patternProperties": "pattern_properties",
    "additionalProperties": "additional_properties",
    "$ref": "ref",
    "oneOf": "one_of",
}


@dataclass
class JsonSchema:
    """One node of a JSON Schema document."""

    id: str | None = None
    schema_uri: str | None = None
    description: str | None = None
    type: str | None = None

    # Declaration order is preserved; it drives field order
    properties: dict[str, JsonSchema] | None = None

    # None means the keyword is absent, which is not the same as "all required"
    required: list[str] | None = None

    definitions: dict[str, JsonSchema] | None = None
    items: JsonSchema | None = None
    pattern_properties: dict[str, JsonSchema] | None = None
    additional_properties: bool = False
    ref: str | None = None
    one_of: list[JsonSchema] | None = None

    # Location of this node in the document (for error messages)
    source_path: str = field(default="#", compare=False)

    def is_required(self, property_name: str) -> bool:
        """Whether a property of this object is required.

        An object without a required list has no required properties.
        """
        return self.required is not None and property_name in self.required
