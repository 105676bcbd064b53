"""
Schema AST module.

Contains the schema document model and its parser.
"""

from __future__ import annotations

from .nodes import KEYWORD_ATTRIBUTES, JsonSchema
from .parser import SchemaParser, parse_schema

__all__ = [
    "JsonSchema",
    "KEYWORD_ATTRIBUTES",
    "SchemaParser",
    "parse_schema",
]
