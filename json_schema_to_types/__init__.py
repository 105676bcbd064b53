"""JSON Schema to Types Generator

A Python package that resolves JSON Schema documents into a
language-agnostic type model and renders it as Rust or Python
type declarations.
"""

__version__ = "0.1.0"

from .pipeline import (
    CodeGeneratorConfig,
    ContextPath,
    Diagnostic,
    PipelineGenerator,
    SchemaParseError,
    SchemaResolutionError,
    VariantNaming,
)
from .pipeline.analyzer import TypeKind, TypeModel, TypeRef, TypeResolver, resolve
from .pipeline.schema_ast import JsonSchema, parse_schema

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "VariantNaming",
    "ContextPath",
    "Diagnostic",
    "SchemaParseError",
    "SchemaResolutionError",
    "JsonSchema",
    "parse_schema",
    "TypeKind",
    "TypeModel",
    "TypeRef",
    "TypeResolver",
    "resolve",
]
