"""
Pipeline - JSON Schema to type declaration generator.

This module provides a multi-phase architecture for generating type
declarations from JSON schemas:

1. Phase 1 (Parser): Parse the JSON Schema dictionary into JsonSchema nodes
2. Phase 2 (Analyzer): Resolve nodes into the type model (IR)
3. Phase 3 (Backend): Render the type model as Rust or Python declarations
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, VariantNaming
from .errors import (
    ContextPath,
    Diagnostic,
    DuplicateTypeNameError,
    MaxDepthExceededError,
    MissingItemsError,
    MissingVariantIdError,
    SchemaParseError,
    SchemaResolutionError,
    UnresolvableSchemaError,
    UnsupportedLanguageError,
)
from .generator import PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "VariantNaming",
    "ContextPath",
    "Diagnostic",
    "SchemaParseError",
    "SchemaResolutionError",
    "MissingItemsError",
    "UnresolvableSchemaError",
    "MissingVariantIdError",
    "MaxDepthExceededError",
    "DuplicateTypeNameError",
    "UnsupportedLanguageError",
]
