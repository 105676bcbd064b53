"""
Schema analyzer that turns a parsed document into a type model.

Resolves the root schema and every entry of "definitions", then collects
all named structures (objects and tagged unions) for the renderers.
"""

from __future__ import annotations

import logging

from ..config import CodeGeneratorConfig
from ..errors import ContextPath, DuplicateTypeNameError
from ..schema_ast.nodes import JsonSchema
from .ir_nodes import EnumDef, ObjectDef, TypeModel, TypeRef
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


class SchemaAnalyzer:
    """Analyzes a schema document and builds its type model."""

    def __init__(self, language: str, config: CodeGeneratorConfig):
        """
        Initialize the analyzer.

        Args:
            language: Target language ("rust" or "python")
            config: Code generation configuration
        """
        self.language = language
        self.config = config
        self.resolver = TypeResolver.for_language(language, config)

    def analyze(self, document: JsonSchema, root_name: str) -> TypeModel:
        """
        Analyze a document and build its type model.

        Args:
            document: The parsed root schema
            root_name: Type name for the root schema

        Returns:
            TypeModel with the root type, definitions and named structures
        """
        model = TypeModel(root_name=root_name)
        named: dict[str, ObjectDef | EnumDef] = {}

        if self._has_root_type(document):
            model.root = self.resolver.resolve(document, root_name)
            self._collect_named_types(model.root, named, model)

        for key, definition in (document.definitions or {}).items():
            type_name = self.resolver.name_resolver.type_name(key)
            logger.debug("Resolving definition %s as %s", key, type_name)
            type_ref = self.resolver.resolve(definition, type_name)
            model.definitions[key] = type_ref
            self._collect_named_types(type_ref, named, model)

        model.diagnostics = list(self.resolver.diagnostics)
        return model

    def _has_root_type(self, document: JsonSchema) -> bool:
        """Whether the root schema is a type rather than a definitions container."""
        return any(
            value is not None
            for value in (document.type, document.ref, document.one_of, document.properties, document.items)
        )

    def _collect_named_types(
        self,
        type_ref: TypeRef,
        named: dict[str, ObjectDef | EnumDef],
        model: TypeModel,
    ) -> None:
        """Recursively collect objects and enums, parents before children."""
        definition = type_ref.named_def
        if definition is not None:
            existing = named.get(definition.name)
            if existing is None:
                named[definition.name] = definition
                model.named_types.append(definition)
            elif existing != definition:
                raise DuplicateTypeNameError(ContextPath(definition.name))

        for arg in type_ref.type_args:
            self._collect_named_types(arg, named, model)

        if type_ref.object_def is not None:
            for field_def in type_ref.object_def.fields:
                self._collect_named_types(field_def.type_ref, named, model)

        if type_ref.enum_def is not None:
            for variant in type_ref.enum_def.variants:
                self._collect_named_types(variant.inner, named, model)
