"""
Type resolver that turns schema nodes into IR types.

Phase 2 of the pipeline. The resolver walks a schema node together with a
context name and decides which type construct it denotes. Anonymous nested
structures are named after their position: a property "address" of
"Person" becomes "PersonAddress", the items of "PersonAddresses" become
"PersonAddress", and a oneOf branch with id "circle" under "Shape" becomes
"ShapeCircle".
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_MAX_DEPTH, CodeGeneratorConfig, VariantNaming
from ..errors import (
    ContextPath,
    Diagnostic,
    MaxDepthExceededError,
    MissingItemsError,
    MissingVariantIdError,
    UnresolvableSchemaError,
)
from ..schema_ast.nodes import JsonSchema
from .ir_nodes import EnumDef, EnumVariant, FieldDef, ObjectDef, TypeKind, TypeRef
from .name_resolver import NameResolver, reserved_words_for
from .reference_resolver import LexicalReferenceResolver, ReferenceResolver

logger = logging.getLogger(__name__)

PRIMITIVE_TYPES = {
    "boolean": TypeKind.BOOLEAN,
    "string": TypeKind.STRING,
    "integer": TypeKind.INTEGER,
    "number": TypeKind.NUMBER,
    "null": TypeKind.NULL,
}


class TypeResolver:
    """Resolves schema nodes to IR types."""

    def __init__(
        self,
        name_resolver: NameResolver,
        reference_resolver: ReferenceResolver | None = None,
        variant_naming: VariantNaming = VariantNaming.REQUIRE_ID,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """
        Initialize the resolver.

        Args:
            name_resolver: Synthesizes type names and field identifiers
            reference_resolver: Maps $ref strings to type names
            variant_naming: Policy for oneOf branches without an id
            max_depth: Maximum nesting depth before resolution fails
        """
        self.name_resolver = name_resolver
        self.reference_resolver = reference_resolver or LexicalReferenceResolver()
        self.variant_naming = variant_naming
        self.max_depth = max_depth

        # Non-fatal findings, in the order they were found
        self.diagnostics: list[Diagnostic] = []

    @classmethod
    def for_language(cls, language: str, config: CodeGeneratorConfig | None = None) -> TypeResolver:
        """Create a resolver using the reserved words of a target language."""
        config = config or CodeGeneratorConfig()
        return cls(
            NameResolver(reserved_words_for(language, config)),
            variant_naming=config.variant_naming,
            max_depth=config.max_depth,
        )

    def resolve(self, node: JsonSchema, context_name: str, depth: int = 0) -> TypeRef:
        """
        Resolve a schema node to a type.

        Args:
            node: The schema node
            context_name: Name derived from the node's position in the schema
            depth: Current nesting depth

        Returns:
            The resolved TypeRef
        """
        context = ContextPath(context_name, node.source_path)
        if depth > self.max_depth:
            raise MaxDepthExceededError(context, self.max_depth)

        if node.ref is not None:
            return TypeRef.reference(self.reference_resolver.resolve(node.ref, context))

        if node.one_of is not None:
            return self._resolve_one_of(node, context_name, depth)

        if node.type in PRIMITIVE_TYPES:
            return TypeRef.primitive(PRIMITIVE_TYPES[node.type])

        if node.type == "array":
            return self._resolve_array(node, context_name, depth)

        if node.type == "object":
            if node.pattern_properties:
                return self._resolve_map(node, context_name, depth)
            return self._resolve_object(node, context_name, depth)

        raise UnresolvableSchemaError(context, node.type)

    def _resolve_one_of(self, node: JsonSchema, context_name: str, depth: int) -> TypeRef:
        """Resolve a oneOf node to a tagged union named context_name."""
        enum_def = EnumDef(name=context_name, description=node.description)

        for index, branch in enumerate(node.one_of, start=1):
            branch_id = self._branch_id(branch, context_name, index)
            variant_name = self.name_resolver.child_name(context_name, branch_id)
            enum_def.variants.append(
                EnumVariant(
                    name=variant_name,
                    inner=self.resolve(branch, variant_name, depth + 1),
                )
            )

        return TypeRef.enum(enum_def)

    def _branch_id(self, branch: JsonSchema, context_name: str, index: int) -> str:
        """Get the identifier a oneOf branch contributes to its variant name."""
        if branch.id:
            return branch.id
        if self.variant_naming == VariantNaming.POSITIONAL:
            return f"Variant{index}"
        raise MissingVariantIdError(ContextPath(context_name, branch.source_path), index)

    def _resolve_array(self, node: JsonSchema, context_name: str, depth: int) -> TypeRef:
        """Resolve an array node; its items are named after the singular context name."""
        if node.items is None:
            raise MissingItemsError(ContextPath(context_name, node.source_path))

        item_name = self.name_resolver.item_name(context_name)
        return TypeRef.array(self.resolve(node.items, item_name, depth + 1))

    def _resolve_map(self, node: JsonSchema, context_name: str, depth: int) -> TypeRef:
        """Resolve an object with patternProperties to a string-keyed map.

        Only the first pattern is used; a map has a single value type.
        """
        patterns = list(node.pattern_properties)
        if len(patterns) > 1:
            logger.debug(
                "%s declares %d patternProperties, using %r only",
                ContextPath(context_name, node.source_path),
                len(patterns),
                patterns[0],
            )

        value_schema = node.pattern_properties[patterns[0]]
        return TypeRef.map(self.resolve(value_schema, context_name, depth + 1))

    def _resolve_object(self, node: JsonSchema, context_name: str, depth: int) -> TypeRef:
        """Resolve an object node to a structure named context_name."""
        object_def = ObjectDef(name=context_name, description=node.description)

        if not node.properties:
            self._report(
                ContextPath(context_name, node.source_path),
                f"{context_name} is an object but has no properties. Likely an error.",
            )

        used_identifiers: set[str] = set()
        for property_name, property_schema in (node.properties or {}).items():
            field_context = self.name_resolver.child_name(context_name, property_name)
            type_ref = self.resolve(property_schema, field_context, depth + 1)
            if not node.is_required(property_name):
                type_ref = TypeRef.optional(type_ref)

            identifier, rename = self.name_resolver.field_identifier(property_name, used_identifiers)
            used_identifiers.add(identifier)
            object_def.fields.append(FieldDef(name=identifier, type_ref=type_ref, rename=rename))

        return TypeRef.object(object_def)

    def _report(self, context: ContextPath, message: str) -> None:
        diagnostic = Diagnostic(context=context, message=message)
        self.diagnostics.append(diagnostic)
        logger.warning("%s", diagnostic)


def resolve(node: JsonSchema, context_name: str, language: str = "rust", config: CodeGeneratorConfig | None = None) -> TypeRef:
    """Resolve a schema node with a resolver for the given target language."""
    return TypeResolver.for_language(language, config).resolve(node, context_name)
