"""
Analyzer module.

Contains reference resolution, name resolution, the type resolver and
IR building.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer
from .ir_nodes import (
    EnumDef,
    EnumVariant,
    FieldDef,
    ObjectDef,
    TypeKind,
    TypeModel,
    TypeRef,
)
from .name_resolver import NameResolver, ReservedWords, reserved_words_for
from .reference_resolver import LexicalReferenceResolver, ReferenceResolver
from .type_resolver import TypeResolver, resolve

__all__ = [
    "EnumDef",
    "EnumVariant",
    "FieldDef",
    "ObjectDef",
    "TypeKind",
    "TypeModel",
    "TypeRef",
    "NameResolver",
    "ReservedWords",
    "reserved_words_for",
    "ReferenceResolver",
    "LexicalReferenceResolver",
    "SchemaAnalyzer",
    "TypeResolver",
    "resolve",
]
