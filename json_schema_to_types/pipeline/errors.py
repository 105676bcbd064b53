"""
Errors and diagnostics raised while turning a schema into a type model.

Fatal errors abort generation for the whole document. Diagnostics are
non-fatal findings that are logged and collected while processing continues.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ContextPath:
    """Where in the schema a node sits.

    Attributes:
        name: Context name threaded through the resolver (e.g. "PersonAddress")
        source_path: Location of the node in the document (e.g. "#/properties/address")
    """

    name: str = ""
    source_path: str = ""

    def __str__(self) -> str:
        if self.source_path:
            return f"{self.name} (at {self.source_path})"
        return self.name


class SchemaParseError(ValueError):
    """Raised when a recognized keyword has the wrong JSON shape."""

    def __init__(self, message: str, source_path: str = ""):
        self.source_path = source_path
        if source_path:
            message = f"{message} (at {source_path})"
        super().__init__(message)


class UnsupportedLanguageError(ValueError):
    """Raised when no backend exists for the requested target language."""

    pass


class SchemaResolutionError(Exception):
    """Base class for fatal errors raised by the type resolver.

    Every resolution error carries the context path of the offending node
    so the schema author can locate it.
    """

    def __init__(self, message: str, context: ContextPath):
        self.context = context
        super().__init__(f"{message}: {context}")


class MissingItemsError(SchemaResolutionError):
    """Raised when an array schema has no item schema."""

    def __init__(self, context: ContextPath):
        super().__init__("array schema has no schema set for items", context)


class UnresolvableSchemaError(SchemaResolutionError):
    """Raised for a node with no recognized type, no $ref and no oneOf."""

    def __init__(self, context: ContextPath, type_name: str | None = None, ref_path: str | None = None):
        self.type_name = type_name
        self.ref_path = ref_path
        if ref_path is not None:
            message = f"unresolvable schema node, $ref {ref_path!r} names no type"
        elif type_name is not None:
            message = f"unresolvable schema node with unknown type {type_name!r}"
        else:
            message = "unresolvable schema node"
        super().__init__(message, context)


class MissingVariantIdError(SchemaResolutionError):
    """Raised when a oneOf branch has no id to build its variant name from."""

    def __init__(self, context: ContextPath, index: int):
        self.index = index
        super().__init__(f"oneOf branch {index} has no id", context)


class MaxDepthExceededError(SchemaResolutionError):
    """Raised when schema nesting goes deeper than the configured limit."""

    def __init__(self, context: ContextPath, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"schema nesting exceeds maximum depth of {max_depth}", context)


class DuplicateTypeNameError(SchemaResolutionError):
    """Raised when two different structures resolve to the same type name."""

    def __init__(self, context: ContextPath):
        super().__init__("conflicting definitions for type name", context)


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal finding about the schema."""

    context: ContextPath
    message: str

    def __str__(self) -> str:
        return f"{self.context}: {self.message}"
