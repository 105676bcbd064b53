"""
IR (Intermediate Representation) node definitions.

These nodes represent the resolved type model of a schema, independent of
any target language. Renderers turn them into declarations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..errors import Diagnostic


class TypeKind(Enum):
    """Kind of type in the IR."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"  # float
    BOOLEAN = "boolean"
    NULL = "null"
    REFERENCE = "reference"  # Named structure defined elsewhere
    OBJECT = "object"  # Named structure with fields
    ARRAY = "array"  # list[T]
    MAP = "map"  # dict[str, T]
    OPTIONAL = "optional"  # T | None
    ENUM = "enum"  # Tagged union


PRIMITIVE_KINDS = frozenset({TypeKind.STRING, TypeKind.INTEGER, TypeKind.NUMBER, TypeKind.BOOLEAN, TypeKind.NULL})

WRAPPER_KINDS = frozenset({TypeKind.ARRAY, TypeKind.MAP, TypeKind.OPTIONAL})


@dataclass
class TypeRef:
    """A resolved type."""

    kind: TypeKind = TypeKind.NULL

    # Type name for references, objects and enums
    name: str = ""

    # Exactly one element for array, map and optional
    type_args: list[TypeRef] = field(default_factory=list)

    object_def: ObjectDef | None = None
    enum_def: EnumDef | None = None

    @property
    def inner(self) -> TypeRef:
        """The wrapped type of an array, map or optional."""
        if self.kind not in WRAPPER_KINDS:
            raise TypeError(f"{self.kind.value} type has no inner type")
        return self.type_args[0]

    @property
    def is_primitive(self) -> bool:
        return self.kind in PRIMITIVE_KINDS

    @property
    def is_optional(self) -> bool:
        return self.kind == TypeKind.OPTIONAL

    @property
    def named_def(self) -> ObjectDef | EnumDef | None:
        """The structure declared by this node, if any."""
        return self.object_def or self.enum_def

    def describe(self) -> str:
        """Short language-neutral rendering, e.g. "array<optional<Pet>>"."""
        if self.kind in PRIMITIVE_KINDS:
            return self.kind.value
        if self.kind in WRAPPER_KINDS:
            return f"{self.kind.value}<{self.inner.describe()}>"
        return self.name

    @staticmethod
    def primitive(kind: TypeKind) -> TypeRef:
        return TypeRef(kind=kind)

    @staticmethod
    def reference(name: str) -> TypeRef:
        return TypeRef(kind=TypeKind.REFERENCE, name=name)

    @staticmethod
    def array(item: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.ARRAY, type_args=[item])

    @staticmethod
    def map(value: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.MAP, type_args=[value])

    @staticmethod
    def optional(inner: TypeRef) -> TypeRef:
        return TypeRef(kind=TypeKind.OPTIONAL, type_args=[inner])

    @staticmethod
    def object(object_def: ObjectDef) -> TypeRef:
        return TypeRef(kind=TypeKind.OBJECT, name=object_def.name, object_def=object_def)

    @staticmethod
    def enum(enum_def: EnumDef) -> TypeRef:
        return TypeRef(kind=TypeKind.ENUM, name=enum_def.name, enum_def=enum_def)


@dataclass
class FieldDef:
    """A field of an object."""

    name: str = ""  # Identifier used in generated code
    type_ref: TypeRef | None = None

    # Original JSON property name, only set when it differs from name
    rename: str | None = None

    @property
    def json_name(self) -> str:
        """Property name on the wire."""
        return self.rename if self.rename is not None else self.name

    @property
    def is_required(self) -> bool:
        return self.type_ref is not None and not self.type_ref.is_optional


@dataclass
class ObjectDef:
    """A named structure with an ordered list of fields."""

    name: str = ""
    fields: list[FieldDef] = field(default_factory=list)
    description: str | None = None


@dataclass
class EnumVariant:
    """A tagged union alternative."""

    name: str = ""
    inner: TypeRef | None = None


@dataclass
class EnumDef:
    """A named tagged union with an ordered list of variants."""

    name: str = ""
    variants: list[EnumVariant] = field(default_factory=list)
    description: str | None = None


@dataclass
class TypeModel:
    """The resolved type model of one schema document."""

    root_name: str = ""

    # None when the document only holds definitions
    root: TypeRef | None = None

    # Definition key -> resolved type
    definitions: dict[str, TypeRef] = field(default_factory=dict)

    # Every object and enum in the tree, parents before children
    named_types: list[ObjectDef | EnumDef] = field(default_factory=list)

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def get(self, name: str) -> ObjectDef | EnumDef | None:
        """Look up a named structure by type name."""
        for named in self.named_types:
            if named.name == name:
                return named
        return None

    @property
    def objects(self) -> list[ObjectDef]:
        return [named for named in self.named_types if isinstance(named, ObjectDef)]

    @property
    def enums(self) -> list[EnumDef]:
        return [named for named in self.named_types if isinstance(named, EnumDef)]
