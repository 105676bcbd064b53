"""
Rust backend: renders the type model as serde structs and enums.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import EnumDef, ObjectDef, TypeKind, TypeModel, TypeRef
from .base import TypeRenderer

NAMED_KINDS = (TypeKind.REFERENCE, TypeKind.OBJECT, TypeKind.ENUM)


class RustBackend(TypeRenderer):
    """Rust code generation backend."""

    TYPE_MAP = {
        TypeKind.STRING: "String",
        TypeKind.INTEGER: "i64",
        TypeKind.NUMBER: "f64",
        TypeKind.BOOLEAN: "bool",
        TypeKind.NULL: "()",
    }

    TEMPLATE_LANG = "rust"
    FILE_EXTENSION = "rs"

    def __init__(self, config):
        super().__init__(config)
        # (owner, target) edges that need a Box to give the type a finite size
        self.boxed_edges: set[tuple[str, str]] = set()

    def prepare(self, model: TypeModel) -> None:
        self.boxed_edges = self.find_boxed_edges(model.named_types)

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to Rust type string."""
        return self._translate(type_ref, owner=None)

    def _translate(self, type_ref: TypeRef, owner: str | None, indirect: bool = False) -> str:
        """
        Translate a type used inside the structure named owner.

        Named types reached without Vec/HashMap indirection are boxed when
        they lead back to owner.
        """
        if type_ref.is_primitive:
            return self.TYPE_MAP[type_ref.kind]

        if type_ref.kind in NAMED_KINDS:
            if owner is not None and not indirect and (owner, type_ref.name) in self.boxed_edges:
                return f"Box<{type_ref.name}>"
            return type_ref.name

        if type_ref.kind == TypeKind.ARRAY:
            return f"Vec<{self._translate(type_ref.inner, owner, indirect=True)}>"

        if type_ref.kind == TypeKind.MAP:
            return f"HashMap<String, {self._translate(type_ref.inner, owner, indirect=True)}>"

        if type_ref.kind == TypeKind.OPTIONAL:
            return f"Option<{self._translate(type_ref.inner, owner, indirect)}>"

        raise ValueError(f"Unsupported type kind: {type_ref.kind}")

    def find_boxed_edges(self, named_types: list[ObjectDef | EnumDef]) -> set[tuple[str, str]]:
        """
        Find direct references that make a structure contain itself.

        An edge owner -> target is direct when it does not go through Vec or
        HashMap. Such an edge needs a Box when target can reach owner again
        through direct edges.
        """
        edges: dict[str, set[str]] = {named.name: self._direct_targets(named) for named in named_types}

        boxed = set()
        for owner, targets in edges.items():
            for target in targets:
                if owner in self._reachable(target, edges):
                    boxed.add((owner, target))
        return boxed

    def _direct_targets(self, named: ObjectDef | EnumDef) -> set[str]:
        if isinstance(named, ObjectDef):
            members = [f.type_ref for f in named.fields]
        else:
            members = [v.inner for v in named.variants]

        targets = set()
        for type_ref in members:
            while type_ref is not None and type_ref.kind == TypeKind.OPTIONAL:
                type_ref = type_ref.inner
            if type_ref is not None and type_ref.kind in NAMED_KINDS:
                targets.add(type_ref.name)
        return targets

    def _reachable(self, start: str, edges: dict[str, set[str]]) -> set[str]:
        """All names reachable from start, start included."""
        seen = {start}
        stack = [start]
        while stack:
            for target in edges.get(stack.pop(), ()):
                if target not in seen:
                    seen.add(target)
                    stack.append(target)
        return seen

    def _prepare_prefix_context(self, model: TypeModel, generation_comment: str) -> dict[str, Any]:
        return {
            "GENERATION_COMMENT": generation_comment,
            "USES_HASHMAP": self._uses_kind(model, TypeKind.MAP),
        }

    def _prepare_object_context(self, object_def: ObjectDef) -> dict[str, Any]:
        fields = []
        for field_def in object_def.fields:
            fields.append(
                {
                    "NAME": field_def.name,
                    "TYPE": self._translate(field_def.type_ref, object_def.name),
                    "RENAME": field_def.rename,
                }
            )

        return {
            "NAME": object_def.name,
            "DOC_LINES": self._doc_lines(object_def.description),
            "DERIVES": ", ".join(self.config.rust_derives),
            "FIELDS": fields,
        }

    def _prepare_enum_context(self, enum_def: EnumDef) -> dict[str, Any]:
        variants = [{"NAME": v.name, "TYPE": self._translate(v.inner, enum_def.name)} for v in enum_def.variants]

        return {
            "NAME": enum_def.name,
            "DOC_LINES": self._doc_lines(enum_def.description),
            "DERIVES": ", ".join(self.config.rust_derives),
            "VARIANTS": variants,
        }
