"""
Python backend: renders the type model as dataclasses.

Objects become dataclasses. A tagged union becomes a type alias over one
class per variant; a variant whose inner type is an object of the same name
is that object, any other variant gets a one-field wrapper class named after
the variant (with a "Value" suffix when a declared structure already has
that name).
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import EnumDef, EnumVariant, ObjectDef, TypeKind, TypeModel, TypeRef
from .base import TypeRenderer


class PythonBackend(TypeRenderer):
    """Python code generation backend."""

    TYPE_MAP = {
        TypeKind.STRING: "str",
        TypeKind.INTEGER: "int",
        TypeKind.NUMBER: "float",
        TypeKind.BOOLEAN: "bool",
        TypeKind.NULL: "None",
    }

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    # Field name of variant wrapper classes
    WRAPPER_FIELD = "value"

    def __init__(self, config):
        super().__init__(config)
        # (enum name, variant name) -> class standing for the variant
        self.variant_classes: dict[tuple[str, str], str] = {}

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to Python type string."""
        if type_ref.is_primitive:
            return self.TYPE_MAP[type_ref.kind]

        if type_ref.kind in (TypeKind.REFERENCE, TypeKind.OBJECT, TypeKind.ENUM):
            return type_ref.name

        if type_ref.kind == TypeKind.ARRAY:
            return f"list[{self.translate_type(type_ref.inner)}]"

        if type_ref.kind == TypeKind.MAP:
            return f"dict[str, {self.translate_type(type_ref.inner)}]"

        if type_ref.kind == TypeKind.OPTIONAL:
            inner = self.translate_type(type_ref.inner)
            # Keep Optional distinct from a null type
            if inner == "None" or inner.endswith(" | None"):
                return f"Optional[{inner}]"
            return f"{inner} | None"

        raise ValueError(f"Unsupported type kind: {type_ref.kind}")

    def order_declarations(self, named_types: list[ObjectDef | EnumDef]) -> list[ObjectDef | EnumDef]:
        """Classes first; union aliases are evaluated at import time and must follow them."""
        objects = [named for named in named_types if isinstance(named, ObjectDef)]
        enums = [named for named in named_types if isinstance(named, EnumDef)]
        return objects + enums

    def prepare(self, model: TypeModel) -> None:
        self.variant_classes = self.name_variant_classes(model.named_types)

    def is_wrapped_variant(self, variant: EnumVariant) -> bool:
        """Whether a variant needs its own wrapper class."""
        inner = variant.inner
        return not (inner is not None and inner.kind == TypeKind.OBJECT and inner.name == variant.name)

    def name_variant_classes(self, named_types: list[ObjectDef | EnumDef]) -> dict[tuple[str, str], str]:
        """
        Pick the class name of every union variant.

        A wrapper takes the variant name unless a declared structure (or an
        earlier wrapper) already uses it, in which case "Value" is appended
        until the name is free.
        """
        taken = {named.name for named in named_types}
        classes = {}
        for enum_def in named_types:
            if not isinstance(enum_def, EnumDef):
                continue
            for variant in enum_def.variants:
                class_name = variant.name
                if self.is_wrapped_variant(variant):
                    while class_name in taken:
                        class_name += "Value"
                    taken.add(class_name)
                classes[(enum_def.name, variant.name)] = class_name
        return classes

    def _prepare_prefix_context(self, model: TypeModel, generation_comment: str) -> dict[str, Any]:
        has_objects = bool(model.objects) or any(self.is_wrapped_variant(v) for e in model.enums for v in e.variants)
        has_renames = any(f.rename is not None for o in model.objects for f in o.fields)

        typing_imports = []
        if any(not e.variants for e in model.enums):
            typing_imports.append("Never")
        if self._uses_nested_optional(model):
            typing_imports.append("Optional")

        return {
            "GENERATION_COMMENT": generation_comment,
            "DATACLASS_JSON": self.config.python_dataclass_json and has_objects,
            "USES_DATACLASS": has_objects,
            "USES_FIELD": has_renames,
            "USES_JSON_CONFIG": self.config.python_dataclass_json and has_renames,
            "TYPING_IMPORTS": typing_imports,
        }

    def _uses_nested_optional(self, model: TypeModel) -> bool:
        for object_def in model.objects:
            for field_def in object_def.fields:
                if "Optional[" in self.translate_type(field_def.type_ref):
                    return True
        for enum_def in model.enums:
            for variant in enum_def.variants:
                if "Optional[" in self.translate_type(variant.inner):
                    return True
        return False

    def _prepare_object_context(self, object_def: ObjectDef) -> dict[str, Any]:
        fields = []
        for field_def in object_def.fields:
            fields.append(
                {
                    "NAME": field_def.name,
                    "TYPE": self.translate_type(field_def.type_ref),
                    "INIT": self._field_init(field_def.rename, field_def.is_required),
                }
            )

        return {
            "NAME": object_def.name,
            "DOC_LINES": self._doc_lines(object_def.description),
            "DATACLASS_JSON": self.config.python_dataclass_json,
            "FIELDS": fields,
        }

    def _field_init(self, rename: str | None, is_required: bool) -> str | None:
        """Right-hand side of a field declaration, None for no default."""
        if rename is None:
            return None if is_required else "None"

        if self.config.python_dataclass_json:
            metadata = f"json_config(field_name={self._quote(rename)})"
        else:
            metadata = "{" + f'"json_name": {self._quote(rename)}' + "}"

        if is_required:
            return f"field(metadata={metadata})"
        return f"field(default=None, metadata={metadata})"

    def _prepare_enum_context(self, enum_def: EnumDef) -> dict[str, Any]:
        wrappers = []
        for variant in enum_def.variants:
            if self.is_wrapped_variant(variant):
                wrappers.append(
                    {
                        "NAME": self._variant_class(enum_def, variant),
                        "FIELD": self.WRAPPER_FIELD,
                        "TYPE": self.translate_type(variant.inner),
                    }
                )

        return {
            "NAME": enum_def.name,
            "DOC_LINES": self._doc_lines(enum_def.description),
            "DATACLASS_JSON": self.config.python_dataclass_json,
            "WRAPPERS": wrappers,
            "VARIANT_NAMES": [self._variant_class(enum_def, variant) for variant in enum_def.variants],
        }

    def _variant_class(self, enum_def: EnumDef, variant: EnumVariant) -> str:
        return self.variant_classes.get((enum_def.name, variant.name), variant.name)
