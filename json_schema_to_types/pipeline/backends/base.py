"""
Base class for type rendering backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import EnumDef, ObjectDef, TypeKind, TypeModel, TypeRef
from ..config import CodeGeneratorConfig


class TypeRenderer(ABC):
    """Abstract base class for type rendering backends."""

    # Type mapping from primitive kinds to language types
    TYPE_MAP: dict[TypeKind, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        # Add custom filters
        self.jinja_env.filters["quote"] = self._quote

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.object_template = self.jinja_env.get_template(f"object.{self.FILE_EXTENSION}.jinja2")
        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")

    def generate(self, model: TypeModel, generation_comment: str = "") -> str:
        """
        Render a complete source file for a type model.

        Args:
            model: The resolved type model
            generation_comment: Header comment, empty for none

        Returns:
            Generated code as a string
        """
        self.prepare(model)

        parts = [self.prefix_template.render(**self._prepare_prefix_context(model, generation_comment)).strip()]
        for named in self.order_declarations(model.named_types):
            parts.append(self.render_declaration(named).strip())

        return "\n\n\n".join(part for part in parts if part) + "\n"

    def prepare(self, model: TypeModel) -> None:
        """Hook to inspect the whole model before declarations are rendered."""

    def order_declarations(self, named_types: list[ObjectDef | EnumDef]) -> list[ObjectDef | EnumDef]:
        """Order in which named structures are declared."""
        return list(named_types)

    def render_declaration(self, named: ObjectDef | EnumDef) -> str:
        """
        Render the declaration of an object or enum.

        Args:
            named: The structure to declare

        Returns:
            Declaration source code
        """
        if isinstance(named, ObjectDef):
            return self.object_template.render(**self._prepare_object_context(named))
        return self.enum_template.render(**self._prepare_enum_context(named))

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type reference.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    @abstractmethod
    def _prepare_prefix_context(self, model: TypeModel, generation_comment: str) -> dict[str, Any]:
        """Template variables for the file prefix (imports, header)."""

    @abstractmethod
    def _prepare_object_context(self, object_def: ObjectDef) -> dict[str, Any]:
        """Template variables for an object declaration."""

    @abstractmethod
    def _prepare_enum_context(self, enum_def: EnumDef) -> dict[str, Any]:
        """Template variables for an enum declaration."""

    def _quote(self, text: str) -> str:
        """Quote text as a double-quoted string literal."""
        return json.dumps(text, ensure_ascii=False)

    def _doc_lines(self, description: str | None) -> list[str]:
        if not description:
            return []
        return [line.rstrip() for line in description.strip().splitlines()]

    def _uses_kind(self, model: TypeModel, kind: TypeKind) -> bool:
        """Whether any type in the model is of the given kind."""
        roots = list(model.definitions.values())
        if model.root is not None:
            roots.append(model.root)
        return any(self._contains_kind(type_ref, kind) for type_ref in roots)

    def _contains_kind(self, type_ref: TypeRef | None, kind: TypeKind) -> bool:
        if type_ref is None:
            return False
        if type_ref.kind == kind:
            return True
        if any(self._contains_kind(arg, kind) for arg in type_ref.type_args):
            return True
        if type_ref.object_def is not None:
            return any(self._contains_kind(f.type_ref, kind) for f in type_ref.object_def.fields)
        if type_ref.enum_def is not None:
            return any(self._contains_kind(v.inner, kind) for v in type_ref.enum_def.variants)
        return False
