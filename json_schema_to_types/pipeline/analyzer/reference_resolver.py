"""
Reference resolver for $ref resolution.

Turns a $ref string into the name of the type it points to. The lexical
resolver only parses the string; it neither checks that the target exists
nor follows it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ...utils import snake_to_pascal_case
from ..errors import ContextPath, UnresolvableSchemaError


class ReferenceResolver(ABC):
    """Resolves a $ref string to a type name."""

    @abstractmethod
    def resolve(self, ref_path: str, context: ContextPath) -> str:
        """
        Resolve a $ref to the name of its target type.

        Args:
            ref_path: The $ref value, e.g. "#/definitions/house_pet"
            context: Where the reference was found (for error messages)

        Returns:
            Target type name
        """


class LexicalReferenceResolver(ReferenceResolver):
    """Derives the target name from the $ref string alone.

    The name is the last "/"-separated segment, cut at its first ".",
    converted to PascalCase:

        "#/definitions/house_pet" -> "HousePet"
        "pet.json" -> "Pet"
        "common.json#/definitions/address" -> "Address"
    """

    def resolve(self, ref_path: str, context: ContextPath) -> str:
        segment = ref_path.rstrip("/").rsplit("/", 1)[-1]
        segment = segment.lstrip("#").split(".", 1)[0]
        name = snake_to_pascal_case(segment)
        if not name:
            raise UnresolvableSchemaError(context, ref_path=ref_path)
        return name
