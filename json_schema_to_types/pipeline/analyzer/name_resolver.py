"""
Name resolver for case conversion and reserved identifiers.

Type names are synthesized from context names in PascalCase. Field
identifiers keep the JSON property name unless it is not a valid identifier
or collides with a reserved word of the target language or with the
identifier of a sibling field.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...utils import pascal_to_snake_case, singularize, snake_to_pascal_case
from ..config import CodeGeneratorConfig
from ..errors import UnsupportedLanguageError

# Rust strict and reserved keywords
RUST_RESERVED_KEYWORDS = {
    "abstract",
    "as",
    "async",
    "await",
    "become",
    "box",
    "break",
    "const",
    "continue",
    "crate",
    "do",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "final",
    "fn",
    "for",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "macro",
    "match",
    "mod",
    "move",
    "mut",
    "override",
    "priv",
    "pub",
    "ref",
    "return",
    "self",
    "Self",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "try",
    "type",
    "typeof",
    "unsafe",
    "unsized",
    "use",
    "virtual",
    "where",
    "while",
    "yield",
}

# Python keywords and soft keywords, pinned so output does not depend on the
# interpreter running the generator
PYTHON_RESERVED_KEYWORDS = {
    "False",
    "None",
    "True",
    "and",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "case",
    "class",
    "continue",
    "def",
    "del",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "from",
    "global",
    "if",
    "import",
    "in",
    "is",
    "lambda",
    "match",
    "nonlocal",
    "not",
    "or",
    "pass",
    "raise",
    "return",
    "try",
    "type",
    "while",
    "with",
    "yield",
}

# Helpers called inside generated class bodies; a field of the same name would
# shadow them for the fields that follow
PYTHON_GENERATED_NAMES = {"field", "json_config"}


@dataclass
class ReservedWords:
    """Reserved identifiers of a target language.

    Attributes:
        words: Identifiers that cannot be used as field names
        substitutions: Preferred replacement for specific words
        suffix: Appended to reserved words without a substitution
    """

    words: set[str] = field(default_factory=set)
    substitutions: dict[str, str] = field(default_factory=dict)
    suffix: str = "_"

    def is_reserved(self, name: str) -> bool:
        return name in self.words or name in self.substitutions

    def substitute(self, name: str) -> str:
        """Return a safe identifier for name."""
        if name in self.substitutions:
            return self.substitutions[name]
        if name in self.words:
            return f"{name}{self.suffix}"
        return name

    def extended(self, words: list[str], substitutions: dict[str, str]) -> ReservedWords:
        """Copy of this table with extra words and substitutions."""
        return ReservedWords(
            words=self.words | set(words),
            substitutions={**self.substitutions, **substitutions},
            suffix=self.suffix,
        )


RESERVED_WORDS: dict[str, ReservedWords] = {
    "rust": ReservedWords(
        words=RUST_RESERVED_KEYWORDS,
        substitutions={"type": "ty", "self": "slf"},
    ),
    "python": ReservedWords(words=PYTHON_RESERVED_KEYWORDS | PYTHON_GENERATED_NAMES),
}

SUPPORTED_LANGUAGES = tuple(RESERVED_WORDS)


def reserved_words_for(language: str, config: CodeGeneratorConfig | None = None) -> ReservedWords:
    """
    Get the reserved-word table for a target language.

    Args:
        language: Target language ("rust" or "python")
        config: Optional configuration adding words and substitutions

    Returns:
        The ReservedWords table
    """
    if language not in RESERVED_WORDS:
        raise UnsupportedLanguageError(f"Language '{language}' is not supported")

    table = RESERVED_WORDS[language]
    if config is not None and (config.reserved_words or config.reserved_word_substitutions):
        table = table.extended(config.reserved_words, config.reserved_word_substitutions)
    return table


class NameResolver:
    """Synthesizes type names and field identifiers."""

    def __init__(self, reserved_words: ReservedWords):
        self.reserved_words = reserved_words

    def type_name(self, text: str) -> str:
        """Convert text to a PascalCase type name."""
        return snake_to_pascal_case(text)

    def child_name(self, context_name: str, part: str) -> str:
        """Name of a structure nested under context_name (e.g. PersonAddress)."""
        return context_name + snake_to_pascal_case(part)

    def item_name(self, context_name: str) -> str:
        """Name of the items of an array found at context_name."""
        return singularize(context_name)

    def field_identifier(self, property_name: str, taken: set[str] | None = None) -> tuple[str, str | None]:
        """
        Get the identifier for a property and its rename metadata.

        Args:
            property_name: The JSON property name
            taken: Identifiers already used by sibling fields; a clash gets
                a numeric suffix (ty, ty_2, ty_3, ...)

        Returns:
            (identifier, rename) where rename is the original property name
            when the identifier differs from it, else None
        """
        identifier = property_name
        if not identifier.isidentifier():
            identifier = pascal_to_snake_case(identifier) or "field"
            if identifier[0].isdigit():
                identifier = f"_{identifier}"

        identifier = self.reserved_words.substitute(identifier)

        if taken:
            base, index = identifier, 2
            while identifier in taken:
                identifier = f"{base}_{index}"
                index += 1

        rename = property_name if identifier != property_name else None
        return identifier, rename
