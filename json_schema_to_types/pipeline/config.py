"""
Configuration for the type generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class VariantNaming(str, Enum):
    """How oneOf branches without an "id" are named."""

    REQUIRE_ID = "require-id"  # Default: a branch without id is a fatal error
    POSITIONAL = "positional"  # Name the branch Variant1, Variant2, ...


DEFAULT_MAX_DEPTH = 64


@dataclass
class CodeGeneratorConfig:
    """Configuration options for type resolution and code generation."""

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Policy for oneOf branches that carry no id
    variant_naming: VariantNaming = VariantNaming.REQUIRE_ID

    # Maximum schema nesting depth before resolution fails
    max_depth: int = DEFAULT_MAX_DEPTH

    # Extra reserved identifiers for the target language
    reserved_words: list[str] = field(default_factory=list)

    # Extra reserved identifier substitutions (e.g. {"match": "match_kind"})
    reserved_word_substitutions: dict[str, str] = field(default_factory=dict)

    # Rust specific configuration
    rust_derives: list[str] = field(default_factory=lambda: ["Serialize", "Deserialize", "Clone", "Debug"])

    # Python specific configuration: decorate dataclasses with @dataclass_json
    python_dataclass_json: bool = True

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "variant_naming" and isinstance(v, str):
                config.variant_naming = VariantNaming(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "variant_naming": self.variant_naming.value,
            "max_depth": self.max_depth,
            "reserved_words": self.reserved_words,
            "reserved_word_substitutions": self.reserved_word_substitutions,
            "rust_derives": self.rust_derives,
            "python_dataclass_json": self.python_dataclass_json,
        }
