"""
Pipeline generator: JSON Schema dictionary in, type declarations out.
"""

from __future__ import annotations

import logging
from typing import Any

from .analyzer import SchemaAnalyzer, TypeModel
from .backends import get_backend
from .config import CodeGeneratorConfig
from .schema_ast import SchemaParser

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Runs parse, analyze and render for one schema document."""

    def __init__(
        self,
        class_name: str,
        schema: dict[str, Any],
        config: CodeGeneratorConfig | None = None,
        language: str = "rust",
    ):
        """
        Initialize the generator.

        Args:
            class_name: Type name for the root schema
            schema: The JSON Schema dictionary
            config: Code generation configuration
            language: Target language ("rust" or "python")
        """
        self.class_name = class_name
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.language = language
        self.backend = get_backend(language, self.config)

    def analyze(self) -> TypeModel:
        """Parse and resolve the schema into its type model."""
        document = SchemaParser(self.config.max_depth).parse(self.schema)
        model = SchemaAnalyzer(self.language, self.config).analyze(document, self.class_name)
        logger.debug(
            "Resolved %s into %d named types with %d diagnostics",
            self.class_name,
            len(model.named_types),
            len(model.diagnostics),
        )
        return model

    def generate(self) -> str:
        """Generate source code for the schema."""
        model = self.analyze()
        return self.backend.generate(model, self._generate_command_comment())

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        from .. import __version__
        from ..cli_utils import reconstruct_command_line

        try:
            from ..json_schema_to_types import json_schema_to_types as click_command

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            # Fallback if Click command not available
            command_line = "json_schema_to_types"

        return f"Generated by json_schema_to_types v{__version__} : {command_line}"
