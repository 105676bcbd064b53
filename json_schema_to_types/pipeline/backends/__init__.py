"""
Rendering backends for the type model.
"""

from __future__ import annotations

from ..config import CodeGeneratorConfig
from ..errors import UnsupportedLanguageError
from .base import TypeRenderer
from .python_backend import PythonBackend
from .rust_backend import RustBackend

BACKENDS: dict[str, type[TypeRenderer]] = {
    "rust": RustBackend,
    "python": PythonBackend,
}


def get_backend(language: str, config: CodeGeneratorConfig) -> TypeRenderer:
    """Create the backend for a target language."""
    if language not in BACKENDS:
        raise UnsupportedLanguageError(f"Language '{language}' is not supported")
    return BACKENDS[language](config)


__all__ = [
    "TypeRenderer",
    "RustBackend",
    "PythonBackend",
    "BACKENDS",
    "get_backend",
]
