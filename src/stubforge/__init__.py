"""Scaffold source files from ``{{token}}`` stub templates.

The package compiles named stubs with literal token substitution, derives
class and variable names from a single identifier, and writes the results to
disk without overwriting existing files unless asked to.
"""

from __future__ import annotations

from .compiler import StubCompiler, substitute
from .config import CompilerSettings, PluginContext, WriterSettings, context_tokens
from .errors import (
    DestinationAlreadyExists,
    DirectoryCreateFailed,
    ErrorKind,
    StubforgeError,
    TemplateNotFound,
    TemplateReadError,
    WriteFailed,
)
from .generator import Generator, TemplateGenerator, generate_all
from .naming import to_class_name, to_pascal_slug, to_variable_name
from .store import TemplateStore
from .writer import SafeWriter

__all__ = [
    "CompilerSettings",
    "DestinationAlreadyExists",
    "DirectoryCreateFailed",
    "ErrorKind",
    "Generator",
    "PluginContext",
    "SafeWriter",
    "StubCompiler",
    "StubforgeError",
    "TemplateGenerator",
    "TemplateNotFound",
    "TemplateReadError",
    "TemplateStore",
    "WriteFailed",
    "WriterSettings",
    "context_tokens",
    "generate_all",
    "substitute",
    "to_class_name",
    "to_pascal_slug",
    "to_variable_name",
]

__version__ = "0.1.0"
