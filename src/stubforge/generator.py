"""Generators that turn an item name into files on disk."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Mapping

from .compiler import StubCompiler
from .config import PluginContext
from .naming import to_class_name, to_variable_name
from .writer import SafeWriter

__all__ = ["Generator", "TemplateGenerator", "generate_all"]


LOGGER = logging.getLogger(__name__)


class Generator(ABC):
    """Compile one stub for an item name and write it below ``base_path``.

    Subclasses decide which stub to use via :attr:`stub_name` and where the
    result goes via :meth:`output_path`. Relative output paths are resolved
    against ``base_path``.

    ``generate`` understands two options:

    ``tokens``
        Extra substitutions that take precedence over the derived ones.
    ``if_absent``
        Skip the file instead of raising when it already exists.
    """

    def __init__(
        self,
        compiler: StubCompiler,
        writer: SafeWriter,
        base_path: str | Path,
        context: PluginContext | None = None,
    ) -> None:
        self.compiler = compiler
        self.writer = writer
        self.base_path = Path(base_path)
        self.context = context

    @property
    @abstractmethod
    def stub_name(self) -> str:
        """Name of the stub compiled by this generator."""

    @abstractmethod
    def output_path(self, name: str) -> Path:
        """Return the destination for the file generated for ``name``."""

    def tokens(self, name: str, options: Mapping[str, Any]) -> dict[str, str]:
        class_name = to_class_name(name)
        variable_name = to_variable_name(name)
        tokens = {
            "name": name,
            "class": class_name,
            "className": class_name,
            "variable": variable_name,
            "variableName": variable_name,
        }
        tokens.update(options.get("tokens") or {})
        return tokens

    def render(self, name: str, options: Mapping[str, Any] | None = None) -> str:
        """Compile the stub for ``name`` without writing anything."""

        tokens = self.tokens(name, options or {})
        if self.context is not None:
            return self.compiler.compile_for(self.stub_name, self.context, tokens)
        return self.compiler.compile(self.stub_name, tokens)

    def resolve_path(self, name: str) -> Path:
        path = Path(self.output_path(name))
        if path.is_absolute():
            return path
        return self.base_path / path

    def generate(self, name: str, options: Mapping[str, Any] | None = None) -> list[Path]:
        """Write the file for ``name`` and return the paths that were written."""

        options = options or {}
        content = self.render(name, options)
        destination = self.resolve_path(name)

        if options.get("if_absent"):
            if not self.writer.write_if_absent(destination, content):
                LOGGER.info("generate skipped stub=%s path=%s", self.stub_name, destination)
                return []
        else:
            self.writer.write(destination, content)

        LOGGER.info("generate stub=%s name=%s path=%s", self.stub_name, name, destination)
        return [destination]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.stub_name!r})"


class TemplateGenerator(Generator):
    """Generator configured with a stub name and an output path pattern.

    ``path_pattern`` is a :meth:`str.format` string that may reference
    ``{name}``, ``{class_name}``, ``{variable_name}`` and, when a context is
    set, ``{slug}``.
    """

    def __init__(
        self,
        compiler: StubCompiler,
        writer: SafeWriter,
        base_path: str | Path,
        *,
        stub: str,
        path_pattern: str,
        context: PluginContext | None = None,
    ) -> None:
        super().__init__(compiler, writer, base_path, context)
        self._stub = stub
        self.path_pattern = path_pattern

    @property
    def stub_name(self) -> str:
        return self._stub

    def output_path(self, name: str) -> Path:
        fields = {
            "name": name,
            "class_name": to_class_name(name),
            "variable_name": to_variable_name(name),
        }
        if self.context is not None:
            fields["slug"] = self.context.slug

        try:
            return Path(self.path_pattern.format(**fields))
        except KeyError as exc:
            raise ValueError(f"unknown field {exc} in path pattern '{self.path_pattern}'") from exc


def generate_all(
    generators: Iterable[Generator],
    name: str,
    options: Mapping[str, Any] | None = None,
) -> list[Path]:
    """Run every generator for ``name`` in order and collect the written paths."""

    written: list[Path] = []
    for generator in generators:
        written.extend(generator.generate(name, options))
    return written
