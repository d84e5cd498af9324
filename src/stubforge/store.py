"""Filesystem backed lookup of stub templates."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from .config import CompilerSettings
from .errors import TemplateNotFound, TemplateReadError

__all__ = ["TemplateStore"]


LOGGER = logging.getLogger(__name__)


class TemplateStore:
    """Resolve stub names to template text stored under ``root``.

    Stubs are plain text files named ``<stub_name><suffix>``. Files are read on
    every :meth:`load` call so edits are visible without recreating the store.
    """

    def __init__(self, root: str | Path, *, suffix: str = ".stub", encoding: str = "utf-8") -> None:
        self._root = Path(root)
        self._suffix = suffix
        self._encoding = encoding

    @classmethod
    def from_settings(cls, settings: CompilerSettings) -> "TemplateStore":
        return cls(settings.stub_path, suffix=settings.suffix, encoding=settings.encoding)

    @property
    def root(self) -> Path:
        """Directory the stubs are read from."""

        return self._root

    def path_for(self, stub_name: str) -> Path:
        """Return the file backing ``stub_name``.

        Names that resolve outside the root directory raise
        :class:`~stubforge.errors.TemplateNotFound`.
        """

        path = self._root / f"{stub_name}{self._suffix}"
        if not path.resolve().is_relative_to(self._root.resolve()):
            raise TemplateNotFound(stub_name)
        return path

    def exists(self, stub_name: str) -> bool:
        try:
            return stat.S_ISREG(self.path_for(stub_name).stat().st_mode)
        except (TemplateNotFound, OSError):
            return False

    def load(self, stub_name: str) -> str:
        """Return the raw text of ``stub_name``.

        Raises :class:`~stubforge.errors.TemplateNotFound` when no file backs the
        name and :class:`~stubforge.errors.TemplateReadError` when the file
        cannot be read or decoded.
        """

        path = self.path_for(stub_name)
        try:
            mode = path.stat().st_mode
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise TemplateNotFound(stub_name) from exc
        except OSError as exc:
            raise TemplateReadError(stub_name, path) from exc

        if not stat.S_ISREG(mode):
            raise TemplateNotFound(stub_name)

        try:
            text = path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateReadError(stub_name, path) from exc

        LOGGER.debug("load stub=%s path=%s length=%s", stub_name, path, len(text))
        return text

    def list_available(self) -> list[str]:
        """Return the names of every stub in the root directory."""

        if not self._root.is_dir():
            return []

        names = [
            path.name[: -len(self._suffix)] if self._suffix else path.name
            for path in self._root.glob(f"*{self._suffix}")
            if path.is_file()
        ]
        return sorted(names)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self._root)!r})"
