"""Collision-safe persistence of generated files."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from .config import WriterSettings
from .errors import DestinationAlreadyExists, DirectoryCreateFailed, WriteFailed

__all__ = ["SafeWriter"]


LOGGER = logging.getLogger(__name__)


def _exists(path: Path) -> bool:
    """Like :meth:`Path.exists` but raise on errors other than a missing entry."""

    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def _is_directory(path: Path) -> bool:
    try:
        return stat.S_ISDIR(path.stat().st_mode)
    except OSError:
        return False


def _missing_directories(directory: Path) -> list[Path]:
    missing: list[Path] = []
    current = directory
    while not _exists(current) and current != current.parent:
        missing.append(current)
        current = current.parent
    missing.reverse()
    return missing


class SafeWriter:
    """Write generated content without clobbering files by accident.

    Existing files are only replaced when ``overwrite`` is enabled. Missing
    parent directories are created with ``dir_mode``. The check-then-write
    sequence is not locked; callers must not write the same path concurrently.
    """

    def __init__(self, overwrite: bool = False, dir_mode: int = 0o755, *, encoding: str = "utf-8") -> None:
        self._overwrite = overwrite
        self._dir_mode = dir_mode
        self._encoding = encoding

    @classmethod
    def from_settings(cls, settings: WriterSettings) -> "SafeWriter":
        return cls(settings.overwrite, settings.dir_mode, encoding=settings.encoding)

    @property
    def overwrite(self) -> bool:
        return self._overwrite

    @property
    def dir_mode(self) -> int:
        return self._dir_mode

    def set_overwrite(self, overwrite: bool) -> "SafeWriter":
        """Toggle overwrite mode for subsequent writes and return ``self``."""

        self._overwrite = overwrite
        return self

    def write(self, path: str | Path, content: str) -> bool:
        """Write ``content`` to ``path`` and return ``True``.

        Raises
        ------
        DestinationAlreadyExists
            ``path`` exists and overwrite is disabled. Nothing is touched.
        DirectoryCreateFailed
            The parent directory is missing and could not be created.
        WriteFailed
            The file could not be written.
        """

        path = Path(path)
        if not self._overwrite and self._destination_exists(path):
            raise DestinationAlreadyExists(path)

        self._ensure_directory(path.parent)

        try:
            path.write_text(content, encoding=self._encoding)
        except OSError as exc:
            raise WriteFailed(path) from exc

        LOGGER.info("wrote path=%s length=%s", path, len(content))
        return True

    def write_if_absent(self, path: str | Path, content: str) -> bool:
        """Write ``content`` unless ``path`` exists. Return whether it was written."""

        path = Path(path)
        if self._destination_exists(path):
            LOGGER.debug("skip existing path=%s", path)
            return False

        return self.write(path, content)

    def _destination_exists(self, path: Path) -> bool:
        try:
            return _exists(path)
        except OSError as exc:
            raise WriteFailed(path) from exc

    def _ensure_directory(self, directory: Path) -> None:
        if _is_directory(directory):
            return

        try:
            for missing in _missing_directories(directory):
                missing.mkdir(mode=self._dir_mode, exist_ok=True)
        except OSError as exc:
            # Another process may have created it in the meantime.
            if not _is_directory(directory):
                raise DirectoryCreateFailed(directory) from exc

        if not _is_directory(directory):
            raise DirectoryCreateFailed(directory)

        LOGGER.debug("ensured directory=%s mode=%o", directory, self._dir_mode)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(overwrite={self._overwrite!r}, dir_mode={self._dir_mode:#o})"
