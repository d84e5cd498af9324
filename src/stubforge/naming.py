"""Identifier casing helpers used to derive template tokens."""

from __future__ import annotations

import re

__all__ = ["to_class_name", "to_variable_name", "to_pascal_slug"]


_WORD_SEPARATORS = re.compile(r"[-_]")
_WORD_START = re.compile(r"(^|[ \t\r\n\f\v])([a-z])")
_SLUG_PIECE_START = re.compile(r"(^|-)([a-z])")


def _upper_first(match: re.Match[str]) -> str:
    return match.group(1) + match.group(2).upper()


def _lower_first(value: str) -> str:
    if value and "A" <= value[0] <= "Z":
        return value[0].lower() + value[1:]
    return value


def to_class_name(name: str) -> str:
    """Return a PascalCase class name built from ``name``.

    Hyphens and underscores act as word separators alongside whitespace. Only
    the first ASCII letter of each word is uppercased; the remaining letters
    are kept as given, so ``"myTHING"`` becomes ``"MyTHING"``.
    """

    spaced = _WORD_SEPARATORS.sub(" ", name)
    titled = _WORD_START.sub(_upper_first, spaced)
    return titled.replace(" ", "")


def to_variable_name(name: str) -> str:
    """Return a camelCase variable name built from ``name``."""

    return _lower_first(to_class_name(name))


def to_pascal_slug(slug: str) -> str:
    """Return ``slug`` with each ``-`` separated piece capitalised and joined.

    Unlike :func:`to_class_name`, underscores are not treated as separators.
    """

    return _SLUG_PIECE_START.sub(_upper_first, slug).replace("-", "")
