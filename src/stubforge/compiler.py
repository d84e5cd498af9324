"""Literal ``{{token}}`` substitution over stub templates."""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Mapping

from .config import CompilerSettings, PluginContext, context_tokens
from .store import TemplateStore

__all__ = ["StubCompiler", "substitute"]


LOGGER = logging.getLogger(__name__)


def substitute(text: str, replacements: Mapping[str, str]) -> str:
    """Replace every ``{{token}}`` in ``text`` whose token is a key of ``replacements``.

    The replacement happens in a single pass, so values containing placeholders
    are inserted verbatim and never expanded. Placeholders without a matching
    key are left untouched.
    """

    if not replacements:
        return text

    placeholders = sorted(("{{" + token + "}}" for token in replacements), key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(placeholder) for placeholder in placeholders))

    def replace(match: re.Match[str]) -> str:
        return str(replacements[match.group(0)[2:-2]])

    return pattern.sub(replace, text)


class StubCompiler:
    """Compile stubs from a :class:`TemplateStore` with token substitutions.

    ``defaults`` are fixed when the compiler is created and apply to every
    call. Per-call overrides win on key collisions and are discarded once the
    call returns.
    """

    def __init__(self, store: TemplateStore, defaults: Mapping[str, str] | None = None) -> None:
        self._store = store
        self._defaults: Mapping[str, str] = MappingProxyType(dict(defaults or {}))

    @classmethod
    def from_settings(cls, settings: CompilerSettings) -> "StubCompiler":
        return cls(TemplateStore.from_settings(settings), settings.defaults)

    @property
    def store(self) -> TemplateStore:
        return self._store

    @property
    def defaults(self) -> Mapping[str, str]:
        """Read-only view of the default substitutions."""

        return self._defaults

    def with_defaults(self, defaults: Mapping[str, str]) -> "StubCompiler":
        """Return a compiler sharing this store but using ``defaults``."""

        return type(self)(self._store, defaults)

    def available(self) -> list[str]:
        return self._store.list_available()

    def render(self, text: str, overrides: Mapping[str, str] | None = None) -> str:
        """Apply defaults and ``overrides`` to an in-memory template string."""

        merged = {**self._defaults, **(overrides or {})}
        return substitute(text, merged)

    def compile(self, stub_name: str, overrides: Mapping[str, str] | None = None) -> str:
        """Load ``stub_name`` and substitute the merged tokens into it."""

        text = self._store.load(stub_name)
        compiled = self.render(text, overrides)
        LOGGER.debug(
            "compile stub=%s overrides=%s length=%s",
            stub_name,
            sorted(overrides or {}),
            len(compiled),
        )
        return compiled

    def compile_with_context(
        self,
        stub_name: str,
        slug: str,
        prefix: str,
        text_domain: str,
        namespace: str,
        extra: Mapping[str, str] | None = None,
    ) -> str:
        """Compile ``stub_name`` with the project context tokens.

        Adds ``slug``, ``prefix``, ``textDomain``, ``namespace``, ``Slug`` (the
        slug in PascalCase) and ``PREFIX`` (the prefix uppercased). Entries in
        ``extra`` take precedence over all of them.
        """

        tokens = context_tokens(slug, prefix, text_domain, namespace)
        tokens.update(extra or {})
        return self.compile(stub_name, tokens)

    def compile_for(
        self,
        stub_name: str,
        context: PluginContext,
        extra: Mapping[str, str] | None = None,
    ) -> str:
        """Like :meth:`compile_with_context` but reading values from ``context``."""

        tokens = dict(context.tokens())
        tokens.update(extra or {})
        return self.compile(stub_name, tokens)
