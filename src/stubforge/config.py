"""Configuration models shared by the store, compiler, writer and generators."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import to_pascal_slug


def context_tokens(slug: str, prefix: str, text_domain: str, namespace: str) -> dict[str, str]:
    """Return the project context tokens, including the derived ``Slug`` and ``PREFIX``."""

    return {
        "slug": slug,
        "prefix": prefix,
        "textDomain": text_domain,
        "namespace": namespace,
        "Slug": to_pascal_slug(slug),
        "PREFIX": prefix.upper(),
    }


class CompilerSettings(BaseModel):
    """Where stubs live and which substitutions every compile starts from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    stub_path: Path = Field(..., description="Directory containing the stub templates.")
    suffix: str = Field(".stub", description="File extension shared by every stub.")
    defaults: dict[str, str] = Field(default_factory=dict, description="Default token substitutions.")
    encoding: str = Field("utf-8", description="Encoding used to read stub files.")


class WriterSettings(BaseModel):
    """Overwrite policy and filesystem options for :class:`~stubforge.writer.SafeWriter`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    overwrite: bool = Field(False, description="Replace files that already exist.")
    dir_mode: int = Field(0o755, ge=0, le=0o7777, description="Permission bits for created directories.")
    encoding: str = Field("utf-8", description="Encoding used when writing generated files.")


class PluginContext(BaseModel):
    """Identifiers describing the project that generated files belong to.

    Attributes
    ----------
    slug:
        Hyphenated, filesystem friendly project identifier such as ``my-plugin``.
    prefix:
        Prefix applied to global names, for example ``my_plugin_``.
    text_domain:
        Translation domain, usually identical to :attr:`slug`.
    namespace:
        Root namespace for generated classes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    slug: str
    prefix: str
    text_domain: str
    namespace: str

    @field_validator("slug")
    @classmethod
    def _slug_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("slug must not be empty")
        return value

    @classmethod
    def from_slug(
        cls,
        slug: str,
        *,
        prefix: str | None = None,
        text_domain: str | None = None,
        namespace: str | None = None,
    ) -> "PluginContext":
        """Build a context from ``slug``, deriving any value not supplied."""

        slug = slug.strip()
        if not slug:
            raise ValueError("slug must not be empty")

        return cls(
            slug=slug,
            prefix=prefix if prefix is not None else slug.replace("-", "_") + "_",
            text_domain=text_domain if text_domain is not None else slug,
            namespace=namespace if namespace is not None else to_pascal_slug(slug),
        )

    def tokens(self) -> Mapping[str, str]:
        """Return the context tokens understood by every stub."""

        return context_tokens(self.slug, self.prefix, self.text_domain, self.namespace)


__all__ = ["CompilerSettings", "PluginContext", "WriterSettings", "context_tokens"]
