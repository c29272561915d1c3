"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True, frozen=True)
class MetaItem:
    """A ``<meta>`` tag identified by its ``name`` or ``property`` attribute.

    Attributes
    ----------
    key : str
        Either ``"name"`` (standard metadata) or ``"property"`` (Open Graph).
    value : str
        Value of the identifying attribute, e.g. ``"description"``.
    content : str
        Text written into the tag's ``content`` attribute.
    """

    key: str
    value: str
    content: str

    @classmethod
    def named(cls, name: str, content: str) -> MetaItem:
        """Return a ``<meta name=…>`` item."""
        return cls("name", name, content)

    @classmethod
    def prop(cls, prop: str, content: str) -> MetaItem:
        """Return a ``<meta property=…>`` item."""
        return cls("property", prop, content)


__all__ = ["MetaItem"]
