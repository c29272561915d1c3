r"""Read the CV source: YAML front matter followed by a Markdown body.

The source document starts with a YAML block fenced by ``---`` lines that
carries the owner's name, headline and contact details; everything after the
closing fence is the Markdown rendered into the page body.

Example
-------
>>> meta, body = split_front_matter("---\ntitle: Jane Doe\n---\n## Skills\n")
>>> meta["title"], body
('Jane Doe', '## Skills\n')
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ruamel.yaml import YAML

from .config.helpers import _optional_str

if typ.TYPE_CHECKING:
    from pathlib import Path

FRONT_MATTER_PATTERN = re.compile(r"\A---\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


class FrontMatterError(ValueError):
    """Raised when the front matter block is not a YAML mapping."""


@dc.dataclass(slots=True)
class FrontMatter:
    """Metadata describing the CV owner.

    Attributes
    ----------
    title : str or None
        Owner's name, shown as the page heading.
    headline : str or None
        Professional headline shown under the name.
    description : str or None
        Summary used for the description meta tags.
    website, email, phone : str or None
        Direct contact details.
    github, linked_in, mastodon, x, stackoverflow : str or None
        Social profile handles or URLs.
    extra : dict[str, object]
        Any other keys present in the front matter.
    """

    title: str | None = None
    headline: str | None = None
    description: str | None = None
    website: str | None = None
    email: str | None = None
    phone: str | None = None
    github: str | None = None
    linked_in: str | None = None
    mastodon: str | None = None
    x: str | None = None
    stackoverflow: str | None = None
    extra: dict[str, object] = dc.field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: typ.Mapping[str, object]) -> FrontMatter:
        """Build a record from parsed YAML, ignoring blank values."""
        known = {field.name for field in dc.fields(cls)} - {"extra"}
        values = {key: _optional_str(data.get(key)) for key in known}
        extra = {key: value for key, value in data.items() if key not in known}
        return cls(**values, extra=extra)


@dc.dataclass(slots=True)
class CvDocument:
    """Parsed CV source split into metadata and Markdown."""

    front_matter: FrontMatter
    markdown: str


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the front matter mapping and the remaining Markdown body.

    Parameters
    ----------
    text : str
        Full source document.

    Returns
    -------
    tuple[dict[str, Any], str]
        Parsed front matter (empty when the document has none) and the body.

    Raises
    ------
    FrontMatterError
        If the fenced block parses to something other than a mapping.
    YAMLError
        If the fenced block is not valid YAML.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(match.group(1)) or {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a YAML mapping."
        raise FrontMatterError(msg)
    return {str(key): value for key, value in loaded.items()}, text[match.end() :]


def load_cv_document(path: Path) -> CvDocument:
    """Read ``path`` and split it into front matter and Markdown.

    Raises
    ------
    FileNotFoundError
        If the source document does not exist.
    """
    if not path.exists():
        msg = f"CV source '{path}' not found."
        raise FileNotFoundError(msg)
    meta, body = split_front_matter(path.read_text(encoding="utf-8"))
    return CvDocument(front_matter=FrontMatter.from_mapping(meta), markdown=body)


__all__ = [
    "CvDocument",
    "FrontMatter",
    "FrontMatterError",
    "load_cv_document",
    "split_front_matter",
]
