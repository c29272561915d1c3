"""Page-level edits applied to the rendered HTML shell.

These helpers set the document title, keep ``<meta>`` tags in sync with the
front matter, and drop the processed CV body into ``<main>``. They operate on
a parsed :class:`~bs4.BeautifulSoup` page and are shared by the page
generator and the PDF exporter.
"""

from __future__ import annotations

import typing as typ
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

from cv_pages._constants import TITLE_SEPARATOR

from .models import MetaItem

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4 import Tag

    from cv_pages.front_matter import FrontMatter


def compose_page_title(front_matter: FrontMatter) -> str:
    """Return ``"<title> » <headline>"``, omitting parts that are absent."""
    parts = [part for part in (front_matter.title, front_matter.headline) if part]
    return TITLE_SEPARATOR.join(parts)


def build_meta_items(
    front_matter: FrontMatter,
    *,
    homepage: str | None,
    base_url: str,
    og_image: str,
) -> list[MetaItem]:
    """Return the meta tags describing the CV page.

    Parameters
    ----------
    front_matter : FrontMatter
        Source of the author, title and description.
    homepage : str or None
        Canonical URL for ``og:url``; omitted when not configured.
    base_url : str
        Deployment URL that ``og_image`` is resolved against. The image tag
        is omitted when this is not an absolute URL.
    og_image : str
        Path of the social preview image.
    """
    title = front_matter.title or ""
    description = front_matter.description or ""
    items = [
        MetaItem.named("description", description),
        MetaItem.named("author", title),
        MetaItem.prop("og:title", compose_page_title(front_matter)),
        MetaItem.prop("og:description", description),
        MetaItem.prop("og:site_name", f"{title}'s CV"),
    ]
    if homepage:
        items.append(MetaItem.prop("og:url", homepage))
    if urlsplit(base_url).scheme:
        items.append(MetaItem.prop("og:image", urljoin(base_url, og_image)))
    return items


def set_document_title(doc: BeautifulSoup, title: str) -> None:
    """Set the ``<title>`` text, creating the element when missing."""
    element = doc.find("title")
    if element is None:
        element = doc.new_tag("title")
        _head(doc).append(element)
    element.string = title


def upsert_meta_tags(doc: BeautifulSoup, items: cabc.Iterable[MetaItem]) -> None:
    """Update matching ``<meta>`` tags in place or append new ones to ``<head>``."""
    for item in items:
        tag = doc.find("meta", attrs={item.key: item.value})
        if tag is None:
            tag = doc.new_tag("meta", attrs={item.key: item.value})
            _head(doc).append(tag)
        tag["content"] = item.content


def inject_main_content(doc: BeautifulSoup, html: str) -> None:
    """Replace the children of ``<main>`` with ``html``; no-op without ``<main>``."""
    main = doc.find("main")
    if main is None:
        return
    fragment = BeautifulSoup(html, "html.parser")
    main.clear()
    for node in list(fragment.contents):
        main.append(node.extract())


def _head(doc: BeautifulSoup) -> Tag:
    """Return ``<head>``, creating it at the top of the document when missing."""
    head = doc.find("head")
    if head is None:
        head = doc.new_tag("head")
        html = doc.find("html")
        if html is not None:
            html.insert(0, head)
        else:
            doc.insert(0, head)
    return head


__all__ = [
    "build_meta_items",
    "compose_page_title",
    "inject_main_content",
    "set_document_title",
    "upsert_meta_tags",
]
