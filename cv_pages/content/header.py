"""Build the CV header (name, headline and contact links) from front matter.

The header lives outside the Markdown body, so it is assembled directly from
the document's front matter and appended to the page's ``<header>`` element:

>>> from bs4 import BeautifulSoup
>>> from cv_pages.front_matter import FrontMatter
>>> doc = BeautifulSoup("<header></header>", "html.parser")
>>> build_header_from_front_matter(
...     doc, FrontMatter(title="Jane Doe", email="jane@example.com")
... )
>>> doc.select_one(".contact-details a")["href"]
'mailto:jane@example.com'

Every contact field is optional. Values that cannot be turned into a link are
skipped without raising.
"""

from __future__ import annotations

import logging
import re
import typing as typ
from urllib.parse import SplitResult, urlsplit

from cv_pages._constants import CONTACT_DETAILS_CLASS, HEADLINE_CLASS, icon_classes

if typ.TYPE_CHECKING:
    from bs4 import BeautifulSoup, Tag

    from cv_pages.front_matter import FrontMatter

logger = logging.getLogger(__name__)

MASTODON_INSTANCE = "https://mastodon.social"
DIGITS_PATTERN = re.compile(r"\d+")


def create_contact_item(
    doc: BeautifulSoup,
    icon: str,
    content: str,
    href: str | None = None,
    *,
    target_blank: bool = False,
) -> Tag:
    """Return a contact entry: an icon followed by a link or plain label.

    Parameters
    ----------
    doc : BeautifulSoup
        Document used to create the new nodes.
    icon : str
        Phosphor icon identifier, with or without the ``ph-`` prefix.
    content : str
        Visible label.
    href : str, optional
        Link target. Without it the label is rendered in a ``span``.
    target_blank : bool, optional
        Open the link in a new tab. Ignored when ``href`` is not given.

    Returns
    -------
    Tag
        ``<div><i class="ph ph-…"></i><a href="…">content</a></div>`` or the
        ``span`` variant.
    """
    item = doc.new_tag("div")
    item.append(doc.new_tag("i", attrs={"class": icon_classes(icon)}))

    if href:
        label = doc.new_tag("a", attrs={"href": href})
        if target_blank:
            label["target"] = "_blank"
    else:
        label = doc.new_tag("span")
    label.string = content
    item.append(label)
    return item


def build_header_from_front_matter(doc: BeautifulSoup, front_matter: FrontMatter) -> None:
    """Append the title and contact blocks to the document's ``header``.

    Parameters
    ----------
    doc : BeautifulSoup
        Page document; nothing happens when it has no ``header`` element.
    front_matter : FrontMatter
        Parsed front matter supplying the name, headline and contact fields.
    """
    header = doc.find("header")
    if header is None:
        return

    header.append(_title_section(doc, front_matter))
    header.append(_contact_section(doc, front_matter))


def _title_section(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag:
    section = doc.new_tag("div")
    title = doc.new_tag("h1")
    title.string = front_matter.title or ""
    section.append(title)

    headline = doc.new_tag("p", attrs={"class": [HEADLINE_CLASS]})
    headline.string = front_matter.headline or ""
    section.append(headline)
    return section


def _contact_section(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag:
    """Build ``div.contact-details`` with one entry per recognised field."""
    section = doc.new_tag("div", attrs={"class": [CONTACT_DETAILS_CLASS]})
    builders = (
        _website_item,
        _email_item,
        _phone_item,
        _github_item,
        _linked_in_item,
        _mastodon_item,
        _x_item,
        _stackoverflow_item,
    )
    for build in builders:
        item = build(doc, front_matter)
        if item is not None:
            section.append(item)
    return section


def _website_item(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag | None:
    if not front_matter.website:
        return None
    url = _parse_url(front_matter.website)
    if url is None:
        logger.warning("Invalid website URL: %r", front_matter.website)
        return None
    return create_contact_item(
        doc, "globe", url.hostname or "", front_matter.website, target_blank=True
    )


def _email_item(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag | None:
    if not front_matter.email:
        return None
    return create_contact_item(
        doc, "envelope", front_matter.email, f"mailto:{front_matter.email}"
    )


def _phone_item(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag | None:
    if not front_matter.phone:
        return None
    return create_contact_item(doc, "phone", front_matter.phone, f"tel:{front_matter.phone}")


def _github_item(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag | None:
    if not front_matter.github:
        return None
    username = front_matter.github.removeprefix("@")
    return create_contact_item(
        doc, "github-logo", front_matter.github, f"https://github.com/{username}"
    )


def _linked_in_item(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag | None:
    if not front_matter.linked_in:
        return None
    url = _parse_url(front_matter.linked_in)
    if url is None:
        logger.warning("Invalid LinkedIn URL: %r", front_matter.linked_in)
        return None
    segments = [segment for segment in url.path.split("/") if segment]
    if not segments:
        logger.warning("LinkedIn URL has no profile segment: %r", front_matter.linked_in)
        return None
    return create_contact_item(
        doc, "linkedin-logo", segments[-1], front_matter.linked_in, target_blank=True
    )


def _mastodon_item(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag | None:
    if not front_matter.mastodon:
        return None
    # Handles always resolve against a single instance.
    handle = "@" + front_matter.mastodon.removeprefix("@")
    return create_contact_item(
        doc, "mastodon-logo", front_matter.mastodon, f"{MASTODON_INSTANCE}/{handle}"
    )


def _x_item(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag | None:
    if not front_matter.x:
        return None
    username = front_matter.x.removeprefix("@")
    return create_contact_item(doc, "bird", front_matter.x, f"https://x.com/{username}")


def _stackoverflow_item(doc: BeautifulSoup, front_matter: FrontMatter) -> Tag | None:
    if not front_matter.stackoverflow:
        return None
    match = DIGITS_PATTERN.search(front_matter.stackoverflow)
    if not match:
        logger.debug("No Stack Overflow user id in %r", front_matter.stackoverflow)
        return None
    return create_contact_item(
        doc,
        "stack-overflow-logo",
        f"SO/{match.group(0)}",
        front_matter.stackoverflow,
        target_blank=True,
    )


def _parse_url(value: str) -> SplitResult | None:
    """Return the split URL when ``value`` is absolute, otherwise ``None``."""
    try:
        parsed = urlsplit(value.strip())
        hostname = parsed.hostname
    except ValueError:
        return None
    if not parsed.scheme or not hostname:
        return None
    return parsed


__all__ = [
    "MASTODON_INSTANCE",
    "build_header_from_front_matter",
    "create_contact_item",
]
