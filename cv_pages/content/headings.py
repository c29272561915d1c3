"""Turn ``[ph-<name>]`` markers at the end of section headings into icons.

Icons are requested in the CV source by ending a second-level heading with a
Phosphor icon marker:

>>> from bs4 import BeautifulSoup
>>> doc = BeautifulSoup("<h2>Programming [ph-code]</h2>", "html.parser")
>>> annotate_heading_icons(doc)
>>> str(doc)
'<h2><i class="ph ph-code" style="margin-right: 0.5em"></i>Programming</h2>'

Headings without a trailing marker are left exactly as they were.
"""

from __future__ import annotations

import re
import typing as typ

from cv_pages._constants import icon_classes

if typ.TYPE_CHECKING:
    from bs4 import BeautifulSoup

ICON_MARKER_PATTERN = re.compile(r"\[ph-([\w-]+)\]\Z")
ICON_STYLE = "margin-right: 0.5em"


def annotate_heading_icons(doc: BeautifulSoup) -> None:
    """Replace trailing icon markers on ``h2`` headings with icon elements.

    Parameters
    ----------
    doc : BeautifulSoup
        Parsed document; mutated in place and used to create the icon nodes.

    Notes
    -----
    The marker must be the literal suffix of the heading's full text. The
    heading's inline markup is flattened to text when a marker is removed.
    """
    for heading in doc.find_all("h2"):
        text = heading.get_text()
        match = ICON_MARKER_PATTERN.search(text)
        if not match:
            continue

        heading.string = text[: match.start()].rstrip()
        icon = doc.new_tag(
            "i", attrs={"class": icon_classes(match.group(1)), "style": ICON_STYLE}
        )
        heading.insert(0, icon)


__all__ = ["ICON_MARKER_PATTERN", "annotate_heading_icons"]
