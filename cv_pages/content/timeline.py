"""Split ``Title [Period] | Organization`` headings into timeline entries.

Work history and education entries are written in the CV source as
third-level headings:

    ### Software Engineer [2020-2022] | [Company X](https://company.com)

which Markdown renders as
``<h3>Software Engineer [2020-2022] | <a href="https://company.com">Company X</a></h3>``.
This module rewrites each such heading into::

    <h3 class="timeline-entry">Software Engineer</h3>
    <div class="timeline-meta">
      <div class="organization"><a href="https://company.com">Company X</a></div>
      <div class="period">2020-2022</div>
    </div>

Title and organization keep any inline markup; headings that do not follow
the pattern exactly are left alone.
"""

from __future__ import annotations

import re
import typing as typ

from bs4 import BeautifulSoup

from cv_pages._constants import (
    ORGANIZATION_CLASS,
    PERIOD_CLASS,
    TIMELINE_ENTRY_CLASS,
    TIMELINE_META_CLASS,
)

if typ.TYPE_CHECKING:
    from bs4 import Tag

TIMELINE_ENTRY_PATTERN = re.compile(r"(.*?) \[([^\]]+)\] \| (.+)")


def format_timeline_entries(doc: BeautifulSoup) -> None:
    """Rewrite every matching ``h3`` into a heading plus a metadata block.

    Parameters
    ----------
    doc : BeautifulSoup
        Parsed document; mutated in place.
    """
    for heading in doc.find_all("h3"):
        match = TIMELINE_ENTRY_PATTERN.fullmatch(heading.decode_contents())
        if not match:
            continue

        title, period, organization = match.groups()
        _replace_contents(heading, title)
        heading["class"] = [TIMELINE_ENTRY_CLASS]

        meta = doc.new_tag("div", attrs={"class": [TIMELINE_META_CLASS]})
        org_block = doc.new_tag("div", attrs={"class": [ORGANIZATION_CLASS]})
        _replace_contents(org_block, organization)
        period_block = doc.new_tag("div", attrs={"class": [PERIOD_CLASS]})
        _replace_contents(period_block, period)
        meta.append(org_block)
        meta.append(period_block)
        heading.insert_after(meta)


def _replace_contents(tag: Tag, markup: str) -> None:
    """Swap the children of ``tag`` for the nodes parsed from ``markup``."""
    fragment = BeautifulSoup(markup, "html.parser")
    tag.clear()
    for node in list(fragment.contents):
        tag.append(node.extract())


__all__ = ["TIMELINE_ENTRY_PATTERN", "format_timeline_entries"]
