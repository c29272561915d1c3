"""Run the CV content transformations over rendered Markdown."""

from __future__ import annotations

from bs4 import BeautifulSoup

from .headings import annotate_heading_icons
from .skills import format_skills_section
from .timeline import format_timeline_entries


def process_content(html: str) -> str:
    """Apply the skills, heading icon and timeline transformations.

    Parameters
    ----------
    html : str
        HTML produced from the CV Markdown body.

    Returns
    -------
    str
        The transformed fragment. Table wrapping and the header are applied
        separately by the page generator.

    Examples
    --------
    >>> process_content("<h2>Experience [ph-briefcase]</h2>")
    '<h2><i class="ph ph-briefcase" style="margin-right: 0.5em"></i>Experience</h2>'
    >>> process_content("")
    ''
    """
    doc = BeautifulSoup(html, "html.parser")

    format_skills_section(doc)
    annotate_heading_icons(doc)
    format_timeline_entries(doc)

    return doc.decode()


__all__ = ["process_content"]
