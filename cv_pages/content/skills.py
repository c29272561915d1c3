"""Decorate the Technical Skills list with per-category icons.

The CV source lists skills as a nested Markdown list under a heading that
contains ``Technical Skills``. Each top-level item is a category whose
leading text picks an icon, for example::

    <h2>Technical Skills</h2>
    <ul>
      <li>Programming
        <ul><li>Python</li></ul>
      </li>
    </ul>

becomes::

    <ul class="technical-skills">
      <li class="skill-category">
        <div><i class="ph ph-code"></i>Programming</div>
        <ul><li>Python</li></ul>
      </li>
    </ul>
"""

from __future__ import annotations

import logging
import typing as typ

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from cv_pages._constants import (
    SKILL_CATEGORY_CLASS,
    TECHNICAL_SKILLS_CLASS,
    icon_classes,
)

if typ.TYPE_CHECKING:
    from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

SKILLS_HEADING_TEXT = "Technical Skills"
DEFAULT_CATEGORY_ICON = "toolbox"
# Order matters: the first keyword found in the category text wins.
CATEGORY_ICONS: tuple[tuple[str, str], ...] = (
    ("cloud", "cloud-arrow-up"),
    ("database", "database"),
    ("game", "game-controller"),
    ("graphics", "cube"),
    ("math", "function"),
    ("programming", "code"),
    ("web", "browser"),
)


def format_skills_section(doc: BeautifulSoup) -> None:
    """Style the list that directly follows the Technical Skills heading.

    Parameters
    ----------
    doc : BeautifulSoup
        Parsed document; mutated in place.

    Notes
    -----
    Nothing happens when no ``h2`` mentions ``Technical Skills`` or when the
    element right after it is not a ``ul``.
    """
    heading = next(
        (h for h in doc.find_all("h2") if SKILLS_HEADING_TEXT in h.get_text()),
        None,
    )
    if heading is None:
        return

    skills_list = heading.find_next_sibling()
    if skills_list is None or skills_list.name != "ul":
        return

    _add_class(skills_list, TECHNICAL_SKILLS_CLASS)
    for item in skills_list.find_all("li", recursive=False):
        _format_category(doc, item)


def category_icon(category: str) -> str:
    """Return the icon identifier for a skill category label.

    Examples
    --------
    >>> category_icon("Cloud Computing")
    'cloud-arrow-up'
    >>> category_icon("Unknown Category")
    'toolbox'
    """
    lowered = category.lower()
    for keyword, icon in CATEGORY_ICONS:
        if keyword in lowered:
            return icon
    logger.debug("No icon keyword matched skill category %r", category)
    return DEFAULT_CATEGORY_ICON


def _format_category(doc: BeautifulSoup, item: Tag) -> None:
    """Prefix a category item with its icon label block."""
    _add_class(item, SKILL_CATEGORY_CLASS)
    nested_list = item.find("ul", recursive=False)

    leading = item.contents[0] if item.contents else None
    label = ""
    if isinstance(leading, NavigableString) and not isinstance(
        leading, PreformattedString
    ):
        label = leading.strip()
        leading.replace_with(doc.new_string(""))

    block = doc.new_tag("div")
    block.append(doc.new_tag("i", attrs={"class": icon_classes(category_icon(label))}))
    block.append(doc.new_string(label))

    if nested_list is not None:
        nested_list.insert_before(block)
    else:
        item.append(block)


def _add_class(tag: Tag, class_name: str) -> None:
    classes = [name for name in tag.get_attribute_list("class") if name]
    if class_name not in classes:
        classes.append(class_name)
    tag["class"] = classes


__all__ = [
    "CATEGORY_ICONS",
    "DEFAULT_CATEGORY_ICON",
    "category_icon",
    "format_skills_section",
]
