"""Wrap rendered tables in scrollable containers."""

from __future__ import annotations

from bs4 import BeautifulSoup

from cv_pages._constants import TABLE_CONTAINER_CLASS


def wrap_tables_in_container(html: str) -> str:
    """Wrap every table in ``html`` with a ``div.table-container``.

    Nested tables get their own container. Tables are visited innermost
    first so wrapping an inner table never disturbs the outer one.

    Parameters
    ----------
    html : str
        Markup fragment that may contain ``table`` elements.

    Returns
    -------
    str
        The serialised fragment with each table as the sole child of its new
        container. Running this twice wraps the tables a second time.
    """
    doc = BeautifulSoup(html, "html.parser")
    for table in reversed(doc.find_all("table")):
        table.wrap(doc.new_tag("div", attrs={"class": [TABLE_CONTAINER_CLASS]}))
    return doc.decode()


__all__ = ["wrap_tables_in_container"]
