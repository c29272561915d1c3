"""Unit tests for the table container wrapper."""

from __future__ import annotations

from bs4 import BeautifulSoup

from cv_pages.content import wrap_tables_in_container


def _wrap(html: str) -> BeautifulSoup:
    return BeautifulSoup(wrap_tables_in_container(html), "html.parser")


def test_table_is_wrapped() -> None:
    """A single table becomes the sole child of a container div."""
    doc = _wrap(
        "<table><tr><td>Row 1, Cell 1</td><td>Row 1, Cell 2</td></tr></table>"
    )
    containers = doc.select(".table-container")
    assert len(containers) == 1
    assert containers[0].name == "div"
    assert [child.name for child in containers[0].contents] == ["table"]


def test_table_attributes_are_preserved() -> None:
    """Wrapping keeps the id, classes and data attributes of the table."""
    doc = _wrap(
        '<table id="summary" class="special-table" data-type="summary">'
        "<tr><td>Data</td></tr></table>"
    )
    table = doc.find("table")
    assert table["id"] == "summary"
    assert table["class"] == ["special-table"]
    assert table["data-type"] == "summary"
    assert table.parent["class"] == ["table-container"]


def test_nested_tables_get_independent_containers() -> None:
    """Inner and outer tables each get one container; the outer is not nested."""
    doc = _wrap(
        "<table><tr><td>"
        "<table><tr><td>Nested</td></tr></table>"
        "</td></tr></table>"
    )
    containers = doc.select(".table-container")
    assert len(containers) == 2
    outer, inner = containers
    assert outer.find(class_="table-container") is inner
    assert outer.find_parent(class_="table-container") is None
    for table in doc.find_all("table"):
        assert table.parent["class"] == ["table-container"]
        assert len(table.parent.contents) == 1
    assert inner.find("td").get_text() == "Nested"


def test_other_elements_are_not_wrapped() -> None:
    """Markup without tables comes back unchanged."""
    html = "<p>No tables <em>here</em></p>"
    assert wrap_tables_in_container(html) == html


def test_rewrapping_wraps_again() -> None:
    """Running twice adds a second container around each table."""
    once = wrap_tables_in_container("<table><tr><td>x</td></tr></table>")
    twice = BeautifulSoup(wrap_tables_in_container(once), "html.parser")
    assert len(twice.select(".table-container")) == 2
    assert twice.find("table").parent.parent["class"] == ["table-container"]
