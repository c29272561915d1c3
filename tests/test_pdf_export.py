"""Tests for the PDF exporter.

WeasyPrint is replaced with a stub through ``cv_pages.pdf._render_pdf`` so the
tests can inspect the HTML and stylesheet handed to the engine without
rendering real documents. One test runs the real engine, when its native
libraries are installed, to check the metadata that ends up in the PDF.
"""

from __future__ import annotations

import datetime as dt
import re
import zlib
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from cv_pages import pdf
from cv_pages.config import PdfConfig
from cv_pages.pdf import PdfExporter, PdfExportError, slugify

PDF_STREAM_PATTERN = re.compile(rb"stream\r?\n(.*?)\r?\nendstream", re.DOTALL)

FIXED_NOW = dt.datetime(2025, 1, 2, 3, 4, 5)  # noqa: DTZ001

PAGE_HTML = """<!doctype html>
<html lang="en">
<head><meta name="author" content="Jane Doe"><title>Jane</title></head>
<body><header><div><h1>Jane Doe</h1></div></header><main><p>Hi</p></main></body>
</html>
"""


@pytest.fixture
def page_path(tmp_path: Path) -> Path:
    """Write a rendered CV page into ``tmp_path``."""
    path = tmp_path / "dist" / "index.html"
    path.parent.mkdir()
    path.write_text(PAGE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def render_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, str]]:
    """Stub the rendering engine and record each call."""
    calls: list[dict[str, str]] = []

    def _fake_render(html: str, base_url: str, stylesheet: str) -> bytes:
        calls.append({"html": html, "base_url": base_url, "stylesheet": stylesheet})
        return b"%PDF-1.7 fake"

    monkeypatch.setattr(pdf, "_render_pdf", _fake_render)
    return calls


def test_export_writes_named_pdf(
    tmp_path: Path, page_path: Path, render_calls: list[dict[str, str]]
) -> None:
    """The file is named after the author and the export time."""
    exporter = PdfExporter(PdfConfig(output_dir=tmp_path / "out"))
    written = exporter.export(page_path, now=FIXED_NOW)
    assert written == tmp_path / "out" / "jane-doe-resume-20250102-030405.pdf"
    assert written.read_bytes() == b"%PDF-1.7 fake"
    assert len(render_calls) == 1


def test_output_dir_override(
    tmp_path: Path, page_path: Path, render_calls: list[dict[str, str]]
) -> None:
    """An explicit directory wins over the configured one."""
    exporter = PdfExporter(PdfConfig(output_dir=tmp_path / "configured"))
    written = exporter.export(page_path, output_dir=tmp_path / "override", now=FIXED_NOW)
    assert written.parent == tmp_path / "override"
    assert not (tmp_path / "configured").exists()


def test_metadata_is_stamped(
    tmp_path: Path, page_path: Path, render_calls: list[dict[str, str]]
) -> None:
    """Author, description, keywords and language reach the engine."""
    exporter = PdfExporter(
        PdfConfig(output_dir=tmp_path, keywords=["cv", "engineer"]), language="en-gb"
    )
    exporter.export(page_path, now=FIXED_NOW)
    doc = BeautifulSoup(render_calls[0]["html"], "html.parser")

    def meta(name: str) -> list[str]:
        return [tag["content"] for tag in doc.find_all("meta", attrs={"name": name})]

    assert doc.find("html")["lang"] == "en-gb"
    assert meta("author") == ["Jane Doe"]
    assert meta("description") == ["Jane Doe's resumé"]
    assert meta("keywords") == ["Jane Doe, cv, engineer"]


def test_page_numbers_and_base_url(
    tmp_path: Path, page_path: Path, render_calls: list[dict[str, str]]
) -> None:
    """The print stylesheet numbers pages; assets resolve beside the page."""
    PdfExporter(PdfConfig(output_dir=tmp_path, page_size="letter")).export(
        page_path, now=FIXED_NOW
    )
    call = render_calls[0]
    assert "size: letter" in call["stylesheet"]
    assert 'counter(page) " / " counter(pages)' in call["stylesheet"]
    assert call["base_url"] == page_path.parent.resolve().as_uri() + "/"


def test_page_without_name_uses_fallback(
    tmp_path: Path, render_calls: list[dict[str, str]]
) -> None:
    """Pages without a header name fall back to a generic file name."""
    path = tmp_path / "index.html"
    path.write_text("<html><head></head><body></body></html>", encoding="utf-8")
    written = PdfExporter(PdfConfig(output_dir=tmp_path)).export(path, now=FIXED_NOW)
    assert written.name == "cv-resume-20250102-030405.pdf"


def test_engine_failure_is_wrapped(
    tmp_path: Path, page_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Rendering errors surface as ``PdfExportError`` and nothing is written."""

    def _broken_render(html: str, base_url: str, stylesheet: str) -> bytes:
        msg = "engine crashed"
        raise OSError(msg)

    monkeypatch.setattr(pdf, "_render_pdf", _broken_render)
    out_dir = tmp_path / "out"
    with pytest.raises(PdfExportError, match="engine crashed"):
        PdfExporter(PdfConfig(output_dir=out_dir)).export(page_path, now=FIXED_NOW)
    assert not out_dir.exists()


def test_missing_page_raises(tmp_path: Path) -> None:
    """Exporting before building reports the missing page."""
    with pytest.raises(FileNotFoundError, match="run the build first"):
        PdfExporter(PdfConfig()).export(tmp_path / "index.html")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Jane Doe", "jane-doe"),
        ("  Jane   Doe  ", "jane-doe"),
        ("Jean-Luc O'Neil", "jean-luc-oneil"),
        ("!!!", ""),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    """Slugs are lowercase and dash separated."""
    assert slugify(text) == expected


@pytest.fixture
def weasyprint_engine() -> object:
    """Return the WeasyPrint module, skipping when it cannot be loaded."""
    try:
        return pytest.importorskip("weasyprint")
    except OSError as exc:
        pytest.skip(f"WeasyPrint native libraries are unavailable: {exc}")


def _pdf_objects(data: bytes) -> bytes:
    """Return the PDF bytes followed by every inflatable stream body."""
    chunks = [data]
    for stream in PDF_STREAM_PATTERN.findall(data):
        try:
            chunks.append(zlib.decompress(stream))
        except zlib.error:
            continue
    return b"\n".join(chunks)


def test_real_engine_records_metadata(
    tmp_path: Path, page_path: Path, weasyprint_engine: object
) -> None:
    """WeasyPrint copies the stamped meta tags into the PDF info dictionary."""
    exporter = PdfExporter(
        PdfConfig(output_dir=tmp_path / "out", keywords=["cv", "engineer"]),
        language="en-gb",
    )
    written = exporter.export(page_path, now=FIXED_NOW)

    data = written.read_bytes()
    assert data.startswith(b"%PDF-")
    objects = _pdf_objects(data)
    assert re.search(rb"/Author\s*\(Jane Doe\)", objects)
    assert re.search(rb"/Keywords\s*\(Jane Doe, cv, engineer\)", objects)
    assert re.search(rb"/Subject\s*[(<]", objects)
    assert re.search(rb"/Lang\s*\(en-gb\)", objects)
