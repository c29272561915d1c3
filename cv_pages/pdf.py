"""Export the rendered CV page to a print-ready PDF.

The exporter reads the HTML written by
:class:`~cv_pages.generator.CvPageGenerator`, stamps author, subject,
keywords and language into the page head so WeasyPrint records them as PDF
metadata, and renders it with a print stylesheet that adds ``page / pages``
numbering to the footer. The output file is named after the CV owner and the
export time, for example ``jane-doe-resume-20250101-120000.pdf``.

Any failure inside the rendering engine aborts the export with
:class:`PdfExportError`; no partial file is written.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
import typing as typ
from pathlib import Path

from bs4 import BeautifulSoup

from ._constants import PDF_FILENAME_TEMPLATE
from .generator import MetaItem, upsert_meta_tags

if typ.TYPE_CHECKING:
    from .config import PdfConfig

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "CV"
FOOTER_COLOR = "#E5E4E2"
FOOTER_FONT = "Avenir, Montserrat, Corbel, 'URW Gothic', source-sans-pro, sans-serif"


class PdfExportError(RuntimeError):
    """Raised when the PDF engine fails to render the CV page."""


def slugify(text: str) -> str:
    """Return a lowercase, dash-separated file name stem.

    Examples
    --------
    >>> slugify("  Jane  O'Doe ")
    'jane-odoe'
    >>> slugify("--Résumé--")
    'résumé'
    """
    slug = text.lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^\w-]+", "", slug)
    slug = re.sub(r"--+", "-", slug)
    return slug.strip("-")


class PdfExporter:
    """Render a generated CV page into a PDF file."""

    def __init__(self, pdf_config: PdfConfig, *, language: str = "en-gb") -> None:
        """Initialize the exporter.

        Parameters
        ----------
        pdf_config : PdfConfig
            Page size, keywords and default output directory.
        language : str, optional
            Language tag recorded on the document; defaults to ``"en-gb"``.
        """
        self.config = pdf_config
        self.language = language

    @property
    def stylesheet(self) -> str:
        """Return the print CSS applied on top of the page styles."""
        return (
            f"@page {{ size: {self.config.page_size}; margin: 0.5in;"
            " @bottom-right {"
            ' content: counter(page) " / " counter(pages);'
            f" font-family: {FOOTER_FONT}; font-size: 14px; color: {FOOTER_COLOR};"
            " } }\n"
        )

    def export(
        self,
        html_path: Path,
        *,
        output_dir: Path | None = None,
        now: dt.datetime | None = None,
    ) -> Path:
        """Write the PDF for the page at ``html_path``.

        Parameters
        ----------
        html_path : Path
            Rendered CV page.
        output_dir : Path, optional
            Directory for the PDF; defaults to the configured directory.
        now : datetime, optional
            Timestamp used in the file name; defaults to the current local time.

        Returns
        -------
        Path
            Path of the written PDF.

        Raises
        ------
        FileNotFoundError
            If ``html_path`` does not exist.
        PdfExportError
            If the rendering engine fails.
        """
        if not html_path.exists():
            msg = f"Rendered page '{html_path}' not found; run the build first."
            raise FileNotFoundError(msg)

        page = BeautifulSoup(html_path.read_text(encoding="utf-8"), "html.parser")
        author = _author_name(page)
        self._stamp_metadata(page, author)

        stamp = (now or dt.datetime.now()).strftime("%Y%m%d-%H%M%S")  # noqa: DTZ005
        filename = PDF_FILENAME_TEMPLATE.format(slug=slugify(author) or "cv", stamp=stamp)
        target_dir = output_dir or self.config.output_dir
        target = target_dir / filename

        base_url = html_path.resolve().parent.as_uri() + "/"
        try:
            pdf_bytes = _render_pdf(page.decode(), base_url, self.stylesheet)
        except Exception as exc:  # noqa: BLE001
            msg = f"Failed to render PDF from '{html_path}': {exc}"
            raise PdfExportError(msg) from exc

        target_dir.mkdir(parents=True, exist_ok=True)
        target.write_bytes(pdf_bytes)
        logger.info("PDF saved at %s", target)
        return target

    def _stamp_metadata(self, page: BeautifulSoup, author: str) -> None:
        """Write the metadata WeasyPrint copies into the PDF info dictionary."""
        html = page.find("html")
        if html is not None:
            html["lang"] = self.language
        keywords = ", ".join([author, *self.config.keywords])
        upsert_meta_tags(
            page,
            [
                MetaItem.named("author", author),
                MetaItem.named("description", f"{author}'s resumé"),
                MetaItem.named("keywords", keywords),
            ],
        )


def _author_name(page: BeautifulSoup) -> str:
    """Return the CV owner's name from ``header h1`` or a generic fallback."""
    title = page.select_one("header h1")
    if title is None:
        return DEFAULT_AUTHOR
    return title.get_text(strip=True) or DEFAULT_AUTHOR


def _render_pdf(html: str, base_url: str, stylesheet: str) -> bytes:
    """Render ``html`` to PDF bytes with WeasyPrint."""
    from weasyprint import CSS, HTML

    document = HTML(string=html, base_url=base_url)
    return document.write_pdf(stylesheets=[CSS(string=stylesheet)])


__all__ = ["PdfExportError", "PdfExporter", "slugify"]
