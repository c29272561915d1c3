"""Dataclasses describing the cv_pages build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

DEFAULT_SOURCE = Path("src/cv.md")
DEFAULT_OUTPUT_DIR = Path("dist")
DEFAULT_KEYWORDS = ("curriculum vitæ", "resumé")


class SiteConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class PdfConfig:
    """Settings for the print-ready export.

    Attributes
    ----------
    output_dir : Path
        Directory receiving the generated PDF.
    page_size : str
        CSS ``@page`` size keyword, such as ``"A4"`` or ``"letter"``.
    keywords : list[str]
        Keywords stored in the PDF metadata after the author's name.
    """

    output_dir: Path = Path()
    page_size: str = "A4"
    keywords: list[str] = dc.field(default_factory=lambda: list(DEFAULT_KEYWORDS))


@dc.dataclass(slots=True)
class SiteConfig:
    """Top-level configuration for building the CV page.

    Attributes
    ----------
    source : Path
        Markdown source with YAML front matter.
    output_dir : Path
        Directory receiving the rendered page.
    output_filename : str
        Name of the rendered HTML file.
    homepage : str or None
        Canonical URL of the published CV, used for ``og:url`` and as the
        base URL fallback.
    language : str
        Document language written to ``<html lang>`` and the PDF metadata.
    og_image : str
        Social preview image path, resolved against the base URL.
    pygments_style : str
        Pygments style used for fenced code blocks.
    pdf : PdfConfig
        Print export settings.
    """

    source: Path = DEFAULT_SOURCE
    output_dir: Path = DEFAULT_OUTPUT_DIR
    output_filename: str = "index.html"
    homepage: str | None = None
    language: str = "en-gb"
    og_image: str = "og-image.jpg"
    pygments_style: str = "monokai"
    pdf: PdfConfig = dc.field(default_factory=PdfConfig)

    @property
    def output_path(self) -> Path:
        """Return the full path of the rendered HTML page."""
        return self.output_dir / self.output_filename


__all__ = [
    "DEFAULT_KEYWORDS",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_SOURCE",
    "PdfConfig",
    "SiteConfig",
    "SiteConfigError",
]
