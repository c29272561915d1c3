"""Cyclopts CLI entrypoint for building the CV page and its PDF export.

The ``cv-pages`` console script defined here renders the Markdown CV into a
static HTML page and, on request, exports that page to a print-ready PDF.
Typical usage involves running ``cv-pages build`` locally or in CI before
publishing ``dist/``, and ``cv-pages pdf`` to produce a dated PDF copy.

Every option can also be supplied through ``CV_PAGES_*`` environment
variables (for example ``CV_PAGES_CONFIG``).

Examples
--------
Build the page with the default configuration:

>>> from cv_pages.cli import main
>>> main()  # doctest: +SKIP

Render into a custom directory:

>>> from cv_pages.cli import app
>>> app(["build", "--output-dir", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .generator import CvPageGenerator
from .pdf import PdfExporter

DEFAULT_CONFIG = Path("config/cv.yaml")

app = App(name="cv-pages", config=cyclopts.config.Env("CV_PAGES_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Render the Markdown CV into a static HTML page.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the build config", env_var="CV_PAGES_CONFIG")
    ] = DEFAULT_CONFIG,
    source: typ.Annotated[
        Path | None,
        Parameter(help="Override the Markdown source", env_var="CV_PAGES_SOURCE"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="CV_PAGES_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build the CV page.

    Parameters
    ----------
    config : Path, optional
        Path to ``cv.yaml``; defaults are used when the file does not exist.
    source : Path or None, optional
        Markdown source overriding the configured ``source``.
    output_dir : Path or None, optional
        Output directory overriding the configured ``output_dir``.
    verbose : bool, optional
        Log debug messages.

    Returns
    -------
    None
        The written page path is printed to stdout.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config, missing_ok=True)
    generator = CvPageGenerator(site_config, source=source, output_dir=output_dir)
    written = generator.run()
    print(f"wrote {_format_path(written)}")


@app.command(help="Build the CV page and export it to PDF.")
def pdf(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the build config", env_var="CV_PAGES_CONFIG")
    ] = DEFAULT_CONFIG,
    source: typ.Annotated[
        Path | None,
        Parameter(help="Override the Markdown source", env_var="CV_PAGES_SOURCE"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the HTML output folder", env_var="CV_PAGES_OUTPUT_DIR"),
    ] = None,
    pdf_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the PDF output folder", env_var="CV_PAGES_PDF_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build the CV page, then render it to a PDF file.

    Parameters
    ----------
    config : Path, optional
        Path to ``cv.yaml``; defaults are used when the file does not exist.
    source : Path or None, optional
        Markdown source overriding the configured ``source``.
    output_dir : Path or None, optional
        HTML output directory overriding the configured ``output_dir``.
    pdf_dir : Path or None, optional
        PDF output directory overriding ``pdf.output_dir``.
    verbose : bool, optional
        Log debug messages.

    Returns
    -------
    None
        The written page and PDF paths are printed to stdout.

    Raises
    ------
    PdfExportError
        If the rendering engine fails; the command exits with a non-zero
        status and no PDF is written.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config, missing_ok=True)
    generator = CvPageGenerator(site_config, source=source, output_dir=output_dir)
    page_path = generator.run()
    print(f"wrote {_format_path(page_path)}")

    exporter = PdfExporter(site_config.pdf, language=site_config.language)
    pdf_path = exporter.export(page_path, output_dir=pdf_dir)
    print(f"wrote {_format_path(pdf_path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``cv-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
