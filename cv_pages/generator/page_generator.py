"""High-level orchestration for CV page generation.

This module ties the build together: it reads the Markdown source and its
front matter, renders the body with :class:`HtmlContentRenderer`, runs the
content post-processing pipeline, and places the result into the Jinja page
shell along with the header, title and meta tags. It exposes
:class:`CvPageGenerator`, which consumes a
:class:`~cv_pages.config.SiteConfig` and writes ``dist/index.html`` (or the
configured output path).

Example
-------
>>> from pathlib import Path
>>> from cv_pages.config import load_site_config
>>> from cv_pages.generator import CvPageGenerator
>>> config = load_site_config(Path("config/cv.yaml"))  # doctest: +SKIP
>>> CvPageGenerator(config).run()  # doctest: +SKIP
PosixPath('dist/index.html')
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from cv_pages.config import resolve_base_url
from cv_pages.content import (
    build_header_from_front_matter,
    process_content,
    wrap_tables_in_container,
)
from cv_pages.front_matter import CvDocument, load_cv_document

from .document import (
    build_meta_items,
    compose_page_title,
    inject_main_content,
    set_document_title,
    upsert_meta_tags,
)
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from cv_pages.config import SiteConfig

logger = logging.getLogger(__name__)

ICON_STYLESHEET = "https://unpkg.com/@phosphor-icons/web@2.1.1/src/regular/style.css"


class CvPageGenerator:
    """Render the CV source into a standalone HTML page."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        source: Path | None = None,
        output_dir: Path | None = None,
        env: cabc.Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Build configuration (source path, output location, metadata).
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        source : Path, optional
            Override for the Markdown source path.
        output_dir : Path, optional
            Override for the HTML output directory.
        env : Mapping[str, str], optional
            Environment used to resolve the deployment base URL; defaults to
            ``os.environ``.
        """
        self.config = site_config
        self.source = source or site_config.source
        self.output_dir = output_dir or site_config.output_dir
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.renderer = HtmlContentRenderer(site_config.pygments_style)
        self.base_url = resolve_base_url(env, site_config.homepage)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("cv_page.jinja")

    @property
    def output_path(self) -> Path:
        """Return the path the rendered page is written to."""
        return self.output_dir / self.config.output_filename

    def run(self) -> Path:
        """Render the CV and write it to disk.

        Returns
        -------
        Path
            Path of the written HTML page.

        Raises
        ------
        FileNotFoundError
            If the Markdown source does not exist.
        """
        document = load_cv_document(self.source)
        html = self.render(document)
        output_path = self.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.debug("Rendered %s into %s", self.source, output_path)
        return output_path

    def render(self, document: CvDocument) -> str:
        """Return the complete HTML page for ``document``."""
        body_html = self.renderer.markdown(document.markdown)
        body_html = wrap_tables_in_container(process_content(body_html))

        shell = self.template.render(
            front_matter=document.front_matter,
            language=self.config.language,
            icon_stylesheet=ICON_STYLESHEET,
            pygments_css=self.renderer.stylesheet,
        )
        page = BeautifulSoup(shell, "html.parser")
        self._apply_page_metadata(page, document)
        build_header_from_front_matter(page, document.front_matter)
        inject_main_content(page, body_html)

        html = page.decode()
        if not html.endswith("\n"):
            html += "\n"
        return html

    def _apply_page_metadata(self, page: BeautifulSoup, document: CvDocument) -> None:
        """Set the page title and upsert the description/Open Graph meta tags."""
        front_matter = document.front_matter
        title = compose_page_title(front_matter)
        if title:
            set_document_title(page, title)
        items = build_meta_items(
            front_matter,
            homepage=self.config.homepage,
            base_url=self.base_url,
            og_image=self.config.og_image,
        )
        upsert_meta_tags(page, items)


__all__ = ["ICON_STYLESHEET", "CvPageGenerator"]
