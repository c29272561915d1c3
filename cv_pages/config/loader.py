"""Load the build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _optional_str, _string_list
from .models import PdfConfig, SiteConfig, SiteConfigError


def load_site_config(path: Path, *, missing_ok: bool = False) -> SiteConfig:
    """Load the YAML configuration describing the CV build.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration file (for example,
        ``config/cv.yaml``).
    missing_ok : bool, optional
        Return the default configuration instead of raising when ``path``
        does not exist.

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for every absent key.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist and ``missing_ok`` is false.
    SiteConfigError
        If the top-level structure or one of the fields has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_site_config(Path("config/cv.yaml"))  # doctest: +SKIP
    >>> config.output_path  # doctest: +SKIP
    PosixPath('dist/index.html')
    """
    if not path.exists():
        if missing_ok:
            return SiteConfig()
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = SiteConfig()
    output_filename = _optional_str(raw.get("output_filename")) or defaults.output_filename
    if "/" in output_filename or "\\" in output_filename:
        msg = "'output_filename' must be a bare file name; use 'output_dir' for folders."
        raise SiteConfigError(msg)

    return SiteConfig(
        source=Path(raw.get("source", defaults.source)),
        output_dir=Path(raw.get("output_dir", defaults.output_dir)),
        output_filename=output_filename,
        homepage=_optional_str(raw.get("homepage")),
        language=_optional_str(raw.get("language")) or defaults.language,
        og_image=_optional_str(raw.get("og_image")) or defaults.og_image,
        pygments_style=_optional_str(raw.get("pygments_style")) or defaults.pygments_style,
        pdf=_build_pdf_config(raw.get("pdf")),
    )


def _build_pdf_config(payload: typ.Mapping[str, typ.Any] | None) -> PdfConfig:
    """Build the PDF settings block, applying defaults for absent keys."""
    defaults = PdfConfig()
    if payload is None:
        return defaults
    if not isinstance(payload, dict):
        msg = "'pdf' configuration must be a mapping."
        raise SiteConfigError(msg)

    keywords = _string_list(payload.get("keywords"), field="pdf.keywords")

    return PdfConfig(
        output_dir=Path(payload.get("output_dir", defaults.output_dir)),
        page_size=_optional_str(payload.get("page_size")) or defaults.page_size,
        keywords=defaults.keywords if keywords is None else keywords,
    )


__all__ = ["load_site_config"]
