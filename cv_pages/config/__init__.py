"""Load and validate the cv_pages build configuration.

This subpackage parses the project's ``config/cv.yaml`` file into typed
dataclasses (:class:`SiteConfig`, :class:`PdfConfig`) and resolves the URL
the CV is deployed at from the CI environment. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from cv_pages.config import load_site_config
>>> site = load_site_config(Path("config/cv.yaml"), missing_ok=True)
>>> site.output_filename
'index.html'
"""

from .helpers import create_base_path, resolve_base_path, resolve_base_url
from .loader import load_site_config
from .models import PdfConfig, SiteConfig, SiteConfigError

__all__ = [
    "PdfConfig",
    "SiteConfig",
    "SiteConfigError",
    "create_base_path",
    "load_site_config",
    "resolve_base_path",
    "resolve_base_url",
]
