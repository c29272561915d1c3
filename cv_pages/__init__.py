"""Render a Markdown curriculum vitae into a styled web page and PDF.

This package exposes the CLI entry points used by ``cv-pages`` to build the
static page and export its print version.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from cv_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
