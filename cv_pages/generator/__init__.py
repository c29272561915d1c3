"""Utilities for rendering the CV Markdown into a finished HTML page."""

from .document import (
    build_meta_items,
    compose_page_title,
    inject_main_content,
    set_document_title,
    upsert_meta_tags,
)
from .models import MetaItem
from .page_generator import CvPageGenerator
from .renderer import HtmlContentRenderer

__all__ = [
    "CvPageGenerator",
    "HtmlContentRenderer",
    "MetaItem",
    "build_meta_items",
    "compose_page_title",
    "inject_main_content",
    "set_document_title",
    "upsert_meta_tags",
]
