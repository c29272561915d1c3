"""Post-processing for the HTML rendered from the CV Markdown.

Markdown cannot express icons, timeline metadata or contact links, so the
rendered body is rewritten with BeautifulSoup before it is placed into the
page shell. Each stage takes the parsed document and mutates it in place,
creating new nodes through that same document.
"""

from .header import build_header_from_front_matter, create_contact_item
from .headings import annotate_heading_icons
from .pipeline import process_content
from .skills import category_icon, format_skills_section
from .table import wrap_tables_in_container
from .timeline import format_timeline_entries

__all__ = [
    "annotate_heading_icons",
    "build_header_from_front_matter",
    "category_icon",
    "create_contact_item",
    "format_skills_section",
    "format_timeline_entries",
    "process_content",
    "wrap_tables_in_container",
]
