"""Common literal values used across cv_pages.

Class names emitted by the content pipeline are shared with the stylesheet in
``cv_pages/templates`` and with the tests, so they live here rather than in
each transformation module.

Examples
--------
>>> from cv_pages import _constants
>>> _constants.icon_classes("code")
['ph', 'ph-code']
>>> _constants.PDF_FILENAME_TEMPLATE.format(slug="jane-doe", stamp="20250101-120000")
'jane-doe-resume-20250101-120000.pdf'
"""

ICON_PREFIX = "ph"

TABLE_CONTAINER_CLASS = "table-container"
TECHNICAL_SKILLS_CLASS = "technical-skills"
SKILL_CATEGORY_CLASS = "skill-category"
TIMELINE_ENTRY_CLASS = "timeline-entry"
TIMELINE_META_CLASS = "timeline-meta"
ORGANIZATION_CLASS = "organization"
PERIOD_CLASS = "period"
CONTACT_DETAILS_CLASS = "contact-details"
HEADLINE_CLASS = "headline"

TITLE_SEPARATOR = " » "
PDF_FILENAME_TEMPLATE = "{slug}-resume-{stamp}.pdf"


def icon_classes(icon: str) -> list[str]:
    """Return the two-token class list for a Phosphor icon identifier."""
    name = icon if icon.startswith(f"{ICON_PREFIX}-") else f"{ICON_PREFIX}-{icon}"
    return [ICON_PREFIX, name]
