"""Behaviour tests for building the CV page.

These pytest-bdd scenarios drive ``CvPageGenerator`` end to end from the
feature file ``cv_build.feature``: a Markdown source with YAML front matter is
written to a temporary directory, rendered, and the resulting page is
inspected for the header contact links, the decorated skills list and the
document title.

Usage
-----
Run ``pytest tests/bdd/test_cv_build.py -v``. The scenarios rely on the
``scenario_state`` fixture and pass an empty environment to the generator,
so no CI variables leak into the rendered metadata.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from cv_pages.config import SiteConfig
from cv_pages.generator import CvPageGenerator

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "cv_build.feature"
scenarios(FEATURE_FILE)

SKILLS_BODY = """
## Technical Skills [ph-wrench]

- Cloud Platforms
    - AWS
- Web Development
    - Django
- Woodworking
    - Chairs
"""


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _write_source(tmp_path: Path, front_matter: str, body: str) -> Path:
    source = tmp_path / "cv.md"
    source.write_text(f"---\n{front_matter.strip()}\n---\n{body}", encoding="utf-8")
    return source


@given("a CV source with front matter and a skills section")
def given_full_source(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write a CV with several contact fields and a Technical Skills list."""
    scenario_state["source"] = _write_source(
        tmp_path,
        """
title: Jane Doe
headline: Platform Engineer
website: https://janedoe.dev
email: jane@example.com
mastodon: "@jane"
stackoverflow: https://stackoverflow.com/users/42/jane
""",
        SKILLS_BODY,
    )


@given("a CV source with a malformed LinkedIn URL")
def given_malformed_source(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write a CV whose LinkedIn value is not a URL."""
    scenario_state["source"] = _write_source(
        tmp_path,
        """
title: Jane Doe
linked_in: not-a-url
email: jane@example.com
""",
        "## Profile [ph-user]\n\nHello.\n",
    )


@when("I build the CV page")
def when_build(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Render the scenario source into ``tmp_path / "dist"``."""
    source = typ.cast("Path", scenario_state["source"])
    config = SiteConfig(source=source, output_dir=tmp_path / "dist")
    written = CvPageGenerator(config, env={}).run()
    scenario_state["written"] = written
    scenario_state["page"] = BeautifulSoup(
        written.read_text(encoding="utf-8"), "html.parser"
    )


@then("the header lists the contact links in order")
def then_contact_links(scenario_state: dict[str, object]) -> None:
    """Verify the header link targets follow the fixed field order."""
    page = typ.cast("BeautifulSoup", scenario_state["page"])
    hrefs = [link["href"] for link in page.select("header .contact-details a")]
    assert hrefs == [
        "https://janedoe.dev",
        "mailto:jane@example.com",
        "https://mastodon.social/@jane",
        "https://stackoverflow.com/users/42/jane",
    ]


@then("the skills list has an icon for every category")
def then_skill_icons(scenario_state: dict[str, object]) -> None:
    """Verify each category received its keyword icon or the fallback."""
    page = typ.cast("BeautifulSoup", scenario_state["page"])
    icons = [i["class"][1] for i in page.select(".technical-skills .skill-category > div > i")]
    assert icons == ["ph-cloud-arrow-up", "ph-browser", "ph-toolbox"]


@then("the page title combines the name and headline")
def then_page_title(scenario_state: dict[str, object]) -> None:
    """Verify the document title joins the name and headline."""
    page = typ.cast("BeautifulSoup", scenario_state["page"])
    assert page.title.get_text() == "Jane Doe » Platform Engineer"


@then("the header has no LinkedIn link")
def then_no_linkedin(scenario_state: dict[str, object]) -> None:
    """Verify the malformed LinkedIn value was skipped."""
    page = typ.cast("BeautifulSoup", scenario_state["page"])
    assert page.select(".contact-details .ph-linkedin-logo") == []
    hrefs = [link["href"] for link in page.select(".contact-details a")]
    assert hrefs == ["mailto:jane@example.com"]


@then("the build reports the written page")
def then_written(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Verify the page was written to the output directory."""
    written = typ.cast("Path", scenario_state["written"])
    assert written == tmp_path / "dist" / "index.html"
    assert written.exists()
