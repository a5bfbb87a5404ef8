"""Behaviour tests for navigation resolution during a build.

The scenarios in ``navigation_build.feature`` use the sample academy site
from ``tests/conftest.py``: one checks the sidebar state rendered for a
course page, the other adds a sidebar entry pointing at missing content and
expects the build to stop before the output directory is created.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from academy_pages.config import load_site_config
from academy_pages.errors import SiteBuildError, UnresolvedLinkError
from academy_pages.site import SiteBuilder

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "navigation_build.feature"
)
scenarios(FEATURE_FILE)

LAST_SIDEBAR_ENTRY = "        - research/projects/llm.md\n"


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("the sample academy site")
def given_sample_site(site_root: Path, scenario_state: dict[str, object]) -> None:
    """Record the sample site's configuration path."""
    scenario_state["config_path"] = site_root / "site.yaml"


@given(parsers.parse('the sidebar links to "{href}"'))
def given_sidebar_link(scenario_state: dict[str, object], href: str) -> None:
    """Append a sidebar entry for ``href`` to the Research section."""
    config_path = typ.cast("Path", scenario_state["config_path"])
    text = config_path.read_text(encoding="utf-8")
    assert LAST_SIDEBAR_ENTRY in text
    config_path.write_text(
        text.replace(LAST_SIDEBAR_ENTRY, f"{LAST_SIDEBAR_ENTRY}        - {href}\n"),
        encoding="utf-8",
    )


@when("I build the site")
def when_build(scenario_state: dict[str, object]) -> None:
    """Build the site and remember where it was written."""
    config = load_site_config(typ.cast("Path", scenario_state["config_path"]))
    SiteBuilder(config).run()
    scenario_state["output_dir"] = config.output_dir


@when("I try to build the site")
def when_try_build(scenario_state: dict[str, object]) -> None:
    """Build the site, capturing any build error for later assertions."""
    config = load_site_config(typ.cast("Path", scenario_state["config_path"]))
    scenario_state["output_dir"] = config.output_dir
    try:
        SiteBuilder(config).run()
    except SiteBuildError as exc:
        scenario_state["error"] = exc


@then(parsers.parse('the sidebar of "{page}" marks "{label}" as active'))
def then_sidebar_active(
    scenario_state: dict[str, object], page: str, label: str
) -> None:
    """Verify exactly one sidebar link is highlighted and it is ``label``."""
    soup = _read(scenario_state, page)
    active = soup.select("aside.sidebar a.is-active")
    assert [anchor.get_text(strip=True) for anchor in active] == [label], (
        f"expected only '{label}' to be active in the sidebar of {page}"
    )


@then(parsers.parse('the sidebar of "{page}" opens "{label}"'))
def then_sidebar_open(scenario_state: dict[str, object], page: str, label: str) -> None:
    """Verify the ancestor entry ``label`` is expanded."""
    soup = _read(scenario_state, page)
    opened = [
        item.find(class_="sidebar-link").get_text(strip=True)
        for item in soup.select("aside.sidebar li.sidebar-item.is-open")
    ]
    assert label in opened, f"expected '{label}' to be open, found {opened}"


@then(parsers.parse('the build fails naming "{href}"'))
def then_build_fails(scenario_state: dict[str, object], href: str) -> None:
    """Verify the build raised an unresolved navigation error for ``href``."""
    error = scenario_state.get("error")
    assert isinstance(error, UnresolvedLinkError), "expected UnresolvedLinkError"
    assert error.target == href
    assert href in str(error)


@then("no output directory is created")
def then_no_output(scenario_state: dict[str, object]) -> None:
    """Verify a failed build leaves no partial output behind."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    assert not output_dir.exists()


def _read(scenario_state: dict[str, object], page: str) -> BeautifulSoup:
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    html = (output_dir / page).read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")
