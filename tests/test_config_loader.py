"""Unit tests for ``academy_pages.config.load_site_config``.

These tests load the sample ``site.yaml`` produced by the ``site_root``
fixture and a handful of deliberately broken configurations to verify that
defaults are applied, paths are anchored at the configuration directory, and
invalid shapes are rejected with :class:`SiteConfigError`.

Usage
-----
Run ``pytest tests/test_config_loader.py -v``.
"""

from __future__ import annotations

import typing as typ

import pytest

from academy_pages.config import SiteConfigError, load_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path

    from academy_pages.config import SiteConfig


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(body.strip() + "\n", encoding="utf-8")
    return path


def test_paths_resolve_against_config_directory(
    site_root: Path, site_config: SiteConfig
) -> None:
    assert site_config.title == "Virtuelle Akademie"
    assert site_config.base_dir == site_root.resolve()
    assert site_config.output_dir == site_root.resolve() / "_site"
    assert site_config.content.roots == (site_root.resolve(),)


def test_template_sections_and_theme(site_config: SiteConfig) -> None:
    assert site_config.templates.default == "page.jinja"
    assert site_config.templates.sections == {"posts": "post.jinja"}
    assert site_config.theme.name == "simplex"
    assert site_config.theme.stylesheets == ("styles/custom.css",)
    assert site_config.theme.toc is True


def test_navigation_keeps_declared_order(site_config: SiteConfig) -> None:
    navigation = site_config.navigation
    assert [entry.label for entry in navigation.sections] == ["Teaching", "Research"]
    courses = navigation.sections[0].children[1]
    assert courses.label == "Courses"
    assert [child.href for child in courses.children] == [
        "teaching/courses/intro.md",
        "teaching/courses/stats.md",
    ]
    assert navigation.sections[0].children[0].label is None


def test_tool_links_open_in_new_window(site_config: SiteConfig) -> None:
    (github,) = site_config.navigation.tools
    assert github.icon == "github"
    assert github.new_window is True
    (mail,) = site_config.footer.links
    assert mail.new_window is False


def test_defaults_apply_when_blocks_missing(tmp_path: Path) -> None:
    config = load_site_config(_write_config(tmp_path, "site:\n  title: Minimal"))
    assert config.output_dir == tmp_path.resolve() / "_site"
    assert config.content.include == ("**/*.md", "**/*.qmd")
    assert config.content.extensions == (".md", ".qmd", ".markdown")
    assert config.navigation.sections == ()
    assert config.search is True


def test_extensions_are_normalized(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
site:
  title: Minimal
content:
  extensions: [md, .QMD]
        """,
    )
    assert load_site_config(path).content.extensions == (".md", ".qmd")


def test_missing_title_is_rejected(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "site:\n  output_dir: out")
    with pytest.raises(SiteConfigError, match="site.title"):
        load_site_config(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


def test_non_mapping_document_raises(tmp_path: Path) -> None:
    with pytest.raises(TypeError):
        load_site_config(_write_config(tmp_path, "- just\n- a list"))


def test_nav_entry_without_target_is_rejected(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
site:
  title: Broken
navigation:
  sidebar:
    - title: Empty
        """,
    )
    with pytest.raises(SiteConfigError, match="Empty"):
        load_site_config(path)


def test_empty_section_template_is_rejected(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
site:
  title: Broken
templates:
  sections:
    posts: ""
        """,
    )
    with pytest.raises(SiteConfigError, match="posts"):
        load_site_config(path)
