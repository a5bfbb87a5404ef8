"""Shared fixtures that lay out a small academy site on disk.

The ``site_root`` fixture mirrors the structure of the real site: a landing
page, teaching and research sections with sidebars, an about page, a blog post
section rendered with its own template, and a few static assets.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from academy_pages.config import SiteConfig, load_site_config

SITE_YAML = """
site:
  title: Virtuelle Akademie
  site_url: https://virtuelleakademie.github.io/
  favicon: /assets/logo.png
  output_dir: _site
content:
  include: ["**/*.qmd", "**/*.md"]
  assets: ["assets/**/*"]
templates:
  default: page.jinja
  sections:
    posts: post.jinja
theme:
  name: simplex
  stylesheets: [styles/custom.css]
navigation:
  navbar:
    left:
      - text: Teaching
        href: teaching/
      - text: Research
        href: research/
    right:
      - text: About
        href: about/
    tools:
      - icon: github
        href: https://github.com/virtuelleakademie
        target: _blank
  sidebar:
    - title: Teaching
      href: teaching/
      contents:
        - teaching/index.qmd
        - text: Courses
          href: teaching/courses/
          contents:
            - teaching/courses/intro.md
            - teaching/courses/stats.md
    - title: Research
      href: research/
      contents:
        - research/index.qmd
        - research/projects/llm.md
footer:
  left: "2025 Virtuelle Akademie"
  links:
    - icon: inbox-fill
      href: mailto:virtuelle.akademie@example.org
"""

CONTENT: dict[str, str] = {
    "index.qmd": "---\ntitle: Virtuelle Akademie\n---\nWelcome to the academy.\n",
    "teaching/index.qmd": "---\ntitle: Teaching\n---\nOur teaching activities.\n",
    "teaching/courses/intro.md": (
        "---\n"
        "title: Introduction to Data Analysis\n"
        "author: Ada Example\n"
        "---\n"
        "## Setup\n\n"
        "Continue with [statistics](stats.md#setup) or visit the\n"
        "[research overview](../../research/index.qmd).\n\n"
        "Read the [pandas docs](https://pandas.pydata.org).\n\n"
        "```{python}\n"
        "import pandas as pd\n"
        "pd.DataFrame({'a': [1, 2]})\n"
        "```\n"
    ),
    "teaching/courses/stats.md": (
        "---\ntitle: Statistics\n---\n## Setup\n\nBack to [the intro](intro.md).\n"
    ),
    "research/index.qmd": "---\ntitle: Research\n---\nProjects and publications.\n",
    "research/projects/llm.md": "---\ntitle: Language Models\n---\nLLM project.\n",
    "about/index.qmd": "---\ntitle: About\n---\nWho we are.\n",
    "posts/index.qmd": "---\ntitle: Posts\ntemplate: listing.jinja\n---\nAll posts.\n",
    "posts/pandas-tutorial.qmd": (
        "---\n"
        "title: Exploring pandas\n"
        "date: 2024-05-01\n"
        "categories: [python, tutorial]\n"
        "---\n"
        "A short tutorial.\n"
    ),
}

ASSETS: dict[str, bytes] = {
    "assets/logo.png": b"\x89PNG\r\n\x1a\nfake",
    "styles/custom.css": b"body { color: #222; }\n",
}


def write_file(root: Path, relative: str, text: str | bytes) -> Path:
    """Write ``text`` to ``root / relative``, creating parent directories."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(text, bytes):
        path.write_bytes(text)
    else:
        path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create the sample site and return its directory."""
    root = tmp_path / "site"
    write_file(root, "site.yaml", SITE_YAML.lstrip())
    for relative, text in CONTENT.items():
        write_file(root, relative, text)
    for relative, data in ASSETS.items():
        write_file(root, relative, data)
    return root


@pytest.fixture
def site_config(site_root: Path) -> SiteConfig:
    """Load the sample site's configuration."""
    return load_site_config(site_root / "site.yaml")


@pytest.fixture
def write() -> typ.Callable[[Path, str, str | bytes], Path]:
    """Return the :func:`write_file` helper for tests that build their own trees."""
    return write_file


@pytest.fixture
def content_sources() -> dict[str, str]:
    """Return the sample site's content files keyed by relative path."""
    return dict(CONTENT)
