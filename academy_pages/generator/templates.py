"""Template selection and the Jinja environment shared by all renders."""

from __future__ import annotations

import typing as typ
from pathlib import Path, PurePosixPath

from jinja2 import ChoiceLoader, Environment, FileSystemLoader

from academy_pages.urls import relative_url

if typ.TYPE_CHECKING:
    from jinja2 import BaseLoader

    from academy_pages.config import TemplateConfig
    from academy_pages.content import ContentItem

PACKAGE_TEMPLATES = Path(__file__).resolve().parents[1] / "templates"


def section_template(source_path: str, sections: typ.Mapping[str, str]) -> str | None:
    """Return the template of the deepest section containing ``source_path``.

    Examples
    --------
    >>> section_template("posts/2024/intro.md", {"posts": "post.jinja"})
    'post.jinja'
    >>> section_template("about/index.md", {"posts": "post.jinja"}) is None
    True
    """
    parent = PurePosixPath(source_path).parent
    for candidate in (parent, *parent.parents):
        key = candidate.as_posix()
        if key == ".":
            key = ""
        if key in sections:
            return sections[key]
    return None


def resolve_template_name(item: ContentItem, templates: TemplateConfig) -> str:
    """Pick the template for ``item``: page metadata, then section, then global."""
    return (
        item.template
        or section_template(item.source_path, templates.sections)
        or templates.default
    )


def build_environment(templates: TemplateConfig) -> Environment:
    """Return a Jinja environment searching the site's templates first.

    The ``relative_url`` filter turns a site path into a link relative to the
    page being rendered: ``{{ node.target | relative_url(page_path) }}``.
    """
    loaders: list[BaseLoader] = []
    if templates.directory is not None:
        loaders.append(FileSystemLoader(str(templates.directory)))
    loaders.append(FileSystemLoader(str(PACKAGE_TEMPLATES)))
    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["relative_url"] = relative_url
    return env


__all__ = [
    "PACKAGE_TEMPLATES",
    "build_environment",
    "resolve_template_name",
    "section_template",
]
