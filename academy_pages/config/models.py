"""Typed dataclasses describing the site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from academy_pages._constants import (
    DEFAULT_CONTENT_EXTENSIONS,
    DEFAULT_INCLUDE_PATTERNS,
    DEFAULT_PYGMENTS_STYLE,
    DEFAULT_TEMPLATE,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class ContentConfig:
    """Where content lives and which files count as pages or assets."""

    roots: tuple[Path, ...] = (Path(),)
    include: tuple[str, ...] = DEFAULT_INCLUDE_PATTERNS
    extensions: tuple[str, ...] = DEFAULT_CONTENT_EXTENSIONS
    assets: tuple[str, ...] = ()
    include_drafts: bool = False


@dc.dataclass(frozen=True, slots=True)
class TemplateConfig:
    """Template selection defaults.

    ``sections`` maps a content directory (``"posts"``, ``"teaching/courses"``)
    to the template used by pages below it when the page itself names none.
    """

    default: str = DEFAULT_TEMPLATE
    sections: dict[str, str] = dc.field(default_factory=dict)
    directory: Path | None = None


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Visual theming applied to generated pages."""

    name: str = "default"
    stylesheets: tuple[str, ...] = ()
    pygments_style: str = DEFAULT_PYGMENTS_STYLE
    toc: bool = True
    anchor_sections: bool = True
    external_links_new_window: bool = True
    external_link_icon: bool = False


@dc.dataclass(frozen=True, slots=True)
class NavEntryConfig:
    """A declared navigation entry before it is resolved against content."""

    label: str | None
    href: str | None
    icon: str | None = None
    new_window: bool = False
    children: tuple[NavEntryConfig, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class NavigationConfig:
    """Navbar, tool links, and sidebar sections in declared order."""

    navbar_left: tuple[NavEntryConfig, ...] = ()
    navbar_right: tuple[NavEntryConfig, ...] = ()
    tools: tuple[NavEntryConfig, ...] = ()
    sections: tuple[NavEntryConfig, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer text and icon links."""

    left: str = ""
    right: str = ""
    links: tuple[NavEntryConfig, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Fully resolved configuration for one generation run."""

    title: str
    output_dir: Path
    base_dir: Path
    content: ContentConfig = dc.field(default_factory=ContentConfig)
    templates: TemplateConfig = dc.field(default_factory=TemplateConfig)
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    navigation: NavigationConfig = dc.field(default_factory=NavigationConfig)
    footer: FooterConfig = dc.field(default_factory=FooterConfig)
    site_url: str | None = None
    description: str | None = None
    favicon: str | None = None
    search: bool = True

    def resolve_path(self, value: Path | str) -> Path:
        """Return ``value`` anchored at the configuration directory."""
        path = Path(value)
        if path.is_absolute():
            return path
        return self.base_dir / path


__all__ = [
    "ContentConfig",
    "FooterConfig",
    "NavEntryConfig",
    "NavigationConfig",
    "SiteConfig",
    "SiteConfigError",
    "TemplateConfig",
    "ThemeConfig",
]
