"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from academy_pages._constants import (
    DEFAULT_CONTENT_EXTENSIONS,
    DEFAULT_INCLUDE_PATTERNS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TEMPLATE,
)

from .helpers import (
    _as_bool,
    _build_nav_entries,
    _build_theme_config,
    _mapping,
    _normalize_extension,
    _optional_str,
    _string_tuple,
)
from .models import (
    ContentConfig,
    FooterConfig,
    NavigationConfig,
    SiteConfig,
    SiteConfigError,
    TemplateConfig,
)

logger = logging.getLogger(__name__)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site and its navigation.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``site.yaml``). Relative paths inside the file are resolved against
        the directory that contains it.

    Returns
    -------
    SiteConfig
        Parsed site configuration with content roots, template defaults,
        theme, navigation declarations, and footer.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid (for example,
        no site title is declared).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from academy_pages.config import load_site_config
    >>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
    >>> config.title  # doctest: +SKIP
    'Virtuelle Akademie'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.resolve().parent
    logger.debug("Loading site configuration from %s", path)

    site = _mapping(raw, "site")
    title = _optional_str(site.get("title"))
    if not title:
        msg = "Site configuration requires 'site.title'."
        raise SiteConfigError(msg)

    output_dir = Path(site.get("output_dir", DEFAULT_OUTPUT_DIR))
    if not output_dir.is_absolute():
        output_dir = base_dir / output_dir

    navigation = _build_navigation_config(_mapping(raw, "navigation"))
    footer = _build_footer_config(_mapping(raw, "footer"))

    return SiteConfig(
        title=title,
        output_dir=output_dir,
        base_dir=base_dir,
        content=_build_content_config(_mapping(raw, "content"), base_dir=base_dir),
        templates=_build_template_config(
            _mapping(raw, "templates"), base_dir=base_dir
        ),
        theme=_build_theme_config(_mapping(raw, "theme")),
        navigation=navigation,
        footer=footer,
        site_url=_optional_str(site.get("site_url")),
        description=_optional_str(site.get("description")),
        favicon=_optional_str(site.get("favicon")),
        search=_as_bool(site.get("search"), default=True),
    )


def _build_content_config(
    payload: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> ContentConfig:
    """Build the content discovery settings, anchoring roots at ``base_dir``."""
    roots = _string_tuple(payload.get("roots"), field="content.roots") or (".",)
    include = (
        _string_tuple(payload.get("include"), field="content.include")
        or DEFAULT_INCLUDE_PATTERNS
    )
    extensions = tuple(
        _normalize_extension(ext)
        for ext in _string_tuple(payload.get("extensions"), field="content.extensions")
    )
    resolved_roots: list[Path] = []
    for root in roots:
        candidate = Path(root)
        if not candidate.is_absolute():
            candidate = base_dir / candidate
        resolved_roots.append(candidate.resolve())
    return ContentConfig(
        roots=tuple(resolved_roots),
        include=include,
        extensions=extensions or DEFAULT_CONTENT_EXTENSIONS,
        assets=_string_tuple(payload.get("assets"), field="content.assets"),
        include_drafts=_as_bool(payload.get("include_drafts"), default=False),
    )


def _build_template_config(
    payload: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> TemplateConfig:
    """Build template defaults, including per-section overrides."""
    sections_raw = payload.get("sections") or {}
    if not isinstance(sections_raw, dict):
        msg = "'templates.sections' must map section paths to template names."
        raise SiteConfigError(msg)
    sections: dict[str, str] = {}
    for section, template in sections_raw.items():
        name = _optional_str(template)
        if not name:
            msg = f"Section '{section}' declares an empty template."
            raise SiteConfigError(msg)
        sections[str(section).strip("/")] = name

    directory = _optional_str(payload.get("dir"))
    template_dir = None
    if directory:
        template_dir = Path(directory)
        if not template_dir.is_absolute():
            template_dir = base_dir / template_dir
    return TemplateConfig(
        default=_optional_str(payload.get("default")) or DEFAULT_TEMPLATE,
        sections=sections,
        directory=template_dir,
    )


def _build_navigation_config(payload: typ.Mapping[str, typ.Any]) -> NavigationConfig:
    """Build navbar and sidebar declarations, preserving declared order."""
    navbar = payload.get("navbar") or {}
    if not isinstance(navbar, dict):
        msg = "'navigation.navbar' must be a mapping with 'left'/'right'/'tools'."
        raise SiteConfigError(msg)
    return NavigationConfig(
        navbar_left=_build_nav_entries(navbar.get("left"), where="navbar.left"),
        navbar_right=_build_nav_entries(navbar.get("right"), where="navbar.right"),
        tools=_build_nav_entries(navbar.get("tools"), where="navbar.tools"),
        sections=_build_nav_entries(payload.get("sidebar"), where="sidebar"),
    )


def _build_footer_config(payload: typ.Mapping[str, typ.Any]) -> FooterConfig:
    """Build the page footer from free text and a list of icon links."""
    return FooterConfig(
        left=_optional_str(payload.get("left")) or "",
        right=_optional_str(payload.get("right")) or "",
        links=_build_nav_entries(payload.get("links"), where="footer.links"),
    )


__all__ = ["load_site_config"]
