"""Load and validate the site configuration YAML.

This subpackage parses the project's ``site.yaml`` file, applies defaults for
content discovery, templates, and theming, and produces frozen dataclasses
(:class:`SiteConfig`, :class:`NavigationConfig`, etc.) that the loader,
navigation builder, and renderer consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from academy_pages.config import load_site_config
>>> site = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> [entry.label for entry in site.navigation.sections]  # doctest: +SKIP
['Teaching', 'Research']
"""

from .loader import load_site_config
from .models import (
    ContentConfig,
    FooterConfig,
    NavEntryConfig,
    NavigationConfig,
    SiteConfig,
    SiteConfigError,
    TemplateConfig,
    ThemeConfig,
)

__all__ = [
    "ContentConfig",
    "FooterConfig",
    "NavEntryConfig",
    "NavigationConfig",
    "SiteConfig",
    "SiteConfigError",
    "TemplateConfig",
    "ThemeConfig",
    "load_site_config",
]
