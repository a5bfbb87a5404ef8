"""Utilities for rendering content items into themed HTML pages."""

from .link_rewriter import CrossLinkExtension
from .models import RenderedPage, RenderResult, SearchEntry
from .page_generator import PageRenderer
from .renderer import HtmlContentRenderer
from .templates import build_environment, resolve_template_name, section_template

__all__ = [
    "CrossLinkExtension",
    "HtmlContentRenderer",
    "PageRenderer",
    "RenderResult",
    "RenderedPage",
    "SearchEntry",
    "build_environment",
    "resolve_template_name",
    "section_template",
]
