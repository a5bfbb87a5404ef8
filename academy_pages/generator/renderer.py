"""Utilities for rendering markdown and syntax-highlighted code snippets.

Code blocks are only ever highlighted. Executable-looking fences such as
Quarto's ```` ```{python} ```` are rewritten to plain language fences and shown
as literal text.
"""

from __future__ import annotations

import dataclasses as dc
import io
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
EXECUTABLE_FENCE_PATTERN = re.compile(
    r"^([`~]{3,})\{([A-Za-z0-9_+#.-]+)[^}\r\n]*\}[ \t]*$", re.MULTILINE
)
TAG_PATTERN = re.compile(r"<[^>]+>")
WHITESPACE_PATTERN = re.compile(r"\s+")


@dc.dataclass(frozen=True, slots=True)
class MarkdownResult:
    """Rendered HTML plus the heading outline collected by the toc extension."""

    html: str
    toc: list[dict[str, typ.Any]]


class LanguageLabelFormatter(HtmlFormatter):
    """Pygments HTML formatter that labels the wrapper with its language.

    Codehilite hands every block it highlights to this formatter, fenced or
    indented, so each ``<div class="codehilite">`` carries a ``data-language``
    attribute. Unlabelled blocks report ``text``.
    """

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.language = lang_str.removeprefix("language-") or "text"

    def format_unencoded(
        self, tokensource: typ.Iterable[tuple[typ.Any, str]], outfile: typ.TextIO
    ) -> None:
        buffer = io.StringIO()
        super().format_unencoded(tokensource, buffer)
        opening = f'<div class="{self.cssclass}"'
        labelled = f'{opening} data-language="{escape(self.language, quote=True)}"'
        outfile.write(buffer.getvalue().replace(opening, labelled, 1))


class HtmlContentRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(
        self, pygments_style: str = "friendly", *, anchor_sections: bool = True
    ) -> None:
        """Initialize a renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting.
        anchor_sections : bool, optional
            Add a permalink anchor to every heading.
        """
        self.pygments_style = pygments_style
        self.anchor_sections = anchor_sections
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(
        self, text: str, extensions: cabc.Sequence[Extension] = ()
    ) -> MarkdownResult:
        """Render markdown into HTML using the configured extensions.

        A new ``Markdown`` instance is created per call so state from one page
        never leaks into another.
        """
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return MarkdownResult(html="", toc=[])
        md = Markdown(
            extensions=[
                "fenced_code",
                "codehilite",
                "tables",
                "sane_lists",
                "attr_list",
                "footnotes",
                "toc",
                *extensions,
            ],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LanguageLabelFormatter,
                },
                "toc": {
                    "permalink": self.anchor_sections,
                    "permalink_class": "anchor-link",
                },
            },
        )
        html = md.convert(normalized)
        toc = list(getattr(md, "toc_tokens", []))
        return MarkdownResult(html=html, toc=toc)

    @staticmethod
    def plain_text(html: str) -> str:
        """Strip tags from ``html`` and collapse whitespace."""
        return WHITESPACE_PATTERN.sub(" ", TAG_PATTERN.sub(" ", html)).strip()

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)
        literal = EXECUTABLE_FENCE_PATTERN.sub(r"\1\2", without_indent)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, literal)


__all__ = ["HtmlContentRenderer", "LanguageLabelFormatter", "MarkdownResult"]
