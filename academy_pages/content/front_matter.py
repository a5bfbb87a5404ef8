r"""Split content files into a YAML metadata header and a Markdown body.

A header is a YAML mapping fenced by ``---`` lines at the very top of the
file (``...`` also closes it). Files without a header have empty metadata.

Example
-------
>>> from pathlib import Path
>>> meta, body = split_front_matter("---\ntitle: Hi\n---\nBody\n", Path("a.md"))
>>> meta["title"], body
('Hi', 'Body\n')
"""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from academy_pages._constants import METADATA_DELIMITER
from academy_pages.errors import MetadataParseError

if typ.TYPE_CHECKING:
    from pathlib import Path

CLOSING_DELIMITERS = frozenset({METADATA_DELIMITER, "..."})
# The header starts on the second line of the file.
HEADER_LINE_OFFSET = 2


def split_front_matter(text: str, source: Path) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed metadata mapping and the remaining body text.

    Raises
    ------
    MetadataParseError
        When the header is never closed, is not valid YAML, or is not a
        mapping. The error carries the 1-based line and column in ``source``.
    """
    clean = text.lstrip("\ufeff")
    lines = clean.splitlines(keepends=True)
    if not lines or lines[0].strip() != METADATA_DELIMITER:
        return {}, clean

    for idx in range(1, len(lines)):
        if lines[idx].strip() in CLOSING_DELIMITERS:
            header = "".join(lines[1:idx])
            body = "".join(lines[idx + 1 :])
            break
    else:
        raise MetadataParseError(
            source, 1, 1, "metadata header opened with '---' is never closed"
        )

    data = _load_header(header, source)
    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise MetadataParseError(
            source, HEADER_LINE_OFFSET, 1, "metadata header must be a mapping"
        )
    return {str(key): value for key, value in data.items()}, body


def _load_header(header: str, source: Path) -> object:
    """Parse the header YAML, translating loader errors to file positions."""
    loader = YAML(typ="safe", pure=True)
    loader.version = (1, 2)
    try:
        return loader.load(header)
    except YAMLError as exc:
        mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
        line = mark.line + HEADER_LINE_OFFSET if mark is not None else HEADER_LINE_OFFSET
        column = mark.column + 1 if mark is not None else 1
        problem = getattr(exc, "problem", None) or str(exc).splitlines()[0]
        raise MetadataParseError(source, line, column, problem) from exc


__all__ = ["split_front_matter"]
