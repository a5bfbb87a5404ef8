"""Exceptions raised while building the site.

Structural problems (duplicate content, unresolved navigation, failed writes)
abort a build. Metadata parse errors are gathered per file and surfaced as a
single :class:`ContentLoadError` once loading finishes. Broken inline links are
modelled as :class:`BrokenCrossLinkError` instances but are collected as
warnings rather than raised.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class SiteBuildError(Exception):
    """Base class for all failures reported by the site pipeline."""


class DuplicateContentError(SiteBuildError):
    """Raised when two source files claim the same content identity."""

    def __init__(self, identity: str, first: Path, second: Path) -> None:
        self.identity = identity
        self.first = first
        self.second = second
        super().__init__(
            f"Duplicate content '{identity}': '{first}' and '{second}' map to the "
            "same page."
        )


class MetadataParseError(SiteBuildError):
    """Raised when a content file carries a malformed metadata header.

    Attributes
    ----------
    source : Path
        File whose header failed to parse.
    line : int
        1-based line of the offending position.
    column : int
        1-based column of the offending position.
    problem : str
        Short description of what went wrong.
    """

    def __init__(self, source: Path, line: int, column: int, problem: str) -> None:
        self.source = source
        self.line = line
        self.column = column
        self.problem = problem
        super().__init__(f"{source}:{line}:{column}: {problem}")


class ContentLoadError(SiteBuildError):
    """Aggregate of every metadata error found during a load pass."""

    def __init__(self, errors: cabc.Sequence[MetadataParseError]) -> None:
        self.errors = list(errors)
        details = "\n".join(f"  {error}" for error in self.errors)
        count = len(self.errors)
        noun = "file" if count == 1 else "files"
        super().__init__(f"Failed to parse metadata in {count} {noun}:\n{details}")


class UnresolvedLinkError(SiteBuildError):
    """Raised when a navigation entry points at content that does not exist."""

    def __init__(self, target: str, label: str | None = None) -> None:
        self.target = target
        self.label = label
        where = f" (entry '{label}')" if label else ""
        super().__init__(f"Navigation target '{target}'{where} does not resolve.")


class BrokenCrossLinkError(SiteBuildError):
    """Inline link from one page to content that is not part of the site."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"{source}: broken link to '{target}'")


class EmitError(SiteBuildError):
    """Raised when writing an output file fails.

    ``written`` lists the output paths that were successfully produced before
    the failure and ``unchanged`` the ones already current on disk, so a
    partial publish can be diagnosed.
    """

    def __init__(
        self,
        path: Path,
        written: cabc.Sequence[Path],
        unchanged: cabc.Sequence[Path] = (),
    ) -> None:
        self.path = path
        self.written = list(written)
        self.unchanged = list(unchanged)
        super().__init__(
            f"Failed to write '{path}' after {len(self.written)} successful writes."
        )


__all__ = [
    "BrokenCrossLinkError",
    "ContentLoadError",
    "DuplicateContentError",
    "EmitError",
    "MetadataParseError",
    "SiteBuildError",
    "UnresolvedLinkError",
]
