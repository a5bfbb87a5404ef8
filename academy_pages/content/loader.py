"""Discover content files under the configured roots and load them.

:class:`ContentLoader` expands the include globs of a
:class:`~academy_pages.config.ContentConfig`, rejects identity collisions up
front, then parses every file into a :class:`ContentItem`. Metadata errors are
collected per file so one bad header does not hide the others; they surface
together as a :class:`~academy_pages.errors.ContentLoadError` when the pass
finishes.

Example
-------
>>> from academy_pages.config import ContentConfig
>>> loader = ContentLoader(ContentConfig())  # doctest: +SKIP
>>> content = loader.load()  # doctest: +SKIP
>>> sorted(content)[:1]  # doctest: +SKIP
['about/index.qmd']
"""

from __future__ import annotations

import concurrent.futures as cf
import dataclasses as dc
import logging
import types
import typing as typ

from academy_pages.errors import (
    ContentLoadError,
    DuplicateContentError,
    MetadataParseError,
)

from .front_matter import split_front_matter
from .models import ContentItem, ContentSet, derive_output_path, derive_title

if typ.TYPE_CHECKING:
    from pathlib import Path

    from academy_pages.config import ContentConfig

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class SourceFile:
    """A discovered file awaiting parsing."""

    root: Path
    source_path: str

    @property
    def path(self) -> Path:
        return self.root / self.source_path


class ContentLoader:
    """Load every matching content file into an immutable :class:`ContentSet`."""

    def __init__(self, content_config: ContentConfig, *, workers: int = 1) -> None:
        """Initialize the loader.

        Parameters
        ----------
        content_config : ContentConfig
            Roots, include globs, and content extensions to scan.
        workers : int, optional
            Number of threads used to read and parse files. Parsing is
            independent per file, so any value yields the same result.
        """
        self.config = content_config
        self.workers = max(1, workers)
        self.extensions = {ext.lower() for ext in content_config.extensions}

    def discover(self) -> list[SourceFile]:
        """Return matched files in deterministic order.

        Raises
        ------
        DuplicateContentError
            When two files share a relative source path across roots or would
            be rendered to the same output path.
        """
        found: dict[str, SourceFile] = {}
        outputs: dict[str, SourceFile] = {}
        for root in self.config.roots:
            for path in self._match_root(root):
                source = SourceFile(root=root, source_path=path)
                existing = found.get(path)
                if existing is not None:
                    raise DuplicateContentError(path, existing.path, source.path)
                output = derive_output_path(path)
                clash = outputs.get(output)
                if clash is not None:
                    raise DuplicateContentError(output, clash.path, source.path)
                found[path] = source
                outputs[output] = source
        logger.debug("Discovered %d content files", len(found))
        return list(found.values())

    def load(self) -> ContentSet:
        """Parse all discovered files.

        Returns
        -------
        ContentSet
            Items keyed by source path, drafts omitted unless configured.

        Raises
        ------
        DuplicateContentError
            Raised before any file is parsed when identities collide.
        ContentLoadError
            Raised after every file has been read when at least one file could
            not be decoded or its metadata header failed to parse.
        """
        sources = self.discover()
        items: list[ContentItem] = []
        errors: list[MetadataParseError] = []
        for outcome in self._parse_all(sources):
            match outcome:
                case MetadataParseError():
                    errors.append(outcome)
                case ContentItem():
                    items.append(outcome)
                case None:
                    continue
        if errors:
            raise ContentLoadError(errors)
        return ContentSet(items)

    def _parse_all(
        self, sources: list[SourceFile]
    ) -> list[ContentItem | MetadataParseError | None]:
        if self.workers == 1 or len(sources) < 2:
            return [self._parse_one(source) for source in sources]
        with cf.ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(self._parse_one, sources))

    def _parse_one(self, source: SourceFile) -> ContentItem | MetadataParseError | None:
        """Parse a single file, returning the error instead of raising it."""
        try:
            text = source.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.debug("Cannot decode %s: %s", source.path, exc.reason)
            return MetadataParseError(
                source.path, 1, 1, f"file is not valid UTF-8 ({exc.reason})"
            )
        except OSError as exc:
            logger.debug("Cannot read %s: %s", source.path, exc)
            return MetadataParseError(
                source.path, 1, 1, f"file cannot be read ({exc.strerror or exc})"
            )
        try:
            metadata, body = split_front_matter(text, source.path)
        except MetadataParseError as exc:
            logger.debug("Metadata error in %s: %s", source.path, exc.problem)
            return exc
        if metadata.get("draft") is True and not self.config.include_drafts:
            logger.debug("Skipping draft %s", source.source_path)
            return None
        title = metadata.get("title")
        return ContentItem(
            source_path=source.source_path,
            root=source.root,
            title=str(title).strip() if title else derive_title(source.source_path),
            metadata=types.MappingProxyType(metadata),
            body=body,
            output_path=derive_output_path(source.source_path),
        )

    def _match_root(self, root: Path) -> list[str]:
        """Return sorted relative POSIX paths of content files under ``root``."""
        matched: set[str] = set()
        for pattern in self.config.include:
            for path in root.glob(pattern):
                if not path.is_file() or path.suffix.lower() not in self.extensions:
                    continue
                relative = path.relative_to(root)
                if any(part.startswith(("_", ".")) for part in relative.parts):
                    continue
                matched.add(relative.as_posix())
        return sorted(matched)


__all__ = ["ContentLoader", "SourceFile"]
