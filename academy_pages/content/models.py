"""Content items and the read-only set produced by a load pass."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import posixpath
import typing as typ
from pathlib import Path, PurePosixPath

from academy_pages._constants import INDEX_STEM, OUTPUT_EXTENSION


def derive_output_path(source_path: str) -> str:
    """Return the output path for ``source_path`` with the extension swapped.

    Examples
    --------
    >>> derive_output_path("teaching/courses/intro.qmd")
    'teaching/courses/intro.html'
    """
    return PurePosixPath(source_path).with_suffix(OUTPUT_EXTENSION).as_posix()


def derive_title(source_path: str) -> str:
    """Build a readable title from a file name when metadata omits one."""
    pure = PurePosixPath(source_path)
    stem = pure.stem
    if stem == INDEX_STEM:
        stem = pure.parent.name or "Home"
    return stem.replace("-", " ").replace("_", " ").strip().title()


@dc.dataclass(frozen=True, slots=True)
class ContentItem:
    """One content file: metadata header, Markdown body, and derived paths.

    Attributes
    ----------
    source_path : str
        POSIX path relative to the content root; the item's identity.
    root : Path
        Absolute content root the file was discovered under.
    title : str
        Page title from metadata or derived from the file name.
    metadata : Mapping[str, Any]
        Read-only view of the parsed metadata header.
    body : str
        Markdown body following the header.
    output_path : str
        POSIX path of the rendered document relative to the output directory.
    """

    source_path: str
    root: Path
    title: str
    metadata: cabc.Mapping[str, typ.Any]
    body: str
    output_path: str

    @property
    def file_path(self) -> Path:
        return self.root / self.source_path

    @property
    def directory(self) -> str:
        """Directory of the item relative to its root (``""`` for the root)."""
        return posixpath.dirname(self.source_path)

    @property
    def is_index(self) -> bool:
        return PurePosixPath(self.source_path).stem == INDEX_STEM

    @property
    def date(self) -> typ.Any:
        return self.metadata.get("date")

    @property
    def author(self) -> typ.Any:
        return self.metadata.get("author")

    @property
    def description(self) -> str | None:
        value = self.metadata.get("description")
        return str(value) if value is not None else None

    @property
    def template(self) -> str | None:
        value = self.metadata.get("template")
        if value is None:
            return None
        return str(value).strip() or None

    @property
    def categories(self) -> tuple[str, ...]:
        value = self.metadata.get("categories")
        match value:
            case None:
                return ()
            case str():
                return (value,)
            case list() | tuple():
                return tuple(str(entry) for entry in value)
            case _:
                return (str(value),)


class ContentSet(cabc.Mapping[str, ContentItem]):
    """Read-only mapping of source path to :class:`ContentItem`."""

    def __init__(self, items: cabc.Iterable[ContentItem]) -> None:
        self._items: dict[str, ContentItem] = {}
        self._by_output: dict[str, ContentItem] = {}
        for item in items:
            self._items[item.source_path] = item
            self._by_output[item.output_path] = item
        self._directories = _collect_directories(self._items)

    def __getitem__(self, key: str) -> ContentItem:
        return self._items[key]

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def by_output_path(self, output_path: str) -> ContentItem | None:
        """Return the item rendered to ``output_path`` if any."""
        return self._by_output.get(output_path)

    def index_for(self, directory: str) -> ContentItem | None:
        """Return the explicit index item of ``directory`` (``""`` is the root)."""
        directory = directory.strip("/")
        name = f"{INDEX_STEM}{OUTPUT_EXTENSION}"
        output = f"{directory}/{name}" if directory else name
        return self._by_output.get(output)

    def has_directory(self, directory: str) -> bool:
        """Return True when any item lives in or below ``directory``."""
        return directory.strip("/") in self._directories

    def items_under(self, directory: str) -> list[ContentItem]:
        """Return non-index items below ``directory`` in source-path order."""
        prefix = directory.strip("/")
        prefix = f"{prefix}/" if prefix else ""
        return [
            item
            for path, item in sorted(self._items.items())
            if path.startswith(prefix) and not item.is_index
        ]


def _collect_directories(items: cabc.Mapping[str, ContentItem]) -> frozenset[str]:
    """Return every directory (and ancestor) that contains at least one item."""
    directories: set[str] = set()
    for path in items:
        parent = PurePosixPath(path).parent
        while parent.as_posix() != ".":
            directories.add(parent.as_posix())
            parent = parent.parent
    return frozenset(directories)


__all__ = ["ContentItem", "ContentSet", "derive_output_path", "derive_title"]
