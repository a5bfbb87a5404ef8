"""Write rendered pages and static assets into the output directory.

The emitter only ever creates or overwrites the files it is given. Files that
already hold identical bytes are left untouched, so repeated builds are
byte-identical and keep modification times stable. Nothing in the output
directory is ever deleted.

Example
-------
>>> from pathlib import Path
>>> from academy_pages.generator import RenderedPage
>>> emitter = SiteEmitter(Path("_site"))  # doctest: +SKIP
>>> emitter.emit([RenderedPage("index.html", b"<html></html>\\n")])  # doctest: +SKIP
EmitReport(written=[PosixPath('_site/index.html')], unchanged=[])
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from academy_pages.errors import EmitError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from academy_pages.generator import RenderedPage

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class EmitReport:
    """Paths touched by an emit pass."""

    written: list[Path] = dc.field(default_factory=list)
    unchanged: list[Path] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class Asset:
    """A static file copied verbatim to ``output_path``."""

    source: Path
    output_path: str


class SiteEmitter:
    """Persist pages under ``output_dir`` preserving their relative paths."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def emit(self, pages: cabc.Iterable[RenderedPage]) -> EmitReport:
        """Write every page, creating intermediate directories.

        Raises
        ------
        EmitError
            On the first filesystem failure. The error lists the files
            written before it and those left unchanged.
        """
        report = EmitReport()
        for page in pages:
            target = self.output_dir / page.output_path
            self._write(target, page.content, report)
        return report

    def copy_assets(
        self, assets: cabc.Iterable[Asset], *, reserved: cabc.Collection[str] = ()
    ) -> EmitReport:
        """Copy static files verbatim, skipping paths owned by rendered pages."""
        report = EmitReport()
        for asset in assets:
            if asset.output_path in reserved:
                logger.warning(
                    "Skipping asset %s: a rendered page uses %s",
                    asset.source,
                    asset.output_path,
                )
                continue
            target = self.output_dir / asset.output_path
            try:
                data = asset.source.read_bytes()
            except OSError as exc:
                raise EmitError(target, report.written, report.unchanged) from exc
            self._write(target, data, report)
        return report

    def _write(self, target: Path, data: bytes, report: EmitReport) -> None:
        try:
            if target.is_file() and target.read_bytes() == data:
                report.unchanged.append(target)
                return
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise EmitError(target, report.written, report.unchanged) from exc
        logger.debug("Wrote %s", target)
        report.written.append(target)


def collect_assets(
    roots: cabc.Iterable[Path],
    patterns: cabc.Iterable[str],
    *,
    extra: cabc.Iterable[str] = (),
    exclude: Path | None = None,
) -> list[Asset]:
    """Expand asset globs under each root into a sorted, de-duplicated list.

    ``extra`` names individual files (stylesheets, favicon) relative to the
    roots; leading slashes are ignored. Files below ``exclude`` (normally the
    output directory) are never collected.
    """
    found: dict[str, Asset] = {}
    globs = list(patterns)
    files = [name.lstrip("/") for name in extra]
    for root in roots:
        for pattern in globs:
            for path in sorted(root.glob(pattern)):
                if path.is_file() and not _is_within(path, exclude):
                    relative = path.relative_to(root).as_posix()
                    found.setdefault(relative, Asset(path, relative))
        for name in files:
            path = root / name
            if path.is_file():
                found.setdefault(name, Asset(path, name))
    return [found[key] for key in sorted(found)]


def _is_within(path: Path, directory: Path | None) -> bool:
    if directory is None:
        return False
    return path.resolve().is_relative_to(directory.resolve())


__all__ = ["Asset", "EmitReport", "SiteEmitter", "collect_assets"]
