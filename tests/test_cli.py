"""Tests for the ``pages build`` and ``pages check`` commands."""

from __future__ import annotations

import typing as typ

import pytest

from academy_pages.cli import build, check
from academy_pages.errors import UnresolvedLinkError

if typ.TYPE_CHECKING:
    from pathlib import Path

    WriteFile = typ.Callable[[Path, str, str | bytes], Path]


def test_build_prints_written_files(
    site_root: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(site_root)
    build(config=site_root / "site.yaml")
    lines = capsys.readouterr().out.splitlines()
    assert "wrote _site/index.html" in lines
    assert "wrote _site/teaching/courses/intro.html" in lines
    assert lines[-1].startswith("9 pages,")
    assert lines[-1].endswith(" 0 unchanged")


def test_rebuild_reports_nothing_written(
    site_root: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(site_root)
    build(config=site_root / "site.yaml")
    capsys.readouterr()
    build(config=site_root / "site.yaml")
    lines = capsys.readouterr().out.splitlines()
    assert not [line for line in lines if line.startswith("wrote ")]
    assert ", 0 written," in lines[-1]


def test_build_honours_output_override(site_root: Path, tmp_path: Path) -> None:
    target = tmp_path / "dist"
    build(config=site_root / "site.yaml", output_dir=target)
    assert (target / "index.html").is_file()


def test_check_writes_nothing(
    site_root: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    check(config=site_root / "site.yaml")
    out = capsys.readouterr().out
    assert "9 pages checked, 0 broken links" in out
    assert not (site_root / "_site").exists()


def test_check_strict_fails_on_broken_links(
    site_root: Path, write: WriteFile, capsys: pytest.CaptureFixture[str]
) -> None:
    write(site_root, "about/team.md", "---\ntitle: Team\n---\n[old](alumni.md)\n")
    check(config=site_root / "site.yaml")
    assert "warning: about/team.md: broken link to 'alumni.md'" in (
        capsys.readouterr().out
    )
    with pytest.raises(SystemExit) as excinfo:
        check(config=site_root / "site.yaml", strict=True)
    assert excinfo.value.code == 1


def test_unresolved_navigation_propagates(site_root: Path, write: WriteFile) -> None:
    config = (site_root / "site.yaml").read_text(encoding="utf-8")
    write(
        site_root,
        "site.yaml",
        config.replace("research/projects/llm.md", "research/projects/gone.md"),
    )
    with pytest.raises(UnresolvedLinkError):
        build(config=site_root / "site.yaml")
    assert not (site_root / "_site").exists()
