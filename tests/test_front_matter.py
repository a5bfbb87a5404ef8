"""Unit tests for metadata header parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from academy_pages.content import split_front_matter
from academy_pages.errors import MetadataParseError

SOURCE = Path("teaching/example.qmd")


def test_header_and_body_are_separated() -> None:
    text = "---\ntitle: Hello\nauthor: Ada\ncategories: [a, b]\n---\nBody text\n"
    metadata, body = split_front_matter(text, SOURCE)
    assert metadata == {"title": "Hello", "author": "Ada", "categories": ["a", "b"]}
    assert body == "Body text\n"


def test_missing_header_yields_empty_metadata() -> None:
    text = "# Plain page\n\nNo metadata here.\n"
    metadata, body = split_front_matter(text, SOURCE)
    assert metadata == {}
    assert body == text


def test_empty_header_is_allowed() -> None:
    metadata, body = split_front_matter("---\n---\nBody\n", SOURCE)
    assert metadata == {}
    assert body == "Body\n"


def test_byte_order_mark_is_ignored() -> None:
    metadata, _ = split_front_matter("\ufeff---\ntitle: Bom\n---\n", SOURCE)
    assert metadata["title"] == "Bom"


def test_dots_close_the_header() -> None:
    metadata, body = split_front_matter("---\ntitle: Dots\n...\nBody\n", SOURCE)
    assert metadata["title"] == "Dots"
    assert body == "Body\n"


def test_unterminated_header_reports_opening_line() -> None:
    with pytest.raises(MetadataParseError) as excinfo:
        split_front_matter("---\ntitle: Never closed\nBody\n", SOURCE)
    assert excinfo.value.source == SOURCE
    assert (excinfo.value.line, excinfo.value.column) == (1, 1)
    assert "never closed" in excinfo.value.problem


def test_yaml_error_reports_file_position() -> None:
    text = "---\ntitle: ok\n  bad: indent\n---\nBody\n"
    with pytest.raises(MetadataParseError) as excinfo:
        split_front_matter(text, SOURCE)
    error = excinfo.value
    assert error.line == 3
    assert "mapping values" in error.problem
    assert str(error).startswith(f"{SOURCE}:3:")


def test_non_mapping_header_is_rejected() -> None:
    with pytest.raises(MetadataParseError, match="must be a mapping"):
        split_front_matter("---\n- one\n- two\n---\n", SOURCE)
