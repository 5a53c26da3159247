from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest

from summary_assistant.loaders import (
    ExtractionError,
    extract_markdown_text,
    extract_rtf_text,
    human_size,
    load_text,
    load_text_from_file,
    load_text_from_path,
)
from summary_assistant.suggestions import count_bullet_lines, count_heading_lines


def test_txt_is_passed_through() -> None:
    assert load_text("notes.TXT", "Plain text. Nothing else.".encode("utf-8")) == "Plain text. Nothing else."


def test_utf8_bom_is_dropped() -> None:
    assert load_text("a.txt", b"\xef\xbb\xbfHello.") == "Hello."


def test_markdown_keeps_structure_but_drops_inline_markup() -> None:
    md = (
        "# Title\n\n"
        "Some **bold** and *italic* text with a [link](https://example.com) and `code`.\n\n"
        "- first\n* second\n- third\n\n"
        "---\n"
        "```\nprint('hidden')\n```\n"
    )
    text = extract_markdown_text(md)
    assert "Some bold and italic text with a link and code." in text
    assert "https://" not in text
    assert "hidden" not in text
    assert count_heading_lines(text) == 1
    assert count_bullet_lines(text) == 3


def test_rtf_control_words_are_removed() -> None:
    rtf = r"{\rtf1\ansi\deff0 {\*\generator Riched20 10.0;}\pard\f0\fs22 Hello world.\par Second line.\par}"
    text = extract_rtf_text(rtf)
    assert "Hello world." in text
    assert "Second line." in text
    assert "\\" not in text
    assert "Riched20" not in text


def test_unsupported_extension() -> None:
    with pytest.raises(ExtractionError, match="Unsupported file type 'pdf'"):
        load_text("scan.pdf", b"%PDF-1.7")
    with pytest.raises(ExtractionError):
        load_text("README", b"no extension")


def test_decode_failure_is_reported() -> None:
    with pytest.raises(ExtractionError, match="not valid UTF-8"):
        load_text("broken.txt", b"\xff\xfe\xfa bad bytes")


def test_load_from_upload_like_object() -> None:
    upload = BytesIO(b"# Notes\n- a\n")
    upload.name = "notes.md"
    assert load_text_from_file(upload) == "# Notes\n- a"


def test_load_from_path(tmp_path: Path) -> None:
    p = tmp_path / "doc.txt"
    p.write_text("Saved text.", encoding="utf-8")
    assert load_text_from_path(p) == "Saved text."
    with pytest.raises(ExtractionError, match="Failed to read"):
        load_text_from_path(tmp_path / "missing.txt")


def test_human_size() -> None:
    assert human_size(0) == "0.0 B"
    assert human_size(1023) == "1023.0 B"
    assert human_size(1536) == "1.5 KB"
    assert human_size(5 * 1024 * 1024) == "5.0 MB"
    assert human_size(3 * 1024 ** 4) == "3072.0 GB"
