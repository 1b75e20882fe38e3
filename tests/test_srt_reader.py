"""SRT input layer: file / stdin → subtitle texts (pysrt)."""
import io

import pytest

from srt_dupes.srt_reader import (
    SrtReadError, load_subtitle_texts, parse_subtitles, read_source,
)
from samples import SRT_BROKEN, SRT_CLEAN, SRT_HALLUCINATED


def test_parse_keeps_file_order_and_multiline_text():
    assert parse_subtitles(SRT_CLEAN) == [
        "Hello there.",
        "How are you?\nI'm fine.",
        "Good bye.",
    ]


def test_parse_keeps_duplicates():
    texts = parse_subtitles(SRT_HALLUCINATED)
    assert texts.count("Thank you for watching.") == 3


@pytest.mark.parametrize("text", ["", "\n\n", "   \n"])
def test_parse_empty_input(text):
    assert parse_subtitles(text) == []


def test_parse_broken_block_raises():
    with pytest.raises(SrtReadError) as exc:
        parse_subtitles(SRT_BROKEN)
    assert "invalid SRT" in str(exc.value)
    assert exc.value.__cause__ is not None


def test_read_file_strips_bom(srt_file):
    p = srt_file(SRT_CLEAN, encoding="utf-8-sig")
    assert read_source(str(p)) == SRT_CLEAN


def test_read_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(SRT_HALLUCINATED))
    assert load_subtitle_texts("-")[1] == "Thank you for watching."


def test_missing_file(tmp_path):
    with pytest.raises(SrtReadError, match="cannot read"):
        read_source(str(tmp_path / "nope.srt"))


def test_non_utf8_file(tmp_path):
    p = tmp_path / "latin.srt"
    p.write_bytes(b"1\n00:00:01,000 --> 00:00:02,000\n\xe9t\xe9\n")
    with pytest.raises(SrtReadError):
        read_source(str(p))
