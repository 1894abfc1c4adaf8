import pytest

from core import lrc_parser
from core.models import LyricsKind


def test_empty_or_none_is_absent():
    assert lrc_parser.parse(None).kind is LyricsKind.ABSENT
    assert lrc_parser.parse("").kind is LyricsKind.ABSENT


@pytest.mark.parametrize("raw", ["Hello\nWorld", "just one line", "[ar: Someone]\nno timing", "10:00 sharp"])
def test_text_without_tags_is_plain(raw):
    doc = lrc_parser.parse(raw)
    assert doc.kind is LyricsKind.PLAIN
    assert doc.text == raw
    assert doc.lines == ()


def test_synced_lines_parsed_and_metadata_skipped(sample_lrc):
    doc = lrc_parser.parse(sample_lrc)
    assert doc.kind is LyricsKind.SYNCED
    assert [l.offset_seconds for l in doc.lines] == [0.0, 10.0, 20.0, 30.5]
    assert [l.text for l in doc.lines] == ["First line", "Second line", "", "Fourth line"]


def test_source_order_is_kept():
    doc = lrc_parser.parse("[00:10.00]Hello\n[00:05.00]World")
    assert [(l.offset_seconds, l.text) for l in doc.lines] == [(10.0, "Hello"), (5.0, "World")]


def test_minutes_and_centiseconds():
    doc = lrc_parser.parse("[02:03.45]  spaced text  ")
    assert len(doc.lines) == 1
    assert doc.lines[0].offset_seconds == pytest.approx(123.45)
    assert doc.lines[0].text == "spaced text"


def test_centiseconds_optional_once_synced():
    doc = lrc_parser.parse("[00:01.00]a\n[00:12]b")
    assert [l.offset_seconds for l in doc.lines] == [1.0, 12.0]


def test_windows_line_endings():
    doc = lrc_parser.parse("[00:01.00]a\r\n[00:02.00]b\r\n")
    assert [l.text for l in doc.lines] == ["a", "b"]


def test_detected_but_unparseable_stays_synced_and_empty():
    # tag present but never at the start of a line
    doc = lrc_parser.parse("intro 00:01.00] words")
    assert doc.kind is LyricsKind.SYNCED
    assert doc.lines == ()


def test_malformed_lines_are_skipped():
    doc = lrc_parser.parse("[00:01.00]ok\n[0:02.00]short minutes\n[aa:bb.cc]bad\n[00:03.00]fine")
    assert [l.text for l in doc.lines] == ["ok", "fine"]


def test_is_synced():
    assert lrc_parser.is_synced("[00:01.00]Line")
    assert not lrc_parser.is_synced("[00:01]Line")
    assert not lrc_parser.is_synced(None)


def test_strip_timestamps_removes_leading_tags():
    raw = "[ar: Someone]\n[00:01.00]First\r\n[00:02.00][00:10.00] Twice\n\n[00:03.00]"
    assert lrc_parser.strip_timestamps(raw) == "First\nTwice"


def test_strip_timestamps_keeps_inner_brackets_and_blank_lines():
    raw = "[00:01.00]a [chorus] b\n\n[00:05.00]c"
    assert lrc_parser.strip_timestamps(raw) == "a [chorus] b\n\nc"


def test_strip_timestamps_empty():
    assert lrc_parser.strip_timestamps(None) == ""
    assert lrc_parser.strip_timestamps("") == ""


def test_synced_document_keeps_raw_text():
    raw = "intro 00:01.00] words"
    doc = lrc_parser.parse(raw)
    assert doc.text == raw
    assert lrc_parser.strip_timestamps(doc.text) == raw


def test_only_newline_splits_lines():
    doc = lrc_parser.parse("[00:01.00]a\x0cb\n[00:02.00]c d")
    assert [l.text for l in doc.lines] == ["a\x0cb", "c d"]
