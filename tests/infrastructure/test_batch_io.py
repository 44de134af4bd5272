"""Tests for batch stream reading and block-list loading."""

from __future__ import annotations

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from domblock.domain.errors import (
    BlocklistNotFoundError,
    InvalidEncodingError,
    MalformedCountError,
    ShortInputError,
)
from domblock.infrastructure.batch_io import (
    LineReader,
    decode_lines,
    load_blocklist,
    parse_count,
    read_batch,
    strip_line_ending,
)


class TestParseCount:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0", 0), ("3", 3), (" 12 ", 12), ("7\r", 7), ("007", 7)],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert parse_count(text) == expected

    @pytest.mark.parametrize("text", ["", " ", "-1", "+2", "1.5", "3 domains", "abc", "0x10"])
    def test_invalid_returns_none(self, text: str) -> None:
        assert parse_count(text) is None


class TestStripLineEnding:
    def test_lf(self) -> None:
        assert strip_line_ending("gdz.ru\n") == "gdz.ru"

    def test_crlf(self) -> None:
        assert strip_line_ending("gdz.ru\r\n") == "gdz.ru"

    def test_other_whitespace_kept(self) -> None:
        assert strip_line_ending(" gdz.ru \n") == " gdz.ru "


class TestReadBatch:
    def test_reads_both_sections(self) -> None:
        batch = read_batch(StringIO("2\ngdz.ru\ncom\n1\nmath.gdz.ru\n"))
        assert batch.blocked == ["gdz.ru", "com"]
        assert batch.queries == ["math.gdz.ru"]

    def test_crlf_input_matches_lf_input(self) -> None:
        lf = read_batch(StringIO("1\ngdz.ru\n1\ngdz.ru\n"))
        crlf = read_batch(StringIO("1\r\ngdz.ru\r\n1\r\ngdz.ru\r\n"))
        assert lf == crlf

    def test_zero_counts(self) -> None:
        batch = read_batch(StringIO("0\n0\n"))
        assert batch.blocked == []
        assert batch.queries == []

    def test_no_trailing_newline(self) -> None:
        batch = read_batch(StringIO("0\n1\na.b"))
        assert batch.queries == ["a.b"]

    def test_extra_lines_ignored(self) -> None:
        batch = read_batch(StringIO("0\n1\na\nb\nc\n"))
        assert batch.queries == ["a"]

    def test_empty_domain_line_is_kept(self) -> None:
        batch = read_batch(StringIO("1\n\n0\n"))
        assert batch.blocked == [""]

    def test_malformed_first_count(self) -> None:
        with pytest.raises(MalformedCountError) as exc_info:
            read_batch(StringIO("two\na\nb\n0\n"))
        assert exc_info.value.code == "MALFORMED_COUNT"
        assert exc_info.value.detail["line"] == 1
        assert exc_info.value.detail["text"] == "two"

    def test_malformed_second_count_reports_line(self) -> None:
        with pytest.raises(MalformedCountError) as exc_info:
            read_batch(StringIO("1\ngdz.ru\n-3\n"))
        assert exc_info.value.detail["line"] == 3
        assert exc_info.value.detail["section"] == "query"

    def test_short_blocked_section(self) -> None:
        with pytest.raises(ShortInputError) as exc_info:
            read_batch(StringIO("3\na\nb\n"))
        assert exc_info.value.code == "SHORT_INPUT"
        assert exc_info.value.detail["expected"] == 3
        assert exc_info.value.detail["actual"] == 2

    def test_missing_query_count(self) -> None:
        with pytest.raises(ShortInputError, match="query count"):
            read_batch(StringIO("1\na\n"))

    def test_empty_stream(self) -> None:
        with pytest.raises(ShortInputError):
            read_batch(StringIO(""))


class TestDecodeLines:
    def test_splits_on_newline_only(self) -> None:
        lines = list(decode_lines(BytesIO(b"gd\rz.ru\ncom\r\r\n")))
        assert lines == ["gd\rz.ru\n", "com\r\r\n"]

    def test_decodes_utf8(self) -> None:
        assert list(decode_lines(BytesIO("пример.рф\n".encode()))) == ["пример.рф\n"]

    def test_invalid_utf8_reports_line(self) -> None:
        lines = decode_lines(BytesIO(b"1\ngdz.ru\n1\n\xff.gdz.ru\n"))
        with pytest.raises(InvalidEncodingError) as exc_info:
            list(lines)
        assert exc_info.value.code == "INVALID_ENCODING"
        assert exc_info.value.detail == {"line": 4}
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_batch_with_doubled_carriage_return(self) -> None:
        batch = read_batch(decode_lines(BytesIO(b"1\ngdz.ru\r\r\n1\na.gdz.ru\n")))
        assert batch.blocked == ["gdz.ru"]
        assert batch.queries == ["a.gdz.ru"]

    def test_batch_keeps_inner_carriage_return(self) -> None:
        batch = read_batch(decode_lines(BytesIO(b"1\ngd\rz.ru\n1\na.gd\rz.ru\n")))
        assert batch.blocked == ["gd\rz.ru"]
        assert batch.queries == ["a.gd\rz.ru"]


class TestLineReader:
    def test_counts_lines(self) -> None:
        reader = LineReader(StringIO("a\nb\n"))
        assert reader.next_line() == "a"
        assert reader.next_line() == "b"
        assert reader.line_number == 2
        assert reader.next_line() is None
        assert reader.line_number == 2


class TestLoadBlocklist:
    def test_skips_blank_and_comment_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "blocked.txt"
        path.write_text("# ads\ngdz.ru\n\n  maps.me  \r\n#com\n", encoding="utf-8")
        assert load_blocklist(path) == ["gdz.ru", "maps.me"]

    def test_keeps_case(self, tmp_path: Path) -> None:
        path = tmp_path / "blocked.txt"
        path.write_text("GDZ.ru\n", encoding="utf-8")
        assert load_blocklist(path) == ["GDZ.ru"]

    def test_custom_comment_prefix(self, tmp_path: Path) -> None:
        path = tmp_path / "blocked.txt"
        path.write_text("; note\n#literal\n", encoding="utf-8")
        assert load_blocklist(path, comment_prefix=";") == ["#literal"]

    def test_lone_carriage_return_does_not_split(self, tmp_path: Path) -> None:
        path = tmp_path / "blocked.txt"
        path.write_bytes(b"gdz.ru\rcom\n")
        assert load_blocklist(path) == ["gdz.ru\rcom"]

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "blocked.txt"
        path.write_bytes(b"gdz.ru\n\xfe\xff\n")
        with pytest.raises(InvalidEncodingError) as exc_info:
            load_blocklist(path)
        assert exc_info.value.detail["line"] == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(BlocklistNotFoundError) as exc_info:
            load_blocklist(tmp_path / "nope.txt")
        assert exc_info.value.code == "BLOCKLIST_NOT_FOUND"
