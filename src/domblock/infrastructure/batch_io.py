"""Line-oriented batch input.

Stream layout::

    N
    <N blocked domains>
    M
    <M query domains>

Counts are validated explicitly; a malformed count or a stream that ends
early raises instead of reading an unintended number of lines.
Block-list files for ``lookup`` are plain one-domain-per-line text.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from domblock.domain.errors import (
    BlocklistNotFoundError,
    InvalidEncodingError,
    MalformedCountError,
    ShortInputError,
)

_COUNT_RE = re.compile(r"[0-9]+")


def strip_line_ending(line: str) -> str:
    """Drop the trailing ``\\n`` and any ``\\r`` left by CRLF input."""
    return line.rstrip("\n").rstrip("\r")


def parse_count(text: str) -> int | None:
    """Parse a count line, returning None unless it is a non-negative integer.

    Surrounding whitespace is ignored; signs, decimals and trailing
    garbage are not.

    Examples:
        >>> parse_count(" 3\\r")
        3
        >>> parse_count("3 domains") is None
        True
    """
    stripped = text.strip()
    if not _COUNT_RE.fullmatch(stripped):
        return None
    return int(stripped)


@dataclass(frozen=True)
class BatchInput:
    """The two raw domain lists read from one stream."""

    blocked: list[str]
    queries: list[str]


class LineReader:
    """Numbered line access over decoded text lines."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(stream)
        self.line_number = 0

    def next_line(self) -> str | None:
        raw = next(self._lines, None)
        if raw is None:
            return None
        self.line_number += 1
        return strip_line_ending(raw)

    def read_count(self, what: str) -> int:
        line = self.next_line()
        if line is None:
            msg = f"Input ended before the {what} count"
            raise ShortInputError(msg, expected=1, actual=0, section=what)
        count = parse_count(line)
        if count is None:
            msg = f"Line {self.line_number}: {what} count {line!r} is not a non-negative integer"
            raise MalformedCountError(msg, line=self.line_number, text=line, section=what)
        return count

    def read_domains(self, count: int, what: str) -> list[str]:
        domains: list[str] = []
        while len(domains) < count:
            line = self.next_line()
            if line is None:
                msg = f"Expected {count} {what} domains, input ended after {len(domains)}"
                raise ShortInputError(msg, expected=count, actual=len(domains), section=what)
            domains.append(line)
        return domains


def read_batch(stream: Iterable[str]) -> BatchInput:
    """Read both sections of the batch protocol from *stream*.

    Lines after the last query are not consumed.
    """
    reader = LineReader(stream)
    blocked = reader.read_domains(reader.read_count("blocked"), "blocked")
    queries = reader.read_domains(reader.read_count("query"), "query")
    return BatchInput(blocked=blocked, queries=queries)


def decode_lines(binary: Iterable[bytes]) -> Iterator[str]:
    """Yield the lines of *binary* decoded as UTF-8.

    Lines split on ``\\n`` only, so a lone ``\\r`` stays inside its line.
    """
    for number, raw in enumerate(binary, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Line {number}: input is not valid UTF-8 ({exc.reason})"
            raise InvalidEncodingError(msg, line=number) from exc


def load_blocklist(path: Path, *, comment_prefix: str = "#") -> list[str]:
    """Load a block-list file, one domain per line.

    Blank lines and lines starting with *comment_prefix* are skipped.
    Entries are otherwise kept verbatim (no case-folding).
    """
    if not path.is_file():
        msg = f"Block-list file not found: {path}"
        raise BlocklistNotFoundError(msg, path=str(path))
    entries: list[str] = []
    with path.open("rb") as f:
        for raw in decode_lines(f):
            line = strip_line_ending(raw).strip()
            if not line:
                continue
            if comment_prefix and line.startswith(comment_prefix):
                continue
            entries.append(line)
    return entries
