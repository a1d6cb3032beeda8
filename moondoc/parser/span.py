"""Located slices of comment text.

A ``SourceBuffer`` owns the text of one comment body together with where that
body sits in its file. A ``Span`` is a (buffer, start, end) view over it: the
text, line and column are derived on demand and nothing is copied until a
caller asks for a string.
"""

import bisect
from dataclasses import dataclass, field
from functools import cached_property

from ..utils.errors import ValidationError
from .diagnostic import Diagnostic


@dataclass(frozen=True)
class SourceBuffer:
    """Text of a single comment body.

    ``line`` and ``column`` are the 1-based file position of the first
    character of ``text``. ``columns`` holds the file column of the first
    character of each body line, since comment prefixes and indentation can
    differ from line to line; lines past its end fall back to ``column``.
    """

    text: str
    path: str = "<comment>"
    line: int = 1
    column: int = 1
    columns: tuple[int, ...] = ()

    def __post_init__(self):
        if self.line < 1 or min((self.column, *self.columns)) < 1:
            raise ValidationError(
                f"Invalid buffer position: {self.line}:{self.column}",
                recovery_hint="Line and column numbers are 1-based",
            )

    @cached_property
    def _line_starts(self) -> list[int]:
        starts = [0]
        for index, char in enumerate(self.text):
            if char == "\n":
                starts.append(index + 1)
        return starts

    def position(self, offset: int) -> tuple[int, int]:
        """Return the absolute (line, column) of a character offset."""
        line_index = bisect.bisect_right(self._line_starts, offset) - 1
        column = offset - self._line_starts[line_index]
        if line_index < len(self.columns):
            return self.line + line_index, self.columns[line_index] + column
        return self.line + line_index, self.column + column

    def span(self) -> "Span":
        """Span covering the whole buffer."""
        return Span(self, 0, len(self.text))


@dataclass(frozen=True)
class Span:
    """Half-open range ``[start, end)`` over a ``SourceBuffer``."""

    buffer: SourceBuffer = field(repr=False)
    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start <= self.end <= len(self.buffer.text):
            raise ValidationError(
                f"Span [{self.start}, {self.end}) is outside its buffer "
                f"of length {len(self.buffer.text)}"
            )

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.as_str()

    def as_str(self) -> str:
        return self.buffer.text[self.start : self.end]

    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def line(self) -> int:
        return self.buffer.position(self.start)[0]

    @property
    def column(self) -> int:
        return self.buffer.position(self.start)[1]

    @property
    def path(self) -> str:
        return self.buffer.path

    def slice(self, start: int, end: int | None = None) -> "Span":
        """Sub-span with offsets relative to this span."""
        if end is None:
            end = len(self)
        return Span(self.buffer, self.start + start, self.start + end)

    def trim(self) -> "Span":
        """Span with surrounding whitespace removed."""
        text = self.as_str()
        stripped = text.lstrip()
        start = len(text) - len(stripped)
        end = start + len(stripped.rstrip())
        return self.slice(start, end)

    def find(self, needle: str) -> int:
        """Relative offset of ``needle`` in this span, or -1."""
        return self.as_str().find(needle)

    def split_once(self, separator: str) -> tuple["Span", "Span"] | None:
        """Split around the first ``separator``; ``None`` when absent."""
        index = self.find(separator)
        if index == -1:
            return None
        return self.slice(0, index), self.slice(index + len(separator))

    def split_word(self) -> tuple["Span", "Span"]:
        """Split off the first whitespace-delimited word.

        Both halves are trimmed; either may be empty.
        """
        trimmed = self.trim()
        text = trimmed.as_str()
        for index, char in enumerate(text):
            if char.isspace():
                return trimmed.slice(0, index), trimmed.slice(index).trim()
        return trimmed, trimmed.slice(len(trimmed))

    def split_first_line(self) -> tuple["Span", "Span"]:
        """Split into the first line and everything after its newline."""
        index = self.find("\n")
        if index == -1:
            return self, self.slice(len(self))
        return self.slice(0, index), self.slice(index + 1)

    def lines(self) -> list["Span"]:
        result = []
        rest = self
        while True:
            line, after = rest.split_first_line()
            result.append(line)
            if after.start == line.end:
                return result
            rest = after

    def diagnostic(self, message: str) -> Diagnostic:
        return Diagnostic(self, message)
