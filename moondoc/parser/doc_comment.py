"""Doc comments and discovering them in Lua source.

A ``DocComment`` ties a comment body to the declaration it documents and to
the file position shown by renderers. ``CommentScanner`` finds the two doc
comment forms, ``--[=[ ... ]=]`` blocks and runs of ``---`` lines, and strips
their comment syntax so spans still report absolute file positions.
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from .span import SourceBuffer
from .syntax import SyntaxNode

logger = logging.getLogger(__name__)

BLOCK_START_PATTERN = re.compile(r"--\[(=+)\[")
LINE_COMMENT_PATTERN = re.compile(r"^(\s*)---(?!-)( ?)")


@dataclass(frozen=True)
class OutputSource:
    """File and line a doc entry is displayed as coming from."""

    path: str
    line: int


@dataclass(frozen=True)
class DocComment:
    """One doc comment body and what it documents."""

    buffer: SourceBuffer
    output_source: OutputSource
    node: SyntaxNode | None = None

    @classmethod
    def from_text(
        cls,
        text: str,
        path: str = "<comment>",
        line: int = 1,
        node: SyntaxNode | None = None,
    ) -> "DocComment":
        """Build a DocComment for an already-stripped comment body."""
        return cls(
            buffer=SourceBuffer(text, path=path, line=line),
            output_source=OutputSource(path=path, line=line),
            node=node,
        )


def _indent_width(lines: list[str]) -> int:
    widths = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    return min(widths) if widths else 0


class CommentScanner:
    """Finds doc comments in Lua source text."""

    def scan(self, text: str, path: str = "<source>") -> Iterator[DocComment]:
        """Yield every doc comment in ``text`` in source order.

        Args:
            text: Full Lua source
            path: File identifier recorded on spans and output sources

        Yields:
            DocComment objects without a syntax node attached
        """
        lines = text.split("\n")
        index = 0
        while index < len(lines):
            line = lines[index]
            block = BLOCK_START_PATTERN.match(line.lstrip())
            if block:
                comment, index = self._scan_block(lines, index, block, path)
                if comment is not None:
                    yield comment
                continue
            if LINE_COMMENT_PATTERN.match(line):
                comment, index = self._scan_line_run(lines, index, path)
                yield comment
                continue
            index += 1

    def _scan_block(
        self, lines: list[str], start: int, block: re.Match, path: str
    ) -> tuple[DocComment | None, int]:
        closing = f"]{block.group(1)}]"
        opener = lines[start]
        body_start = len(opener) - len(opener.lstrip()) + block.end()
        first = opener[body_start:]
        first_column = body_start + len(first) - len(first.lstrip()) + 1

        if closing in first:
            body_lines = [first[: first.index(closing)].strip()]
            return (
                self._make(body_lines, [first_column], start + 1, start + 1, lines, path),
                start + 1,
            )

        end = start + 1
        while end < len(lines) and closing not in lines[end]:
            end += 1
        if end == len(lines):
            logger.warning(f"{path}:{start + 1}: unterminated doc comment block")
            return None, len(lines)

        inner = lines[start + 1 : end]
        tail = lines[end][: lines[end].index(closing)]
        if tail.strip():
            inner.append(tail)
        indent = _indent_width(inner)
        body_lines = [line[indent:] if line.strip() else "" for line in inner]
        columns = [indent + 1] * len(inner)
        body_line = start + 2
        if first.strip():
            body_lines.insert(0, first.strip())
            columns.insert(0, first_column)
            body_line = start + 1
        return self._make(body_lines, columns, body_line, end + 1, lines, path), end + 1

    def _scan_line_run(
        self, lines: list[str], start: int, path: str
    ) -> tuple[DocComment, int]:
        end = start
        body_lines = []
        columns = []
        while end < len(lines):
            match = LINE_COMMENT_PATTERN.match(lines[end])
            if not match:
                break
            body_lines.append(lines[end][match.end() :])
            columns.append(match.end() + 1)
            end += 1
        return self._make(body_lines, columns, start + 1, end, lines, path), end

    def _make(
        self,
        body_lines: list[str],
        columns: list[int],
        body_line: int,
        after: int,
        lines: list[str],
        path: str,
    ) -> DocComment:
        """Build the DocComment; ``after`` is the index of the first line past it."""
        output_line = after
        for offset, line in enumerate(lines[after:]):
            if line.strip():
                output_line = after + offset + 1
                break
        body = "\n".join(body_lines).rstrip()
        logger.debug(f"Found doc comment at {path}:{body_line}")
        buffer = SourceBuffer(
            body,
            path=path,
            line=body_line,
            column=columns[0] if columns else 1,
            columns=tuple(columns),
        )
        return DocComment(
            buffer=buffer,
            output_source=OutputSource(path=path, line=output_line),
        )
