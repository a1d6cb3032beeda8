"""Splitting comment bodies into a description and typed tags.

This module provides the TagParser class, which scans a comment body line by
line, hands every ``@name`` line (and its continuation lines) to the matching
tag parser and collects the failures of individual tags without dropping the
tags that parsed cleanly.
"""

import logging
import re
import textwrap
from dataclasses import dataclass, field

from rapidfuzz import fuzz, process

from ..utils.config import ParserConfig
from ..utils.errors import TagSyntaxError
from .diagnostic import Diagnostic, Diagnostics
from .span import SourceBuffer, Span
from .tags import TAG_PARSERS, CustomTag, Tag, parse_tag

logger = logging.getLogger(__name__)

TAG_LINE_PATTERN = re.compile(r"^\s*@([A-Za-z_][A-Za-z0-9_-]*)(?=\s|$)")
FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")


@dataclass
class TagParseResult:
    """Everything found in one comment body."""

    desc: str
    tags: list[Tag] = field(default_factory=list)
    diagnostics: Diagnostics | None = None

    @property
    def is_valid(self) -> bool:
        return self.diagnostics is None


@dataclass
class _RawTag:
    name: Span
    first_line: Span
    last_line: Span


class TagParser:
    """Parses ``@tag`` annotations out of doc comment bodies."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()

    def parse(self, buffer: SourceBuffer) -> TagParseResult:
        """Parse a comment body into its description and tags.

        Lines before the first tag line form the description. A tag's argument
        text runs until the next tag line or the end of the body. Lines inside
        fenced code blocks never start a tag.

        Args:
            buffer: The comment body, with comment syntax already stripped

        Returns:
            TagParseResult with every valid tag and, if any tag was malformed,
            a Diagnostics batch in source order
        """
        whole = buffer.span()
        raw_tags: list[_RawTag] = []
        desc_end: int | None = None
        in_fence = False

        for line in whole.lines():
            if FENCE_PATTERN.match(line.as_str()):
                in_fence = not in_fence
            match = None if in_fence else TAG_LINE_PATTERN.match(line.as_str())
            if match:
                if desc_end is None:
                    desc_end = line.start
                name = line.slice(match.start(1), match.end(1))
                raw_tags.append(_RawTag(name=name, first_line=line, last_line=line))
            elif raw_tags:
                raw_tags[-1].last_line = line

        if desc_end is None:
            desc_end = whole.end
        desc = textwrap.dedent(whole.slice(0, desc_end).as_str()).strip()

        tags: list[Tag] = []
        diagnostics: list[Diagnostic] = []
        for raw in raw_tags:
            remainder = Span(buffer, raw.name.end, raw.last_line.end)
            try:
                tag = parse_tag(raw.name, remainder)
            except TagSyntaxError as e:
                logger.debug(f"Malformed @{raw.name.as_str()} tag: {e.message}")
                diagnostics.append(e.diagnostic)
                continue
            if isinstance(tag, CustomTag):
                self._check_similar_tag(tag)
            tags.append(tag)

        logger.debug(
            f"Parsed {len(tags)} tags with {len(diagnostics)} errors "
            f"from {buffer.path}:{buffer.line}"
        )
        return TagParseResult(
            desc=desc, tags=tags, diagnostics=Diagnostics.collect(diagnostics)
        )

    def parse_text(self, text: str, path: str = "<comment>", line: int = 1) -> TagParseResult:
        """Convenience wrapper that builds the SourceBuffer."""
        return self.parse(SourceBuffer(text, path=path, line=line))

    def _check_similar_tag(self, tag: CustomTag) -> None:
        """Warn when a custom tag looks like a misspelt known tag."""
        if not self.config.warn_on_similar_tags:
            return
        best = process.extractOne(
            tag.tag_name,
            list(TAG_PARSERS),
            scorer=fuzz.ratio,
            score_cutoff=self.config.fuzzy_tag_threshold,
        )
        if best:
            logger.warning(
                f"{tag.source.path}:{tag.source.line}: unknown tag "
                f"@{tag.tag_name}, did you mean @{best[0]}?"
            )
