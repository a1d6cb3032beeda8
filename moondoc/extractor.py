"""Extraction of doc entries from Lua files.

This module provides the DocExtractor class, which finds the doc comments in
a file, builds a doc entry from each one and keeps going past failures so
every diagnostic of every comment is reported in one run.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .doc_entry import DocEntry, DocEntryKind, parse_doc_entry
from .parser.diagnostic import Diagnostic
from .parser.doc_comment import CommentScanner, DocComment
from .parser.tag_parser import TagParser
from .utils.config import MoondocConfig
from .utils.errors import (
    DiagnosticsError,
    FileAccessError,
    MissingWithinError,
    ParsingError,
)

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Entries and diagnostics gathered from one or more sources."""

    entries: list[DocEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    comments_seen: int = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.diagnostics)

    def merge(self, other: "ExtractionResult") -> None:
        self.entries.extend(other.entries)
        self.diagnostics.extend(other.diagnostics)
        self.comments_seen += other.comments_seen


class DocExtractor:
    """Builds doc entries from doc comments, files and directories."""

    def __init__(self, config: MoondocConfig | None = None) -> None:
        self.config = config or MoondocConfig()
        self.scanner = CommentScanner()
        self.tag_parser = TagParser(self.config.parser)

    def extract_comment(
        self,
        doc_comment: DocComment,
        kind: DocEntryKind | None = None,
        name: str | None = None,
    ) -> DocEntry:
        """Build a single doc entry.

        Raises:
            DiagnosticsError: If the comment has malformed or unused tags
            MissingWithinError: If a function or type entry has no scope
        """
        return parse_doc_entry(
            doc_comment,
            within=self.config.extractor.default_within,
            kind=kind,
            name=name,
            parser=self.tag_parser,
        )

    def extract_comments(self, comments: Iterable[DocComment]) -> ExtractionResult:
        """Build entries from independent comments, collecting every failure."""
        result = ExtractionResult()
        for comment in comments:
            result.comments_seen += 1
            try:
                entry = self.extract_comment(comment)
            except DiagnosticsError as e:
                result.diagnostics.extend(e.diagnostics)
                continue
            except MissingWithinError as e:
                result.diagnostics.append(
                    comment.buffer.span().diagnostic(f"{e.message}. {e.recovery_hint}")
                )
                continue
            if self._keep(entry):
                result.entries.append(entry)
        return result

    def extract_source(self, text: str, path: str = "<source>") -> ExtractionResult:
        """Build entries from every doc comment in Lua source text."""
        result = self.extract_comments(self.scanner.scan(text, path))
        logger.debug(
            f"{path}: {len(result.entries)} entries from {result.comments_seen} "
            f"comments, {len(result.diagnostics)} diagnostics"
        )
        return result

    def extract_file(self, file_path: str | Path) -> ExtractionResult:
        """Read a Lua file and extract its doc entries.

        Raises:
            FileAccessError: If the file cannot be read
            ParsingError: If the file cannot be decoded
        """
        path = Path(file_path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            error_msg = f"File not found: {path}"
            logger.error(error_msg)
            raise FileAccessError(
                error_msg, recovery_hint="Check the file path and ensure the file exists"
            ) from None
        except PermissionError:
            error_msg = f"Permission denied: {path}"
            logger.error(error_msg)
            raise FileAccessError(
                error_msg, recovery_hint="Check file permissions and ensure read access"
            ) from None
        except UnicodeDecodeError as e:
            try:
                text = path.read_text(encoding="latin-1")
            except OSError:
                raise ParsingError(
                    f"Encoding error in {path}: {e}",
                    recovery_hint="Ensure the file is UTF-8 encoded",
                ) from e
            logger.warning(f"File {path} decoded using latin-1 instead of utf-8")
        return self.extract_source(text, str(path))

    def find_files(self, root: str | Path) -> list[Path]:
        """Source files under ``root`` matching the configured patterns."""
        root = Path(root)
        if root.is_file():
            return [root]
        files: set[Path] = set()
        for pattern in self.config.extractor.file_patterns:
            files.update(root.rglob(pattern))
        return sorted(files)

    def extract_path(self, root: str | Path) -> ExtractionResult:
        """Extract from a file or every matching file below a directory."""
        result = ExtractionResult()
        for file_path in self.find_files(root):
            result.merge(self.extract_file(file_path))
        return result

    def _keep(self, entry: DocEntry) -> bool:
        settings = self.config.extractor
        if getattr(entry, "ignore", False) and not settings.include_ignored:
            return False
        if getattr(entry, "private", False) and not settings.include_private:
            return False
        return True
