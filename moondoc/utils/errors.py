"""
Custom exception classes for moondoc.

This module defines the exception hierarchy used throughout the application
for consistent error handling and reporting.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..parser.diagnostic import Diagnostic, Diagnostics


class ParsingError(Exception):
    """Base exception for parsing errors."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize a parsing error.

        Args:
            message: The error message describing what went wrong
            recovery_hint: Optional hint on how to recover from this error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(self.message)


class ValidationError(ParsingError):
    """Exception for validation errors in parsed data."""

    pass


class FileAccessError(ParsingError):
    """Exception for file access related errors."""

    pass


class TagSyntaxError(ParsingError):
    """A single tag's argument text does not match its grammar."""

    def __init__(self, diagnostic: "Diagnostic"):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)


class DiagnosticsError(ParsingError):
    """A doc entry could not be built; carries every diagnostic found."""

    def __init__(self, diagnostics: "Diagnostics"):
        self.diagnostics = diagnostics
        count = len(diagnostics)
        super().__init__(
            f"{count} diagnostic{'s' if count != 1 else ''} reported",
            recovery_hint="Fix the reported tags and re-run the extraction",
        )


class MissingWithinError(ParsingError):
    """A function or type entry has no owning scope name."""

    def __init__(self, entry_name: str):
        self.entry_name = entry_name
        super().__init__(
            f"No owning scope for doc entry '{entry_name}'",
            recovery_hint="Add a @within tag or supply a default scope name",
        )
