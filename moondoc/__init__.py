"""
moondoc: doc entry extraction from tagged Lua doc comments.
"""

from .doc_entry import (
    ClassDocEntry,
    DocEntry,
    DocEntryKind,
    Field,
    FunctionDocEntry,
    FunctionType,
    TypeDocEntry,
    parse_doc_entry,
)
from .extractor import DocExtractor, ExtractionResult
from .parser import DocComment, Diagnostic, Diagnostics, TagParser
from .utils.errors import DiagnosticsError, MissingWithinError, ParsingError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ClassDocEntry",
    "Diagnostic",
    "Diagnostics",
    "DiagnosticsError",
    "DocComment",
    "DocEntry",
    "DocEntryKind",
    "DocExtractor",
    "ExtractionResult",
    "Field",
    "FunctionDocEntry",
    "FunctionType",
    "MissingWithinError",
    "ParsingError",
    "TagParser",
    "TypeDocEntry",
    "parse_doc_entry",
]
