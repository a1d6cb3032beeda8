"""
moondoc Parser Module.

This module provides the public API for turning doc comment text into
located, typed tags.
"""

from ..utils.errors import ParsingError, TagSyntaxError, ValidationError
from .diagnostic import Diagnostic, Diagnostics
from .doc_comment import CommentScanner, DocComment, OutputSource
from .span import SourceBuffer, Span
from .tag_parser import TagParser, TagParseResult
from .tags import (
    ClassTag,
    CustomTag,
    DeprecatedTag,
    FieldTag,
    FunctionTag,
    IgnoreTag,
    MarkerTag,
    MethodTag,
    ParamTag,
    PrivateTag,
    ReturnTag,
    SinceTag,
    Tag,
    TypeTag,
    WithinTag,
    parse_tag,
)

__all__ = [
    "ClassTag",
    "CommentScanner",
    "CustomTag",
    "DeprecatedTag",
    "Diagnostic",
    "Diagnostics",
    "DocComment",
    "FieldTag",
    "FunctionTag",
    "IgnoreTag",
    "MarkerTag",
    "MethodTag",
    "OutputSource",
    "ParamTag",
    "ParsingError",
    "PrivateTag",
    "ReturnTag",
    "SinceTag",
    "SourceBuffer",
    "Span",
    "Tag",
    "TagParseResult",
    "TagParser",
    "TagSyntaxError",
    "TypeTag",
    "ValidationError",
    "WithinTag",
    "parse_tag",
]
