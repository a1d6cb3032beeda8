"""
Doc entry assembly.

This module turns one DocComment into a FunctionDocEntry, TypeDocEntry or
ClassDocEntry: it parses the tags, picks the entry kind and name, resolves the
owning scope and hands the remaining tags to the builder for that kind.
"""

import logging
from enum import Enum

from ..parser.diagnostic import Diagnostic, Diagnostics
from ..parser.doc_comment import DocComment
from ..parser.syntax import FunctionDeclaration, SyntaxNode, TypeDeclaration
from ..parser.tag_parser import TagParser
from ..parser.tags import ClassTag, FunctionTag, MethodTag, Tag, TypeTag, WithinTag
from ..utils.errors import DiagnosticsError
from .base import DocEntryParseArguments, fold_tags
from .class_entry import ClassDocEntry
from .function import FunctionDocEntry, FunctionType
from .type_definition import Field, TypeDocEntry

logger = logging.getLogger(__name__)


class DocEntryKind(Enum):
    """Kinds of doc entries."""

    FUNCTION = "function"
    METHOD = "method"
    TYPE = "type"
    CLASS = "class"


DocEntry = FunctionDocEntry | TypeDocEntry | ClassDocEntry

KIND_TAGS: dict[type[Tag], DocEntryKind] = {
    FunctionTag: DocEntryKind.FUNCTION,
    MethodTag: DocEntryKind.METHOD,
    TypeTag: DocEntryKind.TYPE,
    ClassTag: DocEntryKind.CLASS,
}

# Consumed while choosing the kind and scope; builders never see these.
# @type stays in the tag list because the type builder folds it.
CONSUMED_TAGS = (FunctionTag, MethodTag, ClassTag, WithinTag)


def _kind_from_node(node: SyntaxNode | None) -> DocEntryKind | None:
    if isinstance(node, FunctionDeclaration):
        return DocEntryKind.METHOD if node.is_method else DocEntryKind.FUNCTION
    if isinstance(node, TypeDeclaration):
        return DocEntryKind.TYPE
    return None


def build_doc_entry(kind: DocEntryKind, args: DocEntryParseArguments) -> DocEntry:
    """Run the builder for ``kind``.

    Raises:
        MissingWithinError: If a function or type entry has no owning scope
        DiagnosticsError: If any tag does not apply to the entry kind
    """
    if kind == DocEntryKind.FUNCTION:
        return FunctionDocEntry.parse(args, FunctionType.STATIC)
    if kind == DocEntryKind.METHOD:
        return FunctionDocEntry.parse(args, FunctionType.METHOD)
    if kind == DocEntryKind.TYPE:
        return TypeDocEntry.parse(args)
    return ClassDocEntry.parse(args)


def parse_doc_entry(
    doc_comment: DocComment,
    within: str | None = None,
    kind: DocEntryKind | None = None,
    name: str | None = None,
    parser: TagParser | None = None,
) -> DocEntry:
    """Parse a doc comment into a doc entry.

    The kind and name come from a ``@class``, ``@function``, ``@method`` or
    ``@type`` tag when the comment has one, otherwise from ``kind`` and
    ``name``, falling back to the declaration the comment documents. The owning scope comes from the last ``@within`` tag, otherwise
    from ``within``.

    Args:
        doc_comment: The comment to parse
        within: Default owning scope name
        kind: Entry kind to use when the comment has no kind tag
        name: Entry name to use when the comment has no kind tag
        parser: Tag parser to use, a default one if omitted

    Returns:
        The fully built doc entry

    Raises:
        DiagnosticsError: With every tag and entry diagnostic, in source order
        MissingWithinError: If a function or type entry has no owning scope
    """
    result = (parser or TagParser()).parse(doc_comment.buffer)
    diagnostics: list[Diagnostic] = list(result.diagnostics or [])

    kind_tags = [tag for tag in result.tags if type(tag) in KIND_TAGS]
    if kind_tags:
        kind = KIND_TAGS[type(kind_tags[0])]
        name = kind_tags[0].name.as_str()
        for extra in kind_tags[1:]:
            # Repeated @type tags are folded by the type builder
            if kind == DocEntryKind.TYPE and isinstance(extra, TypeTag):
                continue
            diagnostics.append(
                extra.diagnostic(
                    "Only one of @class, @function, @method or @type "
                    "may be used in a doc comment"
                )
            )
    else:
        # Fall back to the documented declaration
        node = doc_comment.node
        kind = kind or _kind_from_node(node)
        if not name and node is not None:
            name = node.name
        if kind is None or not name:
            diagnostics.append(
                doc_comment.buffer.span().diagnostic(
                    "Cannot determine the kind of this doc entry"
                )
            )

    for tag in result.tags:
        if isinstance(tag, WithinTag):
            within = tag.name.as_str()

    if diagnostics:
        raise DiagnosticsError(Diagnostics(diagnostics).sorted())

    args = DocEntryParseArguments(
        name=name,
        desc=result.desc,
        within=within,
        tags=[tag for tag in result.tags if not isinstance(tag, CONSUMED_TAGS)],
        source=doc_comment,
    )
    logger.debug(f"Building {kind.value} doc entry {name}")
    return build_doc_entry(kind, args)


__all__ = [
    "ClassDocEntry",
    "DocEntry",
    "DocEntryKind",
    "DocEntryParseArguments",
    "Field",
    "FunctionDocEntry",
    "FunctionType",
    "TypeDocEntry",
    "build_doc_entry",
    "fold_tags",
    "parse_doc_entry",
]
