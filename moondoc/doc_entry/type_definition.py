"""Type doc entries.

Fields come from two places: the structural fields of a documented table type
declaration, read first, and explicit ``@field`` tags, appended after them.
Both end up as the same ``Field`` shape.
"""

import logging
from dataclasses import dataclass, field

from ..parser.doc_comment import DocComment, OutputSource
from ..parser.syntax import SyntaxNode, TableTypeField, TypeDeclaration
from ..parser.tags import CustomTag, FieldTag, IgnoreTag, PrivateTag, TypeTag
from .base import (
    DocEntryParseArguments,
    fold_tags,
    require_within,
    set_ignore,
    set_private,
)

logger = logging.getLogger(__name__)


@dataclass
class Field:
    name: str
    lua_type: str
    desc: str

    @classmethod
    def from_tag(cls, tag: FieldTag) -> "Field":
        return cls(
            name=tag.name.as_str(),
            lua_type=tag.lua_type.as_str(),
            desc=tag.description,
        )

    @classmethod
    def from_table_field(cls, type_field: TableTypeField) -> "Field":
        return cls(
            name=type_field.name,
            lua_type=type_field.value,
            desc=type_field.comment,
        )


def structural_fields(node: SyntaxNode | None) -> list[Field]:
    """Fields declared by a table type declaration; empty for anything else."""
    if not isinstance(node, TypeDeclaration) or not node.is_table:
        return []
    fields = [Field.from_table_field(f) for f in node.type_info.fields]
    logger.debug(f"Read {len(fields)} structural fields from type {node.name}")
    return fields


@dataclass
class TypeDocEntry:
    """A doc entry for a type."""

    name: str
    desc: str
    within: str
    output_source: OutputSource
    source: DocComment
    lua_type: str | None = None
    fields: list[Field] = field(default_factory=list)
    tags: list[CustomTag] = field(default_factory=list)
    private: bool = False
    ignore: bool = False

    @classmethod
    def parse(cls, args: DocEntryParseArguments) -> "TypeDocEntry":
        """Build the entry from parsed tags and the documented declaration.

        Raises:
            MissingWithinError: If the entry has no owning scope
            DiagnosticsError: If any tag does not apply to types
        """
        entry = cls(
            name=args.name,
            desc=args.desc,
            within=require_within(args),
            output_source=args.source.output_source,
            source=args.source,
            fields=structural_fields(args.source.node),
        )
        return fold_tags(entry, args.tags, TYPE_TAG_ACTIONS, "type")


def _set_lua_type(entry: TypeDocEntry, tag: TypeTag) -> None:
    if tag.lua_type is not None:
        entry.lua_type = tag.lua_type.as_str()


TYPE_TAG_ACTIONS = {
    TypeTag: _set_lua_type,
    FieldTag: lambda entry, tag: entry.fields.append(Field.from_tag(tag)),
    CustomTag: lambda entry, tag: entry.tags.append(tag),
    PrivateTag: set_private,
    IgnoreTag: set_ignore,
}
