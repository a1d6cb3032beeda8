"""Function and method doc entries."""

from dataclasses import dataclass, field
from enum import Enum

from ..parser.doc_comment import DocComment
from ..parser.tags import DeprecatedTag, MarkerTag, ParamTag, ReturnTag, SinceTag
from .base import DocEntryParseArguments, fold_tags, require_within


class FunctionType(Enum):
    """Separates functions (called with a dot) from methods (called with a colon)."""

    METHOD = "method"
    STATIC = "static"


@dataclass
class FunctionDocEntry:
    """A doc entry for a function or method."""

    name: str
    desc: str
    within: str
    function_type: FunctionType
    source: DocComment
    params: list[ParamTag] = field(default_factory=list)
    returns: list[ReturnTag] = field(default_factory=list)
    markers: list[MarkerTag] = field(default_factory=list)
    since: str | None = None
    deprecated: DeprecatedTag | None = None

    @classmethod
    def parse(
        cls, args: DocEntryParseArguments, function_type: FunctionType
    ) -> "FunctionDocEntry":
        """Build the entry from parsed tags.

        Raises:
            MissingWithinError: If the entry has no owning scope
            DiagnosticsError: If any tag does not apply to functions
        """
        entry = cls(
            name=args.name,
            desc=args.desc,
            within=require_within(args),
            function_type=function_type,
            source=args.source,
        )
        return fold_tags(entry, args.tags, FUNCTION_TAG_ACTIONS, "function")

    @property
    def is_method(self) -> bool:
        return self.function_type == FunctionType.METHOD


def _set_deprecated(entry: FunctionDocEntry, tag: DeprecatedTag) -> None:
    entry.deprecated = tag


def _set_since(entry: FunctionDocEntry, tag: SinceTag) -> None:
    entry.since = tag.version.as_str()


FUNCTION_TAG_ACTIONS = {
    ParamTag: lambda entry, tag: entry.params.append(tag),
    ReturnTag: lambda entry, tag: entry.returns.append(tag),
    MarkerTag: lambda entry, tag: entry.markers.append(tag),
    DeprecatedTag: _set_deprecated,
    SinceTag: _set_since,
}
