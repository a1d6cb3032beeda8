"""Class doc entries.

A class is only a container: functions, properties and types are attached to
it by renderers through their ``within`` name, not embedded here.
"""

from dataclasses import dataclass, field

from ..parser.doc_comment import DocComment, OutputSource
from ..parser.tags import CustomTag, IgnoreTag, PrivateTag
from .base import DocEntryParseArguments, fold_tags, set_ignore, set_private


@dataclass
class ClassDocEntry:
    name: str
    desc: str
    output_source: OutputSource
    source: DocComment
    tags: list[CustomTag] = field(default_factory=list)
    private: bool = False
    ignore: bool = False

    @classmethod
    def parse(cls, args: DocEntryParseArguments) -> "ClassDocEntry":
        entry = cls(
            name=args.name,
            desc=args.desc,
            output_source=args.source.output_source,
            source=args.source,
        )
        return fold_tags(entry, args.tags, CLASS_TAG_ACTIONS, "class")


CLASS_TAG_ACTIONS = {
    CustomTag: lambda entry, tag: entry.tags.append(tag),
    PrivateTag: set_private,
    IgnoreTag: set_ignore,
}
