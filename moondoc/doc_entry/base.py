"""Shared pieces of the doc entry builders.

Every builder folds the tag sequence of one comment into an entry using a
table from tag class to fold action. Tags without an action are collected and,
if there are any, the whole build fails with one diagnostic per such tag.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from ..parser.diagnostic import Diagnostics
from ..parser.doc_comment import DocComment
from ..parser.tags import Tag
from ..utils.errors import DiagnosticsError, MissingWithinError

EntryT = TypeVar("EntryT")

FoldAction = Callable[[Any, Any], None]


@dataclass
class DocEntryParseArguments:
    """Inputs for building one doc entry."""

    name: str
    desc: str
    within: str | None
    tags: list[Tag]
    source: DocComment


def fold_tags(
    entry: EntryT,
    tags: Iterable[Tag],
    actions: Mapping[type[Tag], FoldAction],
    entry_kind: str,
) -> EntryT:
    """Apply each tag's fold action to ``entry``.

    Raises:
        DiagnosticsError: With one diagnostic per tag that has no action
    """
    unused_tags = []
    for tag in tags:
        action = actions.get(type(tag))
        if action is None:
            unused_tags.append(tag)
        else:
            action(entry, tag)

    if unused_tags:
        raise DiagnosticsError(
            Diagnostics(
                tag.diagnostic(f"This tag is unused by {entry_kind} doc entries.")
                for tag in unused_tags
            )
        )
    return entry


def require_within(args: DocEntryParseArguments) -> str:
    """Owning scope of the entry being built.

    Raises:
        MissingWithinError: If neither a @within tag nor a default supplied one
    """
    if not args.within:
        raise MissingWithinError(args.name)
    return args.within


def set_private(entry: Any, tag: Tag) -> None:
    entry.private = True


def set_ignore(entry: Any, tag: Tag) -> None:
    entry.ignore = True
