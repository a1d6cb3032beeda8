"""Typed doc comment tags.

Every recognized ``@name`` has its own tag class with a ``parse`` classmethod
that validates the argument text and either returns a fully-populated tag or
raises ``TagSyntaxError`` carrying one diagnostic. Names that are not
recognized become ``CustomTag`` values; they are never an error.

Tags hold spans, not strings. Normalized text (descriptions with their
continuation lines joined) is produced on demand.
"""

import re
import textwrap
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar

from ..utils.errors import TagSyntaxError
from .span import Span

IDENTIFIER_PATTERN = re.compile(r"^(?:[A-Za-z_][A-Za-z0-9_]*\??|\.\.\.)$")
DESCRIPTION_SEPARATOR = "--"

# Tags that flag a function without taking arguments
MARKER_NAMES = ("yields", "unreleased", "server", "client", "plugin")


def normalize_description(span: Span | None) -> str:
    """Join a description's first line with its dedented continuation lines."""
    if span is None:
        return ""
    first, rest = span.split_first_line()
    text = first.as_str().strip()
    continuation = textwrap.dedent(rest.as_str()).strip()
    if continuation:
        text = f"{text}\n{continuation}" if text else continuation
    return text


def _split_type_and_description(remainder: Span) -> tuple[Span, Span | None]:
    """Split ``<type-expression> [-- description]``.

    The type expression ends at the first ``--`` or at the end of the first
    line. Everything after that is description, continuation lines included.
    """
    first_line, rest = remainder.split_first_line()
    split = first_line.split_once(DESCRIPTION_SEPARATOR)
    if split is not None:
        lua_type, _ = split
        desc = remainder.slice(lua_type.end - remainder.start + len(DESCRIPTION_SEPARATOR))
    else:
        lua_type, desc = first_line, rest
    desc = desc.trim()
    return lua_type.trim(), None if desc.is_empty() else desc


def _require_identifier(source: Span, name: Span, what: str) -> None:
    if name.is_empty():
        raise TagSyntaxError(source.diagnostic(f"Expected a {what} name"))
    if not IDENTIFIER_PATTERN.match(name.as_str()):
        raise TagSyntaxError(
            name.diagnostic(f"'{name.as_str()}' is not a valid {what} name")
        )


def _require_no_arguments(source: Span, remainder: Span) -> None:
    if not remainder.trim().is_empty():
        raise TagSyntaxError(
            remainder.trim().diagnostic("This tag does not take any arguments")
        )


@dataclass(frozen=True)
class Tag:
    """Base for all tags. ``source`` spans the tag from ``@`` to its last argument."""

    source: Span

    keyword: ClassVar[str] = ""

    @property
    def tag_name(self) -> str:
        text = self.source.as_str().lstrip("@")
        return text.split(None, 1)[0] if text else self.keyword

    def diagnostic(self, message: str):
        return self.source.diagnostic(message)


@dataclass(frozen=True)
class ParamTag(Tag):
    name: Span
    lua_type: Span
    desc: Span | None = None

    keyword: ClassVar[str] = "param"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "ParamTag":
        name, rest = remainder.split_word()
        _require_identifier(source, name, "parameter")
        lua_type, desc = _split_type_and_description(rest)
        if lua_type.is_empty():
            raise TagSyntaxError(
                source.diagnostic(f"Expected a type for parameter '{name.as_str()}'")
            )
        return cls(source=source, name=name, lua_type=lua_type, desc=desc)

    @property
    def description(self) -> str:
        return normalize_description(self.desc)


@dataclass(frozen=True)
class ReturnTag(Tag):
    lua_type: Span
    desc: Span | None = None

    keyword: ClassVar[str] = "return"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "ReturnTag":
        lua_type, desc = _split_type_and_description(remainder.trim())
        if lua_type.is_empty():
            raise TagSyntaxError(source.diagnostic("Expected a return type"))
        return cls(source=source, lua_type=lua_type, desc=desc)

    @property
    def description(self) -> str:
        return normalize_description(self.desc)


@dataclass(frozen=True)
class FieldTag(Tag):
    name: Span
    lua_type: Span
    desc: Span | None = None

    keyword: ClassVar[str] = "field"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "FieldTag":
        name, rest = remainder.split_word()
        _require_identifier(source, name, "field")
        lua_type, desc = _split_type_and_description(rest)
        if lua_type.is_empty():
            raise TagSyntaxError(
                source.diagnostic(f"Expected a type for field '{name.as_str()}'")
            )
        return cls(source=source, name=name, lua_type=lua_type, desc=desc)

    @property
    def description(self) -> str:
        return normalize_description(self.desc)


@dataclass(frozen=True)
class TypeTag(Tag):
    """``@type Name [type-expression]``; declares a type entry."""

    name: Span
    lua_type: Span | None = None

    keyword: ClassVar[str] = "type"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "TypeTag":
        # The name must be on the tag line; the type expression may continue
        first_line, _ = remainder.split_first_line()
        name, _ = first_line.split_word()
        if name.is_empty():
            raise TagSyntaxError(source.diagnostic("Expected a type name"))
        rest = remainder.slice(name.end - remainder.start).trim()
        return cls(
            source=source, name=name, lua_type=None if rest.is_empty() else rest
        )


@dataclass(frozen=True)
class MarkerTag(Tag):
    """Argument-less flag on a function, e.g. ``@yields`` or ``@server``."""

    marker: str

    keyword: ClassVar[str] = "marker"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "MarkerTag":
        _require_no_arguments(source, remainder)
        return cls(source=source, marker=tag_name.as_str())


@dataclass(frozen=True)
class DeprecatedTag(Tag):
    """``@deprecated [version] [-- reason]``; both parts are optional."""

    version: Span | None = None
    desc: Span | None = None

    keyword: ClassVar[str] = "deprecated"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "DeprecatedTag":
        remainder = remainder.trim()
        if remainder.is_empty():
            return cls(source=source)
        version, desc = _split_type_and_description(remainder)
        return cls(
            source=source,
            version=None if version.is_empty() else version,
            desc=desc,
        )

    @property
    def description(self) -> str:
        return normalize_description(self.desc)


@dataclass(frozen=True)
class SinceTag(Tag):
    version: Span

    keyword: ClassVar[str] = "since"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "SinceTag":
        version = remainder.trim()
        if version.is_empty():
            raise TagSyntaxError(source.diagnostic("Expected a version"))
        return cls(source=source, version=version)


@dataclass(frozen=True)
class PrivateTag(Tag):
    keyword: ClassVar[str] = "private"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "PrivateTag":
        _require_no_arguments(source, remainder)
        return cls(source=source)


@dataclass(frozen=True)
class IgnoreTag(Tag):
    keyword: ClassVar[str] = "ignore"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "IgnoreTag":
        _require_no_arguments(source, remainder)
        return cls(source=source)


@dataclass(frozen=True)
class WithinTag(Tag):
    name: Span

    keyword: ClassVar[str] = "within"

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "WithinTag":
        name = remainder.trim()
        if name.is_empty():
            raise TagSyntaxError(source.diagnostic("Expected a scope name"))
        return cls(source=source, name=name)


@dataclass(frozen=True)
class _NamedKindTag(Tag):
    """Tag that declares the kind of entry and its name."""

    name: Span

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span):
        first_line, _ = remainder.split_first_line()
        name = first_line.trim()
        if name.is_empty():
            raise TagSyntaxError(source.diagnostic(f"Expected a {cls.keyword} name"))
        extra = remainder.trim()
        if extra != name or any(char.isspace() for char in name.as_str()):
            raise TagSyntaxError(extra.diagnostic(f"Expected a single {cls.keyword} name"))
        return cls(source=source, name=name)


@dataclass(frozen=True)
class ClassTag(_NamedKindTag):
    keyword: ClassVar[str] = "class"


@dataclass(frozen=True)
class FunctionTag(_NamedKindTag):
    keyword: ClassVar[str] = "function"


@dataclass(frozen=True)
class MethodTag(_NamedKindTag):
    keyword: ClassVar[str] = "method"


@dataclass(frozen=True)
class CustomTag(Tag):
    """Any tag whose name is not recognized, kept with its raw text."""

    name: Span
    text: Span

    @classmethod
    def parse(cls, source: Span, tag_name: Span, remainder: Span) -> "CustomTag":
        return cls(source=source, name=tag_name, text=remainder.trim())

    @property
    def tag_name(self) -> str:
        return self.name.as_str()


TagParseFunction = Callable[[Span, Span, Span], Tag]

TAG_PARSERS: dict[str, TagParseFunction] = {
    "param": ParamTag.parse,
    "return": ReturnTag.parse,
    "returns": ReturnTag.parse,
    "field": FieldTag.parse,
    "type": TypeTag.parse,
    "deprecated": DeprecatedTag.parse,
    "since": SinceTag.parse,
    "private": PrivateTag.parse,
    "ignore": IgnoreTag.parse,
    "within": WithinTag.parse,
    "class": ClassTag.parse,
    "function": FunctionTag.parse,
    "method": MethodTag.parse,
    **{name: MarkerTag.parse for name in MARKER_NAMES},
}


def _tag_source(name: Span, remainder: Span) -> Span:
    start = name.start
    if start > 0 and name.buffer.text[start - 1] == "@":
        start -= 1
    end = max(name.end, remainder.end)
    return Span(name.buffer, start, end)


def parse_tag(name: Span, remainder: Span) -> Tag:
    """Parse one tag from its name (without ``@``) and its argument text.

    Raises:
        TagSyntaxError: If the argument text does not fit the tag's grammar
    """
    source = _tag_source(name, remainder.trim())
    parser = TAG_PARSERS.get(name.as_str(), CustomTag.parse)
    return parser(source, name, remainder)
