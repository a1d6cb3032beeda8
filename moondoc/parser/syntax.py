"""Syntax node models supplied by a Lua parser integration.

Only what doc entry assembly needs is modelled: whether a documented
declaration is a table type, and the key tokens, value and leading comments of
each of its fields. Comment text excludes its delimiters (``--``,
``--[[``/``]]``).
"""

from dataclasses import dataclass
from enum import Enum


class TriviaKind(Enum):
    """Kinds of trivia attached to tokens."""

    WHITESPACE = "whitespace"
    SINGLE_LINE_COMMENT = "single_line_comment"
    MULTI_LINE_COMMENT = "multi_line_comment"


class TokenKind(Enum):
    IDENTIFIER = "identifier"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Trivia:
    kind: TriviaKind
    text: str

    @property
    def is_comment(self) -> bool:
        return self.kind in (
            TriviaKind.SINGLE_LINE_COMMENT,
            TriviaKind.MULTI_LINE_COMMENT,
        )


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str


@dataclass(frozen=True)
class TableTypeField:
    """One ``key: type`` entry of a table type."""

    key_tokens: tuple[Token, ...]
    value: str
    leading_trivia: tuple[Trivia, ...] = ()

    @property
    def name(self) -> str:
        """First identifier among the key tokens, or an empty string."""
        return next(
            (t.text for t in self.key_tokens if t.kind == TokenKind.IDENTIFIER), ""
        )

    @property
    def comment(self) -> str:
        """Leading comments with every line trimmed, joined by newlines."""
        lines = [
            line.strip()
            for trivia in self.leading_trivia
            if trivia.is_comment
            for line in trivia.text.splitlines()
        ]
        return "\n".join(lines).strip()


@dataclass(frozen=True)
class TableType:
    fields: tuple[TableTypeField, ...] = ()


@dataclass(frozen=True)
class TypeReference:
    """Any non-table type, kept as its source text."""

    text: str


@dataclass(frozen=True)
class TypeDeclaration:
    """``[export] type Name = <type>``."""

    name: str
    type_info: TableType | TypeReference
    exported: bool = False

    @property
    def is_table(self) -> bool:
        return isinstance(self.type_info, TableType)


@dataclass(frozen=True)
class FunctionDeclaration:
    """``function Scope.name(...)`` or ``function Scope:name(...)``."""

    name: str
    is_method: bool = False


SyntaxNode = TypeDeclaration | FunctionDeclaration
