"""Shared test fixtures and helpers."""

import pytest

from moondoc.parser.doc_comment import DocComment
from moondoc.parser.syntax import (
    TableType,
    TableTypeField,
    Token,
    TokenKind,
    Trivia,
    TriviaKind,
    TypeDeclaration,
)


def create_comment(
    text: str, path: str = "test.lua", line: int = 1, node=None
) -> DocComment:
    """Build a DocComment from an already-stripped comment body."""
    return DocComment.from_text(text, path=path, line=line, node=node)


def create_table_field(
    name: str, value: str, comments: tuple[str, ...] = ()
) -> TableTypeField:
    """Table type field with single-line comments before its key."""
    trivia = []
    for comment in comments:
        trivia.append(Trivia(TriviaKind.SINGLE_LINE_COMMENT, comment))
        trivia.append(Trivia(TriviaKind.WHITESPACE, "\n\t"))
    return TableTypeField(
        key_tokens=(Token(TokenKind.IDENTIFIER, name),),
        value=value,
        leading_trivia=tuple(trivia),
    )


@pytest.fixture
def make_comment():
    return create_comment


@pytest.fixture
def make_table_field():
    return create_table_field


@pytest.fixture
def point_declaration() -> TypeDeclaration:
    """``export type Point = { -- the x value\\n x: number }``."""
    return TypeDeclaration(
        name="Point",
        type_info=TableType(
            fields=(create_table_field("x", "number", (" the x value",)),)
        ),
        exported=True,
    )
