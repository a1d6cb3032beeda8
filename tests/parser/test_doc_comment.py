"""Tests for finding doc comments in Lua source."""

import logging

import pytest

from moondoc.parser.doc_comment import CommentScanner, DocComment, OutputSource
from moondoc.parser.tag_parser import TagParser

BLOCK_SOURCE = """local Math = {}

--[=[
\tAdds two numbers.

\t@param a number
\t@within Math
]=]
function Math.add(a, b)
\treturn a + b
end
"""

LINE_SOURCE = """--- Subtracts.
--- @within Math
--- @function sub
local function sub(a, b) end
---------------------------------
-- plain comment
"""


class TestCommentScanner:
    """Test doc comment discovery."""

    @pytest.fixture
    def scanner(self):
        return CommentScanner()

    def test_block_comment(self, scanner):
        """Test --[=[ ]=] blocks are found and dedented."""
        comments = list(scanner.scan(BLOCK_SOURCE, "Math.lua"))

        assert len(comments) == 1
        comment = comments[0]
        assert comment.buffer.text == "Adds two numbers.\n\n@param a number\n@within Math"
        assert comment.buffer.line == 4
        assert comment.output_source == OutputSource(path="Math.lua", line=9)
        assert comment.node is None

    def test_block_positions_map_to_file(self, scanner):
        """Test diagnostics inside a block point at the file line."""
        source = BLOCK_SOURCE.replace("@within Math", "@within")
        comment = next(scanner.scan(source, "Math.lua"))
        result = TagParser().parse(comment.buffer)
        assert result.diagnostics[0].format() == "Math.lua:7:2: Expected a scope name"

    @pytest.mark.parametrize(
        "source, expected",
        [
            (
                "--[=[ @within\n\t@function f\n]=]\nlocal function f() end\n",
                "a.lua:1:7: Expected a scope name",
            ),
            ("--[=[ @within ]=]\n", "a.lua:1:7: Expected a scope name"),
            (
                "  --[==[  @within ]==]\n",
                "a.lua:1:11: Expected a scope name",
            ),
            (
                "--- @function f\n  --- @within\nlocal function f() end\n",
                "a.lua:2:7: Expected a scope name",
            ),
            (
                "--[=[\n\t\t@function f\n\t\t@within\n]=]\n",
                "a.lua:3:3: Expected a scope name",
            ),
        ],
    )
    def test_columns_follow_each_line(self, scanner, source, expected):
        """Test diagnostics report the file column of the tag on every layout."""
        comment = next(scanner.scan(source, "a.lua"))
        result = TagParser().parse(comment.buffer)
        assert result.diagnostics.format() == expected

    def test_single_line_block(self, scanner):
        """Test a block opened and closed on one line."""
        comment = next(scanner.scan("--[==[ @class Signal ]==]\nlocal Signal = {}"))
        assert comment.buffer.text == "@class Signal"
        assert comment.output_source.line == 2

    def test_plain_block_comments_ignored(self, scanner):
        """Test --[[ ]] comments are not doc comments."""
        assert list(scanner.scan("--[[ not docs ]]\nlocal x = 1")) == []

    def test_line_comment_run(self, scanner):
        """Test runs of --- lines form one doc comment."""
        comments = list(scanner.scan(LINE_SOURCE, "Math.lua"))

        assert len(comments) == 1
        comment = comments[0]
        assert comment.buffer.text == "Subtracts.\n@within Math\n@function sub"
        assert comment.buffer.line == 1
        assert comment.buffer.column == 5
        assert comment.output_source.line == 4

    def test_multiple_comments_in_order(self, scanner):
        """Test every comment is yielded in source order."""
        comments = list(scanner.scan(BLOCK_SOURCE + "\n" + LINE_SOURCE))
        assert [c.buffer.text.splitlines()[0] for c in comments] == [
            "Adds two numbers.",
            "Subtracts.",
        ]

    def test_unterminated_block(self, scanner, caplog):
        """Test an unterminated block is skipped with a warning."""
        with caplog.at_level(logging.WARNING):
            comments = list(scanner.scan("--[=[\n@class Broken\n", "Broken.lua"))
        assert comments == []
        assert "unterminated doc comment block" in caplog.text


class TestDocComment:
    """Test DocComment construction."""

    def test_from_text(self):
        comment = DocComment.from_text("@class Signal", path="Signal.lua", line=3)
        assert comment.buffer.path == "Signal.lua"
        assert comment.output_source == OutputSource("Signal.lua", 3)
        assert comment.buffer.text == "@class Signal"
