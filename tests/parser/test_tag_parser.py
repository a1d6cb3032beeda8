"""Tests for splitting comment bodies into descriptions and tags."""

import logging

import pytest

from moondoc.parser.tag_parser import TagParser
from moondoc.parser.tags import CustomTag, FieldTag, ParamTag, ReturnTag, WithinTag
from moondoc.utils.config import ParserConfig


class TestTagParser:
    """Test the tag parser."""

    @pytest.fixture
    def parser(self):
        return TagParser()

    def test_description_and_tags(self, parser):
        """Test lines before the first tag form the description."""
        result = parser.parse_text(
            "Adds two numbers.\n"
            "\n"
            "Works with floats too.\n"
            "@param a number -- the first\n"
            "@param b number\n"
            "@return number -- the sum\n"
            "@within Math"
        )

        assert result.is_valid
        assert result.desc == "Adds two numbers.\n\nWorks with floats too."
        assert [type(t) for t in result.tags] == [ParamTag, ParamTag, ReturnTag, WithinTag]
        assert result.tags[0].description == "the first"
        assert result.tags[1].name.as_str() == "b"

    def test_no_tags(self, parser):
        """Test a body without tags is all description."""
        result = parser.parse_text("  Just some text.\n  More text.")
        assert result.desc == "Just some text.\nMore text."
        assert result.tags == []
        assert result.diagnostics is None

    def test_multi_line_tag_argument(self, parser):
        """Test a tag's argument runs until the next tag line."""
        result = parser.parse_text(
            "@field x number -- the x value\n"
            "    which continues here\n"
            "\n"
            "@field y number"
        )
        assert len(result.tags) == 2
        assert result.tags[0].description == "the x value\nwhich continues here"
        assert result.tags[1].desc is None

    def test_tag_lines_win_over_continuation(self, parser):
        """Test an indented tag-looking line starts a new tag."""
        result = parser.parse_text("@param a number -- first\n    @param b string")
        assert [t.name.as_str() for t in result.tags] == ["a", "b"]

    def test_fenced_code_is_not_tags(self, parser):
        """Test @ lines inside fenced code blocks stay description."""
        result = parser.parse_text(
            "Example:\n```lua\n@notatag here\n```\n@within Util"
        )
        assert "@notatag here" in result.desc
        assert len(result.tags) == 1
        assert isinstance(result.tags[0], WithinTag)

    def test_email_is_not_a_tag(self, parser):
        """Test @ must start the line to begin a tag."""
        result = parser.parse_text("Mail someone@example.com for help.")
        assert result.tags == []

    def test_valid_and_malformed_counts(self, parser):
        """Test N valid and M malformed tags give N tags and M diagnostics."""
        result = parser.parse_text(
            "@within\n"
            "@param a number\n"
            "@since\n"
            "@field x number\n"
            "@param\n"
            "@custom anything"
        )

        assert len(result.tags) == 3
        assert [type(t) for t in result.tags] == [ParamTag, FieldTag, CustomTag]
        assert len(result.diagnostics) == 3
        assert [d.line for d in result.diagnostics] == [1, 3, 5]
        assert result.diagnostics.messages() == [
            "Expected a scope name",
            "Expected a version",
            "Expected a parameter name",
        ]

    def test_diagnostics_use_file_positions(self, parser):
        """Test diagnostic positions are absolute in the file."""
        result = parser.parse_text("Text.\n@within", path="src/Signal.lua", line=40)
        diagnostic = result.diagnostics[0]
        assert diagnostic.format() == "src/Signal.lua:41:1: Expected a scope name"

    def test_similar_custom_tag_warns(self, caplog):
        """Test a likely typo of a known tag is logged."""
        parser = TagParser(ParserConfig(fuzzy_tag_threshold=75))
        with caplog.at_level(logging.WARNING, logger="moondoc.parser.tag_parser"):
            result = parser.parse_text("@parma x number")

        assert isinstance(result.tags[0], CustomTag)
        assert "did you mean @param" in caplog.text

    def test_similar_custom_tag_warning_disabled(self, caplog):
        """Test the typo warning can be switched off."""
        parser = TagParser(ParserConfig(warn_on_similar_tags=False))
        with caplog.at_level(logging.WARNING, logger="moondoc.parser.tag_parser"):
            parser.parse_text("@parma x number")
        assert caplog.text == ""
