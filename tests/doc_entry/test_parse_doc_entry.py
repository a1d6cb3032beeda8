"""Tests for entry kind selection, class entries and diagnostic aggregation."""

import pytest

from moondoc.doc_entry import (
    ClassDocEntry,
    DocEntryKind,
    FunctionDocEntry,
    FunctionType,
    TypeDocEntry,
    parse_doc_entry,
)
from moondoc.parser.diagnostic import Diagnostics
from moondoc.parser.syntax import FunctionDeclaration
from moondoc.utils.errors import DiagnosticsError, ValidationError


class TestKindSelection:
    """Test how the entry kind is chosen."""

    @pytest.mark.parametrize(
        "text, entry_class",
        [
            ("@class Signal", ClassDocEntry),
            ("@function new\n@within Signal", FunctionDocEntry),
            ("@method fire\n@within Signal", FunctionDocEntry),
            ("@type Handler (...any) -> ()\n@within Signal", TypeDocEntry),
        ],
    )
    def test_kind_tags(self, make_comment, text, entry_class):
        assert isinstance(parse_doc_entry(make_comment(text)), entry_class)

    def test_kind_tag_beats_caller_kind(self, make_comment):
        entry = parse_doc_entry(
            make_comment("@class Signal"), kind=DocEntryKind.FUNCTION, name="other"
        )
        assert isinstance(entry, ClassDocEntry)
        assert entry.name == "Signal"

    @pytest.mark.parametrize(
        "is_method, function_type",
        [(True, FunctionType.METHOD), (False, FunctionType.STATIC)],
    )
    def test_kind_from_function_node(self, make_comment, is_method, function_type):
        """Test an untagged comment takes its kind and name from the declaration."""
        node = FunctionDeclaration("connect", is_method=is_method)
        entry = parse_doc_entry(make_comment("Connects.\n@within Signal", node=node))

        assert isinstance(entry, FunctionDocEntry)
        assert entry.name == "connect"
        assert entry.function_type == function_type

    def test_kind_from_type_node(self, make_comment, point_declaration):
        entry = parse_doc_entry(
            make_comment("A point.\n@within Geometry", node=point_declaration)
        )
        assert isinstance(entry, TypeDocEntry)
        assert entry.name == "Point"
        assert [f.name for f in entry.fields] == ["x"]

    def test_caller_name_beats_node_name(self, make_comment):
        entry = parse_doc_entry(
            make_comment("@within Signal", node=FunctionDeclaration("connect")),
            name="Connect",
        )
        assert entry.name == "Connect"

    def test_unknown_kind(self, make_comment):
        """Test a comment with no kind and no caller kind is reported."""
        with pytest.raises(DiagnosticsError) as exc_info:
            parse_doc_entry(make_comment("Just a description."))
        assert exc_info.value.diagnostics.messages() == [
            "Cannot determine the kind of this doc entry"
        ]

    def test_conflicting_kind_tags(self, make_comment):
        with pytest.raises(DiagnosticsError) as exc_info:
            parse_doc_entry(make_comment("@function new\n@method fire\n@within Signal"))
        diagnostic = exc_info.value.diagnostics[0]
        assert diagnostic.span.as_str() == "@method fire"
        assert "Only one of" in diagnostic.message

    def test_tag_errors_block_building(self, make_comment):
        """Test malformed tags fail the entry with all diagnostics in order."""
        with pytest.raises(DiagnosticsError) as exc_info:
            parse_doc_entry(
                make_comment("@function new\n@param\n@within Signal\n@since")
            )
        diagnostics = exc_info.value.diagnostics
        assert [d.line for d in diagnostics] == [2, 4]


class TestClassDocEntry:
    """Test the class builder."""

    def test_name_and_description(self, make_comment):
        entry = parse_doc_entry(
            make_comment("A signal that can be fired.\n\n@class Signal", path="Signal.lua")
        )
        assert entry.name == "Signal"
        assert entry.desc == "A signal that can be fired."
        assert entry.output_source.path == "Signal.lua"

    def test_within_not_required(self, make_comment):
        entry = parse_doc_entry(make_comment("@class Signal"))
        assert entry.tags == []
        assert entry.private is False

    def test_flags_and_custom_tags(self, make_comment):
        entry = parse_doc_entry(make_comment("@class Signal\n@private\n@tag events"))
        assert entry.private is True
        assert entry.ignore is False
        assert [t.text.as_str() for t in entry.tags] == ["events"]

    def test_function_tags_unused(self, make_comment):
        with pytest.raises(DiagnosticsError) as exc_info:
            parse_doc_entry(make_comment("@class Signal\n@param x number"))
        assert exc_info.value.diagnostics.messages() == [
            "This tag is unused by class doc entries."
        ]


class TestDiagnostics:
    """Test the diagnostics batch."""

    def test_empty_batch_rejected(self):
        with pytest.raises(ValidationError):
            Diagnostics([])
        assert Diagnostics.collect([]) is None

    def test_merge_and_sort(self, make_comment):
        buffer = make_comment("one\ntwo\nthree").buffer
        lines = buffer.span().lines()
        first = Diagnostics([lines[2].diagnostic("c")])
        second = Diagnostics([lines[0].diagnostic("a"), lines[1].diagnostic("b")])

        merged = Diagnostics.merge(first, None, second)
        assert merged.messages() == ["c", "a", "b"]
        assert merged.sorted().messages() == ["a", "b", "c"]
        assert Diagnostics.merge(None, None) is None

    def test_format(self, make_comment):
        buffer = make_comment("bad", path="x.lua", line=3).buffer
        batch = Diagnostics([buffer.span().diagnostic("oops")])
        assert batch.format() == "x.lua:3:1: oops"
