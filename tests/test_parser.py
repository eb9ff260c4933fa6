"""Tests for the document parser."""

from __future__ import annotations

import logging

import pytest

from confindent import Confindent, Value, parse_text
from confindent.exceptions import (
    InvalidIndentationError,
    MixedIndentationError,
    ParseError,
)


class TestParseText:
    """Tests for parse_text function."""

    def test_parses_single(self) -> None:
        """A single line is a single root value."""
        assert parse_text("Key Value") == Confindent(nodes=[Value(key="Key", value="Value")])

    def test_parses_double_noindent(self) -> None:
        """Unindented lines are sibling roots."""
        document = parse_text("Key1 Value1\nKey2 Value2")

        assert document == Confindent(
            nodes=[Value(key="Key1", value="Value1"), Value(key="Key2", value="Value2")]
        )

    def test_parses_nested(self) -> None:
        """Deeper lines become children of the closest shallower line."""
        document = parse_text("Key1 Value1\n\tKey2 Value2\n\t\tKey3 Value3\nKey4 Value4")

        assert document == Confindent(
            nodes=[
                Value(
                    key="Key1",
                    value="Value1",
                    nodes=[
                        Value(
                            key="Key2",
                            value="Value2",
                            nodes=[Value(key="Key3", value="Value3")],
                        )
                    ],
                ),
                Value(key="Key4", value="Value4"),
            ]
        )

    def test_user_example(self, user_source: str) -> None:
        """Children are attached to the root in order."""
        document = parse_text(user_source)

        assert len(document.nodes) == 1
        user = document.nodes[0]
        assert (user.key, user.value) == ("User", "gennyble")
        assert [(node.key, node.value) for node in user.nodes] == [
            ("Email", "gen@nyble.dev"),
            ("ID", "256"),
        ]
        assert user.child_parse("ID", int) == 256

    def test_flag_and_value(self) -> None:
        """A bare key has no value; a key with a space has one."""
        document = parse_text("Flag\nOther value")

        assert len(document.nodes) == 2
        assert document.nodes[0].value is None
        assert document.nodes[1].value == "value"

    def test_empty_value(self) -> None:
        """A trailing space gives an empty, not a missing, value."""
        document = parse_text("Key \nBare")

        assert document.child("Key").value == ""
        assert document.child("Bare").value is None

    def test_blocks_with_different_indent_characters(self) -> None:
        """Each root block may pick its own indent character."""
        document = parse_text("First a\n  Child b\nSecond c\n\tChild d")

        assert document.child("First").child_value("Child") == "b"
        assert document.child("Second").child_value("Child") == "d"

    def test_sibling_after_deep_nesting(self, host_source: str) -> None:
        """Dedenting returns to the matching open level."""
        document = parse_text(host_source)

        hosts = document.children("Host")
        assert [host.value for host in hosts] == ["example.net", "backup.example.net"]
        first = hosts[0]
        assert [node.key for node in first.nodes] == [
            "Username",
            "Port",
            "Forward",
            "Forward",
            "Compression",
        ]
        assert first.children("Forward")[1].child_value("Bind") == "127.0.0.1"
        assert first.child("Compression").value is None
        assert hosts[1].child_value("Username") == "root"

    def test_root_count_matches_unindented_lines(self, host_source: str) -> None:
        """Every unindented line is a root."""
        document = parse_text(host_source)
        unindented = [
            line for line in host_source.splitlines() if line.strip() and line[0] not in " \t"
        ]

        assert len(document.nodes) == len(unindented)

    def test_blank_lines_do_not_reset_nesting(self) -> None:
        """Blank lines, even indented ones, are skipped."""
        document = parse_text("Root\n\tA 1\n\n   \n\tB 2\n\n")

        root = document.child("Root")
        assert [node.key for node in root.nodes] == ["A", "B"]

    def test_duplicates_kept_in_order(self) -> None:
        """Duplicate keys are neither merged nor reordered."""
        document = parse_text("X 1\nY 2\nX 3\nX 4")

        assert [node.value for node in document.children("X")] == ["1", "3", "4"]

    def test_separator_character_is_a_key(self) -> None:
        """Lines holding only an information separator are not blank."""
        document = parse_text("\x1c\nNext 1")

        assert [node.key for node in document.nodes] == ["\x1c", "Next"]
        assert document.nodes[0].value is None

    def test_crlf_input(self) -> None:
        """Windows line endings parse the same as Unix ones."""
        assert parse_text("Root a\r\n\tChild b\r\n") == parse_text("Root a\n\tChild b\n")

    def test_empty_document(self) -> None:
        """Empty or blank input gives an empty document."""
        assert parse_text("") == Confindent()
        assert parse_text("\n  \n") == Confindent()

    def test_from_str(self, user_source: str) -> None:
        """Confindent.from_str parses the same as parse_text."""
        assert Confindent.from_str(user_source) == parse_text(user_source)


class TestParseErrors:
    """Tests for parse failures."""

    def test_tab_then_space(self) -> None:
        """Tab then space before the key is mixed indentation."""
        with pytest.raises(MixedIndentationError) as excinfo:
            parse_text("Root\n\t Child x")

        assert excinfo.value.line == 2

    def test_mixed_within_chain(self) -> None:
        """One block cannot use both characters, whichever comes first."""
        with pytest.raises(MixedIndentationError):
            parse_text("Root\n\tA\n\t\tB\n  C")
        with pytest.raises(MixedIndentationError):
            parse_text("Root\n  A\n\tB")

    def test_started_indented(self) -> None:
        """The first non-blank line must be unindented."""
        with pytest.raises(InvalidIndentationError) as excinfo:
            parse_text("\n\tKey Value")

        assert excinfo.value.line == 2

    def test_depth_between_levels(self) -> None:
        """A width between two open levels is rejected."""
        with pytest.raises(InvalidIndentationError):
            parse_text("Root\n    A\n        B\n      C")

    def test_errors_are_value_errors(self) -> None:
        """Parse errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_text("Root\n \tChild")

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The rejected line is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="confindent.parser"):
            with pytest.raises(ParseError):
                parse_text("Root\n\t Child x")

        assert "Rejected line 2" in caplog.text
