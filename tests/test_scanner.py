"""Tests for the span scanner.

Validates span discovery, coordinate translation into unmarked text,
bound/unbound disambiguation and the lenient handling of malformed markup.
"""

from __future__ import annotations

import logging

import pytest

from diagmarkup.dialects import ARROW, BRACKET, DialectDescriptor
from diagmarkup.markup import MarkedSpan, ParseResult, scan

# ============================================================================
# BRACKET DIALECT
# ============================================================================


class TestScanBracket:
    """Scanning Microsoft.CodeAnalysis.Testing markup."""

    def test_unbound_span(self) -> None:
        """Unbound brackets yield a span without identifier."""
        result = scan("class [|C|] {}", BRACKET)

        assert result.unmarked_text == "class C {}"
        assert result.spans == (MarkedSpan.at(6, 1),)

    def test_bound_span(self) -> None:
        """Bound brackets yield the span and the embedded identifier."""
        result = scan("{|CS1001:class C|} {}", BRACKET)

        assert result.unmarked_text == "class C {}"
        assert result.spans == (MarkedSpan.at(0, 7, "CS1001"),)

    def test_multiple_bound_spans(self) -> None:
        """Each bound span is located in unmarked coordinates."""
        result = scan("int {|CS0101:value|} = {|CS0202:5|};", BRACKET)

        assert result.unmarked_text == "int value = 5;"
        assert result.marked_texts() == ("value", "5")
        assert result.diagnostic_ids() == ("CS0101", "CS0202")

    def test_mixed_bound_and_unbound(self) -> None:
        """Markup eaten by either form shifts later spans."""
        result = scan("[|Int32|] {|CS0101:var|} = [|3|];", BRACKET)

        assert result.unmarked_text == "Int32 var = 3;"
        assert result.spans == (
            MarkedSpan.at(0, 5),
            MarkedSpan.at(6, 3, "CS0101"),
            MarkedSpan.at(12, 1),
        )

    def test_empty_identifier_is_bound(self) -> None:
        """An opener with an empty identifier is still bound."""
        result = scan("{|:x|}", BRACKET)

        assert result.spans == (MarkedSpan.at(0, 1, ""),)

    def test_empty_span(self) -> None:
        """Markers with nothing between them produce zero-length spans."""
        result = scan("a[||]b", BRACKET)

        assert result.unmarked_text == "ab"
        assert result.spans == (MarkedSpan.at(1, 0),)

    def test_multiline(self) -> None:
        """Newlines inside and around spans are ordinary text."""
        source = "\nint a = 3;\n[|Int32|] {|CS0101:var\n|} = 3;\n"
        result = scan(source, BRACKET)

        assert result.unmarked_text == "\nint a = 3;\nInt32 var\n = 3;\n"
        assert result.marked_texts() == ("Int32", "var\n")

    def test_no_markup(self) -> None:
        """Text without markup is returned as-is with no spans."""
        assert scan("class C {}", BRACKET) == ParseResult("class C {}", ())

    def test_empty_text(self) -> None:
        """Empty text scans to an empty result."""
        assert scan("", BRACKET) == ParseResult("", ())


# ============================================================================
# ARROW DIALECT
# ============================================================================


class TestScanArrow:
    """Scanning Gu.Roslyn.Asserts markup."""

    def test_point_span(self) -> None:
        """Arrows mark zero-length points."""
        result = scan("↓class C{}", ARROW)

        assert result.unmarked_text == "class C{}"
        assert result.spans == (MarkedSpan.at(0, 0),)

    def test_multiple_points(self) -> None:
        """Each arrow shifts the following points by one."""
        result = scan("int ↓value = ↓5;", ARROW)

        assert result.unmarked_text == "int value = 5;"
        assert result.spans == (MarkedSpan.at(4, 0), MarkedSpan.at(12, 0))

    def test_consecutive_arrows(self) -> None:
        """Adjacent arrows mark the same point twice."""
        result = scan("↓↓x", ARROW)

        assert result.spans == (MarkedSpan.at(0, 0), MarkedSpan.at(0, 0))

    def test_bracket_tokens_are_text(self) -> None:
        """Tokens of other dialects are plain text for the arrow dialect."""
        result = scan("[|x|] ↓y", ARROW)

        assert result.unmarked_text == "[|x|] y"
        assert result.spans == (MarkedSpan.at(6, 0),)


# ============================================================================
# MALFORMED MARKUP
# ============================================================================


class TestScanMalformed:
    """Scanning never fails on malformed markup."""

    def test_malformed_bound_opener_is_unbound(self) -> None:
        """A bound start without identifier terminator is reclassified as unbound."""
        result = scan("a {|oops|} b", BRACKET)

        assert result.unmarked_text == "a {|oops b"
        assert result.spans == (MarkedSpan.at(2, 6),)
        assert result.marked_texts() == ("{|oops",)

    def test_malformed_opener_does_not_shift_later_spans(self) -> None:
        """Spans after a malformed opener stay aligned with the unmarked text."""
        result = scan("{|x|} [|y|]", BRACKET)

        assert result.unmarked_text == "{|x y"
        assert result.marked_texts() == ("{|x", "y")
        assert result.diagnostic_ids() == (None, None)

    def test_missing_unbound_end_marks_point(self) -> None:
        """A missing end token leaves a zero-length span at the content start."""
        result = scan("a [|b c", BRACKET)

        assert result.unmarked_text == "a b c"
        assert result.spans == (MarkedSpan.at(2, 0),)

    def test_missing_bound_end_marks_point(self) -> None:
        """A missing bound end token keeps the identifier on a zero-length span."""
        result = scan("{|CS1:abc", BRACKET)

        assert result.unmarked_text == "abc"
        assert result.spans == (MarkedSpan.at(0, 0, "CS1"),)

    def test_markers_after_unclosed_opener_are_found(self) -> None:
        """An unclosed malformed opener does not swallow later markers."""
        result = scan("a {| b [|c|] d", BRACKET)

        assert result.unmarked_text == "a {| b c d"
        assert result.spans == (MarkedSpan.at(2, 0), MarkedSpan.at(7, 1))
        assert result.marked_texts() == ("", "c")

    def test_enclosed_tokens_excluded_from_length(self) -> None:
        """Start tokens inside a span are stripped from its length."""
        result = scan("a [|b [|c|]", BRACKET)

        assert result.unmarked_text == "a b c"
        assert result.spans == (MarkedSpan.at(2, 3),)
        assert result.marked_texts() == ("b c",)

    def test_start_token_inside_occurrence_is_content(self) -> None:
        """A start token within consumed markup does not open a nested span."""
        result = scan("{|:[||}", BRACKET)

        assert result.unmarked_text == ""
        assert result.spans == (MarkedSpan.at(0, 0, ""),)

    def test_spans_clamped_after_stray_end_token(self) -> None:
        """A stray end token before a span cannot push it past the text."""
        result = scan("|][|a|]", BRACKET)

        assert result.unmarked_text == "a"
        assert result.spans == (MarkedSpan.at(1, 0),)

    def test_stray_end_tokens_are_removed(self) -> None:
        """End tokens without a start produce no spans but are still stripped."""
        result = scan("a |] b |} c", BRACKET)

        assert result.unmarked_text == "a  b  c"
        assert result.spans == ()


# ============================================================================
# SHARED START TOKENS
# ============================================================================


class TestScanSharedStartTokens:
    """Dialects whose bound and unbound forms start with the same token."""

    @pytest.fixture
    def angles(self) -> DialectDescriptor:
        return DialectDescriptor.any("<<", ">>", "<<", ">>", bound_terminator="!", name="angles")

    def test_tie_resolved_as_bound(self, angles: DialectDescriptor) -> None:
        """A well-formed opener at a shared token is bound."""
        result = scan("a <<CS1!b>> c", angles)

        assert result.unmarked_text == "a b c"
        assert result.spans == (MarkedSpan.at(2, 1, "CS1"),)

    def test_tie_resolved_as_unbound(self, angles: DialectDescriptor) -> None:
        """Without an identifier terminator the shared token is unbound."""
        result = scan("a <<b>> c", angles)

        assert result.unmarked_text == "a b c"
        assert result.spans == (MarkedSpan.at(2, 1),)

    def test_tie_sequence(self, angles: DialectDescriptor) -> None:
        """Bound and unbound occurrences alternate without duplicates."""
        result = scan("a <<CS1!b>> <<c>> <<CS2!d>>", angles)

        assert result.unmarked_text == "a b c d"
        assert result.spans == (
            MarkedSpan.at(2, 1, "CS1"),
            MarkedSpan.at(4, 1),
            MarkedSpan.at(6, 1, "CS2"),
        )

    def test_bound_start_extends_unbound_start(self) -> None:
        """A bound start that is a superstring of the unbound start."""
        dialect = DialectDescriptor.any("<", ">", "<@", "@>", name="at-angles")
        result = scan("<x> <@ID:y@>", dialect)

        assert result.unmarked_text == "x y"
        assert result.spans == (MarkedSpan.at(0, 1), MarkedSpan.at(2, 1, "ID"))


# ============================================================================
# LOGGING
# ============================================================================


class TestScanLogging:
    """Scanner debug logging."""

    def test_logs_span_count(self, caplog: pytest.LogCaptureFixture) -> None:
        """The number of spans found is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="diagmarkup.markup.scanner"):
            scan("[|a|] [|b|]", BRACKET)

        assert "Scanned 2 marked spans (dialect: bracket)" in caplog.text
