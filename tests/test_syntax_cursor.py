"""Tests for cursor infrastructure.

Validates the immutable cursor pattern, ParseResult, and ParseError
location reporting.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from imflex.diagnostics import DiagnosticCode, ErrorTemplate
from imflex.syntax.cursor import Cursor, ParseError, ParseResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor_defaults_to_start(self) -> None:
        """Cursor position defaults to 0."""
        cursor = Cursor("hello")

        assert cursor.pos == 0
        assert cursor.current == "h"

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor unchanged."""
        cursor = Cursor("hello", 0)
        advanced = cursor.advance(2)

        assert cursor.pos == 0
        assert advanced.pos == 2
        assert advanced.current == "l"

    def test_advance_clamps_at_eof(self) -> None:
        """advance() never moves past the end of source."""
        cursor = Cursor("hi", 0).advance(10)

        assert cursor.pos == 2
        assert cursor.is_eof

    def test_remaining(self) -> None:
        """remaining is the unconsumed tail of the source."""
        assert Cursor("johndoe", 1).remaining == "ohndoe"
        assert Cursor("abc", 3).remaining == ""


class TestCursorEOF:
    """Test EOF detection and current-character access."""

    def test_is_eof_for_empty_source(self) -> None:
        """is_eof is True for empty source at position 0."""
        assert Cursor("", 0).is_eof

    def test_current_raises_eof_error_at_end(self) -> None:
        """Accessing current at EOF raises EOFError."""
        with pytest.raises(EOFError, match="Unexpected EOF at position 5"):
            _ = Cursor("hello", 5).current

    def test_peek_beyond_eof_returns_none(self) -> None:
        """peek() returns None beyond EOF instead of raising."""
        cursor = Cursor("ab", 1)

        assert cursor.peek() == "b"
        assert cursor.peek(1) is None


class TestCursorMatching:
    """Test expect / slice helpers."""

    def test_expect_match(self) -> None:
        """expect() consumes a matching character."""
        result = Cursor("(a)", 0).expect("(")

        assert result is not None
        assert result.pos == 1

    def test_expect_mismatch_and_eof(self) -> None:
        """expect() returns None on mismatch or at EOF."""
        assert Cursor("a", 0).expect("(") is None
        assert Cursor("", 0).expect("(") is None

    def test_slice_to_from_start_cursor(self) -> None:
        """slice_to() extracts text consumed since a saved cursor."""
        start = Cursor("abc.def rest", 0)
        end = start.advance(7)

        assert start.slice_to(end.pos) == "abc.def"

    def test_slice_ahead_near_eof(self) -> None:
        """slice_ahead() returns fewer characters near EOF."""
        assert Cursor("\r", 0).slice_ahead(2) == "\r"


# ============================================================================
# POSITION REPORTING
# ============================================================================


class TestCursorPositions:
    """Test line/column and byte-offset computation."""

    def test_line_col_first_line(self) -> None:
        """Positions on the first line are column = offset + 1."""
        assert Cursor("(abc", 4).compute_line_col() == (1, 5)

    def test_line_col_after_crlf(self) -> None:
        """CRLF starts a new line; the CR belongs to the previous line."""
        source = "Subject: a\r\n (b"

        assert Cursor(source, 10).compute_line_col() == (1, 11)
        assert Cursor(source, 12).compute_line_col() == (2, 1)
        assert Cursor(source, 14).compute_line_col() == (2, 3)

    def test_byte_offset_ascii(self) -> None:
        """ASCII byte offset equals character offset."""
        assert Cursor("hello", 3).byte_offset == 3

    def test_byte_offset_multibyte(self) -> None:
        """Multi-byte UTF-8 characters count by their encoded width."""
        cursor = Cursor("é€x", 2)

        assert cursor.pos == 2
        assert cursor.byte_offset == 5

    def test_to_span(self) -> None:
        """to_span() builds a located SourceSpan."""
        span = Cursor("a\r\n(b", 4).to_span(5)

        assert (span.start, span.end) == (4, 5)
        assert (span.line, span.column) == (2, 2)
        assert span.byte_offset == 4

    @given(source=st.text(max_size=50), data=st.data())
    def test_byte_offset_matches_encoded_prefix(self, source: str, data: st.DataObject) -> None:
        """PROPERTY: byte_offset == len(prefix encoded as UTF-8)."""
        pos = data.draw(st.integers(min_value=0, max_value=len(source)))
        event(f"non_ascii={not source.isascii()}")
        prefix = source[:pos].encode("utf-8", "surrogatepass")

        assert Cursor(source, pos).byte_offset == len(prefix)


# ============================================================================
# PARSE RESULT / PARSE ERROR
# ============================================================================


class TestParseResult:
    """Test ParseResult container."""

    def test_value_and_remaining(self) -> None:
        """ParseResult exposes value and remaining input."""
        result = ParseResult("j", Cursor("johndoe", 1))

        assert result.value == "j"
        assert result.remaining == "ohndoe"


class TestParseError:
    """Test ParseError formatting."""

    def test_format_error_with_expected(self) -> None:
        """format_error() includes line:column and expected tokens."""
        error = ParseError("Unterminated comment", Cursor("(abc", 4), expected=(")",))

        assert error.format_error() == "1:5: Unterminated comment (expected: ')')"

    def test_from_diagnostic_locates_span(self) -> None:
        """from_diagnostic() attaches a span at the cursor."""
        error = ParseError.from_diagnostic(
            ErrorTemplate.dangling_escape(), Cursor("(a\\", 3)
        )

        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.DANGLING_ESCAPE
        assert error.diagnostic.span is not None
        assert error.diagnostic.span.start == 3
        assert error.position == 3
        assert error.byte_offset == 3

    def test_format_with_context_points_at_column(self) -> None:
        """format_with_context() draws a caret under the failure column."""
        error = ParseError("Unterminated comment", Cursor("x (abc", 6))
        lines = error.format_with_context().split("\n")

        assert lines[0] == "1:7: Unterminated comment"
        assert lines[2] == "   1 | x (abc"
        assert lines[3].index("^") == len("   1 | ") + 6

    def test_format_with_context_strips_cr(self) -> None:
        """Displayed source lines do not carry the CR of CRLF."""
        error = ParseError("Unexpected", Cursor("a\r\n (b", 6))
        output = error.format_with_context()

        assert "\r" not in output
        assert "   1 | a" in output
        assert "   2 |  (b" in output
