"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for recursive-descent parsing of
RFC 5322 lexical tokens.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column and byte offsets computed on-demand (only for errors)

Line Ending Support:
    RFC 5322 lines end in CRLF. Line numbers are counted on LF, so the CR
    of a CRLF pair belongs to the line it terminates.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass, field

from imflex.diagnostics import Diagnostic, ErrorTemplate, SourceSpan

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency
        3. Simple position - Just an integer character offset
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed!

    Example:
        >>> cursor = Cursor("john", 0)
        >>> cursor.current
        'j'
        >>> cursor.advance().remaining
        'ohn'
        >>> cursor.current  # Original unchanged (immutability)
        'j'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """Unconsumed input from the current position to the end."""
        return self.source[self.pos :]

    @property
    def byte_offset(self) -> int:
        """UTF-8 byte offset of the current position.

        O(n) in the position; intended for error reporting only.
        Lone surrogates count as their escaped width so the offset is
        always defined.
        """
        return len(self.source[: self.pos].encode("utf-8", "surrogatepass"))

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Store the start cursor before scanning and slice from it:

            >>> start = Cursor("abc.def rest", 0)
            >>> cursor = start.advance(7)
            >>> start.slice_to(cursor.pos)
            'abc.def'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        May return fewer characters near EOF.
        """
        return self.source[self.pos : self.pos + n]

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("(a)", 0).expect("(").pos
            1
            >>> Cursor("a", 0).expect("(") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> cursor = Cursor("Subject: a\\r\\n (b", 14)
            >>> cursor.compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def to_span(self, end_pos: int | None = None) -> SourceSpan:
        """Build a SourceSpan starting at the current position.

        Args:
            end_pos: Exclusive end offset (defaults to the current position)
        """
        line, col = self.compute_line_col()
        end = self.pos if end_pos is None else max(end_pos, self.pos)
        return SourceSpan(
            start=self.pos,
            end=end,
            line=line,
            column=col,
            byte_offset=self.byte_offset,
        )


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every grammar rule has signature:
            def rule(cursor: Cursor) -> ParseResult[T] | None:
                ...
                return ParseResult(value, new_cursor)

        None means "no match here"; structural failures raise
        IMFFatalSyntaxError instead.

    Example:
        >>> cursor = Cursor("abc", 0)
        >>> result = ParseResult("a", cursor.advance())
        >>> result.value
        'a'
        >>> result.remaining
        'bc'
    """

    value: T
    cursor: Cursor

    @property
    def remaining(self) -> str:
        """Unconsumed input after the match."""
        return self.cursor.remaining


@dataclass(frozen=True, slots=True)
class ParseError:
    """Positional parse failure with location and context.

    Design:
        - Stores cursor at error point (for line:column)
        - User-friendly message
        - Expected tokens tuple (immutable for better errors)
        - Optional structured Diagnostic located at the cursor

    Example:
        >>> cursor = Cursor("(abc", 4)
        >>> error = ParseError("Unterminated comment", cursor, expected=(")",))
        >>> error.format_error()
        "1:5: Unterminated comment (expected: ')')"
    """

    message: str
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)
    diagnostic: Diagnostic | None = None

    @classmethod
    def from_diagnostic(
        cls, diagnostic: Diagnostic, cursor: Cursor, expected: tuple[str, ...] = ()
    ) -> "ParseError":
        """Create a ParseError whose diagnostic is located at cursor."""
        located = diagnostic.with_span(cursor.to_span())
        return cls(located.message, cursor, expected, located)

    @property
    def position(self) -> int:
        """Character offset of the failure."""
        return self.cursor.pos

    @property
    def byte_offset(self) -> int:
        """UTF-8 byte offset of the failure."""
        return self.cursor.byte_offset

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> error = ParseError("Expected atom", Cursor("a\\r\\n @", 4))
            >>> error.format_error()
            '2:2: Expected atom'
        """
        line, col = self.cursor.compute_line_col()
        error_msg = f"{line}:{col}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the problematic line and a caret pointing to the error location.
        Trailing CR characters are stripped from displayed lines.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context

        Example:
            >>> error = ParseError("Unterminated comment", Cursor("x (abc", 6))
            >>> print(error.format_with_context())
            1:7: Unterminated comment
            <BLANKLINE>
               1 | x (abc
                 |       ^
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1].rstrip("\r"))

            if i == line:
                pointer = " " * (len(line_num_str) - 2) + "| " + " " * (col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)
