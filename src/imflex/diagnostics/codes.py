"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3009: Input-level syntax errors
        3010-3099: Token grammar errors (atoms, comments, folding whitespace)
    """

    # Input-level syntax errors (3000-3009)
    UNEXPECTED_EOF = 3001

    # Token grammar errors (3010-3099)
    NO_MATCH = 3010  # Recoverable: rule did not match at this position
    UNTERMINATED_COMMENT = 3011
    UNEXPECTED_CHARACTER = 3012
    DANGLING_ESCAPE = 3013
    NESTING_DEPTH_EXCEEDED = 3014


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. The UTF-8 byte offset of ``start`` is carried separately
        in ``byte_offset``.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        byte_offset: UTF-8 byte offset of ``start``
    """

    start: int
    end: int
    line: int
    column: int
    byte_offset: int = 0

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line or
                column is less than 1, or byte_offset is negative.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)
        if self.byte_offset < 0:
            msg = f"SourceSpan.byte_offset must be >= 0, got {self.byte_offset}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no position applies)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        rule: Grammar rule that was being parsed (e.g. "comment")
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    rule: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def with_span(self, span: SourceSpan) -> "Diagnostic":
        """Return a copy of this diagnostic located at span."""
        return Diagnostic(
            code=self.code,
            message=self.message,
            span=span,
            hint=self.hint,
            help_url=self.help_url,
            rule=self.rule,
            severity=self.severity,
        )

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNTERMINATED_COMMENT]: Unterminated comment
              --> line 1, column 5
              = rule: comment
              = help: Close every "(" with a matching ")"

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
