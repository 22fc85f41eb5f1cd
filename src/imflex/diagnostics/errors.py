"""imflex exception hierarchy with structured diagnostics.

All exceptions can store Diagnostic objects for rich error information.
The syntax errors split into two kinds that alternation logic must tell
apart:

    IMFNoMatchError      - recoverable; the next alternative may be tried
    IMFFatalSyntaxError  - structural violation; abort the whole parse

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING, ClassVar

from .codes import Diagnostic, SourceSpan

if TYPE_CHECKING:
    from imflex.syntax.cursor import ParseError


class IMFError(Exception):
    """Base exception for all imflex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IMFError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def span(self) -> SourceSpan | None:
        """Source location of the error, if known."""
        return self.diagnostic.span if self.diagnostic is not None else None


class IMFSyntaxError(IMFError):
    """Token grammar error.

    The ``fatal`` class attribute distinguishes the two failure kinds
    without inspecting the concrete type.

    Attributes:
        parse_error: Positional failure record (cursor, expected tokens)
    """

    fatal: ClassVar[bool] = False

    def __init__(
        self, message: str | Diagnostic, *, parse_error: "ParseError | None" = None
    ) -> None:
        """Initialize IMFSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            parse_error: Positional failure record, when raised by the parser
        """
        super().__init__(message)
        self.parse_error = parse_error

    @property
    def position(self) -> int | None:
        """Character offset of the failure, if known."""
        if self.parse_error is not None:
            return self.parse_error.position
        return self.span.start if self.span is not None else None

    def format_with_context(self, context_lines: int = 2) -> str:
        """Render the failure with the offending source line and a caret."""
        if self.parse_error is not None:
            return self.parse_error.format_with_context(context_lines)
        return str(self)


class IMFNoMatchError(IMFSyntaxError):
    """Rule did not match at the current position.

    Recoverable: a caller trying alternative grammar branches at the same
    position may proceed to the next alternative.
    """

    fatal: ClassVar[bool] = False


class IMFFatalSyntaxError(IMFSyntaxError):
    """Unrecoverable structural failure.

    Examples:
    - End of input inside an open comment
    - Backslash escape with nothing following it

    Must unwind the entire enclosing alternation.
    """

    fatal: ClassVar[bool] = True


class IMFNestingDepthError(IMFFatalSyntaxError):
    """Comment nesting exceeded the configured maximum depth.

    This error indicates either adversarial input designed to exhaust
    the call stack or a badly malformed header.
    """
