"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # RFC 5322 section 3.2 (lexical tokens)
    _RFC_BASE = "https://www.rfc-editor.org/rfc/rfc5322#section-3.2"

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of input.

        Args:
            position: Character offset where EOF was reached

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check is_eof before reading the current character",
        )

    @staticmethod
    def no_match(rule: str, found: str | None) -> Diagnostic:
        """Rule did not match at the current position.

        Args:
            rule: Grammar rule name (e.g. "atom")
            found: Character found at the position, or None at EOF

        Returns:
            Diagnostic for NO_MATCH
        """
        found_str = "end of input" if found is None else repr(found)
        msg = f"Expected {rule}, found {found_str}"
        return Diagnostic(
            code=DiagnosticCode.NO_MATCH,
            message=msg,
            span=None,
            rule=rule,
        )

    @staticmethod
    def unterminated_comment(depth: int) -> Diagnostic:
        """End of input reached inside an open comment.

        Args:
            depth: Nesting depth of the innermost open comment (1 = outermost)

        Returns:
            Diagnostic for UNTERMINATED_COMMENT
        """
        msg = "Unterminated comment" if depth <= 1 else (
            f"Unterminated comment (nesting depth {depth})"
        )
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_COMMENT,
            message=msg,
            span=None,
            hint='Close every "(" with a matching ")"',
            help_url=f"{ErrorTemplate._RFC_BASE}.2",
            rule="comment",
        )

    @staticmethod
    def unexpected_character(char: str, rule: str) -> Diagnostic:
        """Character that cannot appear at this point of a rule.

        Args:
            char: The offending character
            rule: Grammar rule being parsed

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character {char!r} in {rule}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=None,
            hint=(
                "Comments may contain printable US-ASCII, whitespace, line folds "
                "(CRLF followed by whitespace), and backslash escapes"
            ),
            help_url=f"{ErrorTemplate._RFC_BASE}.2",
            rule=rule,
        )

    @staticmethod
    def dangling_escape() -> Diagnostic:
        """Backslash at end of input with nothing to escape.

        Returns:
            Diagnostic for DANGLING_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.DANGLING_ESCAPE,
            message="Dangling backslash escape at end of input",
            span=None,
            hint="A backslash must be followed by a printable character or whitespace",
            help_url=f"{ErrorTemplate._RFC_BASE}.1",
            rule="quoted-pair",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int) -> Diagnostic:
        """Comment nesting exceeded the configured limit.

        Args:
            max_depth: The configured maximum nesting depth

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Comment nesting too deep (maximum {max_depth})"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="Reduce comment nesting or raise max_nesting_depth",
            rule="comment",
        )
