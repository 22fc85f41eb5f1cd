"""String-level tokenizer facade over the RFC 5322 grammar rules.

This module provides the MessageTokenizer class that runs a single grammar
rule from :mod:`imflex.syntax.parser.rules` against a string and converts
the rule-level failure model into exceptions.

Architecture:
    Grammar rules take an immutable :class:`~imflex.syntax.cursor.Cursor`
    and return :class:`~imflex.syntax.cursor.ParseResult` or None. The
    tokenizer wraps that convention for callers that work on strings:

    - Success: ``(value, remaining_text)``
    - No match: :class:`~imflex.diagnostics.IMFNoMatchError` (``fatal = False``)
    - Structural failure: :class:`~imflex.diagnostics.IMFFatalSyntaxError`
      (``fatal = True``), propagated from the rule unchanged

Security:
    Includes configurable input size limit and comment nesting limit to
    reject adversarial input before it can exhaust memory or the stack.
"""

import logging
from collections.abc import Callable

from imflex.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from imflex.diagnostics import ErrorTemplate, IMFFatalSyntaxError, IMFNoMatchError
from imflex.syntax.cursor import Cursor, ParseError, ParseResult
from imflex.syntax.parser.rules import (
    ParseContext,
    atom,
    cfws,
    comment,
    dot_atom,
    dot_atom_text,
)
from imflex.syntax.parser.whitespace import fws
from imflex.syntax.tokens import Atom, DotAtom

__all__ = ["MessageTokenizer"]

logger = logging.getLogger(__name__)

type Rule[T] = Callable[[Cursor, ParseContext], ParseResult[T] | None]


class MessageTokenizer:
    """RFC 5322 lexical tokenizer with configured resource limits.

    Design:
    - Stateless apart from two immutable limits; safe to share across threads
    - Each call builds a fresh Cursor and ParseContext
    - Errors carry line:column, byte offset, and source context

    Security:
    - Configurable max_source_size rejects oversized input up front
    - Configurable max_nesting_depth bounds comment recursion

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 1 MiB)
        max_nesting_depth: Maximum allowed comment nesting depth (default: 100)

    Example:
        >>> tokenizer = MessageTokenizer()
        >>> token, rest = tokenizer.atom("(hello)ABC")
        >>> token.pre_comment, token.content, token.post_comment
        ('(hello)', 'ABC', None)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize tokenizer with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 1 MiB).
                            Set to 0 to disable the size limit (not recommended).
            max_nesting_depth: Maximum comment nesting depth (default: 100).
                              Prevents stack exhaustion via ((((...)))).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = ParseContext(
            max_nesting_depth=max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        ).max_nesting_depth

        if max_source_size is not None or max_nesting_depth is not None:
            logger.info(
                "MessageTokenizer configured: max_source_size=%d, max_nesting_depth=%d",
                self._max_source_size,
                self._max_nesting_depth,
            )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed comment nesting depth (after clamping)."""
        return self._max_nesting_depth

    def atom(self, source: str) -> tuple[Atom, str]:
        """Tokenize ``[CFWS] 1*atext [CFWS]`` at the start of source.

        Returns:
            (Atom, remaining text)

        Raises:
            ValueError: If source exceeds max_source_size
            IMFNoMatchError: If source does not start with an atom
            IMFFatalSyntaxError: On a malformed comment
        """
        return self._run("atom", atom, source)

    def dot_atom(self, source: str) -> tuple[DotAtom, str]:
        """Tokenize ``[CFWS] dot-atom-text [CFWS]`` at the start of source."""
        return self._run("dot-atom", dot_atom, source)

    def dot_atom_text(self, source: str) -> tuple[str, str]:
        """Tokenize ``1*atext *("." 1*atext)`` at the start of source."""
        return self._run("dot-atom-text", lambda cursor, _: dot_atom_text(cursor), source)

    def comment(self, source: str) -> tuple[str, str]:
        """Tokenize one (possibly nested) comment at the start of source.

        Example:
            >>> MessageTokenizer().comment("(Hello (You (Are))) ABC")
            ('(Hello (You (Are)))', ' ABC')
        """
        return self._run("comment", comment, source)

    def cfws(self, source: str) -> tuple[str, str]:
        """Tokenize CFWS at the start of source, normalized."""
        return self._run("CFWS", cfws, source)

    def fws(self, source: str) -> tuple[str, str]:
        """Match folding whitespace at the start of source, verbatim."""
        return self._run("FWS", lambda cursor, _: fws(cursor), source)

    def _check_size(self, source: str) -> None:
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in MessageTokenizer constructor to increase limit."
            )
            raise ValueError(msg)

    def _run[T](self, rule_name: str, rule: Rule[T], source: str) -> tuple[T, str]:
        self._check_size(source)

        cursor = Cursor(source, 0)
        context = ParseContext(max_nesting_depth=self._max_nesting_depth)
        logger.debug("Tokenizing %s (%d characters)", rule_name, len(source))

        try:
            result = rule(cursor, context)
        except IMFFatalSyntaxError as e:
            logger.debug("Fatal %s error at position %s: %s", rule_name, e.position, e)
            raise

        if result is None:
            error = ParseError.from_diagnostic(
                ErrorTemplate.no_match(rule_name, cursor.peek()), cursor
            )
            logger.debug("No %s at position %d", rule_name, cursor.pos)
            raise IMFNoMatchError(
                error.diagnostic or error.message, parse_error=error
            )

        return result.value, result.remaining
