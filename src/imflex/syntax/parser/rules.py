"""Grammar rules for RFC 5322 comments, CFWS, atoms and dot-atoms.

    quoted-pair   = "\\" (VCHAR / WSP)
    ccontent      = ctext / quoted-pair / comment
    comment       = "(" *([FWS] ccontent) [FWS] ")"
    CFWS          = (1*([FWS] comment) [FWS]) / FWS
    atom          = [CFWS] 1*atext [CFWS]
    dot-atom-text = 1*atext *("." 1*atext)
    dot-atom      = [CFWS] dot-atom-text [CFWS]

Failure Model:
    Every rule returns ParseResult[T] on success and None when it does not
    match at the cursor. None is recoverable: the caller may try its next
    alternative at the same position.

    Structural violations raise IMFFatalSyntaxError (or its subclass
    IMFNestingDepthError). They unwind every enclosing alternative:

    - End of input inside an open comment
    - Any other character that cannot continue an open comment
    - A backslash at end of input
    - Comment nesting beyond ParseContext.max_nesting_depth

Normalization:
    Inside comments and CFWS, each FWS run before a piece of content
    collapses to exactly one space. Trailing FWS before ")" is dropped.
    A whitespace-only CFWS becomes " ". Comment text is otherwise kept.

obs-qp and obs-ctext are not supported.
"""

from dataclasses import dataclass

from imflex.constants import MAX_DEPTH
from imflex.core.depth_guard import depth_clamp
from imflex.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    IMFFatalSyntaxError,
    IMFNestingDepthError,
)
from imflex.syntax.cursor import Cursor, ParseError, ParseResult
from imflex.syntax.parser.classifiers import atext, ctext, vchar, wsp
from imflex.syntax.parser.whitespace import fws
from imflex.syntax.tokens import Atom, DotAtom

__all__ = [
    "ParseContext",
    "atom",
    "ccontent",
    "cfws",
    "comment",
    "dot_atom",
    "dot_atom_text",
    "quoted_pair",
]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Carries the comment nesting limit through the recursion by explicit
    parameter passing (no thread-local or global state), so every rule
    stays a pure function of its arguments.

    Attributes:
        max_nesting_depth: Maximum allowed comment nesting depth, clamped
            against the interpreter recursion limit
        current_depth: Number of comments currently open (0 = top level)
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def __post_init__(self) -> None:
        """Validate and clamp max_nesting_depth."""
        if self.max_nesting_depth < 0:
            msg = f"max_nesting_depth must be >= 0, got {self.max_nesting_depth}"
            raise ValueError(msg)
        object.__setattr__(self, "max_nesting_depth", depth_clamp(self.max_nesting_depth))

    def is_depth_exceeded(self) -> bool:
        """Check if opening another comment would exceed the limit."""
        return self.current_depth >= self.max_nesting_depth

    def enter_comment(self) -> "ParseContext":
        """Create new context with incremented depth for entering a comment."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


def _fatal(
    diagnostic: Diagnostic,
    cursor: Cursor,
    *,
    expected: tuple[str, ...] = (),
    error_cls: type[IMFFatalSyntaxError] = IMFFatalSyntaxError,
) -> IMFFatalSyntaxError:
    """Build a fatal error located at cursor (caller raises it)."""
    error = ParseError.from_diagnostic(diagnostic, cursor, expected)
    return error_cls(error.diagnostic or diagnostic, parse_error=error)


# =============================================================================
# Comments
# =============================================================================


def quoted_pair(cursor: Cursor) -> ParseResult[str] | None:
    """Parse quoted-pair: a backslash followed by VCHAR or WSP.

    Returns only the escaped character; the backslash is dropped.

    Examples:
        "\\rABC"  -> "r", remaining "ABC"
        "\\\\ABC" -> "\\", remaining "ABC"
        "ABC"    -> None

    Raises:
        IMFFatalSyntaxError: If the backslash is the last character of input
    """
    escaped = cursor.expect("\\")
    if escaped is None:
        return None

    if escaped.is_eof:
        raise _fatal(ErrorTemplate.dangling_escape(), escaped, expected=("VCHAR", "WSP"))

    return vchar(escaped) or wsp(escaped)


def ccontent(cursor: Cursor, context: ParseContext | None = None) -> ParseResult[str] | None:
    """Parse ccontent: ctext, quoted-pair, or a nested comment.

    ctext and quoted-pair are tried first. The nested comment is only
    attempted when both report no match; a fatal error raised while
    parsing it propagates unchanged.

    Examples:
        "[ABC"                  -> "[", remaining "ABC"
        "(ABC [dd(ABC\\")])AC"  -> "(ABC [dd(ABC")])", remaining "AC"
    """
    if context is None:
        context = ParseContext()

    result = ctext(cursor) or quoted_pair(cursor)
    if result is not None:
        return result

    return comment(cursor, context)


def comment(cursor: Cursor, context: ParseContext | None = None) -> ParseResult[str] | None:
    """Parse comment: "(" *([FWS] ccontent) [FWS] ")"

    Each ccontent preceded by FWS is emitted with a single leading space,
    whatever the physical fold or whitespace run looked like. Trailing FWS
    before ")" contributes nothing. The emitted pieces are wrapped in
    literal parentheses.

    Examples:
        "(Hello (You (Are))) ABC"            -> "(Hello (You (Are)))", remaining " ABC"
        "(\\r\\n ABC\\r\\n CDE\\r\\n\\t(\\r\\n EDC))ABC" -> "( ABC CDE ( EDC))", remaining "ABC"
        "()"                                 -> "()"
        "ABC"                                -> None

    Args:
        cursor: Current position in source
        context: Nesting depth tracking (a fresh top-level context if omitted)

    Returns:
        ParseResult with the reconstructed comment, or None if the cursor
        is not at "("

    Raises:
        IMFNestingDepthError: If opening this comment exceeds the depth limit
        IMFFatalSyntaxError: If the comment is not closed
    """
    if context is None:
        context = ParseContext()

    opened = cursor.expect("(")
    if opened is None:
        return None

    if context.is_depth_exceeded():
        raise _fatal(
            ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth),
            cursor,
            error_cls=IMFNestingDepthError,
        )
    inner = context.enter_comment()

    cursor = opened
    pieces: list[str] = []
    while True:
        folded = fws(cursor)
        content = ccontent(folded.cursor if folded else cursor, inner)
        if content is None:
            break
        pieces.append(f" {content.value}" if folded else content.value)
        cursor = content.cursor

    trailing = fws(cursor)
    if trailing is not None:
        cursor = trailing.cursor

    closed = cursor.expect(")")
    if closed is None:
        if cursor.is_eof:
            raise _fatal(
                ErrorTemplate.unterminated_comment(inner.current_depth),
                cursor,
                expected=(")",),
            )
        raise _fatal(
            ErrorTemplate.unexpected_character(cursor.current, "comment"),
            cursor,
            expected=(")",),
        )

    return ParseResult(f"({''.join(pieces)})", closed)


def cfws(cursor: Cursor, context: ParseContext | None = None) -> ParseResult[str] | None:
    """Parse CFWS: (1*([FWS] comment) [FWS]) / FWS

    Comment-bearing form: comments are kept, each FWS before a comment
    becomes one space, and a trailing FWS appends one space.
    Whitespace-only form: the whole FWS becomes exactly " ".

    Examples:
        "(a) (b)  x"      -> "(a) (b) ", remaining "x"
        "\\r\\n\\t  x"       -> " ", remaining "x"
        "x"               -> None
    """
    if context is None:
        context = ParseContext()

    pieces: list[str] = []
    scan = cursor
    while True:
        folded = fws(scan)
        found = comment(folded.cursor if folded else scan, context)
        if found is None:
            break
        pieces.append(f" {found.value}" if folded else found.value)
        scan = found.cursor

    if pieces:
        trailing = fws(scan)
        if trailing is not None:
            return ParseResult(f"{''.join(pieces)} ", trailing.cursor)
        return ParseResult("".join(pieces), scan)

    whitespace = fws(cursor)
    if whitespace is None:
        return None
    return ParseResult(" ", whitespace.cursor)


# =============================================================================
# Atoms
# =============================================================================


def _atext_run(cursor: Cursor) -> ParseResult[str] | None:
    """Parse 1*atext, returning the run verbatim."""
    start = cursor
    while (result := atext(cursor)) is not None:
        cursor = result.cursor
    if cursor.pos == start.pos:
        return None
    return ParseResult(start.slice_to(cursor.pos), cursor)


def atom(cursor: Cursor, context: ParseContext | None = None) -> ParseResult[Atom] | None:
    """Parse atom: [CFWS] 1*atext [CFWS]

    Examples:
        "(hello)ABC"   -> Atom("(hello)", "ABC", None)
        " john (x) @"  -> Atom(" ", "john", " (x) "), remaining "@"
        "@"            -> None

    Raises:
        IMFFatalSyntaxError: From a malformed comment in either CFWS
    """
    if context is None:
        context = ParseContext()

    pre = cfws(cursor, context)
    scan = pre.cursor if pre else cursor

    content = _atext_run(scan)
    if content is None:
        return None

    post = cfws(content.cursor, context)
    token = Atom(
        pre_comment=pre.value if pre else None,
        content=content.value,
        post_comment=post.value if post else None,
    )
    return ParseResult(token, post.cursor if post else content.cursor)


def dot_atom_text(cursor: Cursor) -> ParseResult[str] | None:
    """Parse dot-atom-text: 1*atext *("." 1*atext)

    Sums the lengths of the matched runs and slices the source once, so
    the value is always an exact substring of the input. A dot that is
    not immediately followed by atext is left unconsumed.

    Examples:
        "john.q.public@x" -> "john.q.public", remaining "@x"
        "a..b"            -> "a", remaining "..b"
        "a."              -> "a", remaining "."
        ".a"              -> None
    """
    first = _atext_run(cursor)
    if first is None:
        return None

    length = len(first.value)
    scan = first.cursor
    while (dot := scan.expect(".")) is not None:
        run = _atext_run(dot)
        if run is None:
            break
        length += 1 + len(run.value)
        scan = run.cursor

    return ParseResult(cursor.slice_ahead(length), scan)


def dot_atom(cursor: Cursor, context: ParseContext | None = None) -> ParseResult[DotAtom] | None:
    """Parse dot-atom: [CFWS] dot-atom-text [CFWS]

    Examples:
        "(c) example.com " -> DotAtom("(c) ", "example.com", " ")
        ".com"             -> None

    Raises:
        IMFFatalSyntaxError: From a malformed comment in either CFWS
    """
    if context is None:
        context = ParseContext()

    pre = cfws(cursor, context)
    scan = pre.cursor if pre else cursor

    content = dot_atom_text(scan)
    if content is None:
        return None

    post = cfws(content.cursor, context)
    token = DotAtom(
        pre_comment=pre.value if pre else None,
        content=content.value,
        post_comment=post.value if post else None,
    )
    return ParseResult(token, post.cursor if post else content.cursor)
