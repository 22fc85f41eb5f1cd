"""Folding whitespace for RFC 5322 lexical tokens.

    FWS = ([*WSP CRLF] 1*WSP)

fws() returns the matched text verbatim. Collapsing a fold to a single
space is the job of the comment and CFWS rules one layer up.

obs-FWS (several folds in a row) is not supported.
"""

from imflex.syntax.cursor import Cursor, ParseResult
from imflex.syntax.parser.classifiers import crlf, wsp

__all__ = ["fws", "skip_wsp"]


def skip_wsp(cursor: Cursor) -> Cursor:
    """Skip any run of WSP (zero or more).

    Returns:
        New cursor at first non-WSP character (or EOF)
    """
    while (result := wsp(cursor)) is not None:
        cursor = result.cursor
    return cursor


def fws(cursor: Cursor) -> ParseResult[str] | None:
    """Parse folding whitespace.

    Examples:
        "  x"          -> "  ", remaining "x"
        " \\r\\n\\tx"    -> " \\r\\n\\t", remaining "x"
        "\\r\\nx"        -> None (a fold must be followed by WSP)
        " \\r\\nx"       -> " ", remaining "\\r\\nx"

    When the optional fold prefix matches but no WSP follows it, the
    prefix is dropped and 1*WSP is matched from the start instead.

    Args:
        cursor: Current position in source

    Returns:
        ParseResult with the exact matched substring, or None
    """
    start = cursor

    folded = crlf(skip_wsp(cursor))
    if folded is not None:
        end = skip_wsp(folded.cursor)
        if end.pos > folded.cursor.pos:
            return ParseResult(start.slice_to(end.pos), end)

    end = skip_wsp(start)
    if end.pos == start.pos:
        return None
    return ParseResult(start.slice_to(end.pos), end)
