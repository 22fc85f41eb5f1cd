"""Single-character classifiers for RFC 5322 lexical tokens.

Each classifier consumes exactly one character on success and returns
None (no match) on any other character or at EOF. The character tables
are immutable module constants built once at import.

    VCHAR    = %x21-7E
    WSP      = SP / HTAB
    atext    = ALPHA / DIGIT / "!" / "#" / "$" / "%" / "&" / "'" / "*" /
               "+" / "-" / "/" / "=" / "?" / "^" / "_" / "`" / "{" /
               "|" / "}" / "~"
    ctext    = %d33-39 / %d42-91 / %d93-126
    specials = "(" / ")" / "<" / ">" / "[" / "]" / ":" / ";" / "@" /
               "\\" / "," / "." / DQUOTE

obs-ctext is not supported.
"""

import string

from imflex.syntax.cursor import Cursor, ParseResult

__all__ = [
    "ATEXT_CHARS",
    "CTEXT_CHARS",
    "SPECIALS_CHARS",
    "VCHAR_CHARS",
    "WSP_CHARS",
    "atext",
    "crlf",
    "ctext",
    "specials",
    "vchar",
    "wsp",
]

VCHAR_CHARS: frozenset[str] = frozenset(chr(c) for c in range(0x21, 0x7F))

WSP_CHARS: frozenset[str] = frozenset(" \t")

ATEXT_CHARS: frozenset[str] = frozenset(
    string.ascii_letters + string.digits + "!#$%&'*+-/=?^_`{|}~"
)

# Printable US-ASCII minus "(", ")" and "\"
CTEXT_CHARS: frozenset[str] = VCHAR_CHARS - frozenset("()\\")

SPECIALS_CHARS: frozenset[str] = frozenset('()<>[]:;@\\,."')


def _one_of(cursor: Cursor, charset: frozenset[str]) -> ParseResult[str] | None:
    if cursor.is_eof or cursor.current not in charset:
        return None
    return ParseResult(cursor.current, cursor.advance())


def vchar(cursor: Cursor) -> ParseResult[str] | None:
    """Match one visible (printing) US-ASCII character.

    Examples:
        "johndoe" -> "j", remaining "ohndoe"
        " aabbcc" -> None
    """
    return _one_of(cursor, VCHAR_CHARS)


def wsp(cursor: Cursor) -> ParseResult[str] | None:
    """Match one space or horizontal tab."""
    return _one_of(cursor, WSP_CHARS)


def atext(cursor: Cursor) -> ParseResult[str] | None:
    """Match one character legal in an unquoted atom."""
    return _one_of(cursor, ATEXT_CHARS)


def ctext(cursor: Cursor) -> ParseResult[str] | None:
    """Match one comment text character."""
    return _one_of(cursor, CTEXT_CHARS)


def specials(cursor: Cursor) -> ParseResult[str] | None:
    """Match one of the delimiter characters reserved by the grammar."""
    return _one_of(cursor, SPECIALS_CHARS)


def crlf(cursor: Cursor) -> ParseResult[str] | None:
    """Match a CR LF line ending. A bare CR or bare LF does not match."""
    if cursor.slice_ahead(2) != "\r\n":
        return None
    return ParseResult("\r\n", cursor.advance(2))
