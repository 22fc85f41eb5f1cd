"""RFC 5322 lexical syntax package.

Provides the cursor infrastructure, token types, grammar rules, and the
MessageTokenizer facade.

Python 3.13+.
"""

from .cursor import Cursor, ParseError, ParseResult
from .parser import MessageTokenizer, ParseContext
from .tokens import Atom, DotAtom, Token

__all__ = [
    "Atom",
    "Cursor",
    "DotAtom",
    "MessageTokenizer",
    "ParseContext",
    "ParseError",
    "ParseResult",
    "Token",
    "tokenize_atom",
    "tokenize_cfws",
    "tokenize_comment",
    "tokenize_dot_atom",
]


def tokenize_atom(source: str) -> tuple[Atom, str]:
    """Tokenize an atom at the start of source.

    Convenience function for MessageTokenizer().atom().

    Example:
        >>> from imflex.syntax import tokenize_atom
        >>> token, rest = tokenize_atom("(hello)ABC")
        >>> token.content
        'ABC'
    """
    return MessageTokenizer().atom(source)


def tokenize_dot_atom(source: str) -> tuple[DotAtom, str]:
    """Tokenize a dot-atom at the start of source.

    Convenience function for MessageTokenizer().dot_atom().
    """
    return MessageTokenizer().dot_atom(source)


def tokenize_comment(source: str) -> tuple[str, str]:
    """Tokenize a comment at the start of source.

    Convenience function for MessageTokenizer().comment().
    """
    return MessageTokenizer().comment(source)


def tokenize_cfws(source: str) -> tuple[str, str]:
    """Tokenize CFWS at the start of source.

    Convenience function for MessageTokenizer().cfws().
    """
    return MessageTokenizer().cfws(source)
