"""imflex - RFC 5322 (Internet Message Format) lexical tokenizer.

Recognizes the lexical tokens of RFC 5322 section 3.2: atoms, dot-atoms,
comments (arbitrarily nested), folding whitespace, and quoted-pair
escapes. Higher-level mailbox, address and header parsers assemble their
structures from these tokens.

Public API:
    MessageTokenizer - String-level tokenizer with resource limits
    Atom, DotAtom - Token types
    tokenize_atom, tokenize_dot_atom, tokenize_comment, tokenize_cfws -
        Convenience functions using default limits

Exceptions:
    IMFError - Base exception class
    IMFSyntaxError - Token grammar errors (check ``.fatal``)
    IMFNoMatchError - Recoverable: the rule did not match
    IMFFatalSyntaxError - Structural failure (unterminated comment, ...)
    IMFNestingDepthError - Comment nesting exceeded the configured limit

Submodules:
    imflex.syntax.parser.rules - Cursor-level grammar rules
    imflex.syntax.parser.classifiers - Character classifiers
    imflex.diagnostics - Diagnostic codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    IMFError,
    IMFFatalSyntaxError,
    IMFNestingDepthError,
    IMFNoMatchError,
    IMFSyntaxError,
)
from .syntax import (
    Atom,
    DotAtom,
    MessageTokenizer,
    tokenize_atom,
    tokenize_cfws,
    tokenize_comment,
    tokenize_dot_atom,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("imflex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# RFC conformance
__rfc__ = "5322"
__rfc_url__ = "https://www.rfc-editor.org/rfc/rfc5322#section-3.2"

__all__ = [
    "Atom",
    "DotAtom",
    "IMFError",
    "IMFFatalSyntaxError",
    "IMFNestingDepthError",
    "IMFNoMatchError",
    "IMFSyntaxError",
    "MessageTokenizer",
    "__rfc__",
    "__rfc_url__",
    "__version__",
    "tokenize_atom",
    "tokenize_cfws",
    "tokenize_comment",
    "tokenize_dot_atom",
]
