"""RFC 5322 lexical token parser module.

Module Organization:
- classifiers.py: Single-character classifiers (vchar, wsp, atext, ctext, specials)
- whitespace.py: Folding whitespace (FWS)
- rules.py: Comment engine, CFWS, atom and dot-atom builders
- core.py: MessageTokenizer string-level facade

Public API:
    MessageTokenizer: String-level tokenizer with resource limits
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from imflex.syntax.parser.core import MessageTokenizer
from imflex.syntax.parser.rules import ParseContext

__all__ = ["MessageTokenizer", "ParseContext"]
