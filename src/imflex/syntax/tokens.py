"""RFC 5322 token types.

Atoms and dot-atoms are the two tokens this package exports to
mailbox/address/header assemblers. Both carry their surrounding CFWS
separately from the payload so a caller can recover the decorated token
and its semantic content independently.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Atom", "DotAtom", "Token"]


@dataclass(frozen=True, slots=True)
class Atom:
    """atom = [CFWS] 1*atext [CFWS]

    Attributes:
        pre_comment: Normalized CFWS before the atext run, or None
        content: The atext run, verbatim
        post_comment: Normalized CFWS after the atext run, or None

    Example:
        Source: "(hello)ABC "
        Atom(pre_comment="(hello)", content="ABC", post_comment=" ")
    """

    pre_comment: str | None
    content: str
    post_comment: str | None

    @property
    def decorated(self) -> str:
        """Token text with its normalized CFWS reattached."""
        return f"{self.pre_comment or ''}{self.content}{self.post_comment or ''}"


@dataclass(frozen=True, slots=True)
class DotAtom:
    """dot-atom = [CFWS] dot-atom-text [CFWS]

    ``content`` is one contiguous slice of the source matching
    ``1*atext *("." 1*atext)``.

    Attributes:
        pre_comment: Normalized CFWS before dot-atom-text, or None
        content: The dot-atom-text, byte-identical to the source
        post_comment: Normalized CFWS after dot-atom-text, or None
    """

    pre_comment: str | None
    content: str
    post_comment: str | None

    @property
    def decorated(self) -> str:
        """Token text with its normalized CFWS reattached."""
        return f"{self.pre_comment or ''}{self.content}{self.post_comment or ''}"

    @property
    def labels(self) -> tuple[str, ...]:
        """Dot-separated atext runs (domain labels or local-part segments)."""
        return tuple(self.content.split("."))


type Token = Atom | DotAtom
