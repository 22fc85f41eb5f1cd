"""Hypothesis strategies for imflex property-based testing.

Usage:
    from tests.strategies import comments, dot_atom_texts, fws_text

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - fws_text, comments, dot_atom_texts, cfws_text
"""

from .imf import (
    ATEXT_ALPHABET,
    CTEXT_ALPHABET,
    SPECIALS_ALPHABET,
    VCHAR_ALPHABET,
    atext_runs,
    cfws_text,
    comments,
    ctext_runs,
    dot_atom_texts,
    fws_text,
    nested_comment,
    non_vchar_chars,
    wsp_runs,
)

__all__ = [
    "ATEXT_ALPHABET",
    "CTEXT_ALPHABET",
    "SPECIALS_ALPHABET",
    "VCHAR_ALPHABET",
    "atext_runs",
    "cfws_text",
    "comments",
    "ctext_runs",
    "dot_atom_texts",
    "fws_text",
    "nested_comment",
    "non_vchar_chars",
    "wsp_runs",
]
