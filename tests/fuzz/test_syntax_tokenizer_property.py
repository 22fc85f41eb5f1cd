"""Fuzz property-based tests for the tokenizer: arbitrary input, truncation, progress."""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from imflex.diagnostics import IMFFatalSyntaxError
from imflex.syntax.cursor import Cursor
from imflex.syntax.parser.rules import atom, cfws, comment, dot_atom, dot_atom_text
from imflex.syntax.parser.whitespace import fws
from tests.strategies import comments

pytestmark = pytest.mark.fuzz

# Characters with structural meaning to the grammar, plus a few that have none.
LEXICAL_ALPHABET = "()\\ \t\r\n.@ab\"[]\x00é"

RULES = {
    "atom": atom,
    "cfws": cfws,
    "comment": comment,
    "dot_atom": dot_atom,
    "dot_atom_text": dot_atom_text,
    "fws": fws,
}


@pytest.mark.fuzz
class TestArbitraryInput:
    """Every rule either matches, declines, or fails fatally with a location."""

    @given(source=st.text(alphabet=LEXICAL_ALPHABET, max_size=40), rule=st.sampled_from(sorted(RULES)))
    @settings(max_examples=2000)
    def test_rule_outcomes(self, source: str, rule: str) -> None:
        """PROPERTY: a match consumes a prefix; a fatal error points inside the input."""
        try:
            result = RULES[rule](Cursor(source))
        except IMFFatalSyntaxError as e:
            event(f"outcome={rule}:fatal")
            assert e.position is not None
            assert 0 <= e.position <= len(source)
            return

        if result is None:
            event(f"outcome={rule}:none")
            return

        event(f"outcome={rule}:match")
        assert result.cursor.pos > 0
        assert source.endswith(result.remaining)

    @given(source=st.text(alphabet=LEXICAL_ALPHABET, max_size=40))
    def test_normalized_comments_are_single_line(self, source: str) -> None:
        """PROPERTY: CFWS output never contains CR or LF."""
        try:
            result = cfws(Cursor(source))
        except IMFFatalSyntaxError:
            return
        if result is not None:
            assert "\r" not in result.value
            assert "\n" not in result.value


@pytest.mark.fuzz
class TestTruncation:
    """Cutting a valid comment short is always fatal."""

    @given(case=comments(), data=st.data())
    def test_truncated_comment_is_fatal(self, case: tuple[str, str], data: st.DataObject) -> None:
        """PROPERTY: every proper non-empty prefix of a comment fails fatally."""
        source, _ = case
        cut = data.draw(st.integers(min_value=1, max_value=len(source) - 1))
        event(f"cut_at_end={cut == len(source) - 1}")

        with pytest.raises(IMFFatalSyntaxError):
            comment(Cursor(source[:cut]))
