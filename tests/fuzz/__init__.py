"""Fuzz testing infrastructure for imflex.

This package contains:
- test_syntax_tokenizer_property: Arbitrary-input robustness of every grammar rule

Python 3.13+.
"""
