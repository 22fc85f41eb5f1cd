"""Shared constants for imflex.

This module provides centralized configuration constants used across
the syntax and diagnostics packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested comments
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_COMMENT_LEVEL",
    "RESERVE_FRAMES",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Comments are the only recursive production in the RFC 5322 token grammar:
#
#     comment  = "(" *([FWS] ccontent) [FWS] ")"
#     ccontent = ctext / quoted-pair / comment
#
# Nesting depth in the input maps one-to-one onto recursion depth in the
# parser, so an attacker controls the Python stack through the number of
# consecutive "(" characters. MAX_DEPTH bounds it.
#
# Real-world headers almost never nest comments more than two or three
# levels. 100 levels is clearly malformed or adversarial input.
#
# ============================================================================

# Maximum comment nesting depth.
MAX_DEPTH: int = 100

# Python stack frames consumed per comment nesting level
# (comment -> ccontent -> comment).
FRAMES_PER_COMMENT_LEVEL: int = 2

# Stack frames kept free for the caller and the CFWS/atom layers above
# the first comment.
RESERVE_FRAMES: int = 50

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (1 MiB).
# A single RFC 5322 token never legitimately approaches this; the limit
# exists to reject pathological input before scanning it.
MAX_SOURCE_SIZE: int = 1024 * 1024
