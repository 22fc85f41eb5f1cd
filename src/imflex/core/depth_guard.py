"""Depth limiting for recursion protection.

Comment nesting in RFC 5322 headers is unbounded by the grammar, so the
parser's recursion depth is chosen by whoever wrote the input. This module
clamps configured nesting limits against the interpreter recursion limit
so that a limit breach is always reported as a structured
IMFNestingDepthError, never as a RecursionError.

Thread-safe: pure functions, no module state.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from imflex.constants import FRAMES_PER_COMMENT_LEVEL, RESERVE_FRAMES

__all__ = ["depth_clamp"]

logger = logging.getLogger(__name__)


def depth_clamp(
    requested_depth: int,
    *,
    frames_per_level: int = FRAMES_PER_COMMENT_LEVEL,
    reserve_frames: int = RESERVE_FRAMES,
) -> int:
    """Clamp requested depth against Python recursion limit.

    Validates requested depth against sys.getrecursionlimit() to prevent
    RecursionError on systems with constrained stack limits. Logs warning
    if clamping occurs.

    Args:
        requested_depth: Desired maximum nesting depth
        frames_per_level: Stack frames consumed per nesting level
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary (never below 1)

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(250)
        >>> depth_clamp(50)  # OK, 50 * 2 frames fits in 200
        50
        >>> depth_clamp(500)  # Exceeds limit, clamped to (250 - 50) // 2
        100
    """
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
