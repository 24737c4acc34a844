"""XP levels on triangular thresholds.

Level ``L`` spans ``100 * L`` XP, so reaching level ``N`` takes
``100 * (N - 1) * N / 2`` XP in total: level 2 at 100, level 3 at 300,
level 4 at 600 and so on.
"""

from __future__ import annotations

import math

from petwash_loyalty.models.loyalty import LevelProgress

XP_PER_LEVEL_STEP = 100


def xp_for_next_level(current_level: int) -> int:
    """Width of the XP band for ``current_level``."""

    return current_level * XP_PER_LEVEL_STEP


def cumulative_xp_for_level(level: int) -> int:
    """Total XP required to reach ``level`` from zero."""

    if level <= 1:
        return 0
    return XP_PER_LEVEL_STEP * (level - 1) * level // 2


def level_for_xp(xp: float) -> int:
    if not math.isfinite(xp) or xp < XP_PER_LEVEL_STEP:
        return 1
    # Largest L with (L - 1) * L <= 2 * xp / step, solved exactly with isqrt.
    pairs = 2 * int(xp) // XP_PER_LEVEL_STEP
    return (math.isqrt(4 * pairs + 1) - 1) // 2 + 1


def level_progress(xp: float) -> LevelProgress:
    if not math.isfinite(xp):
        xp = 0
    # progress_percent is left unclamped; level_for_xp keeps it below 100.
    level = level_for_xp(xp)
    xp_in_current_level = xp - cumulative_xp_for_level(level)
    xp_needed_for_next = xp_for_next_level(level)
    return LevelProgress(
        level=level,
        xp_in_current_level=xp_in_current_level,
        xp_needed_for_next=xp_needed_for_next,
        progress_percent=xp_in_current_level / xp_needed_for_next * 100,
    )
