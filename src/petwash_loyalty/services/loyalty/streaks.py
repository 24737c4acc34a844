"""Streak multipliers and one-shot milestone celebrations."""

from __future__ import annotations

from typing import Final, Tuple

from petwash_loyalty.models.loyalty import MilestoneReward, StreakMilestone

# (minimum streak days, multiplier), highest band first
STREAK_BONUS_BANDS: Final[Tuple[Tuple[int, float], ...]] = (
    (30, 2.0),
    (14, 1.5),
    (7, 1.25),
    (3, 1.1),
)
BASE_STREAK_MULTIPLIER: Final[float] = 1.0

STREAK_MILESTONES: Final[Tuple[StreakMilestone, ...]] = (
    StreakMilestone(days=3, points=50, badge_code="streak_3", message="3-day streak! Keep it up!"),
    StreakMilestone(days=7, points=150, badge_code="streak_7", message="Weekly Warrior! 🔥"),
    StreakMilestone(days=14, points=300, badge_code="streak_14", message="Two weeks strong!"),
    StreakMilestone(days=30, points=1000, badge_code="streak_30", message="Monthly Legend! 🏆"),
    StreakMilestone(days=60, points=2500, badge_code="streak_60", message="Unstoppable!"),
    StreakMilestone(days=100, points=5000, badge_code="streak_100", message="Century Club! 💯"),
)


def streak_bonus(streak_days: int) -> float:
    for minimum_days, multiplier in STREAK_BONUS_BANDS:
        if streak_days >= minimum_days:
            return multiplier
    return BASE_STREAK_MULTIPLIER


def streak_milestone(streak_days: int) -> MilestoneReward:
    """Reward for landing exactly on a milestone day.

    This is an exact match, not a range check: callers invoke it once per
    streak-day transition so a celebration fires only on the day it is hit.
    """

    for milestone in STREAK_MILESTONES:
        if milestone.days == streak_days:
            return MilestoneReward(
                is_milestone=True,
                points=milestone.points,
                badge_code=milestone.badge_code,
                message=milestone.message,
            )
    return MilestoneReward(is_milestone=False)
