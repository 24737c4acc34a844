"""Aggregated loyalty overview for a single profile."""

from __future__ import annotations

from petwash_loyalty.domain.loyalty.tiers import TierTable, tier_progress
from petwash_loyalty.models.loyalty import LoyaltyProfile, LoyaltySnapshot
from petwash_loyalty.services.loyalty.levels import level_progress
from petwash_loyalty.services.loyalty.streaks import streak_bonus, streak_milestone


def build_loyalty_snapshot(table: TierTable, profile: LoyaltyProfile) -> LoyaltySnapshot:
    """Derive tier, level and streak state from the profile counters."""

    return LoyaltySnapshot(
        tier=tier_progress(table, profile.lifetime_points),
        level=level_progress(profile.xp),
        streak_days=profile.streak_days,
        streak_multiplier=streak_bonus(profile.streak_days),
        streak_milestone=streak_milestone(profile.streak_days),
        current_points=profile.current_points,
    )
