"""Points and XP earned per wash."""

from __future__ import annotations

import math

from petwash_loyalty.domain.loyalty.tiers import TierTable, get_tier

BASE_WASH_XP = 10
HIGH_VALUE_WASH_THRESHOLD = 100
HIGH_VALUE_WASH_XP = 5
PREMIUM_WASH_THRESHOLD = 200
PREMIUM_WASH_XP = 10
FIRST_WASH_OF_DAY_XP = 15


def wash_points(table: TierTable, amount: float, tier_id: str | None) -> int:
    """Points for a wash: one per whole currency unit times the tier multiplier.

    Unknown tiers and non-finite amounts earn nothing instead of raising.
    """

    tier = get_tier(table, tier_id)
    if tier is None or not math.isfinite(amount):
        return 0
    base_points = math.floor(amount)
    return math.floor(base_points * tier.benefits.points_multiplier)


def wash_xp(amount: float, is_first_wash_today: bool) -> int:
    xp = BASE_WASH_XP
    # Value bonuses stack: a premium wash also counts as high value.
    if amount >= HIGH_VALUE_WASH_THRESHOLD:
        xp += HIGH_VALUE_WASH_XP
    if amount >= PREMIUM_WASH_THRESHOLD:
        xp += PREMIUM_WASH_XP
    if is_first_wash_today:
        xp += FIRST_WASH_OF_DAY_XP
    return xp
