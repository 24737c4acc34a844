"""Reward redemption eligibility."""

from __future__ import annotations

from petwash_loyalty.domain.loyalty.tiers import TierTable, tier_rank
from petwash_loyalty.models.loyalty import LoyaltyProfile, RedemptionDecision, Reward


def can_redeem(table: TierTable, reward: Reward, profile: LoyaltyProfile) -> RedemptionDecision:
    """Decide whether ``profile`` may redeem ``reward``.

    Checks run in a fixed order (points, tier, stock, per-user cap) and stop
    at the first failure so the caller surfaces a single reason.
    """

    if profile.current_points < reward.points_cost:
        deficit = reward.points_cost - profile.current_points
        return RedemptionDecision(can_redeem=False, reason=f"Need {deficit} more points")

    if reward.min_tier:
        # An unknown required tier ranks -1 and never blocks; an unknown
        # member tier ranks below every configured tier.
        required_rank = tier_rank(table, reward.min_tier)
        member_rank = tier_rank(table, profile.tier)
        if member_rank < required_rank:
            return RedemptionDecision(
                can_redeem=False,
                reason=f"Requires {reward.min_tier} tier or higher",
            )

    if reward.stock is not None and reward.stock <= 0:
        return RedemptionDecision(can_redeem=False, reason="Out of stock")

    if reward.max_redemptions_per_user:
        redemption_count = profile.redemption_count or 0
        if redemption_count >= reward.max_redemptions_per_user:
            return RedemptionDecision(can_redeem=False, reason="Maximum redemptions reached")

    return RedemptionDecision(can_redeem=True)
