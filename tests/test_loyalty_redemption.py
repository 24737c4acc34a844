from petwash_loyalty.domain.loyalty import TierTable
from petwash_loyalty.models.loyalty import LoyaltyProfile, Reward
from petwash_loyalty.services.loyalty import can_redeem


def test_insufficient_points_reports_deficit(tier_table: TierTable) -> None:
    decision = can_redeem(
        tier_table,
        Reward(points_cost=50),
        LoyaltyProfile(current_points=40, tier="gold"),
    )

    assert decision.can_redeem is False
    assert "10" in decision.reason
    assert decision.as_payload() == {"canRedeem": False, "reason": "Need 10 more points"}


def test_points_failure_surfaces_before_everything_else(tier_table: TierTable) -> None:
    reward = Reward(points_cost=500, min_tier="gold", stock=0, max_redemptions_per_user=1)
    profile = LoyaltyProfile(current_points=10, tier="bronze", redemption_count=5)

    assert can_redeem(tier_table, reward, profile).reason == "Need 490 more points"


def test_tier_failure_surfaces_before_stock(tier_table: TierTable) -> None:
    reward = Reward(points_cost=50, min_tier="gold", stock=0)
    profile = LoyaltyProfile(current_points=100, tier="silver")

    decision = can_redeem(tier_table, reward, profile)

    assert decision.can_redeem is False
    assert decision.reason == "Requires gold tier or higher"


def test_out_of_stock_with_sufficient_points(tier_table: TierTable) -> None:
    reward = Reward(points_cost=50, stock=0)
    profile = LoyaltyProfile(current_points=100, tier="bronze")

    assert can_redeem(tier_table, reward, profile).reason == "Out of stock"


def test_per_user_cap(tier_table: TierTable) -> None:
    reward = Reward(points_cost=10, max_redemptions_per_user=2)

    capped = can_redeem(tier_table, reward, LoyaltyProfile(current_points=10, redemption_count=2))
    below = can_redeem(tier_table, reward, LoyaltyProfile(current_points=10, redemption_count=1))
    unknown = can_redeem(tier_table, reward, LoyaltyProfile(current_points=10))

    assert capped.reason == "Maximum redemptions reached"
    assert below.can_redeem is True
    assert unknown.can_redeem is True


def test_all_checks_pass(tier_table: TierTable) -> None:
    reward = Reward(points_cost=100, min_tier="silver", stock=3, max_redemptions_per_user=5)
    profile = LoyaltyProfile(current_points=100, tier="gold", redemption_count=1)

    decision = can_redeem(tier_table, reward, profile)

    assert decision.can_redeem is True
    assert decision.reason is None
    assert decision.as_payload() == {"canRedeem": True}


def test_unlimited_stock_and_unknown_tiers(tier_table: TierTable) -> None:
    profile = LoyaltyProfile(current_points=100, tier="bronze")

    assert can_redeem(tier_table, Reward(points_cost=10, stock=None), profile).can_redeem is True
    assert can_redeem(tier_table, Reward(points_cost=10, min_tier="legacy"), profile).can_redeem is True

    stranger = LoyaltyProfile(current_points=100, tier="unlisted")
    decision = can_redeem(tier_table, Reward(points_cost=10, min_tier="bronze"), stranger)
    assert decision.reason == "Requires bronze tier or higher"
