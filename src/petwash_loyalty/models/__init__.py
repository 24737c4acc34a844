"""Loyalty engine records."""

from .loyalty import (  # noqa: F401
    BadgeCondition,
    BadgeStatType,
    BadgeStats,
    ComparisonOperator,
    FraudAssessment,
    LevelProgress,
    LoyaltyProfile,
    LoyaltySnapshot,
    MilestoneReward,
    Offer,
    OfferType,
    RecommendedAction,
    RedemptionDecision,
    ReferralRewards,
    Reward,
    RiskFlag,
    StreakMilestone,
    TierBenefits,
    TierConfig,
    TierProgress,
)
