"""Loyalty engine records and closed vocabularies.

Every record is immutable. Callers build them from their own storage rows,
pass them into the engine functions, and serialise the results through
``as_payload`` into view-models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class OfferType(str, Enum):
    """Kinds of personalised offers the generator can emit."""

    TIME_BASED = "time_based"
    FREQUENCY = "frequency"
    TIER_UPGRADE = "tier_upgrade"
    COMEBACK = "comeback"


class RiskFlag(str, Enum):
    """Activity patterns that warrant a closer look at a member."""

    EXCESSIVE_POINTS_EARNED = "excessive_points_earned"
    SUSPICIOUS_REDEMPTION_PATTERN = "suspicious_redemption_pattern"
    HIGH_PURCHASE_FREQUENCY = "high_purchase_frequency"


class RecommendedAction(str, Enum):
    ALLOW = "allow"
    REVIEW = "review"
    BLOCK = "block"


class BadgeStatType(str, Enum):
    """User statistics a badge condition may test."""

    WASH_COUNT = "wash_count"
    CURRENT_STREAK = "current_streak"
    LONGEST_STREAK = "longest_streak"
    EARLY_MORNING_WASHES = "early_morning_washes"
    WEEKEND_WASHES = "weekend_washes"
    ECO_WASHES = "eco_washes"


class ComparisonOperator(str, Enum):
    """Comparison applied between a user statistic and a badge threshold."""

    GTE = ">="
    GT = ">"
    EQ = "=="
    LTE = "<="
    LT = "<"


@dataclass(frozen=True, slots=True)
class TierBenefits:
    """Perks attached to a loyalty tier."""

    discount_percent: int = 0
    points_multiplier: float = 1.0
    priority_support: bool = False
    birthday_bonus: int = 0
    free_washes_per_year: int = 0
    exclusive_access: bool = False
    concierge_service: bool = False

    def as_payload(self) -> Dict[str, Any]:
        return {
            "discountPercent": self.discount_percent,
            "pointsMultiplier": self.points_multiplier,
            "prioritySupport": self.priority_support,
            "birthdayBonus": self.birthday_bonus,
            "freeWashesPerYear": self.free_washes_per_year,
            "exclusiveAccess": self.exclusive_access,
            "conciergeService": self.concierge_service,
        }


@dataclass(frozen=True, slots=True)
class TierConfig:
    """A single loyalty bracket keyed by its lifetime-points threshold."""

    id: str
    name: str
    threshold: int
    benefits: TierBenefits = field(default_factory=TierBenefits)
    icon: str = ""
    color: str | None = None

    def as_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "threshold": self.threshold,
            "benefits": self.benefits.as_payload(),
            "icon": self.icon,
        }
        if self.color:
            payload["color"] = self.color
        return payload


@dataclass(frozen=True, slots=True)
class LoyaltyProfile:
    """Caller-owned activity counters for one customer."""

    lifetime_points: int = 0
    current_points: int = 0
    tier: str = ""
    xp: int = 0
    streak_days: int = 0
    longest_streak: int = 0
    total_washes: int = 0
    last_wash_date: Optional[datetime] = None
    preferred_times: Tuple[str, ...] = ()
    redemption_count: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Reward:
    """Catalog entry that can be exchanged for points."""

    points_cost: int
    min_tier: Optional[str] = None
    stock: Optional[int] = None
    max_redemptions_per_user: Optional[int] = None


@dataclass(frozen=True, slots=True)
class BadgeCondition:
    """Threshold rule that unlocks a badge."""

    type: str
    operator: str
    value: float


@dataclass(frozen=True, slots=True)
class BadgeStats:
    """Aggregated statistics badge conditions are evaluated against."""

    total_washes: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    early_morning_washes: int = 0
    weekend_washes: int = 0
    eco_washes: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BadgeStats":
        """Build stats from either snake_case or camelCase keys."""

        def pick(snake: str, camel: str) -> int:
            value = data.get(snake, data.get(camel, 0))
            return value if isinstance(value, (int, float)) else 0

        return cls(
            total_washes=pick("total_washes", "totalWashes"),
            current_streak=pick("current_streak", "currentStreak"),
            longest_streak=pick("longest_streak", "longestStreak"),
            early_morning_washes=pick("early_morning_washes", "earlyMorningWashes"),
            weekend_washes=pick("weekend_washes", "weekendWashes"),
            eco_washes=pick("eco_washes", "ecoWashes"),
        )


@dataclass(frozen=True, slots=True)
class Offer:
    """Personalised promotional offer."""

    id: str
    title: str
    description: str
    discount: int
    expires_in: str
    type: OfferType

    def as_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "discount": self.discount,
            "expiresIn": self.expires_in,
            "type": self.type.value,
        }


@dataclass(frozen=True, slots=True)
class StreakMilestone:
    days: int
    points: int
    badge_code: str
    message: str


@dataclass(frozen=True, slots=True)
class TierProgress:
    current_tier: TierConfig
    next_tier: Optional[TierConfig]
    progress_percent: float
    points_needed: float

    def as_payload(self) -> Dict[str, Any]:
        return {
            "currentTier": self.current_tier.as_payload(),
            "nextTier": self.next_tier.as_payload() if self.next_tier else None,
            "progressPercent": self.progress_percent,
            "pointsNeeded": self.points_needed,
        }


@dataclass(frozen=True, slots=True)
class LevelProgress:
    level: int
    xp_in_current_level: int
    xp_needed_for_next: int
    progress_percent: float

    def as_payload(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "xpInCurrentLevel": self.xp_in_current_level,
            "xpNeededForNext": self.xp_needed_for_next,
            "progressPercent": self.progress_percent,
        }


@dataclass(frozen=True, slots=True)
class MilestoneReward:
    """Outcome of a streak milestone lookup; only hits carry reward fields."""

    is_milestone: bool
    points: Optional[int] = None
    badge_code: Optional[str] = None
    message: Optional[str] = None

    def as_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"isMilestone": self.is_milestone}
        if self.is_milestone:
            payload.update(
                {"points": self.points, "badgeCode": self.badge_code, "message": self.message}
            )
        return payload


@dataclass(frozen=True, slots=True)
class RedemptionDecision:
    can_redeem: bool
    reason: Optional[str] = None

    def as_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"canRedeem": self.can_redeem}
        if self.reason is not None:
            payload["reason"] = self.reason
        return payload


@dataclass(frozen=True, slots=True)
class ReferralRewards:
    referrer_points: int
    referee_points: int
    referrer_message: str
    referee_message: str

    def as_payload(self) -> Dict[str, Any]:
        return {
            "referrerPoints": self.referrer_points,
            "refereePoints": self.referee_points,
            "referrerMessage": self.referrer_message,
            "refereeMessage": self.referee_message,
        }


@dataclass(frozen=True, slots=True)
class LoyaltySnapshot:
    """Serializable loyalty overview for clients."""

    tier: TierProgress
    level: LevelProgress
    streak_days: int
    streak_multiplier: float
    streak_milestone: MilestoneReward
    current_points: int

    def as_payload(self) -> Dict[str, Any]:
        return {
            "tier": self.tier.as_payload(),
            "level": self.level.as_payload(),
            "streakDays": self.streak_days,
            "streakMultiplier": self.streak_multiplier,
            "streakMilestone": self.streak_milestone.as_payload(),
            "currentPoints": self.current_points,
        }


@dataclass(frozen=True, slots=True)
class FraudAssessment:
    """Weighted fraud verdict for a member's recent activity."""

    is_fraudulent: bool
    confidence: float
    reasons: Tuple[str, ...]
    recommended_action: RecommendedAction
    risk_flags: Tuple[RiskFlag, ...] = ()

    def as_payload(self) -> Dict[str, Any]:
        return {
            "isFraudulent": self.is_fraudulent,
            "confidence": self.confidence,
            "reasons": list(self.reasons),
            "recommendedAction": self.recommended_action.value,
            "riskFlags": [flag.value for flag in self.risk_flags],
        }


__all__ = [
    "BadgeCondition",
    "BadgeStatType",
    "BadgeStats",
    "ComparisonOperator",
    "FraudAssessment",
    "LevelProgress",
    "LoyaltyProfile",
    "LoyaltySnapshot",
    "MilestoneReward",
    "Offer",
    "OfferType",
    "RecommendedAction",
    "RedemptionDecision",
    "ReferralRewards",
    "Reward",
    "RiskFlag",
    "StreakMilestone",
    "TierBenefits",
    "TierConfig",
    "TierProgress",
]
