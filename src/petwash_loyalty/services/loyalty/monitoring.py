"""Member activity scoring, risk flags and fraud verdicts.

Callers aggregate a member's trailing 30-day counters (points earned and
redeemed, purchase count, average purchase value) and pass them in; nothing
here reads storage or the clock.
"""

from __future__ import annotations

from typing import Final, List, Mapping, Optional

from loguru import logger

from petwash_loyalty.models.loyalty import FraudAssessment, RecommendedAction, RiskFlag

MAX_POINTS_PER_DAY: Final[int] = 10_000
FRAUD_THRESHOLD: Final[float] = 0.75
REVIEW_THRESHOLD: Final[float] = 0.5
SUSPICIOUS_REDEMPTION_RATIO: Final[float] = 0.9
SUSPICIOUS_REDEMPTION_MIN_POINTS: Final[int] = 1000
HIGH_PURCHASE_FREQUENCY: Final[int] = 20
HIGH_POINTS_PER_PURCHASE: Final[int] = 1000
MONITORING_WINDOW_DAYS: Final[int] = 30

TIER_PRODUCTIVITY_BONUS: Final[Mapping[str, int]] = {
    "bronze": 0,
    "silver": 5,
    "gold": 10,
    "platinum": 20,
    "diamond": 25,
    "emerald": 30,
    "royal": 40,
}


def productivity_score(
    purchase_count: int,
    average_purchase_value: float,
    points_earned: float,
    tier_id: Optional[str],
    *,
    tier_bonuses: Mapping[str, int] = TIER_PRODUCTIVITY_BONUS,
) -> float:
    """Score spend quality on a 0-100 scale.

    Purchases contribute up to 30, average basket up to 30, points up to 20
    and the tier bonus whatever ``tier_bonuses`` grants; unknown tiers add 0.
    """

    score = float(min(purchase_count * 5, 30))
    score += min(average_purchase_value / 10, 30)
    score += min(points_earned / 200, 20)
    score += tier_bonuses.get(tier_id or "", 0)
    return max(0.0, min(score, 100.0))


def detect_risk_flags(
    points_earned: float,
    points_redeemed: float,
    purchase_count: int,
    *,
    max_points_per_day: int = MAX_POINTS_PER_DAY,
) -> List[RiskFlag]:
    flags: List[RiskFlag] = []

    if points_earned > max_points_per_day:
        flags.append(RiskFlag.EXCESSIVE_POINTS_EARNED)

    redemption_ratio = points_redeemed / points_earned if points_earned > 0 else 0
    if (
        redemption_ratio > SUSPICIOUS_REDEMPTION_RATIO
        and points_redeemed > SUSPICIOUS_REDEMPTION_MIN_POINTS
    ):
        flags.append(RiskFlag.SUSPICIOUS_REDEMPTION_PATTERN)

    if purchase_count > HIGH_PURCHASE_FREQUENCY:
        flags.append(RiskFlag.HIGH_PURCHASE_FREQUENCY)

    return flags


def recommended_action(fraud_score: float) -> RecommendedAction:
    if fraud_score >= FRAUD_THRESHOLD:
        return RecommendedAction.BLOCK
    if fraud_score >= REVIEW_THRESHOLD:
        return RecommendedAction.REVIEW
    return RecommendedAction.ALLOW


def assess_fraud(
    points_earned: float,
    points_redeemed: float,
    purchase_count: int,
    *,
    max_points_per_day: int = MAX_POINTS_PER_DAY,
) -> FraudAssessment:
    """Weigh the 30-day counters into a fraud score and a recommended action.

    Weights: abnormal accumulation 0.4, excessive-points flag 0.3,
    suspicious redemptions 0.3, high points per purchase 0.2.
    """

    flags = detect_risk_flags(
        points_earned,
        points_redeemed,
        purchase_count,
        max_points_per_day=max_points_per_day,
    )
    reasons: List[str] = []
    fraud_score = 0.0

    if points_earned > max_points_per_day * MONITORING_WINDOW_DAYS:
        reasons.append("Abnormally high points accumulation")
        fraud_score += 0.4

    if RiskFlag.EXCESSIVE_POINTS_EARNED in flags:
        reasons.append("Excessive points in short timeframe")
        fraud_score += 0.3

    if RiskFlag.SUSPICIOUS_REDEMPTION_PATTERN in flags:
        reasons.append("Suspicious redemption patterns detected")
        fraud_score += 0.3

    points_per_purchase = points_earned / purchase_count if purchase_count > 0 else 0
    if points_per_purchase > HIGH_POINTS_PER_PURCHASE:
        reasons.append("Unusually high points per transaction")
        fraud_score += 0.2

    # Weights are tenths; rounding keeps threshold comparisons exact.
    fraud_score = round(fraud_score, 2)
    action = recommended_action(fraud_score)

    logger.bind(fraud_score=fraud_score, action=action.value).debug("Fraud assessment computed")
    return FraudAssessment(
        is_fraudulent=fraud_score >= FRAUD_THRESHOLD,
        confidence=fraud_score,
        reasons=tuple(reasons),
        recommended_action=action,
        risk_flags=tuple(flags),
    )
