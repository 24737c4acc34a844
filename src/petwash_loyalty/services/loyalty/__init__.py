"""Loyalty calculation exports."""

from .activity import (  # noqa: F401
    engagement_score,
    predict_next_wash_date,
    wash_reminder_message,
)
from .badges import evaluate_badge_condition  # noqa: F401
from .levels import (  # noqa: F401
    cumulative_xp_for_level,
    level_for_xp,
    level_progress,
    xp_for_next_level,
)
from .monitoring import (  # noqa: F401
    TIER_PRODUCTIVITY_BONUS,
    assess_fraud,
    detect_risk_flags,
    productivity_score,
    recommended_action,
)
from .offers import days_since, personalized_offers  # noqa: F401
from .points import wash_points, wash_xp  # noqa: F401
from .redemption import can_redeem  # noqa: F401
from .referrals import (  # noqa: F401
    REFERRAL_REWARDS,
    ReferralHasher,
    polynomial_hash_32,
    referral_code,
    referral_rewards,
)
from .snapshot import build_loyalty_snapshot  # noqa: F401
from .streaks import STREAK_MILESTONES, streak_bonus, streak_milestone  # noqa: F401
