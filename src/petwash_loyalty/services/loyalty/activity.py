"""Wash cadence predictions and engagement scoring."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

DEFAULT_PET_NAME = "your pet"


def predict_next_wash_date(last_wash_date: datetime, average_interval_days: int) -> datetime:
    return last_wash_date + timedelta(days=average_interval_days)


def wash_reminder_message(days_until_predicted: int, pet_name: Optional[str] = None) -> str:
    name = pet_name or DEFAULT_PET_NAME

    if days_until_predicted <= 0:
        return f"Time for {name}'s wash! 🛁"
    if days_until_predicted == 1:
        return f"{name}'s wash is due tomorrow! Book now to keep your streak alive."
    if days_until_predicted <= 3:
        return (
            f"{name}'s wash is coming up in {days_until_predicted} days. "
            "Pre-book for bonus points!"
        )
    return f"{name}'s next wash: in {days_until_predicted} days"


def engagement_score(
    purchase_count: int,
    points_earned: float,
    days_since_last_purchase: Optional[int],
) -> float:
    """Score recent activity on a 0-100 scale.

    Purchases contribute up to 40, points earned up to 30 and recency up
    to 30. ``None`` for ``days_since_last_purchase`` means no purchase in
    the window and earns no recency credit.
    """

    score = float(min(purchase_count * 10, 40))
    score += min(points_earned / 100, 30)

    if days_since_last_purchase is not None:
        if days_since_last_purchase < 7:
            score += 30
        elif days_since_last_purchase < 14:
            score += 20
        elif days_since_last_purchase < 30:
            score += 10

    return max(0.0, min(score, 100.0))
