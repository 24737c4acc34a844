"""Personalised offer generation from profile signals."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List

from loguru import logger

from petwash_loyalty.domain.loyalty.tiers import TierTable, tier_progress
from petwash_loyalty.models.loyalty import LoyaltyProfile, Offer, OfferType

FREQUENCY_OFFER_MIN_WASHES = 10
FREQUENCY_OFFER_MAX_WASHES = 20
# Tier-upgrade nudges estimate lifetime points from wash count rather than
# reading the profile balance; kept until product confirms the intended basis.
ESTIMATED_POINTS_PER_WASH = 50
TIER_UPGRADE_POINTS_WINDOW = 500
COMEBACK_INACTIVITY = timedelta(days=30)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def days_since(moment: datetime, *, now: datetime) -> int:
    """Whole days elapsed between ``moment`` and ``now``."""

    return (_as_utc(now) - _as_utc(moment)) // timedelta(days=1)


def personalized_offers(table: TierTable, profile: LoyaltyProfile, *, now: datetime) -> List[Offer]:
    """Collect every offer the profile qualifies for, in rule order.

    Rules are independent; a profile can match any combination of them.
    """

    offers: List[Offer] = []

    if profile.preferred_times:
        offers.append(
            Offer(
                id="time_based_1",
                title="Your Preferred Time Bonus",
                description="15% off washes during your favorite time slots",
                discount=15,
                expires_in="7 days",
                type=OfferType.TIME_BASED,
            )
        )

    if FREQUENCY_OFFER_MIN_WASHES <= profile.total_washes < FREQUENCY_OFFER_MAX_WASHES:
        offers.append(
            Offer(
                id="frequency_1",
                title="Loyal Customer Reward",
                description="Complete 5 more washes this month → 500 bonus points!",
                discount=0,
                expires_in="30 days",
                type=OfferType.FREQUENCY,
            )
        )

    progress = tier_progress(table, profile.total_washes * ESTIMATED_POINTS_PER_WASH)
    if progress.next_tier is not None and progress.points_needed < TIER_UPGRADE_POINTS_WINDOW:
        upcoming = progress.next_tier
        offers.append(
            Offer(
                id="tier_upgrade_1",
                title=f"Almost {upcoming.name}!",
                description=(
                    f"Just {progress.points_needed} more points to unlock "
                    f"{upcoming.benefits.discount_percent}% discount!"
                ),
                discount=0,
                expires_in="14 days",
                type=OfferType.TIER_UPGRADE,
            )
        )

    if profile.last_wash_date is not None:
        inactive_days = days_since(profile.last_wash_date, now=now)
        if inactive_days >= COMEBACK_INACTIVITY.days:
            offers.append(
                Offer(
                    id="comeback_1",
                    title="We Miss You!",
                    description="Come back within 7 days → 25% off + 300 bonus points",
                    discount=25,
                    expires_in="7 days",
                    type=OfferType.COMEBACK,
                )
            )

    logger.bind(offers=[offer.id for offer in offers]).debug("Personalised offers generated")
    return offers
