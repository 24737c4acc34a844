"""Tier configuration and resolution."""

from .tiers import (  # noqa: F401
    DEFAULT_TIER_TABLE,
    TierTable,
    TierTableError,
    get_tier,
    load_configured_tier_table,
    load_tier_table,
    next_tier,
    resolve_tier,
    tier_progress,
    tier_rank,
)
