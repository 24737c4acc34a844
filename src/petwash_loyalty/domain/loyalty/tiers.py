"""Immutable tier configuration and lifetime-points tier resolution.

A :class:`TierTable` is ordered ascending by threshold and its position is
the tier rank (index 0 is the entry tier). The ordering is validated once
when the table is built; the resolver functions rely on it and never
re-sort.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Sequence, Tuple

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from petwash_loyalty.core.settings import Settings
from petwash_loyalty.models.loyalty import TierBenefits, TierConfig, TierProgress
from petwash_loyalty.schemas.loyalty import TierConfigPayload

_TIER_PAYLOADS = TypeAdapter(list[TierConfigPayload])


class TierTableError(RuntimeError):
    """Raised when a tier table violates its ordering contract."""


@dataclass(frozen=True, slots=True)
class TierTable:
    """Ordered, validated tier configuration."""

    tiers: Tuple[TierConfig, ...]

    def __post_init__(self) -> None:
        tiers = tuple(self.tiers)
        object.__setattr__(self, "tiers", tiers)
        if not tiers:
            raise TierTableError("Tier table must contain at least one tier")

        seen: set[str] = set()
        previous: TierConfig | None = None
        for tier in tiers:
            if tier.id in seen:
                raise TierTableError(f"Duplicate tier id {tier.id!r}")
            seen.add(tier.id)
            if previous is not None and tier.threshold <= previous.threshold:
                raise TierTableError(
                    f"Tier {tier.id!r} threshold {tier.threshold} must exceed "
                    f"{previous.id!r} threshold {previous.threshold}"
                )
            previous = tier

    @classmethod
    def from_payload(cls, records: Sequence[Mapping[str, Any]]) -> "TierTable":
        """Validate camelCase tier records and build a table from them."""

        try:
            payloads = _TIER_PAYLOADS.validate_python(list(records))
        except ValidationError as exc:
            raise TierTableError(f"Invalid tier configuration: {exc}") from exc
        return cls(tuple(payload.to_record() for payload in payloads))

    def __iter__(self) -> Iterator[TierConfig]:
        return iter(self.tiers)

    def __len__(self) -> int:
        return len(self.tiers)

    def __getitem__(self, index: int) -> TierConfig:
        return self.tiers[index]

    @property
    def lowest(self) -> TierConfig:
        return self.tiers[0]

    @property
    def highest(self) -> TierConfig:
        return self.tiers[-1]


DEFAULT_TIER_TABLE = TierTable(
    (
        TierConfig(
            id="bronze",
            name="Bronze",
            threshold=0,
            icon="🥉",
            color="#cd7f32",
            benefits=TierBenefits(discount_percent=0, points_multiplier=1.0, birthday_bonus=100),
        ),
        TierConfig(
            id="silver",
            name="Silver",
            threshold=1000,
            icon="🥈",
            color="#cbd5e1",
            benefits=TierBenefits(
                discount_percent=10,
                points_multiplier=1.2,
                birthday_bonus=200,
                free_washes_per_year=1,
            ),
        ),
        TierConfig(
            id="gold",
            name="Gold",
            threshold=3000,
            icon="🥇",
            color="#fbbf24",
            benefits=TierBenefits(
                discount_percent=15,
                points_multiplier=1.5,
                priority_support=True,
                birthday_bonus=300,
                free_washes_per_year=2,
                exclusive_access=True,
            ),
        ),
        TierConfig(
            id="platinum",
            name="Platinum",
            threshold=6000,
            icon="💠",
            color="#e5e7eb",
            benefits=TierBenefits(
                discount_percent=20,
                points_multiplier=2.0,
                priority_support=True,
                birthday_bonus=500,
                free_washes_per_year=3,
                exclusive_access=True,
                concierge_service=True,
            ),
        ),
        TierConfig(
            id="diamond",
            name="Diamond",
            threshold=10000,
            icon="💎",
            color="#3b82f6",
            benefits=TierBenefits(
                discount_percent=25,
                points_multiplier=2.5,
                priority_support=True,
                birthday_bonus=1000,
                free_washes_per_year=5,
                exclusive_access=True,
                concierge_service=True,
            ),
        ),
        TierConfig(
            id="emerald",
            name="Emerald",
            threshold=20000,
            icon="💚",
            color="#10b981",
            benefits=TierBenefits(
                discount_percent=30,
                points_multiplier=3.0,
                priority_support=True,
                birthday_bonus=2000,
                free_washes_per_year=8,
                exclusive_access=True,
                concierge_service=True,
            ),
        ),
        TierConfig(
            id="royal",
            name="Royal",
            threshold=35000,
            icon="👑",
            color="#8b5cf6",
            benefits=TierBenefits(
                discount_percent=40,
                points_multiplier=4.0,
                priority_support=True,
                birthday_bonus=5000,
                free_washes_per_year=12,
                exclusive_access=True,
                concierge_service=True,
            ),
        ),
    )
)


def load_tier_table(path: str | Path) -> TierTable:
    """Read a JSON array of tier records from ``path``."""

    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise TierTableError(f"Tier configuration at {path} must be a JSON array")
    table = TierTable.from_payload(raw)
    logger.bind(path=str(path), tiers=len(table)).debug("Loaded tier table")
    return table


def load_configured_tier_table(settings: Settings) -> TierTable:
    """Return the table named by settings, falling back to the bundled tiers."""

    if settings.tier_table_path:
        return load_tier_table(settings.tier_table_path)
    return DEFAULT_TIER_TABLE


def tier_rank(table: TierTable, tier_id: str | None) -> int:
    """Position of ``tier_id`` in the table, or -1 when it is unknown."""

    for index, tier in enumerate(table):
        if tier.id == tier_id:
            return index
    return -1


def get_tier(table: TierTable, tier_id: str | None) -> Optional[TierConfig]:
    index = tier_rank(table, tier_id)
    if index == -1:
        logger.bind(tier_id=tier_id).debug("Unknown loyalty tier id")
        return None
    return table[index]


def next_tier(table: TierTable, tier_id: str | None) -> Optional[TierConfig]:
    """Tier ranked directly above ``tier_id``; None at the top or when unknown."""

    index = tier_rank(table, tier_id)
    if index == -1 or index == len(table) - 1:
        return None
    return table[index + 1]


def resolve_tier(table: TierTable, lifetime_points: float) -> TierConfig:
    """Highest tier whose threshold the points reach; the entry tier otherwise."""

    for tier in reversed(table.tiers):
        if tier.threshold <= lifetime_points:
            return tier
    return table.lowest


def tier_progress(table: TierTable, lifetime_points: float) -> TierProgress:
    current = resolve_tier(table, lifetime_points)
    upcoming = next_tier(table, current.id)

    if upcoming is None:
        return TierProgress(
            current_tier=current,
            next_tier=None,
            progress_percent=100.0,
            points_needed=0,
        )

    band = upcoming.threshold - current.threshold
    progress = (lifetime_points - current.threshold) / band * 100
    return TierProgress(
        current_tier=current,
        next_tier=upcoming,
        progress_percent=max(0.0, min(100.0, progress)),
        points_needed=upcoming.threshold - lifetime_points,
    )


__all__ = [
    "DEFAULT_TIER_TABLE",
    "TierTable",
    "TierTableError",
    "get_tier",
    "load_configured_tier_table",
    "load_tier_table",
    "next_tier",
    "resolve_tier",
    "tier_progress",
    "tier_rank",
]
