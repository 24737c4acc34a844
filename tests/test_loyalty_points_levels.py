import math

import pytest

from petwash_loyalty.domain.loyalty import TierTable
from petwash_loyalty.services.loyalty import (
    cumulative_xp_for_level,
    level_for_xp,
    level_progress,
    wash_points,
    wash_xp,
    xp_for_next_level,
)


def test_wash_points_floors_amount_then_product(tier_table: TierTable) -> None:
    assert wash_points(tier_table, 99.9, "bronze") == 99
    assert wash_points(tier_table, 99.9, "silver") == 148
    assert wash_points(tier_table, 75, "gold") == 150


def test_wash_points_unknown_tier_earns_nothing(tier_table: TierTable) -> None:
    assert wash_points(tier_table, 250, "obsidian") == 0
    assert wash_points(tier_table, 250, None) == 0


@pytest.mark.parametrize(
    ("amount", "first_today", "expected"),
    [
        (50, False, 10),
        (50, True, 25),
        (100, False, 15),
        (199.99, False, 15),
        (250, False, 25),
        (250, True, 40),
    ],
)
def test_wash_xp_bonuses_are_additive(amount: float, first_today: bool, expected: int) -> None:
    assert wash_xp(amount, first_today) == expected


def test_level_boundaries_are_triangular() -> None:
    assert level_for_xp(0) == 1
    assert level_for_xp(99) == 1
    assert level_for_xp(100) == 2
    assert level_for_xp(299) == 2
    assert level_for_xp(300) == 3
    assert level_for_xp(599) == 3
    assert level_for_xp(600) == 4


def test_level_is_monotonic_in_xp() -> None:
    previous = 1
    for xp in range(0, 20_000, 37):
        current = level_for_xp(xp)
        assert current >= previous
        previous = current


def test_negative_xp_stays_at_first_level() -> None:
    assert level_for_xp(-50) == 1


def test_xp_band_width_and_cumulative_totals() -> None:
    assert xp_for_next_level(1) == 100
    assert xp_for_next_level(4) == 400
    assert cumulative_xp_for_level(1) == 0
    assert cumulative_xp_for_level(4) == 600
    for level in range(1, 30):
        assert level_for_xp(cumulative_xp_for_level(level)) == level


def test_level_progress_inside_band() -> None:
    progress = level_progress(450)

    assert progress.level == 3
    assert progress.xp_in_current_level == 150
    assert progress.xp_needed_for_next == 300
    assert progress.progress_percent == pytest.approx(50.0)
    assert progress.as_payload()["xpInCurrentLevel"] == 150


def test_level_progress_resets_on_level_up() -> None:
    assert level_progress(299).progress_percent == pytest.approx(99.5)
    assert level_progress(300).progress_percent == 0


@pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf])
def test_wash_points_non_finite_amount_earns_nothing(tier_table: TierTable, amount: float) -> None:
    assert wash_points(tier_table, amount, "gold") == 0


@pytest.mark.parametrize("xp", [math.nan, math.inf, -math.inf])
def test_non_finite_xp_stays_at_first_level(xp: float) -> None:
    assert level_for_xp(xp) == 1

    progress = level_progress(xp)
    assert progress.level == 1
    assert progress.xp_in_current_level == 0
    assert progress.progress_percent == 0


def test_large_xp_resolves_to_exact_band() -> None:
    level = level_for_xp(10**12)

    assert cumulative_xp_for_level(level) <= 10**12 < cumulative_xp_for_level(level + 1)
    assert level_for_xp(1e300) > 1


def test_level_matches_band_by_band_walk() -> None:
    def walk(xp: int) -> int:
        level, cumulative = 1, 0
        while xp >= cumulative + level * 100:
            cumulative += level * 100
            level += 1
        return level

    for xp in range(-10, 12_000, 7):
        assert level_for_xp(xp) == walk(xp)
    for xp in (99.99, 100.0, 299.5, 300.0, 599.999):
        assert level_for_xp(xp) == walk(xp)
