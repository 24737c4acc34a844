import sys
from pathlib import Path

import pytest


def _configure_path() -> None:
    src_path = Path(__file__).resolve().parents[1] / "src"
    if src_path.exists():
        sys.path.insert(0, str(src_path))


_configure_path()

from petwash_loyalty.domain.loyalty import TierTable  # noqa: E402
from petwash_loyalty.models.loyalty import TierBenefits, TierConfig  # noqa: E402


@pytest.fixture
def tier_table() -> TierTable:
    return TierTable(
        (
            TierConfig(id="bronze", name="Bronze", threshold=0),
            TierConfig(
                id="silver",
                name="Silver",
                threshold=100,
                benefits=TierBenefits(discount_percent=10, points_multiplier=1.5),
            ),
            TierConfig(
                id="gold",
                name="Gold",
                threshold=500,
                benefits=TierBenefits(discount_percent=20, points_multiplier=2.0),
            ),
        )
    )
