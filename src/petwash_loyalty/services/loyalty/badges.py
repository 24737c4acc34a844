"""Badge unlock evaluation.

Conditions come from the content system and may be malformed. Evaluation
is total and fails closed: anything it cannot interpret yields ``False``.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, Mapping

from loguru import logger

from petwash_loyalty.models.loyalty import (
    BadgeCondition,
    BadgeStatType,
    BadgeStats,
    ComparisonOperator,
)

_STAT_FIELDS: Dict[BadgeStatType, str] = {
    BadgeStatType.WASH_COUNT: "total_washes",
    BadgeStatType.CURRENT_STREAK: "current_streak",
    BadgeStatType.LONGEST_STREAK: "longest_streak",
    BadgeStatType.EARLY_MORNING_WASHES: "early_morning_washes",
    BadgeStatType.WEEKEND_WASHES: "weekend_washes",
    BadgeStatType.ECO_WASHES: "eco_washes",
}

_COMPARATORS: Dict[ComparisonOperator, Callable[[Any, Any], bool]] = {
    ComparisonOperator.GTE: operator.ge,
    ComparisonOperator.GT: operator.gt,
    ComparisonOperator.EQ: operator.eq,
    ComparisonOperator.LTE: operator.le,
    ComparisonOperator.LT: operator.lt,
}


def _condition_fields(condition: Any) -> tuple[Any, Any, Any]:
    if isinstance(condition, BadgeCondition):
        return condition.type, condition.operator, condition.value
    if isinstance(condition, Mapping):
        return condition.get("type"), condition.get("operator"), condition.get("value")
    return None, None, None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_stats(stats: Any) -> BadgeStats | None:
    if isinstance(stats, BadgeStats):
        return stats
    if isinstance(stats, Mapping):
        return BadgeStats.from_mapping(stats)
    return None


def evaluate_badge_condition(
    condition: BadgeCondition | Mapping[str, Any],
    stats: BadgeStats | Mapping[str, Any],
) -> bool:
    raw_type, raw_operator, threshold = _condition_fields(condition)

    try:
        stat_type = BadgeStatType(raw_type)
        comparison = ComparisonOperator(raw_operator)
    except (TypeError, ValueError):
        logger.bind(type=raw_type, operator=raw_operator).debug(
            "Unrecognised badge condition"
        )
        return False

    resolved = _as_stats(stats)
    if resolved is None:
        return False
    user_value = getattr(resolved, _STAT_FIELDS[stat_type], None)
    if not _is_number(threshold) or not _is_number(user_value):
        logger.bind(type=stat_type.value, value=user_value).debug(
            "Non-numeric badge comparison"
        )
        return False

    return bool(_COMPARATORS[comparison](user_value, threshold))
