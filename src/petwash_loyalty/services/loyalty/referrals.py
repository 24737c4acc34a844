"""Referral display codes and referral reward amounts.

Referral codes are derived with a 32-bit polynomial hash. The transform is
NOT cryptographic and collides freely: distinct user ids can share a code
and codes are trivially guessable from an id. Use them only as
human-friendly display codes and attribute sign-ups through a lookup that
tolerates collisions. Anything that needs a unique or unguessable
identifier must use a different mechanism.
"""

from __future__ import annotations

from typing import Callable, Final, Iterator

from petwash_loyalty.models.loyalty import ReferralRewards

ReferralHasher = Callable[[str], int]

REFERRAL_CODE_PREFIX: Final[str] = "PW"
REFERRAL_CODE_HASH_DIGITS: Final[int] = 6

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000

REFERRAL_REWARDS: Final[ReferralRewards] = ReferralRewards(
    referrer_points=500,
    referee_points=250,
    referrer_message="Friend signed up! +500 points",
    referee_message="Welcome! +250 points from referral",
)


def _utf16_code_units(text: str) -> Iterator[int]:
    encoded = text.encode("utf-16-le", "surrogatepass")
    for offset in range(0, len(encoded), 2):
        yield int.from_bytes(encoded[offset : offset + 2], "little")


def polynomial_hash_32(text: str) -> int:
    """Magnitude of the signed 32-bit ``hash * 31 + unit`` rolling hash.

    Runs over UTF-16 code units; the result lies in ``[0, 2**31]``.
    """

    value = 0
    for unit in _utf16_code_units(text):
        value = (value * 31 + unit) & _UINT32_MASK
    if value & _INT32_SIGN:
        value -= _UINT32_MASK + 1
    return abs(value)


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    remaining = abs(value)
    while remaining:
        remaining, index = divmod(remaining, 36)
        digits.append(_BASE36_DIGITS[index])
    sign = "-" if value < 0 else ""
    return sign + "".join(reversed(digits))


def referral_code(user_id: str, *, hasher: ReferralHasher = polynomial_hash_32) -> str:
    """Short shareable code for ``user_id``, e.g. ``PW1A2B3C``."""

    encoded = to_base36(hasher(user_id)).upper()
    return f"{REFERRAL_CODE_PREFIX}{encoded[:REFERRAL_CODE_HASH_DIGITS]}"


def referral_rewards() -> ReferralRewards:
    return REFERRAL_REWARDS
