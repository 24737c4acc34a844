from petwash_loyalty.services.loyalty import (
    REFERRAL_REWARDS,
    polynomial_hash_32,
    referral_code,
    referral_rewards,
)
from petwash_loyalty.services.loyalty.referrals import to_base36


def test_polynomial_hash_small_inputs() -> None:
    assert polynomial_hash_32("") == 0
    assert polynomial_hash_32("a") == 97
    assert polynomial_hash_32("ab") == 97 * 31 + 98


def test_polynomial_hash_wraps_to_signed_32_bits() -> None:
    # Six 'z' characters overflow into the negative int32 range.
    assert polynomial_hash_32("zzzzzz") == 685_785_664
    assert polynomial_hash_32("zzzzzzz") == 215_481_018


def test_polynomial_hash_uses_utf16_code_units() -> None:
    # U+1F600 is the surrogate pair D83D DE00.
    assert polynomial_hash_32("\U0001F600") == 0xD83D * 31 + 0xDE00


def test_referral_code_format() -> None:
    assert referral_code("zzzzzz") == "PWBCARLS"
    assert referral_code("ab") == "PW2E9"


def test_referral_code_is_deterministic() -> None:
    user_id = "9f0c2a7e-41b6-4c55-8d4e-1b2f3a4c5d6e"
    first = referral_code(user_id)

    assert first == referral_code(user_id)
    assert first.startswith("PW")
    assert first == first.upper()
    assert len(first) == 2 + min(6, len(to_base36(polynomial_hash_32(user_id))))


def test_referral_code_accepts_alternate_hasher() -> None:
    assert referral_code("anyone", hasher=lambda _: 2**31) == "PWZIK0ZK"
    assert referral_code("anyone", hasher=lambda _: 0) == "PW0"


def test_referral_rewards_are_fixed() -> None:
    rewards = referral_rewards()

    assert rewards is REFERRAL_REWARDS
    assert rewards.referrer_points == 500
    assert rewards.referee_points == 250
    assert rewards.as_payload()["referrerMessage"] == "Friend signed up! +500 points"
