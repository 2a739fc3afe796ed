import pytest

from ltbkit.hash_utils import hash_combine, string_seed_to_uint


def test_hash_combine_of_zero_is_golden_ratio_constant():
    assert hash_combine(0, 0) == 0x9E3779B9


def test_hash_combine_is_deterministic_and_64_bit():
    first = hash_combine(12345, "abc")
    second = hash_combine(12345, "abc")
    assert first == second
    assert 0 <= first < 2**64


def test_hash_combine_handles_negative_hashes():
    result = hash_combine(7, -1)
    assert 0 <= result < 2**64


def test_hash_combine_depends_on_order():
    forward = hash_combine(hash_combine(0, 1), 2)
    backward = hash_combine(hash_combine(0, 2), 1)
    assert 0 <= forward < 2**64
    assert forward != backward


def test_hash_combine_large_seed_wraps():
    result = hash_combine(2**64 - 1, 3)
    assert 0 <= result < 2**64


@pytest.mark.parametrize("text", ["", "a", "hello world", "caf\u00e9", "x" * 100])
def test_string_seed_is_deterministic_32_bit(text):
    first = string_seed_to_uint(text)
    assert first == string_seed_to_uint(text)
    assert 0 <= first <= 0xFFFFFFFF


def test_string_seed_distinguishes_strings():
    seeds = {string_seed_to_uint(text) for text in ["a", "b", "ab", "ba", ""]}
    assert len(seeds) == 5