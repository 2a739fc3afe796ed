"""Hash combining and turning strings into 32-bit seeds."""

from __future__ import annotations

from typing import Hashable

__all__ = ["hash_combine", "string_seed_to_uint"]

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_GOLDEN_RATIO = 0x9E3779B9


def hash_combine(seed: int, value: Hashable) -> int:
    """Mix the hash of ``value`` into ``seed``, as an unsigned 64-bit number."""
    seed &= _MASK64
    value_hash = hash(value) & _MASK64
    mixed = (value_hash + _GOLDEN_RATIO + (seed << 6) + (seed >> 2)) & _MASK64
    return seed ^ mixed


def _tempering(x: int) -> int:
    return x ^ (x >> 27)


def _seed_sequence(values: list[int], count: int) -> list[int]:
    """Generate ``count`` 32-bit words from ``values`` with the seed-sequence algorithm."""
    if count == 0:
        return []
    n = count
    words = [0x8B8B8B8B] * n
    s = len(values)
    if n >= 623:
        t = 11
    elif n >= 68:
        t = 7
    elif n >= 39:
        t = 5
    elif n >= 7:
        t = 3
    else:
        t = (n - 1) // 2
    p = (n - t) // 2
    q = p + t
    m = max(s + 1, n)

    for k in range(m):
        mixed = words[k % n] ^ words[(k + p) % n] ^ words[(k - 1) % n]
        r1 = (1664525 * _tempering(mixed)) & _MASK32
        if k == 0:
            r2 = r1 + s
        elif k <= s:
            r2 = r1 + k % n + values[k - 1]
        else:
            r2 = r1 + k % n
        r2 &= _MASK32
        words[(k + p) % n] = (words[(k + p) % n] + r1) & _MASK32
        words[(k + q) % n] = (words[(k + q) % n] + r2) & _MASK32
        words[k % n] = r2

    for k in range(m, m + n):
        summed = (words[k % n] + words[(k + p) % n] + words[(k - 1) % n]) & _MASK32
        r3 = (1566083941 * _tempering(summed)) & _MASK32
        r4 = (r3 - k % n) & _MASK32
        words[(k + p) % n] ^= r3
        words[(k + q) % n] ^= r4
        words[k % n] = r4

    return words


def _string_values(text: str) -> list[int]:
    # Bytes are widened as signed chars, so values of 128 and above wrap around.
    return [byte | 0xFFFFFF00 if byte >= 0x80 else byte for byte in text.encode("utf-8")]


def string_seed_to_uint(text: str) -> int:
    """Turn a string into a 32-bit unsigned seed using a seed sequence."""
    return _seed_sequence(_string_values(text), 1)[-1]