"""
Value filters applied to mixer output.
Both filters are stable: surviving values keep their original relative order.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, List

# Primes below 100, sorted (is_prime relies on the ordering).
PRIME_NUMBERS = (
    2, 3, 5, 7, 11,
    13, 17, 19, 23, 29,
    31, 37, 41, 43, 47,
    53, 59, 61, 67, 71,
    73, 79, 83, 89, 97,
)


def is_prime(n: int) -> bool:
    """True if n is in PRIME_NUMBERS (binary search)."""
    i = bisect_left(PRIME_NUMBERS, n)
    return i < len(PRIME_NUMBERS) and PRIME_NUMBERS[i] == n


def purge_duplicates(values: Iterable[int]) -> List[int]:
    """Keep the first occurrence of each value."""
    seen = set()
    out: List[int] = []
    for v in values:
        if v not in seen:
            seen.add(v)
            out.append(v)
    return out


def purge_primes(values: Iterable[int]) -> List[int]:
    """Drop every value listed in PRIME_NUMBERS."""
    return [v for v in values if not is_prime(v)]


__all__ = ["PRIME_NUMBERS", "is_prime", "purge_duplicates", "purge_primes"]
