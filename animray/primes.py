"""Prime number tests, generation and factorisation."""

from __future__ import annotations

import math
from itertools import count
from typing import Iterator


def is_prime(value: int) -> bool:
    """Return True when ``value`` has no odd divisor up to its square root."""
    if value % 2 == 0:
        return value == 2
    limit = math.isqrt(value)
    return all(value % divisor for divisor in range(3, limit + 1, 2))


def prime_generator() -> Iterator[int]:
    """Yield the prime numbers in ascending order, starting from 2."""
    return (candidate for candidate in count(2) if is_prime(candidate))


def prime_factors(value: int) -> list[int]:
    """Return the prime factors of ``value`` in ascending order, with repeats."""
    factors: list[int] = []
    primes = prime_generator()
    factor = next(primes)
    while value > 1:
        if value % factor == 0:
            factors.append(factor)
            value //= factor
        else:
            factor = next(primes)
    return factors