"""Number-theory helpers: primes, factorials, Fibonacci numbers and conversions."""

from __future__ import annotations

import math
from itertools import compress

SIEVE_LIMIT = 86_028_121
"""Largest bound :func:`nth_prime` will sieve up to when no limit is given."""

_ROMAN_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def _sieve(limit: int) -> bytearray:
    """Return a bytearray of primality flags for 0..limit."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    flags = bytearray(b"\x01") * (limit + 1)
    flags[0:2] = bytes(min(2, limit + 1))
    for i in range(2, math.isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return flags


def prime_sieve(limit: int) -> list[bool]:
    """Sieve of Eratosthenes: element ``i`` tells whether ``i`` is prime, for 0..limit."""
    return [bool(flag) for flag in _sieve(limit)]


def primes_up_to(limit: int) -> list[int]:
    """All primes not greater than ``limit``, in increasing order."""
    return list(compress(range(limit + 1), _sieve(limit)))


def nth_prime(k: int, limit: int | None = None) -> int:
    """Return the ``k``-th prime (1-based), sieving up to ``limit``.

    Without a limit the sieve grows as needed, up to :data:`SIEVE_LIMIT`.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    if limit is not None:
        primes = primes_up_to(limit)
        if k > len(primes):
            raise ValueError(f"only {len(primes)} primes up to {limit}")
        return primes[k - 1]
    bound = 64
    while True:
        bound = min(bound, SIEVE_LIMIT)
        primes = primes_up_to(bound)
        if k <= len(primes):
            return primes[k - 1]
        if bound == SIEVE_LIMIT:
            raise ValueError(f"only {len(primes)} primes up to {SIEVE_LIMIT}")
        bound *= 2


def lcm_up_to(n: int) -> int:
    """Least common multiple of 1..n, built from the highest prime powers not above ``n``."""
    result = 1
    if n < 2:
        return result
    for prime in primes_up_to(n):
        power = prime
        while power * prime <= n:
            power *= prime
        result *= power
    return result


def factorial(n: int) -> int:
    """Return n!; ``n`` must not be negative."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(2, n + 1))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor; when the smaller argument is not positive it is returned."""
    smaller = min(a, b)
    if smaller <= 0:
        return smaller
    return math.gcd(a, b)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of ``n`` below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_series(count: int) -> list[int]:
    """The first ``count`` Fibonacci numbers, starting from 0."""
    series = []
    previous, current = 0, 1
    for _ in range(count):
        series.append(previous)
        previous, current = current, previous + current
    return series


def decimal_to_binary(value: int) -> int:
    """Return an integer whose decimal digits spell ``value`` in binary (5 gives 101)."""
    if value < 0:
        return -decimal_to_binary(-value)
    return int(format(value, "b"))


def sum_to(n: int) -> int:
    """Sum of 1..n; at least the first term 1 is always counted."""
    if n < 1:
        return 1
    return n * (n + 1) // 2


def is_armstrong(n: int) -> bool:
    """True when ``n`` equals the sum of the cubes of its decimal digits."""
    if n < 0:
        return False
    return n == sum(int(digit) ** 3 for digit in str(n)) if n else True


def to_roman(number: int) -> str:
    """Roman numeral for ``number``; non-positive numbers give an empty string."""
    parts = []
    for value, symbol in _ROMAN_NUMERALS:
        if number <= 0:
            break
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)