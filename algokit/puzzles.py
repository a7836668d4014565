"""Classic recursive puzzles: the towers of Hanoi and rod cutting."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache

MODULUS = 1_000_000_007


def hanoi_moves(n: int, source: int = 1, spare: int = 2, target: int = 3) -> Iterator[tuple[int, int]]:
    """Yield the (from, to) moves that carry ``n`` discs from ``source`` to ``target``."""
    if n > 0:
        yield from hanoi_moves(n - 1, source, target, spare)
        yield source, target
        yield from hanoi_moves(n - 1, spare, source, target)


def mod_pow(base: int, exp: int, modulus: int = MODULUS) -> int:
    """Square-and-multiply ``base ** exp`` reduced modulo ``modulus``."""
    base %= modulus
    result = 1
    while exp > 0:
        if exp & 1:
            result = result * base % modulus
        base = base * base % modulus
        exp >>= 1
    return result


def _rod_length(prices: Sequence[int], length: int | None) -> int:
    if length is None:
        return len(prices)
    if length > len(prices):
        raise ValueError("no price is known for pieces longer than the price list")
    return max(length, 0)


def rod_cutting_top_down(prices: Sequence[int], length: int | None = None) -> int:
    """Best revenue for a rod of ``length``, by memoised recursion.

    ``prices[i]`` is the price of a piece of length ``i + 1``.
    """
    prices = list(prices)
    n = _rod_length(prices, length)

    @lru_cache(maxsize=None)
    def best(remaining: int) -> int:
        if remaining <= 0:
            return 0
        return max(best(remaining - cut) + prices[cut - 1] for cut in range(1, remaining + 1))

    return best(n)


def rod_cutting_bottom_up(prices: Sequence[int], length: int | None = None) -> int:
    """Best revenue for a rod of ``length``, by filling a table from short rods up."""
    prices = list(prices)
    n = _rod_length(prices, length)
    best = [0] * (n + 1)
    for size in range(1, n + 1):
        best[size] = max(best[size - cut] + prices[cut - 1] for cut in range(1, size + 1))
    return best[n]