"""Array helpers: searching, pair sums, nearest smaller elements and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise


def binary_search(items: Sequence, target) -> int | None:
    """Index of ``target`` in the sorted ``items``, or None when it is absent.

    Raises ValueError when ``items`` is not sorted in non-decreasing order.
    """
    if any(b < a for a, b in pairwise(items)):
        raise ValueError("items must be sorted")
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def two_sum(numbers: Iterable[int], target: int) -> tuple[int, int] | None:
    """Indices (i, j), i < j, of the first pair found summing to ``target``; None if none."""
    seen: dict[int, int] = {}
    for index, number in enumerate(numbers):
        partner = seen.get(target - number)
        if partner is not None:
            return partner, index
        seen[number] = index
    return None


def next_smaller_naive(items: Sequence[int]) -> list[int]:
    """For each element, the first later element smaller than it, or -1, by scanning ahead."""
    return [
        next((later for later in items[i + 1 :] if later < item), -1)
        for i, item in enumerate(items)
    ]


def _nearest_smaller(items: Iterable[int]) -> list[int]:
    stack = [-1]
    result = []
    for item in items:
        while stack and stack[-1] >= item:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(item)
    return result


def next_smaller(items: Sequence[int]) -> list[int]:
    """For each element, the nearest later element smaller than it, or -1, using a stack."""
    return _nearest_smaller(reversed(items))[::-1]


def previous_smaller(items: Sequence[int]) -> list[int]:
    """For each element, the nearest earlier element smaller than it, or -1, using a stack."""
    return _nearest_smaller(items)


def count_occurrences(items: Iterable, value) -> int:
    """How many elements equal ``value``."""
    return sum(1 for item in items if item == value)


def delete_value(items: Iterable, value) -> list:
    """A new list without the first element equal to ``value``.

    Raises ValueError when ``value`` is not present.
    """
    result = list(items)
    try:
        result.remove(value)
    except ValueError:
        raise ValueError(f"{value!r} is not present") from None
    return result