"""Closest pair of points in the plane."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    """A point with integer coordinates, ordered by x and then y."""

    x: int
    y: int


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p.x - q.x, p.y - q.y)


def brute_force_closest(points: Iterable[Point]) -> float:
    """Smallest pairwise distance by checking every pair; infinity for fewer than two points."""
    pts = list(points)
    return min(
        (distance(p, q) for i, p in enumerate(pts) for q in pts[i + 1 :]),
        default=math.inf,
    )


def _strip_closest(strip: list[Point], best: float) -> float:
    strip.sort(key=lambda p: (p.y, p.x))
    for i, p in enumerate(strip):
        for q in strip[i + 1 :]:
            if q.y - p.y >= best:
                break
            best = min(best, distance(p, q))
    return best


def _closest(pts: Sequence[Point]) -> float:
    if len(pts) <= 3:
        return brute_force_closest(pts)
    mid = len(pts) // 2
    mid_x = pts[mid].x
    best = min(_closest(pts[:mid]), _closest(pts[mid:]))
    strip = [p for p in pts if abs(p.x - mid_x) < best]
    return min(best, _strip_closest(strip, best))


def closest_pair_distance(points: Iterable[Point]) -> float:
    """Smallest pairwise distance by divide and conquer; infinity for fewer than two points."""
    return _closest(sorted(points))