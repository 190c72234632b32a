"""Divide-and-conquer closest-pair search and the merge sort it relies on."""

from __future__ import annotations

from operator import attrgetter
from typing import Callable, Sequence

from .geometry import Point, brute_force, distance

_NEIGHBOURS = 11


def _key(coord: str) -> Callable[[Point], int]:
    return attrgetter("x") if coord == "x" else attrgetter("y")


def merge_sorted(left: Sequence[Point], right: Sequence[Point], coord: str) -> list[Point]:
    """Merge two lists sorted on ``coord``; ties keep elements of ``left`` first.

    Any ``coord`` other than ``"x"`` orders by ``y``.
    """
    key = _key(coord)
    result: list[Point] = []
    li = iter(left)
    ri = iter(right)
    a = next(li, None)
    b = next(ri, None)
    while a is not None and b is not None:
        if key(a) <= key(b):
            result.append(a)
            a = next(li, None)
        else:
            result.append(b)
            b = next(ri, None)
    if a is not None:
        result.append(a)
        result.extend(li)
    if b is not None:
        result.append(b)
        result.extend(ri)
    return result


def merge_sort(points: Sequence[Point], coord: str) -> list[Point]:
    """Return a new list of the points, stably merge-sorted on ``coord``."""
    if len(points) <= 1:
        return list(points)
    mid = len(points) // 2
    return merge_sorted(
        merge_sort(points[:mid], coord),
        merge_sort(points[mid:], coord),
        coord,
    )


def sorted_points(points: Sequence[Point], coord: str) -> list[Point]:
    """Points sorted on ``coord`` (``"x"`` or ``"y"``); any other value leaves the order."""
    if coord not in ("x", "y"):
        return list(points)
    return merge_sort(points, coord)


def _closest(px: list[Point], py: list[Point]) -> float:
    n = len(px)
    if n <= 3:
        return brute_force(px)

    mid = n // 2
    mid_x = px[mid].x
    qy = [p for p in py if p.x <= mid_x]
    ry = [p for p in py if p.x > mid_x]

    delta = min(_closest(px[:mid], qy), _closest(px[mid:], ry))

    strip = [p for p in py if abs(p.x - mid_x) < delta]
    for i, p in enumerate(strip):
        for q in strip[i + 1 : i + 1 + _NEIGHBOURS]:
            delta = min(delta, distance(p, q))
    return delta


def closest_pair(points: Sequence[Point]) -> float:
    """Smallest distance between two of the points; 0.0 when there are fewer than two."""
    if len(points) < 2:
        return 0.0
    return _closest(sorted_points(points, "x"), sorted_points(points, "y"))