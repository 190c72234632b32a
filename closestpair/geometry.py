"""Integer points in the plane and the exhaustive closest-pair search."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    dx = p1.x - p2.x
    dy = p1.y - p2.y
    return math.sqrt(dx * dx + dy * dy)


def brute_force(points: Iterable[Point]) -> float:
    """Smallest distance between any two points, checking every pair.

    With fewer than two points there is no pair, and infinity is returned.
    """
    return min(
        (distance(a, b) for a, b in combinations(list(points), 2)),
        default=math.inf,
    )