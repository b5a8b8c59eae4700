# hexgrid.py - Axial hex math for the flat-top map layout (Python 3.10+)
from __future__ import annotations
import math
from typing import Iterator, List, NamedTuple, Tuple

SQRT3 = math.sqrt(3.0)

# q,r steps to the six neighbours
AXIAL_DIRECTIONS = ((+1, 0), (+1, -1), (0, -1), (-1, 0), (-1, +1), (0, +1))


class Axial(NamedTuple):
    """Axial hex coordinate. Hashes like a plain ``(q, r)`` tuple."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r


class Point(NamedTuple):
    x: float
    y: float


def axial_to_world_flat(q: int, r: int, size: float) -> Point:
    """Flat-top axial spacing -> world (x,y)."""
    x = size * (SQRT3 * q + SQRT3 / 2.0 * r)
    y = size * (3.0 / 2.0 * r)
    return Point(x, y)


def world_to_axial(x: float, y: float, size: float) -> Axial:
    """Inverse of :func:`axial_to_world_flat`, rounded to the nearest hex."""
    r = (2.0 / 3.0 * y) / size
    q = (SQRT3 / 3.0 * x - 1.0 / 3.0 * y) / size
    return axial_round(q, r)


def axial_round(q: float, r: float) -> Axial:
    """Round fractional axial coordinates to nearest hex."""
    s = -q - r
    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs

    return Axial(int(rq), int(rr))


def in_hex_region(q: int, r: int, radius: int) -> bool:
    return abs(q) <= radius and abs(r) <= radius and abs(-q - r) <= radius


def hex_count(radius: int) -> int:
    """Number of hexes within ``radius`` of the origin (centred hexagonal number)."""
    return 3 * radius * radius + 3 * radius + 1


def hex_region(radius: int) -> Iterator[Axial]:
    # Square q*r sweep; the cube constraint trims the two far corners
    for q in range(-radius, radius + 1):
        for r in range(-radius, radius + 1):
            if in_hex_region(q, r, radius):
                yield Axial(q, r)


def neighbors_axial(q: int, r: int) -> Iterator[Axial]:
    for dq, dr in AXIAL_DIRECTIONS:
        yield Axial(q + dq, r + dr)


def distance(q1: int, r1: int, q2: int, r2: int) -> int:
    """Calculate hexagonal distance between two axial coordinates."""
    return (abs(q1 - q2) + abs(q1 + r1 - q2 - r2) + abs(r1 - r2)) // 2


def hex_corners(center: Tuple[float, float], size: float) -> List[Point]:
    """Six outline vertices of the hex at ``center``.

    Vertex ``i`` sits at ``60*i - 30`` degrees, ``size`` away from the centre.
    """
    cx, cy = center
    points = []
    for i in range(6):
        angle = math.radians(60 * i - 30)
        points.append(Point(cx + size * math.cos(angle), cy + size * math.sin(angle)))
    return points
