"""Pure geometry for annulus sectors, slice angles and label anchors."""
import math
from typing import NamedTuple

import numpy as np

from .types import Point, PathData
from .constants import (
    START_ANGLE, TAU, FULL_CIRCLE_THRESHOLD,
    OUTER_RADIUS_RATIO, MINIMUM_THICKNESS_RATIO,
    MIN_INNER_RADIUS, MAX_INNER_RADIUS,
    LINE_START_OFFSET, LINE_BEND_RATIO, HORIZONTAL_LINE_RATIO, LABEL_OFFSET,
)

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry (non-finite or negative inputs)."""


def _check(**values: float):
    for name, v in values.items():
        if not math.isfinite(v):
            raise GeometryError(f"Non-finite {name}: {v!r}")


# ============================================================
# Basic Helpers
# ============================================================
def polar(angle: float, r: float) -> Point:
    """Point at distance r from the origin along angle (radians, clockwise on screen)."""
    return (math.cos(angle) * r, math.sin(angle) * r)


def mid_angle(start: float, end: float) -> float:
    return start + (end - start) / 2


def ring_radii(radius: float, inner_pct: float) -> tuple[float, float]:
    """Outer and effective inner radius for a layout radius and inner-radius percent.

    The inner radius is kept at least 1% of the outer radius away from the
    outer edge so the ring never collapses to a filled disk.
    """
    _check(radius=radius, inner_pct=inner_pct)
    if radius < 0:
        raise GeometryError(f"Negative radius: {radius}")
    outer = radius * OUTER_RADIUS_RATIO
    pct = max(MIN_INNER_RADIUS, min(MAX_INNER_RADIUS, inner_pct))
    inner = outer * (pct / 100)
    return outer, min(inner, outer - outer * MINIMUM_THICKNESS_RATIO)


# ============================================================
# Slice Angles
# ============================================================
def slice_angles(values: list[float], total: float) -> list[tuple[float, float]]:
    """Consecutive (start, end) angles for each value, starting at 12 o'clock.

    Each slice spans value/total of a full turn; total is the shared
    denominator (sum of all kept values).
    """
    if not values:
        return []
    _check(total=total)
    if total <= 0:
        raise GeometryError(f"Non-positive total: {total}")
    spans = np.asarray(values, dtype=float) / total * TAU
    ends = START_ANGLE + np.cumsum(spans)
    starts = np.concatenate(([START_ANGLE], ends[:-1]))
    return [(float(s), float(e)) for s, e in zip(starts, ends)]


# ============================================================
# Annulus Sector Path
# ============================================================
def is_full_circle(start: float, end: float) -> bool:
    return abs((end - start) - TAU) < FULL_CIRCLE_THRESHOLD


def arc_path(start: float, end: float, inner: float, outer: float) -> PathData:
    """Closed outline of the annulus sector between two angles.

    The outer arc sweeps in the positive direction, the inner arc back in
    the negative one. A full turn cannot be written as a single arc command
    (its end point equals its start point), so it is built from two
    semicircles per edge, split at start + pi.
    """
    _check(start=start, end=end, inner=inner, outer=outer)
    if inner < 0 or outer < 0:
        raise GeometryError(f"Negative radius: inner={inner}, outer={outer}")

    if is_full_circle(start, end):
        mid = start + math.pi
        o1 = polar(start, outer); o2 = polar(mid, outer)
        i1 = polar(start, inner); i2 = polar(mid, inner)
        return [
            ("M", *o1),
            ("A", outer, outer, 0, 0, 1, *o2),
            ("A", outer, outer, 0, 0, 1, *o1),
            ("L", *i1),
            ("A", inner, inner, 0, 0, 0, *i2),
            ("A", inner, inner, 0, 0, 0, *i1),
            ("Z",),
        ]

    large_arc = 0 if (end - start) <= math.pi else 1
    o1 = polar(start, outer); o2 = polar(end, outer)
    i2 = polar(end, inner); i1 = polar(start, inner)
    return [
        ("M", *o1),
        ("A", outer, outer, 0, large_arc, 1, *o2),
        ("L", *i2),
        ("A", inner, inner, 0, large_arc, 0, *i1),
        ("Z",),
    ]


def polyline_path(points: list[Point]) -> PathData:
    """Open path through the given points."""
    return [("M", *points[0])] + [("L", *p) for p in points[1:]]


# ============================================================
# Label Anchors
# ============================================================
class LeaderLine(NamedTuple):
    """Bent connector from the ring edge to an outside label."""
    start: Point
    bend: Point
    end: Point
    label: Point
    anchor: str      # "start" on the right side, "end" on the left


def leader_line(angle: float, outer: float) -> LeaderLine:
    """L-shaped leader line for a label outside the ring at the given angle."""
    _check(angle=angle, outer=outer)
    start = polar(angle, outer + LINE_START_OFFSET)
    bend = polar(angle, outer + outer * LINE_BEND_RATIO)
    right = math.cos(angle) > 0
    run = outer * HORIZONTAL_LINE_RATIO
    end_x = bend[0] + (run if right else -run)
    label_x = end_x + (LABEL_OFFSET if right else -LABEL_OFFSET)
    return LeaderLine(
        start=start, bend=bend, end=(end_x, bend[1]),
        label=(label_x, bend[1]), anchor="start" if right else "end",
    )


def inside_label_point(angle: float, inner: float, outer: float) -> Point:
    """Label position halfway across the ring."""
    return polar(angle, (inner + outer) / 2)
