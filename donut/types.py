"""Shared type definitions for the donut chart engine."""
from typing import Literal, NamedTuple

Point = tuple[float, float]

# One path command: ("M", x, y), ("L", x, y),
# ("A", rx, ry, rotation, large_arc, sweep, x, y) or ("Z",)
PathOp = tuple
PathData = list[PathOp]

LegendPosition = Literal["top-left", "top-right", "top-center", "left-center", "right-center"]
LabelPosition = Literal["inside", "outside"]
Outcome = Literal["rendered", "no_data", "invalid_viewport", "faulted"]


class Viewport(NamedTuple):
    width: float; height: float


class Margins(NamedTuple):
    top: float; right: float; bottom: float; left: float


class BBox(NamedTuple):
    """Axis-aligned box in screen units, y growing downward."""
    x: float; y: float; width: float; height: float


class SelectionKey(NamedTuple):
    """Identity of a source row for the external selection authority.

    Compared by value; the engine never looks inside it.
    """
    row: int | None
    category: str | None
