"""Radial highlight masks: how much of a slice renders active versus faded.

Under cross-filtering a slice keeps its angular extent (its share of the
true total) and instead shows the highlighted fraction of its value as a
radial band. The band starts at the ring's inner edge and covers
`proportion` of the ring thickness at full opacity, then falls off to
FADE_OPACITY through a narrow transition out to the outer edge. Offsets
are percentages of the outer radius, matching a radial gradient laid on
the ring's bounding circle.
"""
from typing import Literal, NamedTuple

import numpy as np

from .data import Slice
from .constants import FADE_OPACITY, FULL_OPACITY

TRANSITION_WIDTH = 1.0      # percent either side of the boundary
VISIBLE_STEPS = 3
TRANSITION_STEPS = 5
HOLE_EDGE = 0.1             # sharp step just inside the inner radius


class GradientStop(NamedTuple):
    offset: float    # percent of the outer radius, 0-100
    opacity: float


class SliceMask(NamedTuple):
    kind: Literal["gradient", "faded"]
    radius: float                  # outer radius; the mask circle's radius
    stops: list[GradientStop]      # empty for "faded"
    proportion: float = 0.0


def highlight_proportion(s: Slice) -> float:
    """Highlighted share of the slice's own value, clamped to [0, 1]."""
    if s.highlight_value is None:
        return 0.0
    return max(0.0, min(1.0, s.highlight_value / s.value))


def gradient_stops(inner_pct: float, proportion: float) -> list[GradientStop]:
    """Stop sequence for a ring whose inner edge is at inner_pct of the outer radius.

    Offsets never decrease. A proportion of 1 keeps the whole ring opaque.
    """
    proportion = max(0.0, min(1.0, proportion))
    boundary = inner_pct + proportion * (100 - inner_pct)

    stops = [
        GradientStop(0.0, 0.0),
        GradientStop(max(0.0, inner_pct - HOLE_EDGE), 0.0),
        GradientStop(inner_pct, FULL_OPACITY),
    ]
    if proportion >= 1.0:
        stops.append(GradientStop(100.0, FULL_OPACITY))
        return stops

    plateau_end = max(inner_pct, boundary - TRANSITION_WIDTH)
    for off in np.linspace(inner_pct, plateau_end, VISIBLE_STEPS + 1):
        stops.append(GradientStop(float(off), FULL_OPACITY))

    band = np.linspace(boundary - TRANSITION_WIDTH, boundary + TRANSITION_WIDTH,
                       TRANSITION_STEPS + 1)
    for i, off in enumerate(band):
        opacity = FULL_OPACITY - (i / TRANSITION_STEPS) * (FULL_OPACITY - FADE_OPACITY)
        stops.append(GradientStop(float(min(max(off, plateau_end), 100.0)), opacity))

    stops.append(GradientStop(100.0, FADE_OPACITY))

    # running max keeps offsets monotonic when the band overlaps the inner edge
    out, last = [], 0.0
    for st in stops:
        last = max(last, st.offset)
        out.append(st._replace(offset=last))
    return out


def build_slice_mask(s: Slice, has_highlights: bool,
                     inner: float, outer: float) -> SliceMask | None:
    """Mask for one slice, or None when no cross-filter is active."""
    if not has_highlights:
        return None
    if s.highlighted and s.highlight_value is not None and s.highlight_value > 0:
        proportion = highlight_proportion(s)
        inner_pct = inner / outer * 100 if outer > 0 else 0.0
        return SliceMask("gradient", outer, gradient_stops(inner_pct, proportion), proportion)
    # highlighted with a zero value looks the same as not highlighted
    return SliceMask("faded", outer, [])


def label_opacity(s: Slice, has_highlights: bool) -> float | None:
    """Data-label opacity tracking the slice's highlighted share."""
    if not has_highlights:
        return None
    if s.highlighted and s.highlight_value is not None:
        p = s.highlight_value / s.value
        return round(max(FADE_OPACITY, min(FULL_OPACITY, FADE_OPACITY + p * 0.7)), 2)
    return FADE_OPACITY


def swatch_opacity(s: Slice, has_highlights: bool) -> float | None:
    if not has_highlights:
        return None
    return FULL_OPACITY if s.highlighted else FADE_OPACITY
