"""Responsive layout: margins, donut center and radius, legend box."""
from typing import NamedTuple

from .types import Point, BBox, Margins, Viewport
from .settings import Settings, LegendSettings
from .constants import (
    MOBILE_BREAKPOINT, TABLET_BREAKPOINT,
    MARGIN_MOBILE, MARGIN_TABLET, MARGIN_DESKTOP,
    EXTERNAL_LABEL_MARGIN, EXTERNAL_LABEL_MARGIN_CAP,
    MIN_SIZE_RATIO, DIAMETER_RATIO, CENTER_LIFT,
    SHORT_HEIGHT, MEDIUM_HEIGHT,
    VERTICAL_OFFSET_SHORT, VERTICAL_OFFSET_MEDIUM, VERTICAL_OFFSET_TALL,
    LEGEND_WIDTH, LEGEND_GAP, LEGEND_PADDING,
    LEGEND_ESTIMATED_HEIGHT, LEGEND_LIFT,
    MIN_VIEWPORT_SIZE,
)

LEFT_POSITIONS = ("left-center", "top-left")
RIGHT_POSITIONS = ("right-center", "top-right", "top-center")


class LayoutDimensions(NamedTuple):
    """Derived per render pass; never persisted."""
    viewport: Viewport
    margin: Margins
    chart_width: float
    chart_height: float
    radius: float
    center: Point
    legend: BBox | None      # None when the legend is hidden


# ============================================================
# Responsive Rules
# ============================================================
def responsive_margin(width: float) -> float:
    if width < MOBILE_BREAKPOINT:
        return MARGIN_MOBILE
    if width < TABLET_BREAKPOINT:
        return MARGIN_TABLET
    return MARGIN_DESKTOP


def legend_width(width: float) -> float:
    if width < MOBILE_BREAKPOINT:
        return min(80, width * 0.2)
    if width < TABLET_BREAKPOINT:
        return min(100, width * 0.18)
    return min(120, LEGEND_WIDTH * 0.6)


def vertical_offset(height: float) -> float:
    if height < SHORT_HEIGHT:
        return VERTICAL_OFFSET_SHORT
    if height < MEDIUM_HEIGHT:
        return VERTICAL_OFFSET_MEDIUM
    return VERTICAL_OFFSET_TALL


def label_allowance(settings: Settings) -> float:
    """Extra margin on every side for leader lines of outside labels."""
    if not settings.outside_labels:
        return 0
    return min(EXTERNAL_LABEL_MARGIN_CAP, EXTERNAL_LABEL_MARGIN * 0.2)


def center_offset_x(legend: LegendSettings, width: float) -> float:
    """Horizontal shift of the donut away from the legend side."""
    if not legend.show:
        return 0.0
    shift = (width + LEGEND_GAP) / 2
    if legend.position in LEFT_POSITIONS:
        return shift
    if legend.position in RIGHT_POSITIONS:
        return -shift
    return 0.0


def is_valid_viewport(viewport: Viewport) -> bool:
    return viewport.width >= MIN_VIEWPORT_SIZE and viewport.height >= MIN_VIEWPORT_SIZE


# ============================================================
# Legend Box
# ============================================================
def legend_box(viewport: Viewport, position: str, center_y: float) -> BBox:
    """Legend bounding box, vertically anchored just above the donut center.

    Only left/right placements are exact; top-* positions reuse the side
    layout, with top-center going to the right edge like top-right.
    """
    w = legend_width(viewport.width)
    if position in LEFT_POSITIONS:
        x = LEGEND_PADDING
    else:
        x = viewport.width - w - LEGEND_PADDING
    y = center_y - LEGEND_ESTIMATED_HEIGHT / 2 - LEGEND_LIFT
    return BBox(x, y, w, LEGEND_ESTIMATED_HEIGHT)


# ============================================================
# Layout
# ============================================================
def compute_layout(viewport: Viewport, settings: Settings) -> LayoutDimensions:
    """Compute the layout for one render pass.

    The radius never drops below 60% of the smaller viewport side, even
    when the margins leave less room; in extreme aspect ratios the ring may
    then overlap the margins.
    """
    m = responsive_margin(viewport.width) + label_allowance(settings)
    margin = Margins(m, m, m, m)
    chart_w = viewport.width - margin.left - margin.right
    chart_h = viewport.height - margin.top - margin.bottom

    available = min(chart_w, chart_h)
    min_size = min(viewport.width, viewport.height) * MIN_SIZE_RATIO
    radius = max(available, min_size) * DIAMETER_RATIO / 2

    cx = margin.left + chart_w / 2 + center_offset_x(settings.legend, legend_width(viewport.width))
    cy = margin.top + chart_h / 2 - CENTER_LIFT + vertical_offset(viewport.height)

    legend = legend_box(viewport, settings.legend.position, cy) if settings.legend.show else None
    return LayoutDimensions(viewport, margin, chart_w, chart_h, radius, (cx, cy), legend)
