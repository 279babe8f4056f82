"""Donut chart geometry, layout, highlight masks and selection state."""

from .types import Point, Viewport, Margins, BBox, SelectionKey
from .geometry import (
    GeometryError,
    polar, mid_angle, ring_radii, slice_angles, is_full_circle,
    arc_path, polyline_path, leader_line, inside_label_point, LeaderLine,
)
from .data import Slice, ChartData, Palette, normalize, highlight_total, format_number
from .settings import Settings, DEFAULT_SETTINGS, load_settings, enumerate_properties
from .mask import GradientStop, SliceMask, gradient_stops, build_slice_mask
from .layout import LayoutDimensions, compute_layout, is_valid_viewport, legend_width
from .legend import LegendPlan, plan, max_rows, truncate_label
from .selection import SelectionState, UNSELECTED, click_item, click_background, apply_selection
from .commands import PathCmd, CircleCmd, TextCmd, GroupCmd, walk
from .render import RenderState, RenderResult, render, restyle
from .svg import to_svg
from .chart import DonutChart
