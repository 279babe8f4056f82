"""One render pass: rows + settings + viewport to a list of draw commands.

A pass runs to completion and never raises. Its outcome is one of
"rendered", "no_data" (placeholder text), "invalid_viewport" (nothing
drawn) or "faulted" (any unexpected error; logged, placeholder text).
"""
import logging
from typing import Iterable, NamedTuple

from .types import Outcome, Viewport
from .data import ChartData, Palette, Slice, normalize, highlight_total, format_number, format_percent
from .settings import Settings, DataLabelSettings, DEFAULT_SETTINGS
from .layout import LayoutDimensions, compute_layout, is_valid_viewport
from .geometry import (
    ring_radii, slice_angles, arc_path, mid_angle,
    leader_line, inside_label_point, polyline_path,
)
from .mask import build_slice_mask, label_opacity, swatch_opacity
from .legend import plan, max_rows, truncate_label, more_label, row_positions
from .selection import SelectionState, UNSELECTED, apply_selection
from .commands import PathCmd, CircleCmd, TextCmd, GroupCmd
from .constants import (
    STROKE_COLOR, STROKE_WIDTH, LEADER_COLOR, LEADER_WIDTH,
    LEGEND_CIRCLE_RADIUS, LEGEND_TEXT_OFFSET, LEGEND_ITEM_HEIGHT, MORE_COLOR,
    MESSAGE_COLOR, MESSAGE_FONT_SIZE, PLACEHOLDER_MESSAGE,
)

logger = logging.getLogger(__name__)


class RenderState(NamedTuple):
    """Everything a chart instance carries between events."""
    data: ChartData
    settings: Settings
    layout: LayoutDimensions | None
    selection: SelectionState = UNSELECTED


class RenderResult(NamedTuple):
    outcome: Outcome
    commands: list
    state: RenderState
    reason: str | None = None


_EMPTY = ChartData([], 0, False)


# ============================================================
# Data Labels
# ============================================================
def label_text(s: Slice, total: float, has_highlights: bool, dl: DataLabelSettings) -> str:
    """Label for one slice; percentages are always shares of the true total."""
    active = has_highlights and s.highlighted
    shown = (s.highlight_value or 0) if active else s.value
    pct = format_percent(s.value, total, dl.percent_decimals)
    filtered = (format_percent(s.highlight_value, total, dl.percent_decimals)
                if active and s.highlight_value else pct)
    if dl.show_value and dl.show_percent:
        p = filtered if active and s.highlight_value != s.value else pct
        return f"{format_number(shown)} ({p}%)"
    if dl.show_value:
        return format_number(shown)
    if dl.show_percent:
        return f"{filtered if active else pct}%"
    return ""


def emit_data_label(out: list, s: Slice, index: int, start: float, end: float,
                    inner: float, outer: float, data: ChartData, settings: Settings):
    """Leader line (outside labels only) and label text for one slice."""
    dl = settings.data_labels
    text = label_text(s, data.total, data.has_highlights, dl)
    angle = mid_angle(start, end)
    if dl.position == "outside":
        ll = leader_line(angle, outer)
        out.append(PathCmd(polyline_path([ll.start, ll.bend, ll.end]), fill=None,
                           stroke=LEADER_COLOR, stroke_width=LEADER_WIDTH,
                           index=index, role="leader"))
        (x, y), anchor = ll.label, ll.anchor
    else:
        (x, y), anchor = inside_label_point(angle, inner, outer), "middle"
    if not text:
        return
    out.append(TextCmd(x, y, text, dl.font_size, dl.color, anchor=anchor,
                       baseline="middle", weight="bold",
                       opacity=label_opacity(s, data.has_highlights),
                       index=index, role="data-label"))


# ============================================================
# Slices and Center Total
# ============================================================
def emit_slices(out: list, data: ChartData, settings: Settings, inner: float, outer: float):
    values = [s.value for s in data.slices]
    stroke_w = STROKE_WIDTH if settings.ring.show_borders else 0
    for i, (s, (start, end)) in enumerate(zip(data.slices, slice_angles(values, data.total))):
        mask = build_slice_mask(s, data.has_highlights, inner, outer)
        out.append(PathCmd(arc_path(start, end, inner, outer), fill=s.color,
                           stroke=STROKE_COLOR, stroke_width=stroke_w,
                           opacity=1.0, mask=mask, index=i, role="slice"))
        if settings.data_labels.show:
            emit_data_label(out, s, i, start, end, inner, outer, data, settings)


def emit_total(out: list, data: ChartData, settings: Settings):
    t = settings.total
    figure = highlight_total(data) if data.has_highlights else data.total
    out.append(TextCmd(0, 0, format_number(figure), t.font_size, t.color,
                       anchor="middle", baseline="middle", weight="bold", role="total"))
    out.append(TextCmd(0, 0, t.label, t.font_size * 0.5, t.color,
                       anchor="middle", baseline="middle", dy="1.5em", role="total-label"))


# ============================================================
# Legend
# ============================================================
def emit_legend(out: list, data: ChartData, settings: Settings, layout: LayoutDimensions):
    box = layout.legend
    lg = settings.legend
    n_items = len(data.slices)
    lp = plan(n_items, layout.viewport.height, max_rows(layout.chart_height))
    rows = row_positions(box, lp.items_to_show)
    for i, (s, (x, y)) in enumerate(zip(data.slices, rows)):
        out.append(CircleCmd(x, y, LEGEND_CIRCLE_RADIUS, s.color,
                             opacity=swatch_opacity(s, data.has_highlights), index=i))
        out.append(TextCmd(x + LEGEND_TEXT_OFFSET, y, truncate_label(s.category),
                           lg.font_size, lg.color, dy="0.35em",
                           weight="bold" if s.highlighted else "normal",
                           index=i, role="legend"))
    if lp.show_more:
        out.append(TextCmd(box.x + LEGEND_TEXT_OFFSET,
                           box.y + lp.items_to_show * LEGEND_ITEM_HEIGHT,
                           more_label(lp.remaining(n_items)), lg.font_size - 1, MORE_COLOR,
                           dy="0.35em", italic=True, role="more"))


def placeholder(viewport: Viewport) -> list:
    return [TextCmd(viewport.width / 2, viewport.height / 2, PLACEHOLDER_MESSAGE,
                    MESSAGE_FONT_SIZE, MESSAGE_COLOR, anchor="middle",
                    baseline="middle", role="message")]


# ============================================================
# Render Pass
# ============================================================
def build_commands(data: ChartData, settings: Settings, layout: LayoutDimensions) -> list:
    outer, inner = ring_radii(layout.radius, settings.ring.inner_radius)
    donut = []
    emit_slices(donut, data, settings, inner, outer)
    if settings.total.show:
        emit_total(donut, data, settings)
    out = [GroupCmd(layout.center, donut)]
    if settings.legend.show and layout.legend is not None:
        emit_legend(out, data, settings, layout)
    return out


def render(rows: Iterable[tuple], viewport: Viewport | tuple[float, float],
           settings: Settings = DEFAULT_SETTINGS, palette: Palette | None = None,
           categorical: bool = True, previous: RenderState | None = None) -> RenderResult:
    """Run one render pass.

    New data always starts from an unselected state; `previous` is only
    consulted to report a discarded selection.
    """
    viewport = Viewport(*viewport)
    if previous is not None and previous.selection.selected:
        logger.debug("new render pass clears selection of slice %d", previous.selection.index)
    palette = palette or Palette()
    data, layout = _EMPTY, None
    try:
        data = normalize(rows, palette.get_color, settings.colors.category_colors, categorical)
        layout = compute_layout(viewport, settings)
        state = RenderState(data, settings, layout)
        if not is_valid_viewport(viewport):
            logger.debug("viewport %sx%s below minimum", viewport.width, viewport.height)
            return RenderResult("invalid_viewport", [], state)
        if not data.slices:
            logger.debug("no positive values to draw")
            return RenderResult("no_data", placeholder(viewport), state)
        commands = build_commands(data, settings, layout)
    except Exception as exc:
        logger.exception("Error rendering donut chart")
        return RenderResult("faulted", placeholder(viewport),
                            RenderState(data, settings, layout),
                            f"{type(exc).__name__}: {exc}")
    logger.debug("rendered %d slices, total %s", len(data.slices), data.total)
    return RenderResult("rendered", commands, state)


def restyle(result: RenderResult, selection: SelectionState) -> list:
    """Commands of a finished pass with the given local selection applied."""
    if result.outcome != "rendered":
        return result.commands
    return apply_selection(result.commands, selection, result.state.data.has_highlights)
