"""Legend capacity planning: how many rows fit and whether "+N more" is shown."""
import math
from typing import NamedTuple

from .types import Point, BBox
from .constants import (
    LEGEND_ITEM_HEIGHT, MAX_LEGEND_TEXT_LENGTH, ELLIPSIS,
    SHORT_HEIGHT, MEDIUM_HEIGHT,
)


class LegendPlan(NamedTuple):
    items_to_show: int
    show_more: bool

    def remaining(self, total_items: int) -> int:
        return total_items - self.items_to_show


def max_rows(chart_height: float) -> int:
    """Rows of fixed height that fit in the chart area."""
    return max(0, math.floor(chart_height / LEGEND_ITEM_HEIGHT))


def plan(total_items: int, viewport_height: float, max_rows_that_fit: int) -> LegendPlan:
    """Decide how many legend rows to show.

    When everything fits, everything is shown. Otherwise one row is kept
    for the indicator and short viewports are capped further (3 rows under
    200 units, 5 under 400).
    """
    if total_items <= max_rows_that_fit:
        return LegendPlan(total_items, False)
    available = max(1, max_rows_that_fit - 1)
    if viewport_height < SHORT_HEIGHT:
        shown = min(3, available)
    elif viewport_height < MEDIUM_HEIGHT:
        shown = min(5, available)
    else:
        shown = available
    shown = min(shown, total_items)
    return LegendPlan(shown, shown < total_items)


def truncate_label(text: str, limit: int = MAX_LEGEND_TEXT_LENGTH) -> str:
    """Character-count truncation; legend rows use a fixed font size."""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def more_label(remaining: int) -> str:
    return f"... +{remaining} more"


def row_positions(box: BBox, count: int) -> list[Point]:
    """Swatch centers for the first `count` rows; row i+1 sits one row below row i."""
    return [(box.x, box.y + i * LEGEND_ITEM_HEIGHT) for i in range(count)]
