"""Chart data model: raw rows to typed slices with colors and selection keys."""
from typing import Callable, Iterable, NamedTuple

from .types import SelectionKey

Row = tuple  # (category, value, highlight_value)
ColorResolver = Callable[[str], str]

DEFAULT_PALETTE = [
    "#3b82f6", "#10b981", "#f59e0b", "#ef4444",
    "#8b5cf6", "#ec4899", "#06b6d4", "#84cc16",
]


class Slice(NamedTuple):
    """One category's renderable unit."""
    category: str
    value: float
    highlight_value: float | None
    color: str
    key: SelectionKey
    highlighted: bool     # highlight_value present, even if it is 0


class ChartData(NamedTuple):
    slices: list[Slice]
    total: float           # sum of kept values; denominator for every percentage
    has_highlights: bool


class Palette:
    """Default colors keyed by category name, assigned in first-seen order."""

    def __init__(self, colors: list[str] | None = None):
        self.colors = list(colors or DEFAULT_PALETTE)
        self._assigned: dict[str, str] = {}

    def get_color(self, key: str) -> str:
        if key not in self._assigned:
            self._assigned[key] = self.colors[len(self._assigned) % len(self.colors)]
        return self._assigned[key]

    __call__ = get_color


def _kept(value) -> bool:
    # NaN compares false as well
    return value is not None and value > 0


def normalize(rows: Iterable[Row], color_for: ColorResolver,
              overrides: dict[str, str] | None = None,
              categorical: bool = True) -> ChartData:
    """Build slices from (category, value, highlight) rows.

    Rows with a missing or non-positive value are dropped. Duplicate
    categories stay separate slices. Without a category dimension only the
    first row is read and becomes a single "Total" slice.
    """
    overrides = overrides or {}
    rows = list(rows)
    slices: list[Slice] = []

    def _color(cat: str) -> str:
        return overrides[cat] if cat in overrides else color_for(cat)

    if not categorical:
        if rows and _kept(rows[0][1]):
            _, value, hv = rows[0]
            slices.append(Slice("Total", value, hv, _color("Total"),
                                SelectionKey(None, None), hv is not None))
    else:
        for i, (category, value, hv) in enumerate(rows):
            if not _kept(value):
                continue
            # non-string categories (years, ids) are labelled by their text
            raw = None if category is None else str(category)
            cat = raw or f"Category {i + 1}"
            slices.append(Slice(cat, value, hv, _color(cat),
                                SelectionKey(i, raw), hv is not None))

    total = sum(s.value for s in slices)
    return ChartData(slices, total, any(s.highlighted for s in slices))


def highlight_total(data: ChartData) -> float:
    """Sum of highlight values over highlighted slices."""
    return sum(s.highlight_value or 0 for s in data.slices if s.highlighted)


def format_number(v: float) -> str:
    """Digit-grouped number; integral values print without decimals."""
    if float(v).is_integer():
        return f"{int(v):,}"
    return f"{v:,.3f}".rstrip("0").rstrip(".")


def format_percent(part: float, total: float, decimals: int) -> str:
    return f"{part / total * 100:.{decimals}f}"
