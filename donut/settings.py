"""Display settings: documented defaults merged with persisted objects."""
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple

from .data import Slice
from .types import LegendPosition, LabelPosition
from .constants import (
    MIN_INNER_RADIUS, MAX_INNER_RADIUS,
    MIN_PERCENT_DECIMALS, MAX_PERCENT_DECIMALS,
)


class TotalSettings(NamedTuple):
    show: bool = True
    font_size: float = 24
    color: str = "#333333"
    label: str = "Total"


class LegendSettings(NamedTuple):
    show: bool = True
    position: LegendPosition = "right-center"
    font_size: float = 12
    color: str = "#333333"


class DataLabelSettings(NamedTuple):
    show: bool = True
    color: str = "#333333"
    font_size: float = 12
    show_value: bool = True
    show_percent: bool = True
    position: LabelPosition = "inside"
    percent_decimals: int = 1


class RingSettings(NamedTuple):
    inner_radius: float = 60     # percent of the outer radius
    show_borders: bool = False


class ColorSettings(NamedTuple):
    category_colors: Mapping[str, str] = MappingProxyType({})


class Settings(NamedTuple):
    total: TotalSettings = TotalSettings()
    legend: LegendSettings = LegendSettings()
    data_labels: DataLabelSettings = DataLabelSettings()
    ring: RingSettings = RingSettings()
    colors: ColorSettings = ColorSettings()

    @property
    def outside_labels(self) -> bool:
        return self.data_labels.show and self.data_labels.position == "outside"


DEFAULT_SETTINGS = Settings()

LEGEND_POSITIONS = ("top-left", "top-right", "top-center", "left-center", "right-center")
_POSITION_ALIASES = {
    "topLeft": "top-left", "topRight": "top-right", "topCenter": "top-center",
    "leftCenter": "left-center", "rightCenter": "right-center",
}


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def get_value(objects: Mapping[str, Any] | None, group: str, prop: str, default: Any) -> Any:
    """One persisted property, or default when the group or property is absent."""
    if not objects:
        return default
    obj = objects.get(group)
    if not obj:
        return default
    value = obj.get(prop)
    return default if value is None else value


def normalize_position(position: str) -> LegendPosition:
    position = _POSITION_ALIASES.get(position, position)
    return position if position in LEGEND_POSITIONS else "right-center"


def load_settings(objects: Mapping[str, Any] | None) -> Settings:
    """Merge persisted objects over the defaults. Inputs are not modified."""
    d = DEFAULT_SETTINGS

    def g(group, prop, default):
        return get_value(objects, group, prop, default)

    total = TotalSettings(
        show=bool(g("total", "show", d.total.show)),
        font_size=g("total", "font_size", d.total.font_size),
        color=g("total", "color", d.total.color),
        label=g("total", "label", d.total.label),
    )
    legend = LegendSettings(
        show=bool(g("legend", "show", d.legend.show)),
        position=normalize_position(g("legend", "position", d.legend.position)),
        font_size=g("legend", "font_size", d.legend.font_size),
        color=g("legend", "color", d.legend.color),
    )
    label_pos = g("data_labels", "position", d.data_labels.position)
    data_labels = DataLabelSettings(
        show=bool(g("data_labels", "show", d.data_labels.show)),
        color=g("data_labels", "color", d.data_labels.color),
        font_size=g("data_labels", "font_size", d.data_labels.font_size),
        show_value=bool(g("data_labels", "show_value", d.data_labels.show_value)),
        show_percent=bool(g("data_labels", "show_percent", d.data_labels.show_percent)),
        position="outside" if label_pos == "outside" else "inside",
        percent_decimals=int(clamp(g("data_labels", "percent_decimals", d.data_labels.percent_decimals),
                                   MIN_PERCENT_DECIMALS, MAX_PERCENT_DECIMALS)),
    )
    ring = RingSettings(
        inner_radius=clamp(g("ring", "inner_radius", d.ring.inner_radius),
                           MIN_INNER_RADIUS, MAX_INNER_RADIUS),
        show_borders=bool(g("ring", "show_borders", d.ring.show_borders)),
    )
    colors = ColorSettings(
        category_colors=dict(g("colors", "category_colors", d.colors.category_colors)),
    )
    return Settings(total, legend, data_labels, ring, colors)


def enumerate_properties(settings: Settings, group: str,
                         slices: list[Slice] | None = None) -> list[dict]:
    """Current values of one property group, for a host property pane."""
    if group == "data_point":
        overrides = settings.colors.category_colors
        return [{"group": "data_point", "display_name": s.category,
                 "properties": {"fill": overrides.get(s.category, s.color)},
                 "selector": s.key}
                for s in (slices or [])]
    groups = {
        "total": settings.total, "legend": settings.legend,
        "data_labels": settings.data_labels, "ring": settings.ring,
    }
    if group not in groups:
        return []
    return [{"group": group, "properties": groups[group]._asdict(), "selector": None}]
