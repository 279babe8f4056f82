"""Tests for donut/layout.py responsive layout."""
import pytest
from donut.types import Viewport
from donut.settings import DEFAULT_SETTINGS, load_settings
from donut.layout import (
    LayoutDimensions, compute_layout, is_valid_viewport,
    responsive_margin, legend_width, vertical_offset, label_allowance,
)


def _settings(**groups):
    return load_settings(groups)


class TestResponsiveRules:
    @pytest.mark.parametrize("width,expected", [(299, 10), (300, 15), (599, 15), (600, 20)])
    def test_margin_breakpoints(self, width, expected):
        assert responsive_margin(width) == expected

    def test_legend_width(self):
        assert legend_width(250) == 50
        assert legend_width(299) == pytest.approx(59.8)
        assert legend_width(500) == 90
        assert legend_width(590) == 100
        assert legend_width(1200) == 96

    @pytest.mark.parametrize("height,expected", [(150, 5), (200, 10), (399, 10), (400, 15)])
    def test_vertical_offset(self, height, expected):
        assert vertical_offset(height) == expected

    def test_label_allowance(self):
        assert label_allowance(DEFAULT_SETTINGS) == 0
        assert label_allowance(_settings(data_labels={"position": "outside"})) == 12
        hidden = _settings(data_labels={"position": "outside", "show": False})
        assert label_allowance(hidden) == 0


class TestComputeLayout:
    def test_returns_named_tuple(self):
        assert isinstance(compute_layout(Viewport(600, 400), DEFAULT_SETTINGS), LayoutDimensions)

    def test_desktop_right_legend(self):
        lay = compute_layout(Viewport(600, 400), DEFAULT_SETTINGS)
        assert lay.margin == (20, 20, 20, 20)
        assert (lay.chart_width, lay.chart_height) == (560, 360)
        assert abs(lay.radius - 162) < 1e-9
        assert abs(lay.center[0] - 237) < 1e-9
        assert abs(lay.center[1] - 200) < 1e-9
        assert lay.legend == (494, 175, 96, 20)

    def test_left_legend_shifts_right(self):
        lay = compute_layout(Viewport(600, 400), _settings(legend={"position": "left-center"}))
        assert abs(lay.center[0] - 363) < 1e-9
        assert lay.legend.x == 10

    def test_hidden_legend_centers_donut(self):
        lay = compute_layout(Viewport(600, 400), _settings(legend={"show": False}))
        assert abs(lay.center[0] - 300) < 1e-9
        assert lay.legend is None

    def test_top_center_legend_clears_donut(self):
        lay = compute_layout(Viewport(600, 400), _settings(legend={"position": "top-center"}))
        assert abs(lay.center[0] - 237) < 1e-9
        assert lay.legend.x == 494
        outer = lay.radius * 0.98
        assert lay.legend.x > lay.center[0] + outer

    def test_top_left_and_right_follow_sides(self):
        left = compute_layout(Viewport(600, 400), _settings(legend={"position": "top-left"}))
        right = compute_layout(Viewport(600, 400), _settings(legend={"position": "top-right"}))
        assert left.center[0] > 300 > right.center[0]
        assert left.legend.x == 10
        assert right.legend.x == 494

    def test_mobile(self):
        lay = compute_layout(Viewport(250, 150), DEFAULT_SETTINGS)
        assert lay.margin.top == 10
        assert abs(lay.radius - 58.5) < 1e-9
        assert abs(lay.center[0] - 85) < 1e-9
        assert abs(lay.center[1] - 65) < 1e-9

    def test_outside_labels_add_margin(self):
        lay = compute_layout(Viewport(600, 400), _settings(data_labels={"position": "outside"}))
        assert lay.margin.left == 32
        assert (lay.chart_width, lay.chart_height) == (536, 336)

    def test_radius_floor(self):
        # chart area only 20 tall; floor is 60% of the 60-unit side
        lay = compute_layout(Viewport(1000, 60), _settings(legend={"show": False}))
        assert lay.chart_height == 20
        assert abs(lay.radius - 60 * 0.6 * 0.9 / 2) < 1e-9


class TestValidViewport:
    def test_minimum(self):
        assert is_valid_viewport(Viewport(50, 50))
        assert not is_valid_viewport(Viewport(49, 400))
        assert not is_valid_viewport(Viewport(400, 49))
