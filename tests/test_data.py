"""Tests for donut/data.py row normalization and formatting."""
import math
import pytest
from donut.types import SelectionKey
from donut.data import (
    ChartData, Palette, DEFAULT_PALETTE, normalize, highlight_total,
    format_number, format_percent,
)


@pytest.fixture
def palette():
    return Palette()


class TestNormalize:
    def test_returns_chart_data(self, ab_data):
        assert isinstance(ab_data, ChartData)
        assert [s.category for s in ab_data.slices] == ["A", "B"]
        assert ab_data.total == 100
        assert not ab_data.has_highlights

    def test_drops_non_positive_and_missing(self, palette):
        data = normalize([("A", 0, None), ("B", 10, None), ("C", None, None),
                          ("D", -3, None), ("E", math.nan, None)], palette)
        assert [s.category for s in data.slices] == ["B"]
        assert data.total == 10

    def test_duplicates_stay_separate(self, palette):
        data = normalize([("A", 50, None), ("A", 50, None)], palette)
        assert len(data.slices) == 2
        a0, a1 = data.slices
        assert a0.category == a1.category == "A"
        assert a0.key != a1.key
        assert a0.color == a1.color

    def test_empty_category_synthesized(self, palette):
        data = normalize([("A", 1, None), ("", 2, None), (None, 3, None)], palette)
        assert [s.category for s in data.slices] == ["A", "Category 2", "Category 3"]

    def test_synthesized_name_uses_source_row(self, palette):
        data = normalize([("A", 0, None), ("", 2, None)], palette)
        assert data.slices[0].category == "Category 2"
        assert data.slices[0].key == SelectionKey(1, "")

    def test_total_only_mode(self, palette):
        data = normalize([(None, 42, None), (None, 7, None)], palette, categorical=False)
        assert len(data.slices) == 1
        assert data.slices[0].category == "Total"
        assert data.total == 42

    def test_total_only_non_positive(self, palette):
        assert normalize([(None, 0, None)], palette, categorical=False).slices == []

    def test_color_override(self, palette):
        data = normalize([("A", 1, None), ("B", 1, None)], palette, {"B": "#123456"})
        assert data.slices[0].color == DEFAULT_PALETTE[0]
        assert data.slices[1].color == "#123456"

    def test_highlight_flags(self, palette, filtered_rows):
        data = normalize(filtered_rows, palette)
        assert data.has_highlights
        assert all(s.highlighted for s in data.slices)
        # zero highlight is still highlighted
        assert data.slices[1].highlight_value == 0
        assert data.total == 100
        assert highlight_total(data) == 40

    def test_numeric_category_labelled_by_text(self, palette):
        data = normalize([(2023, 1, None), (0, 2, None)], palette)
        assert [s.category for s in data.slices] == ["2023", "0"]
        assert data.slices[0].key == SelectionKey(0, "2023")

    def test_keys_compare_by_value(self, palette):
        d1 = normalize([("A", 1, None)], palette)
        d2 = normalize([("A", 1, None)], palette)
        assert d1.slices[0].key == d2.slices[0].key
        assert d1.slices[0].key is not d2.slices[0].key


class TestPalette:
    def test_stable_per_key(self):
        p = Palette()
        assert p.get_color("x") == p.get_color("x")
        assert p.get_color("y") == DEFAULT_PALETTE[1]

    def test_cycles(self):
        p = Palette(["#a", "#b"])
        assert [p(k) for k in "xyz"] == ["#a", "#b", "#a"]


class TestFormatting:
    @pytest.mark.parametrize("value,text", [
        (100, "100"), (100.0, "100"), (1234, "1,234"),
        (1234567.5, "1,234,567.5"), (0.1234, "0.123"), (2.5, "2.5"),
    ])
    def test_format_number(self, value, text):
        assert format_number(value) == text

    def test_format_percent(self):
        assert format_percent(30, 100, 1) == "30.0"
        assert format_percent(1, 3, 3) == "33.333"
        assert format_percent(1, 3, 0) == "33"
