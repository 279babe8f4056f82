"""Tests for donut/settings.py defaults and clamping."""
import copy
import pytest
from donut.data import Palette, normalize
from donut.settings import (
    Settings, DEFAULT_SETTINGS, load_settings, get_value, enumerate_properties,
)


class TestDefaults:
    def test_empty_objects_give_defaults(self):
        assert load_settings(None) == DEFAULT_SETTINGS
        assert load_settings({}) == DEFAULT_SETTINGS

    def test_documented_values(self):
        s = DEFAULT_SETTINGS
        assert s.total == (True, 24, "#333333", "Total")
        assert s.legend.position == "right-center"
        assert s.data_labels.percent_decimals == 1
        assert s.data_labels.position == "inside"
        assert s.ring == (60, False)
        assert s.colors.category_colors == {}

    def test_default_overrides_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_SETTINGS.colors.category_colors["A"] = "#fff"
        assert load_settings(None).colors.category_colors == {}


class TestGetValue:
    def test_missing_levels(self):
        assert get_value(None, "legend", "show", 1) == 1
        assert get_value({}, "legend", "show", 1) == 1
        assert get_value({"legend": {}}, "legend", "show", 1) == 1

    def test_present(self):
        assert get_value({"legend": {"show": False}}, "legend", "show", True) is False


class TestLoadSettings:
    def test_merge_keeps_other_defaults(self):
        s = load_settings({"legend": {"font_size": 9}})
        assert s.legend.font_size == 9
        assert s.legend.show is True
        assert s.total == DEFAULT_SETTINGS.total

    @pytest.mark.parametrize("raw,expected", [(0, 1), (1, 1), (99, 99), (150, 99), (45.5, 45.5)])
    def test_inner_radius_clamped(self, raw, expected):
        assert load_settings({"ring": {"inner_radius": raw}}).ring.inner_radius == expected

    @pytest.mark.parametrize("raw,expected", [(-1, 0), (2, 2), (7, 3)])
    def test_percent_decimals_clamped(self, raw, expected):
        s = load_settings({"data_labels": {"percent_decimals": raw}})
        assert s.data_labels.percent_decimals == expected

    @pytest.mark.parametrize("raw,expected", [
        ("leftCenter", "left-center"), ("top-left", "top-left"),
        ("topRight", "top-right"), ("bottom", "right-center"),
    ])
    def test_legend_position(self, raw, expected):
        assert load_settings({"legend": {"position": raw}}).legend.position == expected

    def test_label_position(self):
        assert load_settings({"data_labels": {"position": "outside"}}).outside_labels
        assert load_settings({"data_labels": {"position": "weird"}}).data_labels.position == "inside"

    def test_input_not_mutated(self):
        objects = {"colors": {"category_colors": {"A": "#fff"}}, "ring": {"inner_radius": 500}}
        before = copy.deepcopy(objects)
        s = load_settings(objects)
        s.colors.category_colors["B"] = "#000"
        assert objects == before

    def test_returns_settings(self):
        assert isinstance(load_settings({"total": {"label": "Sum"}}), Settings)


class TestEnumerateProperties:
    def test_group(self):
        (entry,) = enumerate_properties(DEFAULT_SETTINGS, "legend")
        assert entry["properties"]["position"] == "right-center"
        assert entry["selector"] is None

    def test_unknown_group(self):
        assert enumerate_properties(DEFAULT_SETTINGS, "nope") == []

    def test_data_points(self):
        s = load_settings({"colors": {"category_colors": {"B": "#abcdef"}}})
        data = normalize([("A", 1, None), ("B", 2, None)], Palette().get_color)
        entries = enumerate_properties(s, "data_point", data.slices)
        assert [e["display_name"] for e in entries] == ["A", "B"]
        assert entries[1]["properties"]["fill"] == "#abcdef"
        assert entries[0]["selector"] == data.slices[0].key
