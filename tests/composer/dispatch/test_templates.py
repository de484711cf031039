"""
Tests for the built-in scene templates

Covers defaults applied by each template and their content rules.
"""

import pytest

from composer.dispatch import dispatch
from composer.dispatch.templates.overlay import anchor_box
from composer.errors import ContentShapeError, EmptySceneError, UnknownComponentError


class TestSplitScreenTemplate:
    def test_defaults(self):
        props = dispatch("split_screen", {
            "left": {"header": {"title": "Left"}},
            "right": {"header": {"title": "Right", "align": "right"}},
        }).props

        assert props["ratio"] == 0.5
        assert props["divider"] is True
        assert props["left"]["width"] == 960
        assert props["left"]["header"]["align"] == "left"
        assert props["right"]["header"]["align"] == "right"
        assert "global" not in props

    def test_ratio_splits_width(self):
        props = dispatch("split_screen", {"left": {}, "ratio": 0.25}, 2000, 1000).props
        assert props["left"]["width"] == 500
        assert props["right"]["width"] == 1500

    def test_divider_can_be_disabled(self):
        props = dispatch("split_screen", {"left": {}, "divider": False}).props
        assert props["divider"] is False

    def test_missing_side_is_empty_panel(self):
        props = dispatch("split_screen", {"left": {"header": {"title": "Only"}}}).props
        assert props["right"] == {"width": 960}

    def test_needs_at_least_one_side(self):
        with pytest.raises(ContentShapeError):
            dispatch("split_screen", {"divider": True})

    def test_global_title(self):
        props = dispatch("split_screen", {
            "left": {},
            "global": {"title": "Markets", "titleAnimation": {"type": "fade"}},
        }).props
        assert props["global"] == {"title": "Markets", "titleAnimation": {"type": "fade"}}

    def test_chart_sized_to_panel(self, bar_chart):
        props = dispatch("split_screen", {"right": {"chart": bar_chart}}, 1920, 1080).props
        chart = props["right"]["chart"]

        assert chart["component"] == "BarChart"
        assert chart["width"] == 960 - 80
        assert chart["height"] == pytest.approx(648)
        assert chart["scale"]["max"] == pytest.approx(96)
        assert [b["label"] for b in chart["bars"]] == ["Q1", "Q2", "Q3", "Q4"]


class TestFullBleedTemplate:
    def test_text_string(self):
        props = dispatch("full_bleed", {"text": "Headline"}).props
        assert props == {"text": {"content": "Headline"}}

    def test_text_block(self):
        props = dispatch("full_bleed", {"text": {"content": "Hi", "color": "#fff"}}).props
        assert props["text"] == {"content": "Hi", "color": "#fff"}

    def test_header_centred_by_default(self):
        props = dispatch("full_bleed", {"header": {"title": "T", "category": "MARKETS"}}).props
        assert props["header"]["align"] == "center"
        assert props["header"]["category"] == "MARKETS"

    def test_background_and_overlay_defaults(self):
        props = dispatch("full_bleed", {
            "text": "x",
            "background": {},
            "overlay": {"type": "scanlines"},
        }).props
        assert props["background"] == {"color": "#000"}
        assert props["overlay"] == {"type": "scanlines", "color": "#00ffff"}

    def test_chart_box(self, bar_chart):
        chart = dispatch("full_bleed", {"chart": bar_chart}, 1000, 500).props["chart"]
        assert chart["width"] == 800
        assert chart["height"] == 300
        assert chart["plot"] == {"x": 60, "y": 0, "width": 740, "height": 260}

    def test_empty_scene(self):
        with pytest.raises(EmptySceneError):
            dispatch("full_bleed", {"background": {"color": "#111"}})

    def test_candlestick_chart(self):
        chart = dispatch("full_bleed", {"chart": {
            "type": "candlestick",
            "data": [{"o": 1, "h": 3, "l": 0, "c": 2}],
            "labels": ["Mon"],
        }}).props["chart"]
        assert chart["component"] == "SmartGraph"
        assert chart["labels"] == ["Mon"]
        assert chart["candles"][0]["bullish"] is True

    def test_area_chart_has_area_path(self):
        chart = dispatch("full_bleed", {"chart": {
            "type": "area",
            "data": [{"x": 1, "y": 2}, {"x": 2, "y": 4}],
        }}).props["chart"]
        assert chart["area_path"].endswith("Z")
        assert chart["labels"] == ["1", "2"]

    def test_line_chart_has_no_area_path(self):
        chart = dispatch("full_bleed", {"chart": {
            "type": "line",
            "data": [{"x": "a", "y": 2}],
        }}).props["chart"]
        assert "area_path" not in chart
        assert chart["component"] == "LineChart"


class TestOverlayTemplate:
    def test_stat_callout(self):
        props = dispatch("overlay", {
            "component": "stat_callout",
            "position": "bottom_left",
            "data": {"value": 42, "label": "Answer"},
        }).props

        assert props["component"] == "StatCallout"
        assert props["anchor"] == {"bottom": 100, "left": 100}
        assert props["data"] == {"value": 42, "label": "Answer"}

    def test_unknown_component(self):
        with pytest.raises(UnknownComponentError, match="hologram"):
            dispatch("overlay", {"component": "hologram", "data": {"value": 1, "label": "x"}})

    def test_missing_data(self):
        with pytest.raises(ContentShapeError):
            dispatch("overlay", {"component": "stat_callout"})

    @pytest.mark.parametrize("position,expected", [
        (None, {}),
        ("top_left", {"top": 100, "left": 100}),
        ("top_right", {"top": 100, "right": 100}),
        ("bottom_right", {"bottom": 100, "right": 100}),
        ("center", {"top": "50%", "left": "50%", "transform": "translate(-50%, -50%)"}),
    ])
    def test_anchor_box(self, position, expected):
        assert anchor_box(position) == expected


class TestTransitionTemplate:
    def test_wipe_defaults(self):
        props = dispatch("transition", {"effect": "wipe"}).props
        assert props == {"component": "Wipe", "effect": "wipe", "direction": "right", "duration": 1}

    def test_wipe_direction(self):
        props = dispatch("transition", {"effect": "wipe", "from": "up", "color": "#f00"}).props
        assert props["direction"] == "up"
        assert props["color"] == "#f00"

    def test_arrow_sweep_message(self):
        props = dispatch("transition", {"effect": "arrow_sweep", "message": {"text": "Next"}}).props
        assert props["component"] == "ArrowSweep"
        assert props["message"] == "Next"

    def test_unknown_effect(self):
        with pytest.raises(UnknownComponentError):
            dispatch("transition", {"effect": "spin"})


class TestGridTemplate:
    def test_passes_content_through(self):
        assert dispatch("grid", {"rows": 2, "cols": 3}).props == {"rows": 2, "cols": 3}

    def test_missing_content(self):
        assert dispatch("grid", None).props == {}
