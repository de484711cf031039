"""
Tests for composer.charts.layout

Covers categorical slots, bar geometry, polylines and candlesticks.
"""

import pytest

from composer.charts import (
    Scale,
    compute_scale,
    layout_categorical,
    layout_continuous,
    map_bars,
    map_candlestick,
)
from composer.charts.layout import MIN_CANDLE_BODY_HEIGHT, MIN_CANDLE_WIDTH


class TestCategoricalLayout:
    def test_bars_and_gaps_fill_width(self):
        slots = layout_categorical(4, 1000, gap_fraction=0.2)

        assert slots.bar_width == pytest.approx(200)
        assert slots.gap == pytest.approx(40)
        assert 4 * slots.bar_width + 5 * slots.gap == pytest.approx(1000)

    def test_x_positions(self):
        slots = layout_categorical(2, 100, gap_fraction=0.3)
        assert slots.x_of(0) == pytest.approx(10)
        assert slots.x_of(1) == pytest.approx(10 + 35 + 10)

    def test_no_gaps(self):
        slots = layout_categorical(5, 500, gap_fraction=0)
        assert slots.bar_width == 100
        assert slots.x_of(4) == 400

    @pytest.mark.parametrize("n,fraction", [(0, 0.2), (3, 1.0), (3, -0.1)])
    def test_invalid_arguments(self, n, fraction):
        with pytest.raises(ValueError):
            layout_categorical(n, 100, fraction)


class TestMapBars:
    def test_bar_heights_follow_scale(self):
        scale = Scale(min=0, max=100, grid_lines=())
        bars = map_bars([50, 100], 300, 200, scale)

        assert bars[0].height == pytest.approx(100)
        assert bars[0].y == pytest.approx(100)
        assert bars[1].height == pytest.approx(200)
        assert bars[1].y == pytest.approx(0)

    def test_negative_value_has_zero_height(self):
        bars = map_bars([-5, 10], 200, 100)
        assert bars[0].height == pytest.approx(0)

    def test_values_are_kept(self):
        bars = map_bars([1, 2, 3], 300, 100)
        assert [b.value for b in bars] == [1, 2, 3]


class TestLayoutContinuous:
    def test_points_spread_over_width(self):
        scale = Scale(min=0, max=10, grid_lines=())
        line = layout_continuous([(0, 0), (1, 5), (2, 10)], 200, 100, scale)

        assert line.points == ((0, 100), (100, 50), (200, 0))
        assert line.path == "M 0 100 L 100 50 L 200 0"

    def test_area_path_closes_to_baseline(self):
        scale = Scale(min=0, max=10, grid_lines=())
        line = layout_continuous([{"x": "a", "y": 10}, {"x": "b", "y": 0}], 50, 20, scale)
        assert line.area_path == "M 0 0 L 50 20 L 50 20 L 0 20 Z"

    def test_single_point_at_left_edge(self):
        line = layout_continuous([(0, 5)], 100, 100)
        assert line.points[0][0] == 0

    def test_default_scale_is_line_policy(self):
        line = layout_continuous([(0, 100), (1, 200)], 100, 100)
        assert line.scale == compute_scale([100, 200], kind="line")

    def test_fractional_coordinates_are_trimmed(self):
        scale = Scale(min=0, max=3, grid_lines=())
        line = layout_continuous([(0, 1), (1, 2)], 10, 10, scale)
        assert line.path == "M 0 6.667 L 10 3.333"

    def test_empty_series(self):
        with pytest.raises(ValueError):
            layout_continuous([], 100, 100)


class TestMapCandlestick:
    def test_centred_slots(self):
        candles = map_candlestick([(10, 12, 9, 11), (11, 13, 10, 12)], 200, 100)
        assert [c.x for c in candles] == [50, 150]

    def test_body_spans_open_close(self):
        scale = Scale(min=0, max=100, grid_lines=())
        (candle,) = map_candlestick([{"o": 20, "h": 90, "l": 10, "c": 60}], 100, 100, scale)

        assert candle.body_top == pytest.approx(40)
        assert candle.body_height == pytest.approx(40)
        assert candle.wick_top == pytest.approx(10)
        assert candle.wick_bottom == pytest.approx(90)
        assert candle.bullish is True

    def test_bearish_candle(self):
        (candle,) = map_candlestick([(60, 70, 10, 20)], 100, 100)
        assert candle.bullish is False

    def test_doji_body_has_minimum_height(self):
        (candle,) = map_candlestick([(50, 60, 40, 50)], 100, 100)
        assert candle.body_height == MIN_CANDLE_BODY_HEIGHT

    def test_minimum_body_width(self):
        candles = map_candlestick([(1, 2, 0, 1)] * 100, 100, 100)
        assert all(c.body_width == MIN_CANDLE_WIDTH for c in candles)

    def test_body_width_is_three_quarters_of_slot(self):
        candles = map_candlestick([(1, 2, 0, 1)] * 4, 400, 100)
        assert candles[0].body_width == pytest.approx(75)

    def test_empty_series(self):
        with pytest.raises(ValueError):
            map_candlestick([], 100, 100)
