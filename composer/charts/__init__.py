"""
Chart Layout Engine

Shared numeric layout for every chart-bearing template: value scaling per
chart kind, categorical slots, straight-line polylines and candlesticks.
"""

from composer.charts.layout import (
    Y_AXIS_GUTTER,
    BarGeometry,
    CandleGeometry,
    CategoricalLayout,
    Polyline,
    layout_categorical,
    layout_continuous,
    map_bars,
    map_candlestick,
)
from composer.charts.scale import (
    GRID_LINE_COUNT,
    SCALE_POLICIES,
    ChartKind,
    Scale,
    compute_scale,
)

__all__ = [
    "GRID_LINE_COUNT",
    "SCALE_POLICIES",
    "Y_AXIS_GUTTER",
    "BarGeometry",
    "CandleGeometry",
    "CategoricalLayout",
    "ChartKind",
    "Polyline",
    "Scale",
    "compute_scale",
    "layout_categorical",
    "layout_continuous",
    "map_bars",
    "map_candlestick",
]
