"""
Chart Geometry

Turns data series into pixel geometry for the chart templates: bar slots,
line/area polylines and candlestick bodies/wicks. All functions are pure
and deterministic so repeated renders produce identical frames.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from composer.charts.scale import ChartKind, Scale, compute_scale


# Horizontal space reserved for the y-axis labels of every plot
Y_AXIS_GUTTER = 60

MIN_CANDLE_BODY_HEIGHT = 3.0
MIN_CANDLE_WIDTH = 4.0
CANDLE_BODY_FRACTION = 0.75


def _fmt(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class CategoricalLayout:
    """Equal-width bars separated by equal gaps (n + 1 gaps, incl. both edges)."""
    bar_width: float
    gap: float

    def x_of(self, index: int) -> float:
        """Left edge of the bar at `index`."""
        return self.gap + index * (self.bar_width + self.gap)


def layout_categorical(n: int, total_width: float, gap_fraction: float = 0.2) -> CategoricalLayout:
    """Split `total_width` into n bars and n + 1 gaps.

    Args:
        n: Number of bars (>= 1)
        total_width: Available width in pixels
        gap_fraction: Share of the width reserved for gaps, 0 <= f < 1

    Returns:
        CategoricalLayout with the bar width and the single gap width.
    """
    if n < 1:
        raise ValueError(f"Need at least one category, got {n}")
    if not 0 <= gap_fraction < 1:
        raise ValueError(f"gap_fraction must be in [0, 1), got {gap_fraction}")
    total_gap = total_width * gap_fraction
    return CategoricalLayout(
        bar_width=(total_width - total_gap) / n,
        gap=total_gap / (n + 1),
    )


@dataclass(frozen=True)
class BarGeometry:
    x: float
    y: float
    width: float
    height: float
    value: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height, "value": self.value}


def map_bars(
    values: Sequence[float],
    width: float,
    height: float,
    scale: Optional[Scale] = None,
    gap_fraction: float = 0.2,
) -> Tuple[BarGeometry, ...]:
    """Place one bar per value; bars grow up from the zero baseline."""
    scale = scale or compute_scale(values, kind=ChartKind.BAR)
    slots = layout_categorical(len(values), width, gap_fraction)
    bars = []
    for i, value in enumerate(values):
        top = scale.to_y(max(value, scale.min), height)
        bars.append(BarGeometry(
            x=slots.x_of(i),
            y=top,
            width=slots.bar_width,
            height=height - top,
            value=value,
        ))
    return tuple(bars)


@dataclass(frozen=True)
class Polyline:
    """Straight-segment path through the data points.

    Attributes:
        points: Pixel coordinates, one per data point
        path: SVG path data ("M x y L x y ...")
        area_path: The path closed down to the baseline, for area fills
        scale: Scale used for the y axis
    """
    points: Tuple[Tuple[float, float], ...]
    path: str
    area_path: str
    scale: Scale

    def to_dict(self) -> dict:
        return {
            "points": [list(p) for p in self.points],
            "path": self.path,
            "area_path": self.area_path,
            "scale": self.scale.to_dict(),
        }


def _point_y(point: Any) -> float:
    if isinstance(point, dict):
        return point["y"]
    if isinstance(point, (tuple, list)):
        return point[1]
    return point.y


def layout_continuous(
    points: Sequence[Any],
    width: float,
    height: float,
    scale: Optional[Scale] = None,
) -> Polyline:
    """Lay out a line/area series with linear interpolation.

    x is assigned by index (points are evenly spread over the width); the
    point's own x is treated as a label.

    Args:
        points: Objects, dicts or (x, y) pairs
        width: Plot width in pixels
        height: Plot height in pixels
        scale: Optional precomputed scale; defaults to the line policy

    Returns:
        Polyline with pixel coordinates and SVG path data.
    """
    if not points:
        raise ValueError("Cannot lay out an empty series")
    ys = [_point_y(p) for p in points]
    scale = scale or compute_scale(ys, kind=ChartKind.LINE)
    denominator = (len(ys) - 1) or 1

    coords = tuple(
        ((i / denominator) * width, scale.to_y(y, height))
        for i, y in enumerate(ys)
    )
    path = f"M {_fmt(coords[0][0])} {_fmt(coords[0][1])}"
    for x, y in coords[1:]:
        path += f" L {_fmt(x)} {_fmt(y)}"
    area_path = f"{path} L {_fmt(width)} {_fmt(height)} L 0 {_fmt(height)} Z"
    return Polyline(points=coords, path=path, area_path=area_path, scale=scale)


@dataclass(frozen=True)
class CandleGeometry:
    """Pixel geometry of one candlestick.

    Attributes:
        x: Horizontal centre of the candle
        body_top: Top of the body (the higher of open/close on screen)
        body_height: Body height, never below MIN_CANDLE_BODY_HEIGHT
        body_width: Body width
        wick_top: y of the high
        wick_bottom: y of the low
        bullish: True when close >= open
    """
    x: float
    body_top: float
    body_height: float
    body_width: float
    wick_top: float
    wick_bottom: float
    bullish: bool

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "body_top": self.body_top,
            "body_height": self.body_height,
            "body_width": self.body_width,
            "wick_top": self.wick_top,
            "wick_bottom": self.wick_bottom,
            "bullish": self.bullish,
        }


def _ohlc_values(candle: Any) -> Tuple[float, float, float, float]:
    if isinstance(candle, dict):
        return candle["o"], candle["h"], candle["l"], candle["c"]
    if isinstance(candle, (tuple, list)):
        o, h, l, c = candle
        return o, h, l, c
    return candle.o, candle.h, candle.l, candle.c


def map_candlestick(
    ohlc: Sequence[Any],
    width: float,
    height: float,
    scale: Optional[Scale] = None,
) -> Tuple[CandleGeometry, ...]:
    """Compute body and wick geometry for a candlestick series.

    Args:
        ohlc: Candles as objects with o/h/l/c, dicts, or 4-tuples
        width: Plot width in pixels
        height: Plot height in pixels
        scale: Optional precomputed scale; defaults to the candlestick
            policy over all highs and lows

    Returns:
        One CandleGeometry per candle, centred in equal slots.
    """
    if not ohlc:
        raise ValueError("Cannot lay out an empty candlestick series")
    candles = [_ohlc_values(c) for c in ohlc]
    if scale is None:
        extremes = [v for _, h, l, _ in candles for v in (l, h)]
        scale = compute_scale(extremes, kind=ChartKind.CANDLESTICK)

    slot = width / len(candles)
    body_width = max(MIN_CANDLE_WIDTH, slot * CANDLE_BODY_FRACTION)
    geometry = []
    for i, (o, h, l, c) in enumerate(candles):
        y_open = scale.to_y(o, height)
        y_close = scale.to_y(c, height)
        geometry.append(CandleGeometry(
            x=slot * i + slot / 2,
            body_top=min(y_open, y_close),
            body_height=max(abs(y_close - y_open), MIN_CANDLE_BODY_HEIGHT),
            body_width=body_width,
            wick_top=scale.to_y(h, height),
            wick_bottom=scale.to_y(l, height),
            bullish=c >= o,
        ))
    return tuple(geometry)
