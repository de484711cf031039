"""
Chart props.

Converts a chart definition into renderer props with all geometry
precomputed by the chart layout engine. Every plot reserves Y_AXIS_GUTTER
pixels on the left for value labels and X_LABEL_BAND pixels at the bottom
for category labels.
"""

from typing import Any, Dict

from composer.charts import (
    Y_AXIS_GUTTER,
    ChartKind,
    compute_scale,
    layout_continuous,
    map_bars,
    map_candlestick,
)
from composer.dispatch.base import dump_model
from composer.schema.content import BarChart, CandlestickChart


X_LABEL_BAND = 40

CHART_COMPONENTS = {
    ChartKind.BAR: "BarChart",
    ChartKind.LINE: "LineChart",
    ChartKind.AREA: "AreaChart",
    ChartKind.CANDLESTICK: "SmartGraph",
}


def chart_instruction(chart: Any, width: float, height: float) -> Dict[str, Any]:
    """Build the props for one chart drawn in a `width` x `height` box."""
    kind = ChartKind.from_value(chart.type)
    plot_width = max(width - Y_AXIS_GUTTER, 1)
    plot_height = max(height - X_LABEL_BAND, 1)

    props: Dict[str, Any] = {
        "component": CHART_COMPONENTS[kind],
        "type": kind.value,
        "width": width,
        "height": height,
        "plot": {"x": Y_AXIS_GUTTER, "y": 0, "width": plot_width, "height": plot_height},
    }
    for key in ("color", "title"):
        value = getattr(chart, key, None)
        if value is not None:
            props[key] = value
    if chart.animation is not None:
        props["animation"] = dump_model(chart.animation)

    if isinstance(chart, BarChart):
        values = [d.value for d in chart.data]
        scale = compute_scale(values, kind=kind)
        bars = map_bars(values, plot_width, plot_height, scale)
        props["bars"] = [
            dict(bar.to_dict(), label=datum.label, **({"color": datum.color} if datum.color else {}))
            for bar, datum in zip(bars, chart.data)
        ]
        props["labels"] = [d.label for d in chart.data]
    elif isinstance(chart, CandlestickChart):
        extremes = [v for candle in chart.data for v in (candle.l, candle.h)]
        scale = compute_scale(extremes, kind=kind)
        props["candles"] = [c.to_dict() for c in map_candlestick(chart.data, plot_width, plot_height, scale)]
        props["labels"] = list(chart.labels or [])
    else:
        scale = compute_scale([p.y for p in chart.data], kind=kind)
        polyline = layout_continuous(chart.data, plot_width, plot_height, scale)
        props["points"] = [list(p) for p in polyline.points]
        props["path"] = polyline.path
        if kind is ChartKind.AREA:
            props["area_path"] = polyline.area_path
        props["labels"] = [str(p.x) for p in chart.data]

    props["scale"] = scale.to_dict()
    return props
