"""
Chart Scaling Policies

Value-axis scaling shared by every chart template. The policy differs per
chart kind and is looked up in SCALE_POLICIES rather than unified:

- bar:          anchored at zero, headroom above the maximum (default 20%)
- line / area:  both ends padded proportionally, min*(1-h) .. max*(1+h)
                (default h = 10%, i.e. min*0.9 .. max*1.1)
- candlestick:  padded by a fraction of the data range, split evenly
                above and below (default 15%)

Every scale carries five evenly spaced grid lines from min to max.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple, Union


GRID_LINE_COUNT = 5


class ChartKind(Enum):
    BAR = "bar"
    LINE = "line"
    AREA = "area"
    CANDLESTICK = "candlestick"

    @classmethod
    def from_value(cls, value: Union[str, "ChartKind"]) -> "ChartKind":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown chart kind: {value}. Valid kinds: {valid}")


@dataclass(frozen=True)
class Scale:
    """Value range of a chart plus its grid lines.

    Attributes:
        min: Value mapped to the bottom of the plot
        max: Value mapped to the top of the plot
        grid_lines: GRID_LINE_COUNT values, evenly spaced from min to max
    """
    min: float
    max: float
    grid_lines: Tuple[float, ...]

    @property
    def span(self) -> float:
        """max - min, or 1.0 when the range is degenerate."""
        return (self.max - self.min) or 1.0

    def to_y(self, value: float, height: float) -> float:
        """Map a data value to a pixel y coordinate (0 at the top)."""
        return height - ((value - self.min) / self.span) * height

    def to_dict(self) -> dict:
        return {"min": self.min, "max": self.max, "grid_lines": list(self.grid_lines)}


BoundsFn = Callable[[float, float, float], Tuple[float, float]]


def _zero_anchored(raw_min: float, raw_max: float, headroom: float) -> Tuple[float, float]:
    # negative values are not drawn below the axis
    return 0.0, max(raw_max, 0.0) * (1 + headroom)


def _proportional_padding(raw_min: float, raw_max: float, headroom: float) -> Tuple[float, float]:
    # multiplicative: a negative minimum moves up (-10 -> -9),
    # so all-negative series can fall outside the plot. Renderers match this.
    return raw_min * (1 - headroom), raw_max * (1 + headroom)


def _range_padding(raw_min: float, raw_max: float, headroom: float) -> Tuple[float, float]:
    padding = (raw_max - raw_min) * headroom
    return raw_min - padding / 2, raw_max + padding / 2


@dataclass(frozen=True)
class ScalePolicy:
    bounds: BoundsFn
    default_headroom: float


SCALE_POLICIES: Dict[ChartKind, ScalePolicy] = {
    ChartKind.BAR: ScalePolicy(_zero_anchored, 0.2),
    ChartKind.LINE: ScalePolicy(_proportional_padding, 0.1),
    ChartKind.AREA: ScalePolicy(_proportional_padding, 0.1),
    ChartKind.CANDLESTICK: ScalePolicy(_range_padding, 0.15),
}


def grid_lines(minimum: float, maximum: float, count: int = GRID_LINE_COUNT) -> Tuple[float, ...]:
    span = maximum - minimum
    steps = count - 1
    return tuple(minimum + span * (i / steps) for i in range(count))


def compute_scale(
    values: Sequence[float],
    headroom_fraction: Optional[float] = None,
    kind: Union[str, ChartKind] = ChartKind.BAR,
) -> Scale:
    """Compute the value scale for a chart.

    Args:
        values: Data values (at least one)
        headroom_fraction: Margin fraction; None uses the kind's default
        kind: Chart kind selecting the scaling policy

    Returns:
        Scale with min, max and five grid lines.

    Raises:
        ValueError: If values is empty or headroom is negative.
    """
    if not values:
        raise ValueError("Cannot scale an empty series")
    policy = SCALE_POLICIES[ChartKind.from_value(kind)]
    headroom = policy.default_headroom if headroom_fraction is None else headroom_fraction
    if headroom < 0:
        raise ValueError(f"headroom_fraction must be >= 0, got {headroom}")

    minimum, maximum = policy.bounds(min(values), max(values), headroom)
    return Scale(min=minimum, max=maximum, grid_lines=grid_lines(minimum, maximum))
