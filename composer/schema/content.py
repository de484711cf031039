"""
Scene Content Schemas

Pydantic models for the type-specific `content` payload of each scene.
Presence rules that are allowed to fail per scene (e.g. a full_bleed scene
with nothing to show) are deliberately left optional here and enforced by
the dispatcher; these models only guarantee that whatever is present has
the right type.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ContentModel(BaseModel):
    """Base for all content models: immutable, populated by alias."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)


Position = Literal["top_left", "top_right", "bottom_left", "bottom_right", "center"]
Direction = Literal["left", "right", "up", "down"]
Align = Literal["left", "center", "right"]
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]


class Animation(ContentModel):
    """Animation hints passed through to the timeline library."""
    type: str
    duration: Optional[FiniteFloat] = None
    delay: Optional[FiniteFloat] = None
    ease: Optional[str] = None


class Header(ContentModel):
    """Category / title / subtitle block."""
    category: Optional[str] = None
    title: str = Field(..., description="Header title")
    subtitle: Optional[str] = None
    align: Optional[Align] = None
    color: Optional[str] = None


# --- Charts ---

class BarDatum(ContentModel):
    label: str
    value: FiniteFloat
    color: Optional[str] = None


class XYPoint(ContentModel):
    x: Union[int, float, str]
    y: FiniteFloat


class OHLC(ContentModel):
    """One candlestick: open, high, low, close."""
    o: FiniteFloat
    h: FiniteFloat
    l: FiniteFloat
    c: FiniteFloat


class BarChart(ContentModel):
    type: Literal["bar"]
    data: List[BarDatum] = Field(..., min_length=1)
    color: Optional[str] = None
    title: Optional[str] = None
    animation: Optional[Animation] = None


class LineChart(ContentModel):
    type: Literal["line"]
    data: List[XYPoint] = Field(..., min_length=1)
    color: Optional[str] = None
    title: Optional[str] = None
    animation: Optional[Animation] = None


class AreaChart(ContentModel):
    type: Literal["area"]
    data: List[XYPoint] = Field(..., min_length=1)
    color: Optional[str] = None
    title: Optional[str] = None
    animation: Optional[Animation] = None


class CandlestickChart(ContentModel):
    type: Literal["candlestick"]
    data: List[OHLC] = Field(..., min_length=1)
    labels: Optional[List[str]] = None
    color: Optional[str] = None
    title: Optional[str] = None
    animation: Optional[Animation] = None


Chart = Annotated[
    Union[BarChart, LineChart, AreaChart, CandlestickChart],
    Field(discriminator="type"),
]


# --- split_screen ---

class SplitSide(ContentModel):
    header: Optional[Header] = None
    chart: Optional[Chart] = None


class GlobalTitle(ContentModel):
    title: Optional[str] = None
    title_animation: Optional[Animation] = Field(None, alias="titleAnimation")


class SplitScreenContent(ContentModel):
    """Two panels side by side with an optional divider and shared title.

    Attributes:
        left: Left panel (header and/or chart)
        right: Right panel (header and/or chart)
        divider: Draw a divider between panels (default True)
        ratio: Share of the width given to the left panel, 0 < ratio < 1
        global_: Title drawn across both panels (JSON key "global")
    """
    left: Optional[SplitSide] = None
    right: Optional[SplitSide] = None
    divider: Optional[bool] = None
    ratio: Optional[float] = Field(None, gt=0, lt=1)
    global_: Optional[GlobalTitle] = Field(None, alias="global")


# --- full_bleed ---

class TextBlock(ContentModel):
    content: str
    color: Optional[str] = None


class Background(ContentModel):
    color: Optional[str] = None


class OverlayDecoration(ContentModel):
    type: str
    color: Optional[str] = None


class FullBleedContent(ContentModel):
    """Single full-frame panel: header, text and/or chart over a background."""
    header: Optional[Header] = None
    text: Optional[Union[str, TextBlock]] = None
    chart: Optional[Chart] = None
    background: Optional[Background] = None
    overlay: Optional[OverlayDecoration] = None


# --- overlay ---

class StatData(ContentModel):
    value: Union[int, float, str]
    label: str
    color: Optional[str] = None


class OverlayContent(ContentModel):
    """A library component drawn on top of other scenes."""
    component: str
    position: Optional[Position] = None
    data: Optional[StatData] = None
    animation: Optional[Animation] = None


# --- transition ---

class TransitionMessage(ContentModel):
    text: str
    position: Optional[str] = None
    color: Optional[str] = None


class TransitionContent(ContentModel):
    effect: str
    from_: Optional[Direction] = Field(None, alias="from")
    to: Optional[Direction] = None
    color: Optional[str] = None
    message: Optional[TransitionMessage] = None


# grid content is implementation-defined and passed through untouched
GridContent = Dict[str, Any]
