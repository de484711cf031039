"""
VideoDefinition Schema

Root document describing a video: metadata, optional theme and an ordered
list of typed scenes. Scenes are a discriminated union keyed by `type`, so
each scene's content is validated against the model for its type.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from composer.schema.content import (
    FullBleedContent,
    GridContent,
    OverlayContent,
    SplitScreenContent,
    TransitionContent,
)


SCENE_TYPES = ("split_screen", "overlay", "transition", "full_bleed", "grid")
THEMES = ("bloomberg", "wsj", "ft", "default")


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Dimensions(FrozenModel):
    width: int = Field(..., gt=0, description="Frame width in pixels")
    height: int = Field(..., gt=0, description="Frame height in pixels")


class Meta(FrozenModel):
    """Video-level metadata.

    Attributes:
        id: Identifier, unique within a render run (used for file names)
        title: Human-readable title (the id stands in when absent)
        duration: Total duration in seconds
        fps: Frames per second
        dimensions: Output frame size
    """
    id: str = Field(..., min_length=1)
    title: Optional[str] = None
    duration: float = Field(..., gt=0, allow_inf_nan=False)
    fps: int = Field(..., gt=0)
    dimensions: Dimensions


class Timing(FrozenModel):
    """Explicit frame range; takes precedence over `duration`."""
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)


class SceneBase(FrozenModel):
    id: str = Field(..., min_length=1)
    duration: float = Field(..., ge=0, allow_inf_nan=False, description="Seconds")
    timing: Optional[Timing] = None


class SplitScreenScene(SceneBase):
    type: Literal["split_screen"]
    content: SplitScreenContent


class OverlayScene(SceneBase):
    type: Literal["overlay"]
    content: OverlayContent


class TransitionScene(SceneBase):
    type: Literal["transition"]
    content: TransitionContent


class FullBleedScene(SceneBase):
    type: Literal["full_bleed"]
    content: FullBleedContent


class GridScene(SceneBase):
    type: Literal["grid"]
    content: GridContent = Field(default_factory=dict)


Scene = Annotated[
    Union[SplitScreenScene, OverlayScene, TransitionScene, FullBleedScene, GridScene],
    Field(discriminator="type"),
]


class VideoDefinition(FrozenModel):
    """Complete declarative description of one video."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, json_schema_extra={
        "example": {
            "meta": {
                "id": "q3-earnings",
                "title": "Q3 Earnings",
                "duration": 10,
                "fps": 30,
                "dimensions": {"width": 1920, "height": 1080},
            },
            "theme": "bloomberg",
            "scenes": [
                {
                    "id": "intro",
                    "type": "full_bleed",
                    "duration": 4,
                    "content": {"text": "Revenue is up"},
                },
                {
                    "id": "chart",
                    "type": "split_screen",
                    "duration": 6,
                    "timing": {"start": 120, "end": 300},
                    "content": {
                        "left": {"header": {"title": "Revenue"}},
                        "right": {"chart": {"type": "bar", "data": [
                            {"label": "Q1", "value": 30},
                            {"label": "Q2", "value": 50},
                        ]}},
                    },
                },
            ],
        }
    })

    meta: Meta
    theme: Optional[Literal["bloomberg", "wsj", "ft", "default"]] = None
    scenes: List[Scene] = Field(default_factory=list)

    def scene(self, scene_id: str):
        """Look up a scene by id (None if absent)."""
        for scene in self.scenes:
            if scene.id == scene_id:
                return scene
        return None
