"""
VideoDefinition schema: the declarative data contract for a video.
"""

from composer.schema.parser import (
    collect_schema_errors,
    json_schema,
    parse,
    parse_file,
    to_dict,
)
from composer.schema.video import (
    SCENE_TYPES,
    THEMES,
    Dimensions,
    FullBleedScene,
    GridScene,
    Meta,
    OverlayScene,
    Scene,
    SplitScreenScene,
    Timing,
    TransitionScene,
    VideoDefinition,
)

__all__ = [
    "SCENE_TYPES",
    "THEMES",
    "Dimensions",
    "FullBleedScene",
    "GridScene",
    "Meta",
    "OverlayScene",
    "Scene",
    "SplitScreenScene",
    "Timing",
    "TransitionScene",
    "VideoDefinition",
    "collect_schema_errors",
    "json_schema",
    "parse",
    "parse_file",
    "to_dict",
]
