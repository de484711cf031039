"""
Rendering: Composition -> video file through an external engine.
"""

from composer.render.artifacts import default_output_path, save_document, timestamp_slug
from composer.render.base import BaseRenderer, RenderResult
from composer.render.command import CommandRenderer, hint_for

__all__ = [
    "BaseRenderer",
    "CommandRenderer",
    "RenderResult",
    "default_output_path",
    "hint_for",
    "save_document",
    "timestamp_slug",
]
