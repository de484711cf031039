"""
Composition

Wires the core together: parse the document, resolve scene timing, check
the frame budget and dispatch each scheduled scene to its template. The
resulting Composition is the timeline handed to the external renderer.

Document-level problems (SchemaError, FrameBudgetError) abort the whole
composition. Scene-level problems (DispatchError) only drop the scene: it
is logged, listed in `skipped`, and its siblings are unaffected.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from composer.dispatch import dispatch_scene
from composer.schema import VideoDefinition, parse
from composer.timing import TimingPolicy, check_frame_budget, resolve, total_frames

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositionEntry:
    """One scheduled, renderable scene."""
    scene_id: str
    scene_type: str
    template: str
    props: Dict[str, Any]
    start_frame: int
    duration_in_frames: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scene_id": self.scene_id,
            "scene_type": self.scene_type,
            "template": self.template,
            "props": self.props,
            "start_frame": self.start_frame,
            "duration_in_frames": self.duration_in_frames,
        }


@dataclass(frozen=True)
class SkippedScene:
    scene_id: str
    reason: str
    error_type: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"scene_id": self.scene_id, "reason": self.reason, "error_type": self.error_type}


@dataclass(frozen=True)
class Composition:
    """Render-ready timeline for one video.

    Attributes:
        id: Video id (meta.id)
        title: Video title (meta.title, or meta.id when untitled)
        duration_in_frames: Frame budget (meta.duration * meta.fps)
        fps: Frames per second
        width: Frame width
        height: Frame height
        theme: Cosmetic theme name, if any
        entries: Rendered scenes ordered by start frame
        skipped: Scenes dropped at dispatch, with the reason
    """
    id: str
    title: str
    duration_in_frames: int
    fps: int
    width: int
    height: int
    theme: Optional[str] = None
    entries: Tuple[CompositionEntry, ...] = field(default_factory=tuple)
    skipped: Tuple[SkippedScene, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "duration_in_frames": self.duration_in_frames,
            "fps": self.fps,
            "width": self.width,
            "height": self.height,
            "theme": self.theme,
            "entries": [e.to_dict() for e in self.entries],
            "skipped": [s.to_dict() for s in self.skipped],
        }


def compose(
    raw: Union[VideoDefinition, Dict[str, Any], str, bytes],
    policy: Union[str, TimingPolicy, None] = TimingPolicy.ZERO_START,
) -> Composition:
    """Build the render timeline for a video document.

    Args:
        raw: VideoDefinition, decoded JSON mapping, or JSON text
        policy: Placement of scenes without explicit timing

    Returns:
        Composition with one entry per rendered scene.

    Raises:
        SchemaError: If the document is structurally invalid
        FrameBudgetError: If a scene ends past the frame budget
    """
    video = parse(raw)
    meta = video.meta
    budget = total_frames(meta)
    schedule = resolve(video.scenes, meta.fps, policy)
    check_frame_budget(schedule, budget)

    width, height = meta.dimensions.width, meta.dimensions.height
    entries: List[CompositionEntry] = []
    skipped: List[SkippedScene] = []

    for slot in schedule:
        scene = video.scenes[slot.index]
        result = dispatch_scene(scene, width, height)
        if not result.rendered:
            logger.warning(f"Skipping scene '{scene.id}' ({scene.type}): {result.error}")
            skipped.append(SkippedScene(
                scene_id=scene.id,
                reason=str(result.error),
                error_type=type(result.error).__name__,
            ))
            continue
        entries.append(CompositionEntry(
            scene_id=scene.id,
            scene_type=scene.type,
            template=result.instruction.template,
            props=result.instruction.props,
            start_frame=slot.start_frame,
            duration_in_frames=slot.duration_frames,
        ))

    logger.info(
        f"Composed '{meta.id}': {len(entries)} scene(s), "
        f"{len(skipped)} skipped, {budget} frames"
    )
    return Composition(
        id=meta.id,
        title=meta.title or meta.id,
        duration_in_frames=budget,
        fps=meta.fps,
        width=width,
        height=height,
        theme=video.theme,
        entries=tuple(entries),
        skipped=tuple(skipped),
    )
