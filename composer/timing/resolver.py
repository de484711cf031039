"""
Scene Timing Resolver

Converts each scene's declared `duration` and optional explicit `timing`
into an absolute frame range.

Rules, applied per scene in document order:
1. Explicit timing wins: start = timing.start, duration = timing.end - timing.start
2. Otherwise duration = round(scene.duration * fps), and the start frame is
   chosen by the TimingPolicy:
   - ZERO_START: every untimed scene starts at frame 0 (overlapping)
   - SEQUENTIAL: untimed scenes are stacked back to back in document order
3. Scenes whose duration resolves to <= 0 frames are dropped.

The resolved schedule is ordered by start frame; ties keep document order.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

from composer.schema.video import Meta


logger = logging.getLogger(__name__)


class TimingPolicy(Enum):
    """Placement of scenes that have no explicit timing."""
    ZERO_START = "zero_start"
    SEQUENTIAL = "sequential"

    @classmethod
    def from_value(cls, value: Union[str, "TimingPolicy", None]) -> "TimingPolicy":
        if value is None:
            return cls.ZERO_START
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().replace("-", "_"))
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown timing policy: {value}. Valid policies: {valid}")


@dataclass(frozen=True)
class ResolvedScene:
    """One entry of the resolved schedule.

    Attributes:
        id: Scene id
        start_frame: First frame of the scene
        duration_frames: Number of frames the scene is shown (> 0)
        index: Position of the scene in the source document
    """
    id: str
    start_frame: int
    duration_frames: int
    index: int = 0

    @property
    def end_frame(self) -> int:
        """Exclusive end frame."""
        return self.start_frame + self.duration_frames

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "start_frame": self.start_frame,
            "duration_frames": self.duration_frames,
            "end_frame": self.end_frame,
        }


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def seconds_to_frames(seconds: float, fps: int) -> int:
    return round_half_up(seconds * fps)


def total_frames(meta: Meta) -> int:
    """Frame budget of a video: meta.duration * meta.fps."""
    return seconds_to_frames(meta.duration, meta.fps)


def resolve(
    scenes: Iterable,
    fps: int,
    policy: Union[str, TimingPolicy, None] = TimingPolicy.ZERO_START,
) -> Tuple[ResolvedScene, ...]:
    """Resolve absolute frame ranges for a list of scenes.

    Args:
        scenes: Validated scenes (anything with id, duration, timing)
        fps: Frames per second of the video
        policy: Placement policy for scenes without explicit timing

    Returns:
        Tuple of ResolvedScene ordered by start frame (stable on
        document order). Non-positive scenes are absent.
    """
    policy = TimingPolicy.from_value(policy)
    resolved = []
    cursor = 0

    for index, scene in enumerate(scenes):
        timing = scene.timing
        if timing is not None:
            start = timing.start
            duration = timing.end - timing.start
        else:
            duration = seconds_to_frames(scene.duration, fps)
            if policy is TimingPolicy.SEQUENTIAL:
                start = cursor
                cursor += max(duration, 0)
            else:
                start = 0

        if duration <= 0:
            logger.debug(f"Dropping scene '{scene.id}': resolved to {duration} frames")
            continue

        resolved.append(ResolvedScene(
            id=scene.id,
            start_frame=start,
            duration_frames=duration,
            index=index,
        ))

    resolved.sort(key=lambda r: (r.start_frame, r.index))
    return tuple(resolved)
