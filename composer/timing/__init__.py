"""
Scene timing: resolved schedule and frame budget checks.
"""

from composer.timing.budget import check_frame_budget, find_budget_overflows
from composer.timing.resolver import (
    ResolvedScene,
    TimingPolicy,
    resolve,
    round_half_up,
    seconds_to_frames,
    total_frames,
)

__all__ = [
    "ResolvedScene",
    "TimingPolicy",
    "check_frame_budget",
    "find_budget_overflows",
    "resolve",
    "round_half_up",
    "seconds_to_frames",
    "total_frames",
]
