"""Frame budget checks for a resolved schedule."""

from typing import Iterable, List

from composer.errors import FrameBudgetError
from composer.timing.resolver import ResolvedScene


def find_budget_overflows(schedule: Iterable[ResolvedScene], budget: int) -> List[FrameBudgetError]:
    """Return one FrameBudgetError per scene ending past `budget` frames.

    Errors are ordered by document position so the first one is stable.
    """
    overflows = sorted(
        (r for r in schedule if r.end_frame > budget),
        key=lambda r: r.index,
    )
    return [
        FrameBudgetError(
            path=f"scenes.{r.index}",
            expected=f"scene '{r.id}' to end within {budget} frames",
            received=f"frames {r.start_frame}..{r.end_frame}",
        )
        for r in overflows
    ]


def check_frame_budget(schedule: Iterable[ResolvedScene], budget: int) -> None:
    """Raise the first FrameBudgetError, if any scene overflows."""
    overflows = find_budget_overflows(schedule, budget)
    if overflows:
        raise overflows[0]
