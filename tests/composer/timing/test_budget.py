"""Tests for composer.timing.budget"""

import pytest

from composer.errors import FrameBudgetError, SchemaError
from composer.timing import ResolvedScene, check_frame_budget, find_budget_overflows


SCHEDULE = (
    ResolvedScene(id="a", start_frame=0, duration_frames=120, index=0),
    ResolvedScene(id="b", start_frame=200, duration_frames=150, index=1),
)


class TestFrameBudget:
    def test_within_budget(self):
        assert find_budget_overflows(SCHEDULE, 350) == []
        check_frame_budget(SCHEDULE, 350)

    def test_overflow_reported_with_scene_path(self):
        overflows = find_budget_overflows(SCHEDULE, 300)

        assert len(overflows) == 1
        assert overflows[0].path == "scenes.1"
        assert "300" in overflows[0].expected
        assert overflows[0].received == "frames 200..350"

    def test_check_raises_first_overflow(self):
        with pytest.raises(FrameBudgetError) as exc_info:
            check_frame_budget(SCHEDULE, 100)
        assert exc_info.value.path == "scenes.0"

    def test_budget_error_is_schema_error(self):
        assert issubclass(FrameBudgetError, SchemaError)

    def test_scene_ending_exactly_at_budget_fits(self):
        assert find_budget_overflows(SCHEDULE[:1], 120) == []
