"""
Tests for composer.composition

End-to-end: parse, resolve, budget check and dispatch into a Composition.
"""

import json

import pytest

from composer import Composition, compose
from composer.errors import FrameBudgetError, SchemaError
from composer.schema import parse, to_dict
from composer.timing import TimingPolicy


class TestCompose:
    def test_zero_start_scenario(self, zero_start_document):
        composition = compose(zero_start_document)

        assert isinstance(composition, Composition)
        assert composition.duration_in_frames == 300
        assert [(e.scene_id, e.start_frame, e.duration_in_frames) for e in composition.entries] == [
            ("s1", 0, 120),
            ("s2", 0, 180),
        ]
        assert composition.skipped == ()

    def test_untitled_full_bleed_scenario(self):
        document = {
            "meta": {"id": "t1", "duration": 10, "fps": 30, "dimensions": {"width": 1920, "height": 1080}},
            "scenes": [
                {"id": "s1", "type": "full_bleed", "duration": 4, "content": {"text": "Hello"}},
                {"id": "s2", "type": "full_bleed", "duration": 6, "content": {"text": "World"}},
            ],
        }

        composition = compose(document)

        assert [(e.scene_id, e.start_frame, e.duration_in_frames) for e in composition.entries] == [
            ("s1", 0, 120),
            ("s2", 0, 180),
        ]
        assert composition.title == "t1"
        assert "title" not in to_dict(parse(document))["meta"]

    def test_sequential_policy(self, zero_start_document):
        composition = compose(zero_start_document, TimingPolicy.SEQUENTIAL)
        assert [(e.scene_id, e.start_frame) for e in composition.entries] == [("s1", 0), ("s2", 120)]

    def test_entries_carry_templates(self, zero_start_document):
        composition = compose(zero_start_document)
        assert [e.template for e in composition.entries] == ["SplitScreen", "Overlay"]
        assert composition.entries[1].props["anchor"] == {"top": 100, "right": 100}

    def test_invalid_scene_is_skipped(self, document_factory):
        composition = compose(document_factory([
            {"id": "ok", "type": "full_bleed", "duration": 2, "content": {"text": "Hi"}},
            {"id": "bad", "type": "overlay", "duration": 2, "content": {"component": "laser"}},
            {"id": "empty", "type": "full_bleed", "duration": 2, "content": {}},
        ]))

        assert [e.scene_id for e in composition.entries] == ["ok"]
        assert [(s.scene_id, s.error_type) for s in composition.skipped] == [
            ("bad", "UnknownComponentError"),
            ("empty", "EmptySceneError"),
        ]

    def test_dropped_scene_is_neither_entry_nor_skipped(self, document_factory):
        composition = compose(document_factory([
            {"id": "zero", "type": "grid", "duration": 0},
        ]))
        assert composition.entries == ()
        assert composition.skipped == ()

    def test_schema_error_aborts(self, document_factory):
        doc = document_factory([])
        del doc["meta"]["dimensions"]
        with pytest.raises(SchemaError):
            compose(doc)

    def test_frame_budget_enforced(self, document_factory):
        doc = document_factory(
            [{"id": "long", "type": "grid", "duration": 20}],
            duration=10,
        )
        with pytest.raises(FrameBudgetError) as exc_info:
            compose(doc)
        assert exc_info.value.path == "scenes.0"

    def test_sequential_overflow_detected(self, zero_start_document):
        zero_start_document["meta"]["duration"] = 8
        compose(zero_start_document)
        with pytest.raises(FrameBudgetError):
            compose(zero_start_document, "sequential")

    def test_uses_meta_dimensions(self, document_factory, bar_chart):
        doc = document_factory([{"id": "c", "type": "full_bleed", "duration": 1, "content": {"chart": bar_chart}}])
        doc["meta"]["dimensions"] = {"width": 1000, "height": 500}
        composition = compose(doc)

        assert (composition.width, composition.height) == (1000, 500)
        assert composition.entries[0].props["chart"]["width"] == 800

    def test_to_dict_is_json_serializable(self, zero_start_document):
        zero_start_document["theme"] = "ft"
        data = compose(zero_start_document).to_dict()

        assert json.loads(json.dumps(data)) == data
        assert data["theme"] == "ft"
        assert data["entries"][0]["start_frame"] == 0

    def test_json_text_input(self, zero_start_document):
        assert compose(json.dumps(zero_start_document)).id == "demo"
