"""
Unit tests for JSON extraction from LLM output.
"""

import json

import pytest

from composer.planner import extract_json


class TestExtractJson:
    def test_plain_json(self):
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_fenced_block(self):
        text = 'Here is the plan:\n```json\n{"meta": {"id": "x"}}\n```\nEnjoy!'
        assert extract_json(text) == {"meta": {"id": "x"}}

    def test_unlabelled_fence(self):
        assert extract_json('```\n{"a": [1, 2]}\n```') == {"a": [1, 2]}

    def test_object_surrounded_by_prose(self):
        text = 'Sure! {"scenes": [], "note": "braces } in strings"} Hope that helps.'
        assert extract_json(text) == {"scenes": [], "note": "braces } in strings"}

    def test_smart_quotes(self):
        assert extract_json("{“title”: “Q3”}") == {"title": "Q3"}

    def test_skips_invalid_candidates(self):
        text = "{not json} then {\"ok\": true}"
        assert extract_json(text) == {"ok": True}

    def test_top_level_array_is_not_an_object(self):
        with pytest.raises(json.JSONDecodeError):
            extract_json("[1, 2, 3]")

    def test_no_json(self):
        with pytest.raises(json.JSONDecodeError, match="No JSON object"):
            extract_json("I could not produce a plan for this script.")
