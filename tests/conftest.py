"""
Pytest configuration and shared fixtures.
"""
import json
import os

import pytest

from composer.utils.logging_config import logging_config


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_logging():
    """Let each test (and each CliRunner invocation) install fresh handlers."""
    logging_config.reset()
    yield
    logging_config.reset()


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Keep user/project config files and .env out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("VIDEO_COMPOSER_") or name.endswith("_API_KEY") or name == "API_KEY":
            monkeypatch.delenv(name, raising=False)


def make_document(scenes=None, duration=10, fps=30, **meta):
    """Build a minimal VideoDefinition document."""
    doc = {
        "meta": {
            "id": meta.pop("id", "demo"),
            "title": meta.pop("title", "Demo"),
            "duration": duration,
            "fps": fps,
            "dimensions": {"width": 1920, "height": 1080},
        },
        "scenes": scenes if scenes is not None else [],
    }
    doc.update(meta)
    return doc


@pytest.fixture
def bar_chart():
    return {
        "type": "bar",
        "data": [
            {"label": "Q1", "value": 30},
            {"label": "Q2", "value": 50},
            {"label": "Q3", "value": 45},
            {"label": "Q4", "value": 80},
        ],
    }


@pytest.fixture
def zero_start_document():
    """Two untimed scenes: 4s split_screen and 6s overlay at 30 fps."""
    return make_document([
        {
            "id": "s1",
            "type": "split_screen",
            "duration": 4,
            "content": {
                "left": {"header": {"title": "Revenue"}},
                "right": {"header": {"title": "Costs"}},
            },
        },
        {
            "id": "s2",
            "type": "overlay",
            "duration": 6,
            "content": {
                "component": "stat_callout",
                "position": "top_right",
                "data": {"value": "+40%", "label": "YoY"},
            },
        },
    ])


@pytest.fixture
def document_file(tmp_path, zero_start_document):
    path = tmp_path / "video.json"
    path.write_text(json.dumps(zero_start_document), encoding="utf-8")
    return path


@pytest.fixture
def document_factory():
    """Factory fixture: document_factory(scenes, duration=10, fps=30, **meta)."""
    return make_document


MOCK_PLAN = {
    "meta": {
        "id": "btc-crash",
        "title": "Bitcoin Crash",
        "duration": 8,
        "fps": 30,
        "dimensions": {"width": 1920, "height": 1080},
    },
    "theme": "bloomberg",
    "scenes": [
        {
            "id": "intro",
            "type": "full_bleed",
            "duration": 3,
            "content": {"header": {"title": "Bitcoin falls 20%"}},
        },
        {
            "id": "chart",
            "type": "full_bleed",
            "duration": 5,
            "timing": {"start": 90, "end": 240},
            "content": {
                "chart": {
                    "type": "candlestick",
                    "data": [
                        {"o": 100, "h": 110, "l": 95, "c": 105},
                        {"o": 105, "h": 106, "l": 80, "c": 82},
                    ],
                },
            },
        },
    ],
}


@pytest.fixture
def mock_plan():
    """A valid VideoDefinition as an LLM director would return it."""
    return json.loads(json.dumps(MOCK_PLAN))
