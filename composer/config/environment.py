"""
Environment variable names recognised by the composer configuration.
"""

import os
from typing import Any, Callable, Dict, List, Tuple


class EnvironmentVariables:
    """Centralized environment variable definitions."""

    FPS = "VIDEO_COMPOSER_FPS"
    WIDTH = "VIDEO_COMPOSER_WIDTH"
    HEIGHT = "VIDEO_COMPOSER_HEIGHT"
    TIMING_POLICY = "VIDEO_COMPOSER_TIMING_POLICY"
    DATA_DIR = "VIDEO_COMPOSER_DATA_DIR"
    OUTPUT_DIR = "VIDEO_COMPOSER_OUTPUT_DIR"
    LOG_LEVEL = "VIDEO_COMPOSER_LOG_LEVEL"

    RENDER_BINARY = "VIDEO_COMPOSER_RENDER_BINARY"
    RENDER_ENTRY = "VIDEO_COMPOSER_RENDER_ENTRY"
    RENDER_COMPOSITION = "VIDEO_COMPOSER_RENDER_COMPOSITION"
    RENDER_TIMEOUT = "VIDEO_COMPOSER_RENDER_TIMEOUT"

    LLM_PROVIDER = "VIDEO_COMPOSER_LLM_PROVIDER"
    LLM_MODEL = "VIDEO_COMPOSER_LLM_MODEL"

    # variable -> (config path, converter)
    MAPPING: Dict[str, Tuple[Tuple[str, ...], Callable[[str], Any]]] = {
        FPS: (("fps",), int),
        WIDTH: (("width",), int),
        HEIGHT: (("height",), int),
        TIMING_POLICY: (("timing_policy",), str),
        DATA_DIR: (("data_dir",), str),
        OUTPUT_DIR: (("output_dir",), str),
        LOG_LEVEL: (("log_level",), str),
        RENDER_BINARY: (("render", "binary"), str),
        RENDER_ENTRY: (("render", "entry"), str),
        RENDER_COMPOSITION: (("render", "composition_id"), str),
        RENDER_TIMEOUT: (("render", "timeout"), int),
        LLM_PROVIDER: (("planner", "provider"), str),
        LLM_MODEL: (("planner", "model"), str),
    }

    @classmethod
    def get_all_variables(cls) -> List[str]:
        return list(cls.MAPPING.keys())

    @classmethod
    def load_overrides(cls) -> Dict[str, Any]:
        """Nested config dict built from the variables that are set.

        Raises:
            ValueError: If a numeric variable holds a non-numeric value.
        """
        overrides: Dict[str, Any] = {}
        for name, (path, convert) in cls.MAPPING.items():
            if name not in os.environ:
                continue
            raw = os.environ[name]
            try:
                value = convert(raw)
            except ValueError:
                raise ValueError(f"Invalid {name}: '{raw}' is not a valid {convert.__name__}")
            target = overrides
            for key in path[:-1]:
                target = target.setdefault(key, {})
            target[path[-1]] = value
        return overrides
