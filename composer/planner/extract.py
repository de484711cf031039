"""
JSON extraction from LLM output.

Models often wrap the document in markdown fences, add a sentence before
or after it, or use typographic quotes. extract_json tries, in order: the
whole text, each fenced block, then every balanced {...} object.
"""

import json
import re
from typing import Any, Dict, Iterator


_FENCE_PATTERN = re.compile(r"```(?:json|JSON)?\s*(.*?)```", re.DOTALL)
_SMART_QUOTES = {
    "“": '"',
    "”": '"',
    "‘": "'",
    "’": "'",
}


def _normalize_quotes(text: str) -> str:
    for smart, plain in _SMART_QUOTES.items():
        text = text.replace(smart, plain)
    return text


def _balanced_objects(text: str) -> Iterator[str]:
    """Yield each top-level {...} span, respecting strings and escapes."""
    depth = 0
    start = None
    in_string = False
    escaped = False
    for i, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
            if depth == 0:
                yield text[start:i + 1]


def extract_json(text: str) -> Dict[str, Any]:
    """Extract the first JSON object from LLM output.

    Raises:
        json.JSONDecodeError: If no JSON object can be decoded
    """
    text = _normalize_quotes(text or "").strip()

    candidates = [text]
    candidates.extend(m.strip() for m in _FENCE_PATTERN.findall(text))
    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data

    for span in _balanced_objects(text):
        try:
            return json.loads(span)
        except json.JSONDecodeError:
            continue

    raise json.JSONDecodeError("No JSON object found in text", text, 0)
