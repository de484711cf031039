"""
VideoDefinition Parser

Turns raw input (a mapping or a JSON string) into a validated, immutable
VideoDefinition. Structural problems are reported as SchemaError with the
offending path; parse() fails on the first one, collect_schema_errors()
returns all of them in the same deterministic order.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from composer.errors import SchemaError, describe_value
from composer.schema.video import SCENE_TYPES, VideoDefinition


# Union tags pydantic inserts into error locations; they are not part of the
# document path a user would write.
_UNION_LABELS = frozenset(SCENE_TYPES) | {
    "bar", "line", "area", "candlestick",
    "str", "int", "float", "TextBlock",
}

_EXPECTED_BY_TYPE = {
    "missing": "field to be present",
    "union_tag_not_found": "a 'type' discriminator",
    "model_type": "an object",
    "dict_type": "an object",
    "list_type": "an array",
    "extra_forbidden": "no additional fields",
}


def _format_loc(loc) -> str:
    parts = [str(p) for p in loc if not (isinstance(p, str) and p in _UNION_LABELS)]
    return ".".join(parts) if parts else "root"


def _expected_from_error(err: Dict[str, Any]) -> str:
    err_type = err.get("type", "")
    if err_type in _EXPECTED_BY_TYPE:
        return _EXPECTED_BY_TYPE[err_type]
    if err_type == "union_tag_invalid":
        ctx = err.get("ctx") or {}
        return f"one of {ctx.get('expected_tags', ', '.join(SCENE_TYPES))}"
    msg = err.get("msg", "valid value")
    for prefix in ("Input should be ", "Value error, "):
        if msg.startswith(prefix):
            return msg[len(prefix):]
    return msg


def _schema_errors_from_pydantic(error: ValidationError) -> List[SchemaError]:
    issues = []
    for err in error.errors():
        received = "missing" if err["type"] == "missing" else describe_value(err.get("input"))
        issues.append(SchemaError(
            path=_format_loc(err["loc"]),
            expected=_expected_from_error(err),
            received=received,
        ))
    return issues


def _undecodable(error: UnicodeDecodeError) -> str:
    return f"byte 0x{error.object[error.start]:02x} at offset {error.start} is not valid UTF-8"


def _load_raw(raw: Any) -> Any:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SchemaError("root", "a UTF-8 JSON document", _undecodable(e)) from e
    if isinstance(raw, str):
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise SchemaError(
                path="root",
                expected="a JSON document",
                received=f"invalid JSON ({e.msg} at line {e.lineno}, column {e.colno})",
            ) from e
    return raw


def _duplicate_id_errors(video: VideoDefinition) -> List[SchemaError]:
    seen = set()
    issues = []
    for i, scene in enumerate(video.scenes):
        if scene.id in seen:
            issues.append(SchemaError(
                path=f"scenes.{i}.id",
                expected="a scene id unique within the video",
                received=f"duplicate id '{scene.id}'",
            ))
        seen.add(scene.id)
    return issues


def collect_schema_errors(raw: Any) -> List[SchemaError]:
    """Return every structural error in `raw` (empty list if it parses).

    Args:
        raw: Mapping or JSON text.

    Returns:
        List of SchemaError, in validation order.
    """
    try:
        data = _load_raw(raw)
    except SchemaError as e:
        return [e]
    if not isinstance(data, Mapping):
        return [SchemaError("root", "an object", describe_value(data))]
    try:
        video = VideoDefinition.model_validate(data)
    except ValidationError as e:
        return _schema_errors_from_pydantic(e)
    return _duplicate_id_errors(video)


def parse(raw: Any) -> VideoDefinition:
    """Validate raw input into a VideoDefinition.

    Args:
        raw: Mapping (already-decoded JSON), JSON text, or an existing
            VideoDefinition (returned as-is).

    Returns:
        Immutable VideoDefinition.

    Raises:
        SchemaError: On the first structural mismatch.
    """
    if isinstance(raw, VideoDefinition):
        return raw
    data = _load_raw(raw)
    if not isinstance(data, Mapping):
        raise SchemaError("root", "an object", describe_value(data))
    try:
        video = VideoDefinition.model_validate(data)
    except ValidationError as e:
        raise _schema_errors_from_pydantic(e)[0] from e

    duplicates = _duplicate_id_errors(video)
    if duplicates:
        raise duplicates[0]
    return video


def parse_file(path: Union[str, Path]) -> VideoDefinition:
    """Read and parse a JSON VideoDefinition from disk."""
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaError("root", "a readable JSON file", f"{file_path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise SchemaError("root", "a UTF-8 JSON document", f"{file_path}: {_undecodable(e)}") from e
    return parse(text)


def to_dict(video: VideoDefinition) -> Dict[str, Any]:
    """Serialize back to the JSON document shape (aliases, no nulls)."""
    return video.model_dump(mode="json", by_alias=True, exclude_none=True)


def json_schema() -> Dict[str, Any]:
    """JSON Schema for VideoDefinition documents."""
    return VideoDefinition.model_json_schema(by_alias=True)
