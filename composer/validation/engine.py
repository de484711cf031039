"""
Validation Engine

Checks VideoDefinition documents without rendering them. A document is
invalid when it has structural errors or a scene ends past the frame
budget. Scenes the dispatcher would skip are reported as warnings, which
strict mode promotes to failures. Supports single documents and batches.
"""

import glob
import json
import time
from pathlib import Path
from typing import Any, List, Optional, Union

from composer.dispatch import dispatch_scene
from composer.schema import collect_schema_errors, parse
from composer.timing import TimingPolicy, find_budget_overflows, resolve, total_frames
from composer.validation.report import ValidationIssue, ValidationReport


class ValidationEngine:
    """Validation orchestrator for VideoDefinition documents."""

    def __init__(
        self,
        strict: bool = False,
        policy: Union[str, TimingPolicy, None] = TimingPolicy.ZERO_START,
    ):
        """Initialize the validation engine.

        Args:
            strict: If True, warnings are treated as errors.
            policy: Timing policy used to resolve the schedule.
        """
        self.strict = strict
        self.policy = TimingPolicy.from_value(policy)

    def validate_file(self, file_path: Union[str, Path]) -> ValidationReport:
        """Validate a JSON document on disk."""
        start = time.time()
        source = str(file_path)
        data, load_issues = self._load_json(source)
        if load_issues:
            return self._report(source, load_issues, 0, start)
        return self.validate_data(data, source=source, _start=start)

    def validate_data(
        self,
        data: Any,
        source: str = "<input>",
        _start: Optional[float] = None,
    ) -> ValidationReport:
        """Validate an already-loaded document (mapping or JSON text).

        Args:
            data: Decoded JSON mapping or JSON text
            source: Label used in the report

        Returns:
            ValidationReport with all issues found.
        """
        start = _start if _start is not None else time.time()

        schema_errors = collect_schema_errors(data)
        if schema_errors:
            issues = [
                ValidationIssue(
                    level="error",
                    field=e.path,
                    message=f"expected {e.expected}, received {e.received}",
                )
                for e in schema_errors
            ]
            return self._report(source, issues, 0, start)

        video = parse(data)
        issues: List[ValidationIssue] = []
        schedule = resolve(video.scenes, video.meta.fps, self.policy)
        scheduled = {slot.index for slot in schedule}

        for overflow in find_budget_overflows(schedule, total_frames(video.meta)):
            issues.append(ValidationIssue(
                level="error",
                field=overflow.path,
                message=f"expected {overflow.expected}, received {overflow.received}",
                suggestion="Shorten the scene or increase meta.duration.",
            ))

        width, height = video.meta.dimensions.width, video.meta.dimensions.height
        for index, scene in enumerate(video.scenes):
            if index not in scheduled:
                issues.append(ValidationIssue(
                    level="info",
                    field=f"scenes.{index}",
                    message=f"Scene '{scene.id}' resolves to zero frames and is dropped",
                ))
                continue
            result = dispatch_scene(scene, width, height)
            if not result.rendered:
                issues.append(ValidationIssue(
                    level="warning",
                    field=f"scenes.{index}.content",
                    message=f"Scene '{scene.id}' will not render: {result.error}",
                    suggestion=f"{type(result.error).__name__}: fix the {scene.type} content",
                ))

        return self._report(source, issues, len(video.scenes), start)

    def validate_batch(self, pattern: str) -> List[ValidationReport]:
        """Validate every file matching a glob pattern.

        Returns:
            List of ValidationReport, one per file (or a single failed
            report when nothing matches).
        """
        files = sorted(glob.glob(pattern, recursive=True))
        if not files:
            return [ValidationReport(
                source=pattern,
                is_valid=False,
                policy=self.policy.value,
                issues=[ValidationIssue(
                    level="error",
                    field="root",
                    message=f"No files matching pattern: {pattern}",
                )],
            )]
        return [self.validate_file(fp) for fp in files]

    def _report(
        self,
        source: str,
        issues: List[ValidationIssue],
        scene_count: int,
        start: float,
    ) -> ValidationReport:
        has_errors = any(i.level == "error" for i in issues)
        has_warnings = any(i.level == "warning" for i in issues)
        return ValidationReport(
            source=source,
            is_valid=not has_errors and (not self.strict or not has_warnings),
            issues=issues,
            policy=self.policy.value,
            scene_count=scene_count,
            duration_ms=int((time.time() - start) * 1000),
        )

    def _load_json(self, file_path: str):
        """Load a JSON file.

        Returns:
            Tuple of (data_or_None, list_of_issues).
        """
        path = Path(file_path)
        if not path.exists():
            return None, [ValidationIssue(level="error", field="root", message=f"File not found: {file_path}")]
        if not path.is_file():
            return None, [ValidationIssue(level="error", field="root", message=f"Path is not a file: {file_path}")]

        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f), []
        except json.JSONDecodeError as e:
            return None, [ValidationIssue(
                level="error",
                field="root",
                message=f"Invalid JSON: {e}",
                suggestion="Check that the file contains valid JSON.",
            )]
        except UnicodeDecodeError as e:
            return None, [ValidationIssue(
                level="error",
                field="root",
                message=f"File is not valid UTF-8: byte 0x{e.object[e.start]:02x} at offset {e.start}",
                suggestion="Save the document as UTF-8 JSON.",
            )]
        except OSError as e:
            return None, [ValidationIssue(level="error", field="root", message=f"Cannot read file: {e}")]
