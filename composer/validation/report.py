"""
Validation Report Data Models

ValidationIssue and ValidationReport carry the outcome of checking a
VideoDefinition document: structural errors, frame budget overflows and
scene-level warnings for scenes that would render as nothing.
"""

import json
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Literal, Optional


ISSUE_ICONS = {"error": "❌", "warning": "⚠", "info": "ℹ"}


@dataclass
class ValidationIssue:
    """A single validation issue.

    Attributes:
        level: Severity level (error, warning, info)
        field: Dotted path of the offending field, or "root"
        message: Human-readable description of the issue
        suggestion: Optional hint for fixing the issue
    """
    level: Literal["error", "warning", "info"]
    field: str
    message: str
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        d = {"level": self.level, "field": self.field, "message": self.message}
        if self.suggestion:
            d["suggestion"] = self.suggestion
        return d


@dataclass
class ValidationReport:
    """Structured report from a validation run.

    Attributes:
        source: File path or label of the validated document
        is_valid: Whether the document passed validation
        issues: Issues found, in discovery order
        policy: Timing policy the schedule was resolved with
        scene_count: Number of scenes in the document (0 if unparseable)
        timestamp: When validation was performed (UTC)
        duration_ms: How long validation took in milliseconds
    """
    source: str
    is_valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)
    policy: str = "zero_start"
    scene_count: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    def _with_level(self, level: str) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.level == level]

    @property
    def errors(self) -> List[ValidationIssue]:
        return self._with_level("error")

    @property
    def warnings(self) -> List[ValidationIssue]:
        return self._with_level("warning")

    def summary(self) -> Dict[str, int]:
        counts = Counter(issue.level for issue in self.issues)
        return {"errors": counts["error"], "warnings": counts["warning"], "infos": counts["info"]}

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "is_valid": self.is_valid,
            "policy": self.policy,
            "scene_count": self.scene_count,
            "issues": [issue.to_dict() for issue in self.issues],
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
            "summary": self.summary(),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def format_human(self) -> str:
        """One status line per document, then one line per issue."""
        if not self.is_valid:
            headline = "❌ Failed"
        elif self.warnings:
            headline = "✅ Valid (with warnings)"
        else:
            headline = "✅ Valid"

        lines = [f"{headline}: {self.source} ({self.scene_count} scenes, {self.policy} timing)"]
        for issue in self.issues:
            lines.append(f"  {ISSUE_ICONS[issue.level]} [{issue.field}] {issue.message}")
            if issue.suggestion:
                lines.append(f"      → {issue.suggestion}")
        return "\n".join(lines)


@dataclass
class BatchReport:
    """Reports for every document matched by one batch pattern."""
    pattern: str
    reports: List[ValidationReport] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.reports if r.is_valid)

    @property
    def failed(self) -> int:
        return len(self.reports) - self.passed

    @property
    def with_warnings(self) -> int:
        return sum(1 for r in self.reports if r.is_valid and r.warnings)

    @property
    def is_valid(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict:
        return {
            "pattern": self.pattern,
            "total": len(self.reports),
            "passed": self.passed,
            "with_warnings": self.with_warnings,
            "failed": self.failed,
            "reports": [r.to_dict() for r in self.reports],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def format_human(self) -> str:
        lines = [f"Validating {len(self.reports)} file(s) matching {self.pattern}"]
        lines.extend(r.format_human() for r in self.reports)
        lines.append("")
        lines.append(f"  ✅ {self.passed} passed")
        if self.with_warnings:
            lines.append(f"  {ISSUE_ICONS['warning']} {self.with_warnings} with warnings")
        if self.failed:
            lines.append(f"  {ISSUE_ICONS['error']} {self.failed} failed")
        return "\n".join(lines)
