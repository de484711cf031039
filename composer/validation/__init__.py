"""
Validation of VideoDefinition documents: structure, frame budget and
per-scene renderability.
"""

from composer.validation.engine import ValidationEngine
from composer.validation.report import BatchReport, ValidationIssue, ValidationReport

__all__ = ["BatchReport", "ValidationEngine", "ValidationIssue", "ValidationReport"]
