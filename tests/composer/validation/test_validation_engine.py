"""
Tests for composer.validation

Covers single documents, strict mode, batch validation and report
formatting.
"""

import json

import pytest

from composer.timing import TimingPolicy
from composer.validation import BatchReport, ValidationEngine, ValidationIssue, ValidationReport


@pytest.fixture
def engine():
    return ValidationEngine()


@pytest.fixture
def skipped_scene_document(document_factory):
    return document_factory([
        {"id": "ok", "type": "full_bleed", "duration": 2, "content": {"text": "Hi"}},
        {"id": "empty", "type": "full_bleed", "duration": 2, "content": {}},
    ])


class TestValidateData:
    def test_valid_document(self, engine, zero_start_document):
        report = engine.validate_data(zero_start_document)

        assert report.is_valid
        assert report.issues == []
        assert report.scene_count == 2
        assert report.policy == "zero_start"

    def test_schema_errors_reported(self, engine, document_factory):
        doc = document_factory([])
        doc["meta"]["fps"] = "fast"
        report = engine.validate_data(doc)

        assert not report.is_valid
        assert report.errors[0].field == "meta.fps"
        assert report.errors[0].message.startswith("expected")

    def test_budget_overflow_is_error(self, engine, document_factory):
        report = engine.validate_data(document_factory(
            [{"id": "long", "type": "grid", "duration": 11}], duration=10,
        ))
        assert not report.is_valid
        assert report.errors[0].field == "scenes.0"
        assert report.errors[0].suggestion

    def test_policy_changes_budget_outcome(self, zero_start_document):
        zero_start_document["meta"]["duration"] = 8
        assert ValidationEngine().validate_data(zero_start_document).is_valid
        assert not ValidationEngine(policy=TimingPolicy.SEQUENTIAL).validate_data(zero_start_document).is_valid

    def test_dropped_scene_is_info(self, engine, document_factory):
        report = engine.validate_data(document_factory([{"id": "z", "type": "grid", "duration": 0}]))
        assert report.is_valid
        assert [i.level for i in report.issues] == ["info"]

    def test_non_rendering_scene_is_warning(self, engine, skipped_scene_document):
        report = engine.validate_data(skipped_scene_document)

        assert report.is_valid
        assert report.warnings[0].field == "scenes.1.content"
        assert "EmptySceneError" in report.warnings[0].suggestion

    def test_strict_mode_fails_on_warnings(self, skipped_scene_document):
        report = ValidationEngine(strict=True).validate_data(skipped_scene_document)
        assert not report.is_valid

    def test_json_text_input(self, engine, zero_start_document):
        assert engine.validate_data(json.dumps(zero_start_document)).is_valid


class TestValidateFile:
    def test_valid_file(self, engine, document_file):
        report = engine.validate_file(document_file)
        assert report.is_valid
        assert report.source == str(document_file)

    def test_missing_file(self, engine, tmp_path):
        report = engine.validate_file(tmp_path / "nope.json")
        assert not report.is_valid
        assert "not found" in report.errors[0].message

    def test_invalid_json(self, engine, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        report = engine.validate_file(path)
        assert "Invalid JSON" in report.errors[0].message

    def test_not_utf8(self, engine, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"meta": "\xff\xfe"}')
        report = engine.validate_file(path)
        assert not report.is_valid
        assert "not valid UTF-8" in report.errors[0].message

    def test_directory(self, engine, tmp_path):
        report = engine.validate_file(tmp_path)
        assert "not a file" in report.errors[0].message


class TestValidateBatch:
    def test_batch(self, engine, tmp_path, zero_start_document):
        (tmp_path / "a.json").write_text(json.dumps(zero_start_document), encoding="utf-8")
        (tmp_path / "b.json").write_text("[]", encoding="utf-8")

        reports = engine.validate_batch(str(tmp_path / "*.json"))

        assert [r.is_valid for r in reports] == [True, False]

    def test_no_matches(self, engine, tmp_path):
        reports = engine.validate_batch(str(tmp_path / "*.json"))
        assert len(reports) == 1
        assert "No files matching" in reports[0].errors[0].message


class TestValidationReport:
    def test_to_dict_summary(self):
        report = ValidationReport(
            source="x.json",
            is_valid=False,
            issues=[
                ValidationIssue(level="error", field="meta", message="missing"),
                ValidationIssue(level="warning", field="scenes.0.content", message="w", suggestion="fix"),
            ],
        )
        data = report.to_dict()

        assert data["summary"] == {"errors": 1, "warnings": 1, "infos": 0}
        assert data["issues"][1]["suggestion"] == "fix"
        assert "suggestion" not in data["issues"][0]

    def test_to_json(self):
        report = ValidationReport(source="x.json", is_valid=True)
        assert json.loads(report.to_json())["is_valid"] is True

    def test_format_human(self, engine, skipped_scene_document):
        text = engine.validate_data(skipped_scene_document, source="doc.json").format_human()

        assert text.startswith("✅ Valid (with warnings): doc.json")
        assert "⚠ [scenes.1.content]" in text

    def test_format_human_failed(self):
        report = ValidationReport(
            source="bad.json",
            is_valid=False,
            issues=[ValidationIssue(level="error", field="root", message="broken")],
        )
        assert report.format_human().splitlines()[0].startswith("❌ Failed: bad.json")


class TestBatchReport:
    @pytest.fixture
    def batch(self):
        warned = ValidationReport(
            source="b.json",
            is_valid=True,
            issues=[ValidationIssue(level="warning", field="scenes.0.content", message="w")],
        )
        failed = ValidationReport(
            source="c.json",
            is_valid=False,
            issues=[ValidationIssue(level="error", field="meta", message="missing")],
        )
        return BatchReport(
            pattern="data/*.json",
            reports=[ValidationReport(source="a.json", is_valid=True), warned, failed],
        )

    def test_counts(self, batch):
        assert (batch.passed, batch.with_warnings, batch.failed) == (2, 1, 1)
        assert not batch.is_valid

    def test_to_dict(self, batch):
        data = batch.to_dict()
        assert data["total"] == 3
        assert data["pattern"] == "data/*.json"
        assert [r["source"] for r in data["reports"]] == ["a.json", "b.json", "c.json"]

    def test_format_human(self, batch):
        text = batch.format_human()
        assert "3 file(s) matching data/*.json" in text
        assert "✅ 2 passed" in text
        assert "❌ 1 failed" in text

    def test_empty_batch_is_valid(self):
        assert BatchReport(pattern="*.json").is_valid
