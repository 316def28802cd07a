"""Tests for report assembly and persistence."""

import json

from pages_deploy.core.report_builder import ReportBuilder, load_report, next_steps_for
from pages_deploy.models.result import PipelineStage, ReportStatus, RunAccumulator


def test_success_when_no_errors(make_config):
    report = ReportBuilder(make_config(), RunAccumulator()).build()

    assert report.status == ReportStatus.SUCCESS
    assert report.errors == ()
    assert report.failed_stage is None
    assert report.next_steps[0].startswith("Wait")
    assert "Test: https://example.github.io/finance-dashboard/" in report.next_steps


def test_warnings_never_flip_status(make_config):
    acc = RunAccumulator()
    acc.add_warning("x.js not found")
    acc.add_warning("branch differs")

    report = ReportBuilder(make_config(), acc).build()

    assert report.status == ReportStatus.SUCCESS
    assert report.warnings == ("x.js not found", "branch differs")


def test_any_error_means_failed(make_config):
    acc = RunAccumulator()
    acc.add_error("Failed to add y.js: denied", PipelineStage.STAGING)

    report = ReportBuilder(make_config(), acc).build()

    assert report.status == ReportStatus.FAILED
    assert report.failed_stage == PipelineStage.STAGING
    assert "Fix the errors listed above" in report.next_steps


def test_failure_steps_lead_with_stage_remediation():
    steps = next_steps_for(ReportStatus.FAILED, stage=PipelineStage.PUBLISHING)
    assert "Pull or rebase" in steps[0]
    assert steps[1:] == next_steps_for(ReportStatus.FAILED)


def test_fatal_stage_takes_precedence(make_config):
    acc = RunAccumulator()
    acc.add_error("Failed to add y.js", PipelineStage.STAGING)
    acc.mark_fatal(PipelineStage.PUBLISHING, "push rejected")

    report = ReportBuilder(make_config(), acc).build()
    assert report.failed_stage == PipelineStage.PUBLISHING
    assert report.errors == ("Failed to add y.js", "push rejected")


def test_save_and_load(make_config, tmp_path):
    acc = RunAccumulator()
    acc.mark_fatal(PipelineStage.VERIFYING, "Missing required files: missing.txt")
    report = ReportBuilder(make_config(), acc).build()

    path = ReportBuilder.save(report, tmp_path / "out" / "deployment-report.json")
    data = json.loads(path.read_text())

    assert data["status"] == "FAILED"
    assert data["errors"] == ["Missing required files: missing.txt"]
    assert data["failed_stage"] == "verifying"
    assert set(data) == {
        "timestamp", "status", "errors", "warnings", "info",
        "verification_urls", "next_steps", "failed_stage",
    }
    assert load_report(path) == report
