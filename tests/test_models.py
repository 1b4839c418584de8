"""Tests for data models."""

import dataclasses

import pytest

from loyalty_drift.models import (
    ABSENT,
    DEFAULT_TRACKED_FIELDS,
    DriftConfig,
    DriftLevel,
    DriftReport,
    Issue,
    IssueKind,
)


class TestIssue:
    """Tests for the Issue model."""

    def test_changed_message(self):
        issue = Issue("tier", IssueKind.CHANGED, "Gold", "Platinum")
        assert issue.message == 'Value drift in tier: v1="Gold" → v2="Platinum"'

    def test_removed_message(self):
        issue = Issue("promoCode", IssueKind.REMOVED, from_value="SPRING10")
        assert issue.message == 'Field removed in v2: promoCode (was "SPRING10")'

    def test_added_message(self):
        issue = Issue("score", IssueKind.ADDED, to_value=76)
        assert issue.message == 'Field added in v2: score (now "76")'

    def test_message_renders_json_values(self):
        """Values display the way they look in JSON."""
        issue = Issue("flag", IssueKind.CHANGED, None, True)
        assert issue.message == 'Value drift in flag: v1="null" → v2="true"'

        issue = Issue("spend", IssueKind.CHANGED, 120.0, 120.5)
        assert issue.message == 'Value drift in spend: v1="120" → v2="120.5"'

    def test_to_dict_omits_absent(self):
        """Absent values are left out; null values are kept."""
        data = Issue("tier", IssueKind.REMOVED, from_value=None).to_dict()

        assert data["from"] is None
        assert "to" not in data
        assert data["kind"] == "removed"

    def test_from_dict_restores_absent(self):
        issue = Issue.from_dict({"field": "tier", "kind": "added", "to": "Gold"})

        assert issue.from_value is ABSENT
        assert issue.to_value == "Gold"

    def test_absent_is_falsy_singleton(self):
        assert not ABSENT
        assert type(ABSENT)() is ABSENT


class TestDriftReport:
    """Tests for the DriftReport model."""

    def test_format_no_drift(self):
        report = DriftReport()
        text = report.format_result()

        assert text.startswith("No drift detected for tracked fields.")
        assert "Drift Level: Low" in text
        assert "Issue Count: 0" in text
        assert "no field-level differences" in text

    def test_format_with_issues(self):
        report = DriftReport(
            issues=(
                Issue("tier", IssueKind.CHANGED, "Silver", "Gold"),
                Issue("score", IssueKind.CHANGED, 60, 68),
            ),
        )
        lines = report.format_result().splitlines()

        assert lines[0] == "Drift Detected:"
        assert lines[1] == '- Value drift in tier: v1="Silver" → v2="Gold"'
        assert "Drift Level: Medium" in lines
        assert "Issue Count: 2" in lines
        assert lines[-1].startswith("Impact: Medium")

    def test_summary_line(self):
        assert DriftReport().summary_line() == "No drift detected for tracked fields."
        report = DriftReport(
            issues=(Issue("tier", IssueKind.CHANGED, "Silver", "Gold"),),
        )
        assert report.summary_line() == "Drift Level: Low · Issues: 1"

    def test_to_dict(self):
        report = DriftReport(
            issues=(Issue("tier", IssueKind.ADDED, to_value="Gold"),),
        )
        data = report.to_dict()

        assert data["level"] == "Low"
        assert data["issue_count"] == 1
        assert data["issues"][0]["message"] == 'Field added in v2: tier (now "Gold")'

    def test_report_is_frozen(self):
        report = DriftReport()
        with pytest.raises(dataclasses.FrozenInstanceError):
            report.issues = ()  # type: ignore[misc]

    def test_level_follows_issue_count(self):
        """The level cannot disagree with the number of issues."""
        issues = tuple(Issue(f"f{i}", IssueKind.ADDED, to_value=i) for i in range(5))

        assert DriftReport(issues=issues[:1]).level == DriftLevel.LOW
        assert DriftReport(issues=issues[:2]).level == DriftLevel.MEDIUM
        assert DriftReport(issues=issues).level == DriftLevel.HIGH

    def test_from_dict_ignores_stored_level(self):
        """A stored level that contradicts the issues is not trusted."""
        data = {
            "level": "Low",
            "issues": [
                {"field": f"f{i}", "kind": "added", "to": i} for i in range(5)
            ],
        }

        report = DriftReport.from_dict(data)

        assert report.issue_count == 5
        assert report.level == DriftLevel.HIGH

    def test_from_dict_reads_to_dict_output(self):
        report = DriftReport(
            issues=(
                Issue("tier", IssueKind.CHANGED, "Silver", "Gold"),
                Issue("promoCode", IssueKind.REMOVED, from_value=None),
            )
        )

        assert DriftReport.from_dict(report.to_dict()) == report


class TestDriftConfig:
    """Tests for the DriftConfig model."""

    def test_defaults(self):
        config = DriftConfig()
        assert config.tracked_fields == list(DEFAULT_TRACKED_FIELDS)

    def test_to_dict_and_back(self):
        config = DriftConfig(tracked_fields=["tier", "score"])
        restored = DriftConfig.from_dict(config.to_dict())

        assert restored.tracked_fields == ["tier", "score"]
        assert restored.version == config.version

    def test_from_dict_missing_fields_uses_defaults(self):
        config = DriftConfig.from_dict({"version": "0.1"})
        assert config.tracked_fields == list(DEFAULT_TRACKED_FIELDS)
