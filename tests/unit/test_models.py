"""Tests for a11y_scanner.models."""

import pytest

from a11y_scanner.models import ScanStatistics, Severity, Violation


def _violation(**overrides):
    fields = dict(
        id="img-missing-alt",
        severity=Severity.ERROR,
        wcag_criteria=("1.1.1",),
        title="t",
        description="d",
        help="h",
        line=1,
        code="<img>",
        fix_suggestions=("fix",),
    )
    fields.update(overrides)
    return Violation(**fields)


class TestViolationInvariants:
    def test_valid_violation(self):
        v = _violation()
        assert v.column == 1
        assert v.tags == ()

    def test_requires_wcag_criteria(self):
        with pytest.raises(ValueError):
            _violation(wcag_criteria=())

    def test_requires_fix_suggestions(self):
        with pytest.raises(ValueError):
            _violation(fix_suggestions=())

    def test_line_is_one_based(self):
        with pytest.raises(ValueError):
            _violation(line=0)

    def test_immutable(self):
        v = _violation()
        with pytest.raises(AttributeError):
            v.line = 5


class TestRule:
    def test_defaults_from_rule(self, sample_rule):
        v = sample_rule.violation(4, "<x>")
        assert v.id == "sample-rule"
        assert v.severity == Severity.WARNING
        assert v.description == "Default description"
        assert v.fix_suggestions == ("First fix", "Second fix")
        assert (v.line, v.column) == (4, 1)

    def test_overrides(self, sample_rule):
        v = sample_rule.violation(2, "<x>", column=7, description="Custom", fix_suggestions=["Only"])
        assert v.description == "Custom"
        assert v.fix_suggestions == ("Only",)
        assert v.column == 7


class TestScanStatistics:
    def test_counts_by_severity(self):
        violations = [
            _violation(),
            _violation(severity=Severity.WARNING),
            _violation(severity=Severity.WARNING),
            _violation(severity=Severity.INFO),
        ]
        stats = ScanStatistics.from_violations(violations)
        assert stats.total_violations == 4
        assert (stats.errors, stats.warnings, stats.info) == (1, 2, 1)
        assert stats.estimated_fix_minutes == 8
        assert stats.estimated_fix_time == "8 minutes"

    def test_minimum_fix_time(self):
        stats = ScanStatistics.from_violations([])
        assert stats.total_violations == 0
        assert stats.estimated_fix_time == "1 minutes"
