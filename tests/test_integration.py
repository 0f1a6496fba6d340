"""
End-to-end tests through the public API.
"""

import json
from datetime import date

import pytest

from nuaudit import AuditParseError, parse_audit, parse_audit_json
from nuaudit.ir.enums import NUPathCategory, Season
from nuaudit.ir.serialization import from_json


class TestMinimalDocument:
    """One course, one NUPath line, one summary block."""

    def test_round_trip(self, minimal_audit):
        result = parse_audit(minimal_audit)

        (course,) = result.complete_courses
        assert course.subject == "MATH"
        assert course.class_id == 1341
        assert course.name == "CALCULUS 1"
        assert course.credit_hours == 4.0
        assert course.season is Season.SPRING
        assert course.year == 2021
        assert course.term_id == 202130
        assert result.ip_courses == []

        assert result.complete_nupaths == [NUPathCategory.FQ]

        assert result.summary.earned_hours == 4.0
        assert result.summary.attempted_hours == 4.0
        assert result.summary.quality_points == 16.0
        assert result.summary.gpa == 4.0
        assert result.summary.courses_taken == 1

        assert result.grad_date == date(2022, 5, 1)
        assert result.audit_year is None


class TestSampleDocument:
    """A full export with noise, repeats and ranges."""

    def test_deduplicated(self, sample_audit):
        result = parse_audit(sample_audit)
        assert [(c.class_id, c.term_id) for c in result.complete_courses] == [
            (2500, 201910),
            (2510, 201930),
        ]

    def test_bucket_partition(self, sample_audit):
        result = parse_audit(sample_audit)
        nupaths = result.complete_nupaths + result.ip_nupaths + result.required_nupaths
        assert sorted(nupaths) == sorted([NUPathCategory.ND, NUPathCategory.WI, NUPathCategory.CE])
        assert not set(result.complete_courses) & set(result.ip_courses)

    def test_idempotent(self, sample_audit):
        assert parse_audit(sample_audit) == parse_audit(sample_audit)


class TestListsAndBlocks:
    """Course-list connectors and section block boundaries."""

    def test_connector_not_a_subject(self):
        result = parse_audit("Graduation Date: 05/01/22\n    SELECT FROM: CS 1800 OR 2500\n")
        assert [(e.subject, e.class_id, e.class_id_2) for e in result.required_courses] == [
            ("CS", 1800, None),
            ("CS", 2500, None),
        ]

    def test_heading_after_major_not_a_name(self):
        result = parse_audit(
            "Major: Computer Science\n    OK  FOUNDATIONS OF COMPUTER SCIENCE\nGraduation Date: 05/01/22\n"
        )
        assert result.majors == ["Computer Science"]


class TestFailures:
    """Fatal errors raise; recoverable ones do not."""

    def test_missing_graduation_date(self, no_graduation_audit):
        with pytest.raises(AuditParseError) as exc:
            parse_audit(no_graduation_audit)
        assert exc.value.line == 5
        assert exc.value.column == 1
        assert exc.value.diagnostics

    def test_unknown_nupath_succeeds(self, unknown_nupath_audit):
        result = parse_audit(unknown_nupath_audit)
        assert result.complete_nupaths == []
        assert result.ip_nupaths == []
        assert result.required_nupaths == []


class TestParseAuditJson:
    """The string-in, string-out entry point."""

    def test_success(self, minimal_audit):
        output = parse_audit_json(minimal_audit)
        assert from_json(output) == parse_audit(minimal_audit)

    def test_error_object(self, no_graduation_audit):
        data = json.loads(parse_audit_json(no_graduation_audit))
        assert set(data) == {"error", "line", "column"}
        assert data["line"] == 5

    def test_garbage_does_not_raise(self):
        data = json.loads(parse_audit_json("\x00 not an audit \x00"))
        assert "error" in data

    def test_invalid_profile_does_not_raise(self, tmp_path, monkeypatch, minimal_audit):
        path = tmp_path / "list.yaml"
        path.write_text("- not\n- a profile\n")
        monkeypatch.setenv("NUAUDIT_PROFILE", str(path))

        data = json.loads(parse_audit_json(minimal_audit))
        assert "mapping" in data["error"]
        assert data["line"] is None
