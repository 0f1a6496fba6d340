"""
Tests for p20_walk_tree.
"""

from datetime import date

import pytest

from nuaudit.grammar.nodes import DocumentNode, EndOfInputNode
from nuaudit.ir.enums import DiagnosticLevel, NUPathCategory, Season
from nuaudit.passes.p10_parse_tree import parse_tree
from nuaudit.passes.p20_walk_tree import walk_tree


def walked(make_context, text):
    ctx = make_context(text)
    parse_tree(ctx)
    walk_tree(ctx)
    return ctx


class TestWalkTree:
    """Node routing into the AuditResult."""

    def test_sections(self, make_context, sample_audit):
        result = walked(make_context, sample_audit).result
        assert result.grad_date == date(2022, 5, 1)
        assert result.audit_year == 2018
        assert result.majors == ["Computer Science", "Mathematics"]
        assert result.minors == ["Music"]

    def test_nupath_buckets(self, make_context, sample_audit):
        result = walked(make_context, sample_audit).result
        assert result.complete_nupaths == [NUPathCategory.ND]
        assert result.ip_nupaths == [NUPathCategory.WI]
        assert result.required_nupaths == [NUPathCategory.CE]

    def test_courses_routed_by_marker(self, make_context, sample_audit):
        result = walked(make_context, sample_audit).result

        # Repeats survive until p30
        assert [c.class_id for c in result.complete_courses] == [2500, 2500, 2510]
        assert result.complete_courses[2].hon is True

        (ip,) = result.ip_courses
        assert ip.class_id == 4500
        assert ip.season is Season.FALL
        assert ip.term_id == 202210

    def test_required_courses(self, make_context, sample_audit):
        result = walked(make_context, sample_audit).result
        assert [(e.subject, e.class_id, e.class_id_2) for e in result.required_courses] == [
            ("CS", 3800, 3810),
            ("CS", 4800, None),
            ("MATH", 1341, None),
            ("MATH", 1342, None),
        ]

    def test_summary(self, make_context, sample_audit):
        summary = walked(make_context, sample_audit).result.summary
        assert summary.earned_hours == 64.0
        assert summary.courses_taken == 17
        assert summary.gpa == 3.537

    def test_unknown_nupath_dropped_with_warning(self, make_context, unknown_nupath_audit):
        ctx = walked(make_context, unknown_nupath_audit)

        result = ctx.result
        assert result.complete_nupaths == []
        assert result.ip_nupaths == []
        assert result.required_nupaths == []

        (diag,) = ctx.diagnostics
        assert diag.level == DiagnosticLevel.WARNING
        assert diag.code == "NUPATH_DROPPED"
        assert diag.line == 2
        assert ctx.trace[-1].counts["dropped"] == 1

    def test_nupath_without_status_dropped(self, make_context):
        ctx = walked(make_context, "Graduation Date: 05/01/22\nNUpath Writing (WF)\n")
        assert ctx.result.complete_nupaths == []
        assert ctx.diagnostics[0].code == "NUPATH_DROPPED"

    def test_invalid_date_is_fatal(self, make_context):
        ctx = make_context("Graduation Date: 13/45/22\n")
        parse_tree(ctx)
        with pytest.raises(ValueError, match="graduation date"):
            walk_tree(ctx)

    def test_requires_tree(self, make_context):
        with pytest.raises(RuntimeError):
            walk_tree(make_context("Graduation Date: 05/01/22\n"))

    def test_end_of_input_skipped(self, make_context):
        ctx = make_context("")
        ctx.tree = DocumentNode(line=1, children=(EndOfInputNode(line=1),))
        walk_tree(ctx)
        assert ctx.result.grad_date is None
        assert ctx.diagnostics == []
