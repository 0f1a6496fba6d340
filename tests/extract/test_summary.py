"""
Tests for the summary extractor.
"""

import pytest

from nuaudit.extract.summary import extract_summary
from nuaudit.grammar.nodes import SummaryNode


def summary_node(**overrides) -> SummaryNode:
    fields = dict(
        line=20,
        earned_hours="64.00",
        courses_taken="17",
        attempted_hours="68.00",
        quality_points="240.50",
        gpa="3.537",
    )
    fields.update(overrides)
    return SummaryNode(**fields)


class TestExtractSummary:
    """Totals block conversion."""

    def test_converts_all_fields(self):
        summary = extract_summary(summary_node())
        assert summary.earned_hours == 64.0
        assert summary.attempted_hours == 68.0
        assert summary.quality_points == 240.5
        assert summary.gpa == 3.537
        assert summary.courses_taken == 17

    def test_bad_value_is_fatal(self):
        with pytest.raises(ValueError, match="gpa.*line 20"):
            extract_summary(summary_node(gpa="N/A"))

    def test_fractional_course_count_is_fatal(self):
        with pytest.raises(ValueError, match="courses_taken"):
            extract_summary(summary_node(courses_taken="1.5"))
