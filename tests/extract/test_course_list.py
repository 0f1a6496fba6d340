"""
Tests for the still-required course list extractor.
"""

from nuaudit.extract.course_list import extract_course_list
from nuaudit.grammar.nodes import CourseListNode, CourseRefToken, RangeToken


def ref(number: str, subject: str = None) -> CourseRefToken:
    return CourseRefToken(subject=subject, number=number)


def course_list(*items) -> CourseListNode:
    return CourseListNode(line=1, items=tuple(items))


class TestExtractCourseList:
    """Range merging and subject inheritance."""

    def test_range_merges_into_one_entry(self):
        entries = extract_course_list(
            course_list(ref("2500", "CS"), RangeToken("to"), ref("2510", "CS"))
        )
        assert len(entries) == 1
        assert entries[0].subject == "CS"
        assert entries[0].class_id == 2500
        assert entries[0].class_id_2 == 2510

    def test_subject_inherited(self):
        entries = extract_course_list(course_list(ref("1800", "CS"), ref("2500")))
        assert [(e.subject, e.class_id) for e in entries] == [("CS", 1800), ("CS", 2500)]
        assert all(e.class_id_2 is None for e in entries)

    def test_range_then_more_entries(self):
        entries = extract_course_list(
            course_list(ref("2500", "CS"), RangeToken("TO"), ref("2510"), ref("1800"), ref("1341", "MATH"))
        )
        assert [(e.subject, e.class_id, e.class_id_2) for e in entries] == [
            ("CS", 2500, 2510),
            ("CS", 1800, None),
            ("MATH", 1341, None),
        ]

    def test_leading_range_marker_ignored(self):
        entries = extract_course_list(course_list(RangeToken("TO"), ref("2500", "CS")))
        assert len(entries) == 1
        assert entries[0].class_id == 2500
        assert entries[0].class_id_2 is None

    def test_trailing_range_marker_leaves_entry(self):
        entries = extract_course_list(course_list(ref("2500", "CS"), RangeToken("TO")))
        assert len(entries) == 1
        assert entries[0].class_id_2 is None

    def test_no_subject_anywhere(self):
        entries = extract_course_list(course_list(ref("2500")))
        assert entries[0].subject is None

    def test_empty_list(self):
        assert extract_course_list(course_list()) == []
