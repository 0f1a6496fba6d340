"""
Course List Extractor — A still-required list to PrerequisiteEntry values.

Lists read like "CS 2500 TO 2510, 1800, MATH 1341". A number after
the range marker closes the range opened by the previous entry
instead of starting a new one. An entry without a subject takes
the last subject written out in the same list.
"""

from enum import Enum
from typing import Optional

from nuaudit.core.logging import LogChannel, get_logger
from nuaudit.grammar.nodes import CourseListNode, RangeToken
from nuaudit.ir.schema import PrerequisiteEntry

log = get_logger(LogChannel.EXTRACT, name="nuaudit.extract.course_list")


class ListState(Enum):
    """Position within a course list."""
    AWAITING_ENTRY = "awaiting_entry"
    AWAITING_RANGE_END = "awaiting_range_end"


def extract_course_list(node: CourseListNode) -> list[PrerequisiteEntry]:
    """Convert a course list into entries, merging "X TO Y" ranges."""
    entries: list[PrerequisiteEntry] = []
    state = ListState.AWAITING_ENTRY
    last_subject: Optional[str] = None

    for item in node.items:
        if isinstance(item, RangeToken):
            if entries:
                state = ListState.AWAITING_RANGE_END
            else:
                log.debug("dangling_range_marker", line=node.line)
            continue

        if item.subject:
            last_subject = item.subject
        number = int(item.number)

        if state is ListState.AWAITING_RANGE_END:
            entries[-1].class_id_2 = number
        else:
            entries.append(PrerequisiteEntry(subject=item.subject or last_subject, class_id=number))
        state = ListState.AWAITING_ENTRY

    return entries
