"""
Pass 30 — Course Deduplication

Audit exports repeat a course line under every requirement the
course counts toward. This pass keeps the first occurrence of each
course (by number, subject, term and name) within the completed
and in-progress lists.
"""

from nuaudit.core.context import AuditContext
from nuaudit.core.logging import get_pass_logger
from nuaudit.ir.schema import CourseRecord

PASS_NAME = "p30_dedupe_courses"
log = get_pass_logger(PASS_NAME)


def _unique(courses: list[CourseRecord]) -> list[CourseRecord]:
    seen: set[CourseRecord] = set()
    unique = []
    for course in courses:
        if course in seen:
            continue
        seen.add(course)
        unique.append(course)
    return unique


def dedupe_courses(ctx: AuditContext) -> AuditContext:
    """Drop repeated course records, preserving document order."""
    result = ctx.result
    before = len(result.complete_courses) + len(result.ip_courses)

    result.complete_courses = _unique(result.complete_courses)
    result.ip_courses = _unique(result.ip_courses)

    removed = before - len(result.complete_courses) - len(result.ip_courses)
    if removed:
        log.verbose("duplicates_removed", removed=removed)

    ctx.add_trace(pass_name=PASS_NAME, action="deduplicated", removed=removed)
    return ctx
