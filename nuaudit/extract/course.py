"""
Course Extractor — A course line to a CourseRecord.

The year code packs season and two-digit year: "FL18" is Fall
2018. The trailing modifier carries the honors and in-progress
markers.
"""

from nuaudit.core.logging import LogChannel, get_logger
from nuaudit.grammar.nodes import CourseNode
from nuaudit.grammar.profile import FormatProfile
from nuaudit.ir.enums import Season
from nuaudit.ir.schema import CourseRecord

log = get_logger(LogChannel.EXTRACT, name="nuaudit.extract.course")


def split_year_code(year_code: str) -> tuple[Season, int]:
    """
    Split a packed year code into season and calendar year.

    Raises:
        UnknownCodeError: If the season prefix is not a known code
        ValueError: If the year digits are not numeric
    """
    season = Season.from_code(year_code[:2])
    year = 2000 + int(year_code[2:])
    return season, year


def extract_course(node: CourseNode, profile: FormatProfile) -> tuple[CourseRecord, bool]:
    """
    Build a CourseRecord from a course line.

    Returns:
        (record, in_progress) where in_progress is True when the
        modifier contains the in-progress marker
    """
    season, year = split_year_code(node.year_code)
    modifier = node.modifier

    record = CourseRecord(
        subject=node.subject,
        hon=profile.honors_marker in modifier,
        class_id=int(node.number),
        name=node.name,
        credit_hours=float(node.credits),
        season=season,
        year=year,
    )
    in_progress = profile.in_progress_marker in modifier

    log.debug(
        "course_extracted",
        line=node.line,
        course=f"{record.subject} {record.class_id}",
        term_id=record.term_id,
        in_progress=in_progress,
    )
    return record, in_progress
