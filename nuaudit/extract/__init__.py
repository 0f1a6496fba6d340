"""Extractors — One conversion per grammar construct."""

from nuaudit.extract.course import extract_course, split_year_code
from nuaudit.extract.course_list import ListState, extract_course_list
from nuaudit.extract.nupath import extract_nupath
from nuaudit.extract.summary import extract_summary

__all__ = [
    "extract_course",
    "split_year_code",
    "extract_course_list",
    "ListState",
    "extract_nupath",
    "extract_summary",
]
