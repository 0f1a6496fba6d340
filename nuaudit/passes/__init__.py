"""Passes — Pipeline stages for audit parsing."""

from nuaudit.passes.p10_parse_tree import parse_tree
from nuaudit.passes.p20_walk_tree import walk_tree
from nuaudit.passes.p30_dedupe_courses import dedupe_courses
from nuaudit.passes.p80_package import package

__all__ = [
    "parse_tree",
    "walk_tree",
    "dedupe_courses",
    "package",
]
