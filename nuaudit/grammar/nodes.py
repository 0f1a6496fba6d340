"""
Parse Tree Nodes — One variant per grammar construct.

Nodes hold the raw text of their fields; converting text to
typed values is the extractors' job. Every node records the
1-based source line it came from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Node:
    """Base of all parse tree nodes."""
    line: int


# =============================================================================
# Leaves
# =============================================================================

@dataclass(frozen=True)
class DateNode(Node):
    """A graduation date as printed, e.g. 05/01/22."""
    text: str


@dataclass(frozen=True)
class CatalogNumberNode(Node):
    """A catalog year as printed, e.g. 2018."""
    text: str


@dataclass(frozen=True)
class MajorListNode(Node):
    """Raw major block: header line plus indented name lines."""
    text: str


@dataclass(frozen=True)
class MinorListNode(Node):
    """Raw minor block: header line plus indented name lines."""
    text: str


# =============================================================================
# Wrappers
# =============================================================================

@dataclass(frozen=True)
class GraduationDateNode(Node):
    """Graduation date section: a literal label wrapping a date."""
    label: str
    date: DateNode


@dataclass(frozen=True)
class CatalogNode(Node):
    """Catalog year section."""
    year: CatalogNumberNode


# =============================================================================
# Requirement Lines
# =============================================================================

class TokenKind(str, Enum):
    """Token kinds inside an NUPath line."""
    STATUS = "STATUS"
    NUPATH_ID = "NUPATH_ID"


@dataclass(frozen=True)
class Token:
    """A labeled token with its 1-based column."""
    kind: TokenKind
    text: str
    column: int


@dataclass(frozen=True)
class NUPathNode(Node):
    """An NUPath requirement line: optional status, two-letter category."""
    tokens: tuple[Token, ...]


@dataclass(frozen=True)
class CourseRefToken:
    """A course reference inside a course list; subject may be omitted."""
    subject: Optional[str]
    number: str


@dataclass(frozen=True)
class RangeToken:
    """The range keyword between two course references."""
    text: str


ListItem = Union[CourseRefToken, RangeToken]


@dataclass(frozen=True)
class CourseListNode(Node):
    """A still-required course list, e.g. CS 2500 TO 2510, 1800."""
    items: tuple[ListItem, ...]


@dataclass(frozen=True)
class CourseNode(Node):
    """A taken or in-progress course line, fields as printed."""
    year_code: str
    subject: str
    number: str
    credits: str
    name: str
    modifier: str = ""


@dataclass(frozen=True)
class CourseOptionNode(Node):
    """A requirement line: exactly one of NUPath, course list, or course."""
    option: Union[NUPathNode, CourseListNode, CourseNode]


@dataclass(frozen=True)
class SummaryNode(Node):
    """The two-line totals block, fields as printed."""
    earned_hours: str
    courses_taken: str
    attempted_hours: str
    quality_points: str
    gpa: str


# =============================================================================
# Document
# =============================================================================

@dataclass(frozen=True)
class EndOfInputNode(Node):
    """Marks the end of the document."""


@dataclass(frozen=True)
class DocumentNode(Node):
    """Root of the parse tree; children are in document order."""
    children: tuple[Node, ...]
