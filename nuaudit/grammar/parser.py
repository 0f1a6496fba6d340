"""
Audit Grammar — Line-oriented recognizer for audit exports.

Turns raw audit text into a DocumentNode whose children are
typed nodes in document order. Lines that match no construct
are report noise (headers, rules, explanatory text) and produce
no node.

Labels and markers come from a FormatProfile, so the same
recognizer serves any export that shares the column layout.
"""

import re
from typing import Optional

from nuaudit.grammar.nodes import (
    CatalogNode,
    CatalogNumberNode,
    CourseListNode,
    CourseNode,
    CourseOptionNode,
    CourseRefToken,
    DateNode,
    DocumentNode,
    EndOfInputNode,
    GraduationDateNode,
    ListItem,
    MajorListNode,
    MinorListNode,
    Node,
    NUPathNode,
    RangeToken,
    SummaryNode,
    Token,
    TokenKind,
)
from nuaudit.grammar.profile import FormatProfile, get_profile
from nuaudit.ir.enums import CompletionStatus, Season


class AuditSyntaxError(ValueError):
    """The text does not conform to the audit grammar."""

    def __init__(self, message: str, line: int, column: int = 1):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"line {line}, column {column}: {message}")


# Letter grades that may sit between credits and course name
GRADE = r"(?:[A-F][+-]?|P|S|T)"

NUMBER = r"\d+(?:\.\d+)?"


class AuditGrammar:
    """Compiled patterns for one FormatProfile."""

    def __init__(self, profile: FormatProfile):
        self.profile = profile
        p = profile
        seasons = "|".join(re.escape(s.value) for s in Season)
        statuses = "|".join(re.escape(s.value) for s in CompletionStatus)
        # Never matches when the profile lists no connectors
        connectors = "|".join(re.escape(c) for c in p.connector_markers) or r"(?!)"

        self.graduation = re.compile(
            rf"^\s*(?P<label>{re.escape(p.graduation_label)})\s*(?P<date>\S+)"
        )
        self.catalog = re.compile(
            rf"^\s*{re.escape(p.catalog_label)}\s*(?P<year>\d{{4}})\b"
        )
        self.major = re.compile(rf"^\s*{re.escape(p.major_label)}")
        self.minor = re.compile(rf"^\s*{re.escape(p.minor_label)}")
        self.nupath = re.compile(
            rf"^\s*(?:(?P<status>[A-Z]{{2}})\s+)?(?i:{re.escape(p.nupath_label)})(?=\s|$)"
            rf".*?\((?P<code>[A-Za-z]{{2}})\)\s*$"
        )
        self.course_list = re.compile(
            rf"^\s*{re.escape(p.course_list_label)}\s*(?P<body>.*?)\s*$"
        )
        self.list_item = re.compile(
            rf"(?P<range>(?<![A-Za-z])(?i:{re.escape(p.range_marker)})(?![A-Za-z]))"
            rf"|(?P<connector>(?<![A-Za-z])(?i:{connectors})(?![A-Za-z]))"
            rf"|(?:(?P<subject>[A-Z]{{2,4}})\s*)?(?P<number>\d{{4}})"
        )
        # Requirement heading such as "OK  FOUNDATIONS"; noise, but ends a block
        self.heading = re.compile(rf"^\s*(?:{statuses})\s{{2,}}\S")
        self.course = re.compile(
            rf"^\s*(?P<year>(?:{seasons})\d{{2}})\s+"
            rf"(?P<subject>[A-Z]{{2,4}})\s*(?P<number>\d{{4}})\s+"
            rf"(?P<credits>\d+\.\d+)\s+"
            rf"(?:{GRADE}\s+)?"
            rf"(?P<name>\S+(?: \S+)*)"
            rf"(?:\s{{2,}}(?P<modifier>\S.*?))?\s*$"
        )
        self.earned = re.compile(
            rf"^\s*{re.escape(p.earned_label)}\s*(?P<earned>{NUMBER})\s+HOURS"
            rf"\s+(?P<courses>\d+)\s+COURSES?\s*$"
        )
        self.attempted = re.compile(
            rf"^\s*{re.escape(p.attempted_label)}\s*(?P<attempted>{NUMBER})\s+HOURS"
            rf"\s+(?P<points>{NUMBER})\s+POINTS\s+(?P<gpa>{NUMBER})\s+GPA\s*$"
        )

    # =========================================================================
    # Document
    # =========================================================================

    def parse(self, text: str) -> DocumentNode:
        """
        Parse a whole document.

        Raises:
            AuditSyntaxError: If a required section is missing or a
                multi-line construct is cut short
        """
        lines = text.splitlines()
        children: list[Node] = []
        has_graduation = False

        i = 0
        while i < len(lines):
            matched = self._match(lines, i)
            if matched is None:
                i += 1
                continue
            node, consumed = matched
            if isinstance(node, GraduationDateNode):
                has_graduation = True
            children.append(node)
            i += consumed

        end_line = len(lines) + 1
        if not has_graduation:
            raise AuditSyntaxError(
                f"expected '{self.profile.graduation_label}' section",
                line=end_line,
            )

        children.append(EndOfInputNode(line=end_line))
        return DocumentNode(line=1, children=tuple(children))

    def _match(self, lines: list[str], i: int) -> Optional[tuple[Node, int]]:
        """Recognize the construct starting at lines[i], if any."""
        line = lines[i]
        lineno = i + 1

        m = self.graduation.match(line)
        if m:
            date = DateNode(line=lineno, text=m.group("date"))
            return GraduationDateNode(line=lineno, label=m.group("label"), date=date), 1

        m = self.catalog.match(line)
        if m:
            year = CatalogNumberNode(line=lineno, text=m.group("year"))
            return CatalogNode(line=lineno, year=year), 1

        if self.major.match(line):
            text, consumed = self._block(lines, i)
            return MajorListNode(line=lineno, text=text), consumed

        if self.minor.match(line):
            text, consumed = self._block(lines, i)
            return MinorListNode(line=lineno, text=text), consumed

        m = self.earned.match(line)
        if m:
            return self._summary(lines, i, m), 2

        option = self._requirement(line, lineno)
        if option is not None:
            return CourseOptionNode(line=lineno, option=option), 1

        return None

    # =========================================================================
    # Constructs
    # =========================================================================

    def _block(self, lines: list[str], i: int) -> tuple[str, int]:
        """A header line plus the indented lines that continue it."""
        block = [lines[i]]
        j = i + 1
        while j < len(lines):
            line = lines[j]
            if not line.strip() or not line[0].isspace() or self._starts_construct(line):
                break
            block.append(line)
            j += 1
        return "\n".join(block), len(block)

    def _starts_construct(self, line: str) -> bool:
        return any(
            pattern.match(line)
            for pattern in (
                self.graduation,
                self.catalog,
                self.major,
                self.minor,
                self.earned,
                self.nupath,
                self.course_list,
                self.course,
                self.heading,
            )
        )

    def _summary(self, lines: list[str], i: int, earned: re.Match) -> SummaryNode:
        lineno = i + 1
        following = lines[i + 1] if i + 1 < len(lines) else ""
        attempted = self.attempted.match(following)
        if attempted is None:
            raise AuditSyntaxError(
                f"expected '{self.profile.attempted_label}' line to complete summary",
                line=lineno + 1,
            )
        return SummaryNode(
            line=lineno,
            earned_hours=earned.group("earned"),
            courses_taken=earned.group("courses"),
            attempted_hours=attempted.group("attempted"),
            quality_points=attempted.group("points"),
            gpa=attempted.group("gpa"),
        )

    def _requirement(self, line: str, lineno: int) -> Optional[Node]:
        """NUPath line, course list, or course line."""
        m = self.nupath.match(line)
        if m:
            tokens = []
            if m.group("status"):
                tokens.append(Token(TokenKind.STATUS, m.group("status"), m.start("status") + 1))
            tokens.append(Token(TokenKind.NUPATH_ID, m.group("code"), m.start("code") + 1))
            return NUPathNode(line=lineno, tokens=tuple(tokens))

        m = self.course_list.match(line)
        if m:
            return CourseListNode(line=lineno, items=self._list_items(m.group("body")))

        m = self.course.match(line)
        if m:
            return CourseNode(
                line=lineno,
                year_code=m.group("year"),
                subject=m.group("subject"),
                number=m.group("number"),
                credits=m.group("credits"),
                name=m.group("name"),
                modifier=m.group("modifier") or "",
            )

        return None

    def _list_items(self, body: str) -> tuple[ListItem, ...]:
        items: list[ListItem] = []
        for m in self.list_item.finditer(body):
            if m.group("connector"):
                continue
            if m.group("range"):
                items.append(RangeToken(m.group("range")))
            else:
                items.append(CourseRefToken(subject=m.group("subject"), number=m.group("number")))
        return tuple(items)


# Compiled grammars, keyed by profile
_grammars: dict[FormatProfile, AuditGrammar] = {}


def get_grammar(profile: FormatProfile = None) -> AuditGrammar:
    """Get the compiled grammar for a profile (default profile if None)."""
    profile = profile or get_profile()
    if profile not in _grammars:
        _grammars[profile] = AuditGrammar(profile)
    return _grammars[profile]


def parse_document(text: str, profile: FormatProfile = None) -> DocumentNode:
    """
    Parse raw audit text into a DocumentNode.

    Args:
        text: The full audit export
        profile: Format profile (default profile if None)

    Raises:
        AuditSyntaxError: If the text does not conform to the grammar
    """
    return get_grammar(profile).parse(text)
