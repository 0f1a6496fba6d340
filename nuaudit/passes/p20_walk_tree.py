"""
Pass 20 — Tree Walk

Walks the parse tree in document order and routes every node to
its extractor, accumulating the AuditResult on the context.

Wrappers (graduation date, catalog, course option) are descended
and their inner node re-dispatched. NUPath lines that cannot be
classified are dropped with a warning; everything else that fails
to convert aborts the run.
"""

from datetime import datetime
from typing import Callable

from nuaudit.core.context import AuditContext
from nuaudit.core.logging import get_pass_logger
from nuaudit.extract import (
    extract_course,
    extract_course_list,
    extract_nupath,
    extract_summary,
)
from nuaudit.grammar.nodes import (
    CatalogNode,
    CatalogNumberNode,
    CourseListNode,
    CourseNode,
    CourseOptionNode,
    DateNode,
    GraduationDateNode,
    MajorListNode,
    MinorListNode,
    Node,
    NUPathNode,
    SummaryNode,
    TokenKind,
)

PASS_NAME = "p20_walk_tree"
log = get_pass_logger(PASS_NAME)


class TreeWalker:
    """Dispatches parse tree nodes into one AuditContext's result."""

    def __init__(self, ctx: AuditContext):
        self.ctx = ctx
        self.result = ctx.result
        self.profile = ctx.profile
        self.dropped = 0
        self._handlers: dict[type, Callable[[Node], None]] = {
            GraduationDateNode: self._graduation_date,
            CatalogNode: self._catalog,
            MajorListNode: self._major_list,
            MinorListNode: self._minor_list,
            DateNode: self._date,
            CatalogNumberNode: self._catalog_number,
            CourseOptionNode: self._course_option,
            NUPathNode: self._nupath,
            CourseListNode: self._course_list,
            CourseNode: self._course,
            SummaryNode: self._summary,
        }

    def dispatch(self, node: Node) -> None:
        handler = self._handlers.get(type(node))
        if handler is None:
            log.verbose("node_skipped", kind=type(node).__name__, line=node.line)
            return
        handler(node)

    # =========================================================================
    # Wrappers
    # =========================================================================

    def _graduation_date(self, node: GraduationDateNode) -> None:
        # The label is literal text; only the date carries data
        self.dispatch(node.date)

    def _catalog(self, node: CatalogNode) -> None:
        self.dispatch(node.year)

    def _course_option(self, node: CourseOptionNode) -> None:
        self.dispatch(node.option)

    # =========================================================================
    # Sections
    # =========================================================================

    def _names(self, text: str, label: str) -> list[str]:
        """Name lines of a major/minor block, header label stripped."""
        names = []
        for line in text.split("\n"):
            line = line.strip()
            if line.startswith(label):
                line = line[len(label):].strip()
            if line:
                names.append(line)
        return names

    def _major_list(self, node: MajorListNode) -> None:
        self.result.majors.extend(self._names(node.text, self.profile.major_label))

    def _minor_list(self, node: MinorListNode) -> None:
        self.result.minors.extend(self._names(node.text, self.profile.minor_label))

    def _date(self, node: DateNode) -> None:
        try:
            parsed = datetime.strptime(node.text, self.profile.date_format)
        except ValueError as e:
            raise ValueError(f"Invalid graduation date on line {node.line}: {node.text!r}") from e
        self.result.grad_date = parsed.date()

    def _catalog_number(self, node: CatalogNumberNode) -> None:
        self.result.audit_year = int(node.text)

    # =========================================================================
    # Requirements
    # =========================================================================

    def _nupath(self, node: NUPathNode) -> None:
        status, category = extract_nupath(node)
        if status is None or category is None:
            raw = {token.kind: token.text for token in node.tokens}
            column = node.tokens[0].column if node.tokens else None
            self.dropped += 1
            log.warning(
                "nupath_entry_dropped",
                line=node.line,
                status=raw.get(TokenKind.STATUS),
                category=raw.get(TokenKind.NUPATH_ID),
            )
            self.ctx.add_diagnostic(
                level="warning",
                code="NUPATH_DROPPED",
                message=(
                    f"NUPath entry needs a known status and category, got "
                    f"status={raw.get(TokenKind.STATUS)!r} category={raw.get(TokenKind.NUPATH_ID)!r}"
                ),
                source=PASS_NAME,
                line=node.line,
                column=column,
            )
            return
        self.result.nupath_bucket(status).append(category)

    def _course_list(self, node: CourseListNode) -> None:
        self.result.required_courses.extend(extract_course_list(node))

    def _course(self, node: CourseNode) -> None:
        course, in_progress = extract_course(node, self.profile)
        if in_progress:
            self.result.ip_courses.append(course)
        else:
            self.result.complete_courses.append(course)

    def _summary(self, node: SummaryNode) -> None:
        self.result.summary = extract_summary(node)


def walk_tree(ctx: AuditContext) -> AuditContext:
    """
    Populate ctx.result from ctx.tree.

    Raises:
        RuntimeError: If no parse tree has been built
        ValueError: If a date, catalog year, or summary value fails to convert
    """
    if ctx.tree is None:
        raise RuntimeError("No parse tree on context. Run p10_parse_tree first.")

    walker = TreeWalker(ctx)
    for node in ctx.tree.children:
        walker.dispatch(node)

    result = ctx.result
    log.info(
        "tree_walked",
        majors=len(result.majors),
        complete_courses=len(result.complete_courses),
        ip_courses=len(result.ip_courses),
        required_courses=len(result.required_courses),
        dropped=walker.dropped,
    )

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="walked",
        complete_courses=len(result.complete_courses),
        ip_courses=len(result.ip_courses),
        required_courses=len(result.required_courses),
        dropped=walker.dropped,
    )
    return ctx
