"""
Pass 10 — Parse Tree

Runs the audit grammar over the raw text and stores the
resulting DocumentNode on the context.

A document the grammar rejects ends the run here.
"""

from collections import Counter

from nuaudit.core.context import AuditContext
from nuaudit.core.logging import get_pass_logger
from nuaudit.grammar.nodes import CourseOptionNode
from nuaudit.grammar.parser import parse_document

PASS_NAME = "p10_parse_tree"
log = get_pass_logger(PASS_NAME)


def parse_tree(ctx: AuditContext) -> AuditContext:
    """
    Build the parse tree.

    Raises:
        AuditSyntaxError: If the text does not conform to the grammar
    """
    log.verbose("starting_parse", input_chars=len(ctx.raw_text), profile=ctx.profile.name)

    ctx.tree = parse_document(ctx.raw_text, ctx.profile)

    kinds = Counter(
        type(node.option if isinstance(node, CourseOptionNode) else node).__name__
        for node in ctx.tree.children
    )
    log.info("tree_built", nodes=len(ctx.tree.children), **kinds)

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="parsed",
        nodes=len(ctx.tree.children),
    )
    return ctx
