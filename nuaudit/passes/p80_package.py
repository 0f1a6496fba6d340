"""
Pass 80 — Packaging

Sets the final status from the diagnostics gathered along the way.
"""

from nuaudit.core.context import AuditContext
from nuaudit.core.logging import get_pass_logger
from nuaudit.ir.enums import AuditStatus, DiagnosticLevel

PASS_NAME = "p80_package"
log = get_pass_logger(PASS_NAME)


def package(ctx: AuditContext) -> AuditContext:
    """
    Package the final output.

    A successful run that dropped entries is PARTIAL.
    """
    result = ctx.result

    if ctx.status == AuditStatus.SUCCESS and ctx.has_diagnostics(DiagnosticLevel.WARNING):
        ctx.status = AuditStatus.PARTIAL

    log.verbose(
        "packaged",
        status=ctx.status.value,
        majors=len(result.majors),
        minors=len(result.minors),
        complete_courses=len(result.complete_courses),
        ip_courses=len(result.ip_courses),
        required_courses=len(result.required_courses),
        diagnostics=len(ctx.diagnostics),
    )

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="packaged",
        diagnostics=len(ctx.diagnostics),
    )
    return ctx
