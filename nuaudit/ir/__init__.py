"""
IR — Intermediate Representation

The typed record of what an audit states. JSON output is a
rendering of the IR.
"""

from nuaudit.ir.enums import (
    AuditStatus,
    CompletionStatus,
    DiagnosticLevel,
    NUPathCategory,
    Season,
    UnknownCodeError,
)
from nuaudit.ir.schema import (
    AuditReport,
    AuditResult,
    CourseRecord,
    Diagnostic,
    PrerequisiteEntry,
    SummaryStatistics,
    TraceEntry,
)
from nuaudit.ir.terms import term_id

__all__ = [
    # Enums
    "AuditStatus",
    "CompletionStatus",
    "DiagnosticLevel",
    "NUPathCategory",
    "Season",
    "UnknownCodeError",
    # Models
    "AuditReport",
    "AuditResult",
    "CourseRecord",
    "Diagnostic",
    "PrerequisiteEntry",
    "SummaryStatistics",
    "TraceEntry",
    # Codec
    "term_id",
]
