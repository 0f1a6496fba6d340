"""
nuaudit — Degree-audit transformation engine

Turns a plain-text degree-audit export into a typed, JSON-ready
record of majors, courses, NUPath requirements and academic totals.

The audit states what it states. nuaudit extracts; it does not judge.
"""

__version__ = "0.1.0"
__schema_version__ = "0.1.0"

from nuaudit.core.engine import AuditParseError, parse_audit, parse_audit_json  # noqa: E402

__all__ = [
    "AuditParseError",
    "parse_audit",
    "parse_audit_json",
]
