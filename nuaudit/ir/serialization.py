"""
IR Serialization — JSON import/export for parsed audits.
"""

from pathlib import Path
from typing import Union

from nuaudit.ir.schema import AuditReport, AuditResult


def to_json(result: AuditResult, indent: int = 2) -> str:
    """Serialize an AuditResult to JSON string."""
    return result.model_dump_json(indent=indent, by_alias=True)


def from_json(json_str: str) -> AuditResult:
    """Deserialize an AuditResult from JSON string."""
    return AuditResult.model_validate_json(json_str)


def report_to_json(report: AuditReport, indent: int = 2) -> str:
    """Serialize a full AuditReport, diagnostics and trace included."""
    return report.model_dump_json(indent=indent, by_alias=True)


def save(result: AuditResult, path: Union[str, Path]) -> None:
    """Save an AuditResult to a JSON file."""
    path = Path(path)
    path.write_text(to_json(result))


def load(path: Union[str, Path]) -> AuditResult:
    """Load an AuditResult from a JSON file."""
    path = Path(path)
    return from_json(path.read_text())
