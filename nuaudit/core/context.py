"""
AuditContext — Mutable state passed between pipeline passes.

Each pass reads prior artifacts and mutates only its allowed fields.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from nuaudit.grammar.nodes import DocumentNode
from nuaudit.grammar.profile import FormatProfile, get_profile
from nuaudit.ir.enums import AuditStatus, DiagnosticLevel
from nuaudit.ir.schema import AuditReport, AuditResult, Diagnostic, TraceEntry


@dataclass
class AuditRequest:
    """Input to the parsing pipeline."""

    text: str
    request_id: Optional[str] = None
    profile: Optional[str] = None  # Bundled profile name or YAML path
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.request_id is None:
            self.request_id = str(uuid4())


@dataclass
class AuditContext:
    """
    Mutable context passed through pipeline passes.

    Each pass may read all fields but should only mutate
    the fields it is responsible for.
    """

    # Input
    request: AuditRequest
    raw_text: str
    profile: FormatProfile = field(default_factory=FormatProfile)

    # Parse tree (set by p10_parse_tree)
    tree: Optional[DocumentNode] = None

    # Accumulator (populated by p20_walk_tree)
    result: AuditResult = field(default_factory=AuditResult)

    # Trace and diagnostics
    trace: list[TraceEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    status: AuditStatus = AuditStatus.SUCCESS

    # Internal
    start_time: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_request(cls, request: AuditRequest) -> "AuditContext":
        """Create a context from a request, resolving its format profile."""
        return cls(
            request=request,
            raw_text=request.text,
            profile=get_profile(request.profile),
        )

    def add_trace(self, pass_name: str, action: str, **counts: int) -> None:
        """Add a trace entry."""
        self.trace.append(
            TraceEntry(
                id=str(uuid4()),
                timestamp=datetime.now(),
                pass_name=pass_name,
                action=action,
                counts=counts,
            )
        )

    def add_diagnostic(
        self,
        level: str,
        code: str,
        message: str,
        source: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        """Add a diagnostic message."""
        self.diagnostics.append(
            Diagnostic(
                id=str(uuid4()),
                level=DiagnosticLevel(level),
                code=code,
                message=message,
                source=source,
                line=line,
                column=column,
            )
        )

    def has_diagnostics(self, level: DiagnosticLevel) -> bool:
        return any(d.level == level for d in self.diagnostics)

    def to_report(self) -> AuditReport:
        """Convert context to the final AuditReport. Failed runs carry no result."""
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        return AuditReport(
            request_id=self.request.request_id or str(uuid4()),
            timestamp=self.start_time,
            processing_duration_ms=duration_ms,
            status=self.status,
            result=None if self.status == AuditStatus.ERROR else self.result,
            diagnostics=self.diagnostics,
            trace=self.trace,
        )
