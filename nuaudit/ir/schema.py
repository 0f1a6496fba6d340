"""
IR Schema — Pydantic models for the parsed audit.

Field names are the JSON names. List order is document order.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from nuaudit.ir.enums import (
    AuditStatus,
    CompletionStatus,
    DiagnosticLevel,
    NUPathCategory,
    Season,
)
from nuaudit.ir.terms import term_id as encode_term_id

SCHEMA_VERSION = "0.1.0"


class CourseRecord(BaseModel):
    """
    A completed or in-progress course line.

    Two records are the same course when number, subject, term and
    name agree; honors and credit hours do not affect identity.
    """

    subject: str = Field(..., description="Subject code, e.g. CS")
    hon: bool = Field(default=False, description="True if taken for honors credit")
    class_id: int = Field(..., description="Course number, e.g. 2500")
    name: str = Field(..., description="Display name as printed in the audit")
    credit_hours: float = Field(..., ge=0.0, description="Credit hours")
    season: Season = Field(..., description="Term season")
    year: int = Field(..., ge=2000, le=2099, description="Calendar year of the term")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def term_id(self) -> int:
        """Registrar term ID, always derived from season and year."""
        return encode_term_id(self.season, self.year % 100)

    def identity_key(self) -> tuple[int, str, int, str]:
        return (self.class_id, self.subject, self.term_id, self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CourseRecord):
            return NotImplemented
        return self.identity_key() == other.identity_key()

    def __hash__(self) -> int:
        return hash(self.identity_key())


class PrerequisiteEntry(BaseModel):
    """One entry of a still-required course list."""

    # JSON names the alternatives "list"
    model_config = ConfigDict(populate_by_name=True)

    subject: Optional[str] = Field(None, description="Subject, inherited within a list when omitted")
    class_id: int = Field(..., description="Course number, or start of a range")
    class_id_2: Optional[int] = Field(None, description="End of an 'X to Y' course range")
    alternatives: list[int] = Field(
        default_factory=list,
        alias="list",
        description="Alternative course numbers",
    )


class SummaryStatistics(BaseModel):
    """Totals from the audit's summary block."""

    earned_hours: float = 0.0
    attempted_hours: float = 0.0
    quality_points: float = 0.0
    gpa: float = 0.0
    courses_taken: int = 0


class AuditResult(BaseModel):
    """
    The parsed audit.

    Every NUPath line and course line lands in exactly one of the
    complete / in-progress / required buckets.
    """

    majors: list[str] = Field(default_factory=list)
    minors: list[str] = Field(default_factory=list)
    audit_year: Optional[int] = Field(None, description="Catalog year the audit runs against")
    grad_date: Optional[date] = Field(None, description="Expected graduation date")

    complete_nupaths: list[NUPathCategory] = Field(default_factory=list)
    ip_nupaths: list[NUPathCategory] = Field(default_factory=list)
    required_nupaths: list[NUPathCategory] = Field(default_factory=list)

    complete_courses: list[CourseRecord] = Field(default_factory=list)
    ip_courses: list[CourseRecord] = Field(default_factory=list)
    required_courses: list[PrerequisiteEntry] = Field(default_factory=list)

    summary: SummaryStatistics = Field(default_factory=SummaryStatistics)

    def nupath_bucket(self, status: CompletionStatus) -> list[NUPathCategory]:
        """The NUPath list that collects entries with this status."""
        return {
            CompletionStatus.COMPLETED: self.complete_nupaths,
            CompletionStatus.IN_PROGRESS: self.ip_nupaths,
            CompletionStatus.REQUIRED: self.required_nupaths,
        }[status]


# ============================================================================
# Pipeline Records
# ============================================================================

class TraceEntry(BaseModel):
    """A single pipeline trace entry."""

    id: str
    timestamp: datetime
    pass_name: str
    action: str
    counts: dict[str, int] = Field(default_factory=dict)


class Diagnostic(BaseModel):
    """A diagnostic message, located in the source text where possible."""

    id: str
    level: DiagnosticLevel
    code: str
    message: str
    source: str
    line: Optional[int] = Field(None, description="1-based source line")
    column: Optional[int] = Field(None, description="1-based source column")


class AuditReport(BaseModel):
    """The complete output of an engine run."""

    version: str = Field(default=SCHEMA_VERSION, description="Schema version")
    request_id: str = Field(..., description="Unique parse ID")
    timestamp: datetime = Field(..., description="When the parse started")
    processing_duration_ms: float = Field(default=0.0)

    status: AuditStatus = Field(default=AuditStatus.SUCCESS)
    result: Optional[AuditResult] = Field(None, description="Absent when the parse failed")

    diagnostics: list[Diagnostic] = Field(default_factory=list)
    trace: list[TraceEntry] = Field(default_factory=list)
