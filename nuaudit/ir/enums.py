"""
IR Enums — Seasons, statuses, NUPath codes, and pipeline codes.

No stringly-typed constants scattered across extractors.
"""

from enum import Enum


class UnknownCodeError(ValueError):
    """Raised when an audit code is not a member of a closed enumeration."""

    def __init__(self, kind: str, code: str):
        self.kind = kind
        self.code = code
        super().__init__(f"Unknown {kind} code: {code!r}")


# ============================================================================
# Audit Codes
# ============================================================================

class Season(str, Enum):
    """
    Academic term season, keyed by the two-character audit code.

    The code is the first half of a packed year token: "FL18" is
    Fall of 2018, "S119" is Summer 1 of 2019.
    """

    FALL = "FL"
    SPRING = "SP"
    SUMMER1 = "S1"
    SUMMER2 = "S2"
    FULL_SUMMER = "SM"

    @classmethod
    def from_code(cls, code: str) -> "Season":
        """Parse a season from its exact two-character code."""
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodeError("season", code) from None


class CompletionStatus(str, Enum):
    """Whether a requirement is done, in progress, or still needed."""

    IN_PROGRESS = "IP"
    COMPLETED = "OK"
    REQUIRED = "NO"

    @classmethod
    def from_code(cls, code: str) -> "CompletionStatus":
        """Parse a status from the audit's status column."""
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodeError("status", code) from None


class NUPathCategory(str, Enum):
    """
    University-wide breadth requirements.

    Thirteen fixed codes. Equality is by code; there is no
    case-folding or fuzzy matching.
    """

    ND = "ND"
    EI = "EI"
    IC = "IC"
    FQ = "FQ"
    SI = "SI"
    AD = "AD"
    DD = "DD"
    ER = "ER"
    WF = "WF"
    WD = "WD"
    WI = "WI"
    EX = "EX"
    CE = "CE"

    @classmethod
    def from_code(cls, code: str) -> "NUPathCategory":
        """Parse a category from its exact two-letter code."""
        try:
            return cls(code)
        except ValueError:
            raise UnknownCodeError("NUPath", code) from None

    @property
    def label(self) -> str:
        """Human-readable requirement title."""
        return _NUPATH_LABELS[self]


_NUPATH_LABELS = {
    NUPathCategory.ND: "Natural/Designed World",
    NUPathCategory.EI: "Creative Expression/Innovation",
    NUPathCategory.IC: "Interpreting Culture",
    NUPathCategory.FQ: "Formal/Quantitative Reasoning",
    NUPathCategory.SI: "Societies/Institutions",
    NUPathCategory.AD: "Analyzing/Using Data",
    NUPathCategory.DD: "Difference/Diversity",
    NUPathCategory.ER: "Ethical Reasoning",
    NUPathCategory.WF: "First Year Writing",
    NUPathCategory.WD: "Advanced Writing in the Disciplines",
    NUPathCategory.WI: "Writing Intensive",
    NUPathCategory.EX: "Integration Experience",
    NUPathCategory.CE: "Capstone Experience",
}


# ============================================================================
# Pipeline
# ============================================================================

class DiagnosticLevel(str, Enum):
    """Severity of a diagnostic."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditStatus(str, Enum):
    """
    Outcome of a parse.

    PARTIAL means the result is usable but some entries were dropped.
    """

    SUCCESS = "success"
    PARTIAL = "partial"
    ERROR = "error"
