import pytest

from nuaudit.core.context import AuditContext, AuditRequest
from nuaudit.grammar.profile import clear_cache

# A full export: noise lines, a repeated course, an honors course,
# an in-progress course, ranges, and the summary block.
SAMPLE_AUDIT = """\
Northeastern University Degree Audit
Prepared: 09/15/21

Graduation Date: 05/01/22
CATALOG YEAR: 2018

Major: Computer Science
       Mathematics
Minor: Music

OK NUpath Natural/Designed World (ND)
IP NUpath Writing Intensive (WI)
NO NUpath Capstone Experience (CE)

OK  FOUNDATIONS OF COMPUTER SCIENCE
    FL18 CS 2500 4.00 A  FUNDAMENTALS OF CS 1
    FL18 CS 2500 4.00 A  FUNDAMENTALS OF CS 1
    SP19 CS 2510 4.00 A- FUNDAMENTALS OF CS 2  (HON)
    FL21 CS 4500 4.00 SOFTWARE DEVELOPMENT  IP

NO  ALGORITHMS
    SELECT FROM: CS 3800 TO 3810, 4800
    SELECT FROM: MATH 1341, 1342

EARNED: 64.00 HOURS 17 COURSES
ATTEMPTED: 68.00 HOURS 240.50 POINTS 3.537 GPA
"""

MINIMAL_AUDIT = """\
Graduation Date: 05/01/22
OK NUpath Formal/Quantitative Reasoning (FQ)
    SP21 MATH 1341 4.00 A  CALCULUS 1
EARNED: 4.00 HOURS 1 COURSES
ATTEMPTED: 4.00 HOURS 16.00 POINTS 4.000 GPA
"""

UNKNOWN_NUPATH_AUDIT = """\
Graduation Date: 05/01/22
OK NUpath Mystery Requirement (ZZ)
"""

NO_GRADUATION_AUDIT = """\
CATALOG YEAR: 2018
OK NUpath Natural/Designed World (ND)
EARNED: 4.00 HOURS 1 COURSES
ATTEMPTED: 4.00 HOURS 16.00 POINTS 4.000 GPA
"""


@pytest.fixture
def sample_audit() -> str:
    return SAMPLE_AUDIT


@pytest.fixture
def minimal_audit() -> str:
    return MINIMAL_AUDIT


@pytest.fixture
def unknown_nupath_audit() -> str:
    return UNKNOWN_NUPATH_AUDIT


@pytest.fixture
def no_graduation_audit() -> str:
    return NO_GRADUATION_AUDIT


@pytest.fixture
def make_context():
    """Build a fresh AuditContext for a piece of audit text."""
    def _make(text: str) -> AuditContext:
        return AuditContext.from_request(AuditRequest(text=text))
    return _make


@pytest.fixture(autouse=True)
def default_profile(monkeypatch):
    """Every test runs against the bundled profile with a clean cache."""
    monkeypatch.delenv("NUAUDIT_PROFILE", raising=False)
    clear_cache()
    yield
    clear_cache()
