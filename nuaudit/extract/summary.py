"""
Summary Extractor — The totals block to SummaryStatistics.

These fields are always well-formed in a valid export; a value
that fails to convert aborts the whole parse.
"""

from typing import Callable, Union

from nuaudit.grammar.nodes import SummaryNode
from nuaudit.ir.schema import SummaryStatistics


def _convert(node: SummaryNode, field: str, convert: Callable[[str], Union[int, float]]):
    raw = getattr(node, field)
    try:
        return convert(raw)
    except ValueError as e:
        raise ValueError(f"Summary {field} is not numeric on line {node.line}: {raw!r}") from e


def extract_summary(node: SummaryNode) -> SummaryStatistics:
    """
    Convert the summary block's fields.

    Raises:
        ValueError: If any field is not numeric
    """
    return SummaryStatistics(
        earned_hours=_convert(node, "earned_hours", float),
        attempted_hours=_convert(node, "attempted_hours", float),
        quality_points=_convert(node, "quality_points", float),
        gpa=_convert(node, "gpa", float),
        courses_taken=_convert(node, "courses_taken", int),
    )
