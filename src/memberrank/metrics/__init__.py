"""Per-member metrics: pure functions from a syntax node to a score."""

from enum import Enum

from ..scanning.syntax import SyntaxNode
from .nesting import nesting_depth
from .statements import counted_statement_kinds, statement_count


class Metric(str, Enum):
    """Metrics a member can be ranked by."""

    STATEMENTS = "statements"
    NESTING = "nesting"


def compute(metric: Metric, node: SyntaxNode, count_compound: bool = False) -> int:
    """Score ``node`` with ``metric``."""
    if metric is Metric.NESTING:
        return nesting_depth(node)
    return statement_count(node, counted_statement_kinds(count_compound))


__all__ = [
    "Metric",
    "compute",
    "nesting_depth",
    "statement_count",
    "counted_statement_kinds",
]
