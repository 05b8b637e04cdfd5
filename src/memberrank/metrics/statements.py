"""Statement count: how many statements a subtree holds, at any depth."""

from __future__ import annotations

from collections.abc import Collection

from ..scanning.kinds import EXECUTABLE_STATEMENT_KINDS, SIMPLE_STATEMENT_KINDS, NodeKind
from ..scanning.syntax import SyntaxNode, iter_nodes


def statement_count(
    node: SyntaxNode, counted: Collection[NodeKind] = SIMPLE_STATEMENT_KINDS
) -> int:
    """Count the statements in the subtree rooted at ``node``.

    Every node of the subtree is visited, counted ones included, so
    statements nested inside other statements are found. Blocks are never
    counted.

    Args:
        node: Root of the subtree to measure
        counted: Statement kinds that score a point

    Returns:
        Number of counted statements; 0 for a leaf without a counted kind
    """
    return sum(
        1
        for current in iter_nodes(node)
        if current.kind in counted and current.kind is not NodeKind.BLOCK
    )


def counted_statement_kinds(count_compound: bool = False) -> frozenset[NodeKind]:
    """Kinds scored by statement_count.

    Compound statements (if, while, try, ...) only score when
    ``count_compound`` is set; otherwise the statements inside them do.
    """
    return EXECUTABLE_STATEMENT_KINDS if count_compound else SIMPLE_STATEMENT_KINDS
