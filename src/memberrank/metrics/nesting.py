"""Maximum nesting depth of control-flow constructs.

The depth of a node is the length of the longest chain of enlarging
constructs nested inside one another below it:

    depth(leaf) = 0
    depth(node) = max(depth(c) + [c is enlarging] for c in node.children)

The increment belongs to the child being entered, so ten sibling ``if``
statements give depth 1 while ``if { if { while { } } }`` gives 3.
"""

from __future__ import annotations

from collections.abc import Collection

from ..scanning.kinds import NESTING_ENLARGER_KINDS, NodeKind
from ..scanning.syntax import SyntaxNode


def nesting_depth(
    node: SyntaxNode, enlargers: Collection[NodeKind] = NESTING_ENLARGER_KINDS
) -> int:
    """Compute the nesting depth of ``node``.

    Evaluated as a post-order fold over an explicit stack, so the result
    does not depend on the interpreter's recursion limit.

    Args:
        node: Root of the subtree to measure
        enlargers: Kinds that add one level when entered

    Returns:
        Non-negative depth; 0 for a leaf
    """
    depths: dict[int, int] = {}
    stack: list[tuple[SyntaxNode, bool]] = [(node, False)]

    while stack:
        current, expanded = stack.pop()
        if not expanded:
            stack.append((current, True))
            stack.extend((child, False) for child in current.children)
            continue

        best = 0
        for child in current.children:
            depth = depths[id(child)] + (1 if child.kind in enlargers else 0)
            if depth > best:
                best = depth
        depths[id(current)] = best

    return depths[id(node)]
