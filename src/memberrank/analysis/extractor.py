"""Member extraction: finds the function-like members of a syntax tree.

A member counts as a function when it sits directly inside a class, struct
or record (interfaces are skipped) and contains at least one statement other
than a block somewhere below it. That admits methods, constructors,
properties and operators with bodies, and leaves out fields, abstract or
expression-bodied members and empty methods.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..scanning.kinds import EXECUTABLE_STATEMENT_KINDS, TYPE_DECLARATION_KINDS, NodeKind
from ..scanning.syntax import SyntaxNode, iter_nodes


def is_member_container(node: SyntaxNode) -> bool:
    """True for type declarations whose members are scanned."""
    return node.kind in TYPE_DECLARATION_KINDS and node.kind is not NodeKind.INTERFACE_DECLARATION


def has_executable_statement(node: SyntaxNode) -> bool:
    """True if some node below ``node`` is a statement other than a block."""
    return any(d.kind in EXECUTABLE_STATEMENT_KINDS for d in node.descendants())


def extract_members(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield the function-like members below ``root`` in document order.

    Nested types are scanned for their own members; a nested type holding
    statements is also yielded as a member of its enclosing type.
    """
    for node in iter_nodes(root):
        if not is_member_container(node):
            continue
        for member in node.children:
            if has_executable_statement(member):
                yield member
