"""Syntax tree model shared by the parser, extractor and metrics.

A SyntaxNode tree is built once per file by the normalizer and never
mutated afterwards, so worker threads can walk trees without locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .kinds import NodeKind


@dataclass(frozen=True)
class Location:
    """Where a node starts.

    Attributes:
        file: Path of the source file the node was parsed from
        line: Starting line number (1-indexed)
    """

    file: str
    line: int


@dataclass(frozen=True, eq=False)
class SyntaxNode:
    """An immutable syntax tree node.

    Attributes:
        kind: Kind tag from the closed NodeKind vocabulary
        children: Ordered child nodes
        location: File and first line of the node
        type_name: Grammar node type the node was normalized from
    """

    kind: NodeKind
    children: tuple[SyntaxNode, ...] = field(default=(), repr=False)
    location: Location = field(default_factory=lambda: Location("", 1))
    type_name: str = ""

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def file(self) -> str:
        return self.location.file

    @property
    def line(self) -> int:
        return self.location.line

    def descendants(self) -> Iterator[SyntaxNode]:
        """Yield every node below this one in document order (self excluded)."""
        stack = list(reversed(self.children))
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))


def iter_nodes(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield ``node`` and then all of its descendants in document order."""
    yield node
    yield from node.descendants()
