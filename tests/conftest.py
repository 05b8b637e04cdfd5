"""Shared fixtures for memberrank tests: hand-built syntax trees."""

import pytest

from memberrank.scanning.kinds import NodeKind
from memberrank.scanning.syntax import Location, SyntaxNode


class TreeBuilder:
    """Builds small SyntaxNode trees without going through the parser."""

    def __init__(self, file="Sample.cs"):
        self.file = file

    def node(self, kind, *children, line=1, file=None):
        """A node of ``kind``; children are given positionally."""
        return SyntaxNode(
            kind=kind,
            children=tuple(children),
            location=Location(file or self.file, line),
            type_name=kind.value,
        )

    def leaf(self):
        return self.node(NodeKind.OTHER)

    def stmt(self, line=1, file=None):
        """A single expression statement."""
        return self.node(NodeKind.EXPRESSION_STATEMENT, self.leaf(), line=line, file=file)

    def block(self, *children):
        return self.node(NodeKind.BLOCK, *children)

    def wrap(self, kind, body):
        """Wrap ``body`` in a construct of ``kind`` with a condition and a block."""
        return self.node(kind, self.leaf(), self.block(body))

    def method(self, *body, line=1, file=None):
        """A method declaration whose body block holds ``body``."""
        return self.node(
            NodeKind.METHOD_DECLARATION,
            self.leaf(),
            self.leaf(),
            self.block(*body),
            line=line,
            file=file,
        )

    def class_decl(self, *members, kind=NodeKind.CLASS_DECLARATION, line=1, file=None):
        return self.node(kind, self.leaf(), *members, line=line, file=file)

    def unit(self, *types, file=None):
        return self.node(NodeKind.COMPILATION_UNIT, *types, file=file)


@pytest.fixture
def build():
    """Tree builder for hand-made syntax trees."""
    return TreeBuilder()


@pytest.fixture
def scenario_a_method(build):
    """A method with three plain statements and no control flow."""
    return build.method(build.stmt(), build.stmt(), build.stmt())


@pytest.fixture
def scenario_b_method(build):
    """A method holding if (a) { if (b) { while (c) { stmt; } } }."""
    inner_while = build.wrap(NodeKind.WHILE_STATEMENT, build.stmt())
    inner_if = build.wrap(NodeKind.IF_STATEMENT, inner_while)
    return build.method(build.wrap(NodeKind.IF_STATEMENT, inner_if))
