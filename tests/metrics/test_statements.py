"""Tests for metrics/statements.py - statement count."""

import pytest

from memberrank.metrics import Metric, compute
from memberrank.metrics.statements import counted_statement_kinds, statement_count
from memberrank.scanning.kinds import (
    COMPOUND_STATEMENT_KINDS,
    EXECUTABLE_STATEMENT_KINDS,
    SIMPLE_STATEMENT_KINDS,
    NodeKind,
)


class TestStatementCount:
    """Default counting: simple statements only."""

    def test_leaf_without_statement(self, build):
        """A leaf that is not a statement counts 0."""
        assert statement_count(build.leaf()) == 0

    def test_scenario_a(self, scenario_a_method):
        """Three plain statements count 3."""
        assert statement_count(scenario_a_method) == 3

    def test_scenario_b(self, scenario_b_method):
        """Only the innermost statement of if/if/while counts."""
        assert statement_count(scenario_b_method) == 1

    def test_nested_statements_count_once(self, build):
        """A statement deep inside control flow counts exactly once."""
        body = build.stmt()
        for _ in range(10):
            body = build.wrap(NodeKind.IF_STATEMENT, body)
        assert statement_count(build.method(body, build.stmt())) == 2

    def test_blocks_are_transparent(self, build):
        """Wrapping statements in extra blocks does not change the count."""
        flat = build.method(build.stmt(), build.stmt())
        wrapped = build.method(build.block(build.block(build.stmt()), build.stmt()))
        assert statement_count(flat) == statement_count(wrapped) == 2

    def test_empty_method(self, build):
        """An empty body counts 0."""
        assert statement_count(build.method()) == 0

    def test_statement_root_counts_itself(self, build):
        """The root is part of the subtree it measures."""
        assert statement_count(build.stmt()) == 1

    def test_statement_inside_expression(self, build):
        """Statements inside a lambda body are found through the expression."""
        lam = build.node(
            NodeKind.PARENTHESIZED_LAMBDA_EXPRESSION,
            build.leaf(),
            build.block(build.stmt(), build.stmt()),
        )
        decl = build.node(
            NodeKind.LOCAL_DECLARATION_STATEMENT, build.node(NodeKind.OTHER, lam)
        )
        assert statement_count(build.method(decl)) == 3

    @pytest.mark.parametrize("kind", sorted(SIMPLE_STATEMENT_KINDS, key=lambda k: k.value))
    def test_each_simple_kind_counts(self, build, kind):
        """Every simple statement kind scores a point."""
        assert statement_count(build.method(build.node(kind))) == 1


class TestCompoundCounting:
    """Counting with compound statements included."""

    def test_default_excludes_compound(self):
        """By default compound statements are not counted."""
        assert counted_statement_kinds() == SIMPLE_STATEMENT_KINDS
        assert not (counted_statement_kinds() & COMPOUND_STATEMENT_KINDS)

    def test_compound_set_excludes_block(self):
        """The full set still leaves blocks out."""
        kinds = counted_statement_kinds(count_compound=True)
        assert kinds == EXECUTABLE_STATEMENT_KINDS
        assert NodeKind.BLOCK not in kinds

    def test_scenario_b_with_compound(self, scenario_b_method):
        """if, if, while and the statement make four."""
        kinds = counted_statement_kinds(count_compound=True)
        assert statement_count(scenario_b_method, kinds) == 4

    def test_block_never_counts(self, build):
        """Even when passed explicitly, blocks are skipped."""
        tree = build.method(build.block(build.stmt()))
        assert statement_count(tree, {NodeKind.BLOCK, NodeKind.EXPRESSION_STATEMENT}) == 1


class TestCompute:
    """Metric dispatch."""

    def test_compute_dispatches(self, scenario_b_method):
        """compute() routes to the matching metric."""
        assert compute(Metric.NESTING, scenario_b_method) == 3
        assert compute(Metric.STATEMENTS, scenario_b_method) == 1
        assert compute(Metric.STATEMENTS, scenario_b_method, count_compound=True) == 4

    def test_metric_values(self):
        """Metric names are the CLI spellings."""
        assert Metric("statements") is Metric.STATEMENTS
        assert Metric("nesting") is Metric.NESTING
