"""Ranking: orders scored members and keeps the top N.

Order is value descending, then file name, then line. The three keys make
the order total, so the ranked list is the same however the members were
discovered.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..scanning.syntax import SyntaxNode
from .models import ScoredResult, base_name


def to_result(member: SyntaxNode, value: int) -> ScoredResult:
    """Pair a member with its score, keeping only what the output needs."""
    return ScoredResult(file=base_name(member.file), line=member.line, value=value)


def rank(results: Iterable[ScoredResult], limit: int) -> list[ScoredResult]:
    """Sort ``results`` and keep the first ``limit`` entries.

    Args:
        results: Scored entries in any order
        limit: Maximum number of entries to return

    Returns:
        ``min(limit, len(results))`` entries in ranking order

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    return sorted(results, key=ScoredResult.sort_key)[:limit]


def rank_candidates(
    candidates: Iterable[tuple[SyntaxNode, int]], limit: int
) -> list[ScoredResult]:
    """Rank (member, value) pairs."""
    return rank((to_result(member, value) for member, value in candidates), limit)


def rank_members(
    members: Iterable[SyntaxNode], metric: Callable[[SyntaxNode], int], limit: int
) -> list[ScoredResult]:
    """Score ``members`` with ``metric`` and rank them."""
    return rank_candidates(((m, metric(m)) for m in members), limit)


def format_results(results: Iterable[ScoredResult]) -> str:
    """Render results as tab-separated lines, one per entry, no header."""
    return "".join(f"{result}\n" for result in results)
