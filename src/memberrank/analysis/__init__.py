"""Member extraction, scoring and ranking."""

from .engine import RankingEngine, analyze, rank_by_nesting_depth, rank_by_statement_count
from .extractor import extract_members, has_executable_statement
from .models import AnalysisResult, MemberScores, ScoredResult
from .ranking import format_results, rank, rank_candidates, rank_members

__all__ = [
    "RankingEngine",
    "analyze",
    "rank_by_statement_count",
    "rank_by_nesting_depth",
    "extract_members",
    "has_executable_statement",
    "AnalysisResult",
    "MemberScores",
    "ScoredResult",
    "rank",
    "rank_candidates",
    "rank_members",
    "format_results",
]
