"""
memberrank - complexity rankings for C# members

Extracts every function-like member of a directory of C# sources, scores
each by statement count and by control-flow nesting depth, and reports the
highest-scoring members per metric.
"""

__version__ = "0.1.0"

from .analysis import (
    AnalysisResult,
    ScoredResult,
    analyze,
    rank_by_nesting_depth,
    rank_by_statement_count,
)
from .config import AnalysisConfig, load_config
from .metrics import Metric

__all__ = [
    "analyze",
    "rank_by_statement_count",
    "rank_by_nesting_depth",
    "AnalysisResult",
    "ScoredResult",
    "AnalysisConfig",
    "load_config",
    "Metric",
]
