"""Ranking engine: runs extraction and scoring over a directory of sources.

Pipeline:
  Enumerate files
       → per file, in parallel: parse → extract members → score both metrics
       → merge all per-file lists
       → rank on demand (AnalysisResult.top)

Per-file tasks share nothing; each returns its own list and the lists are
concatenated once every task has finished. A file that cannot be read or
parsed is logged and left out.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Union

from ..config import AnalysisConfig
from ..exceptions import MemberRankError
from ..file_ops import enumerate_source_files
from ..metrics import Metric, counted_statement_kinds, nesting_depth, statement_count
from ..scanning.normalizer import CSharpParser
from .extractor import extract_members
from .models import AnalysisResult, MemberScores, ScoredResult

logger = logging.getLogger(__name__)

# Default worker count: use CPU count, capped at 8 to avoid overwhelming I/O
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

# Below this many files the thread pool costs more than it saves
_PARALLEL_THRESHOLD = 10

PathLike = Union[str, Path]


class RankingEngine:
    """Scores every function-like member of a directory's source files.

    Usage:
        engine = RankingEngine(load_config(recursive=True))
        result = engine.analyze(Path("src"))
        top = result.top(Metric.NESTING, 100)
    """

    def __init__(
        self, config: Optional[AnalysisConfig] = None, parser: Optional[CSharpParser] = None
    ) -> None:
        """Initialize the engine.

        Raises:
            ParserUnavailableError: If no parser is given and the C# grammar
                is not installed
        """
        self.config = config or AnalysisConfig()
        self._parser = parser or CSharpParser(strict=self.config.strict_parse)
        self._counted = counted_statement_kinds(self.config.count_compound_statements)
        self._max_workers = self.config.workers or _DEFAULT_WORKERS

    def score_file(self, path: Path) -> list[MemberScores]:
        """Parse one file and score each of its members.

        Raises:
            FileAccessError: If the file cannot be read
            ParsingError: If the file cannot be parsed
        """
        root = self._parser.parse_file(path)
        return [
            MemberScores(
                path=member.file,
                line=member.line,
                statements=statement_count(member, self._counted),
                nesting=nesting_depth(member),
                kind=member.type_name,
            )
            for member in extract_members(root)
        ]

    def _score_file_safely(self, path: Path) -> Optional[list[MemberScores]]:
        """score_file, with failures logged and turned into None."""
        try:
            return self.score_file(path)
        except MemberRankError as e:
            logger.warning(f"Skipping {path}: {e}")
        except OSError as e:
            logger.warning(f"Skipping {path}: OS error: {e}")
        return None

    def analyze_files(self, file_paths: list[Path], root: str = "") -> AnalysisResult:
        """Score the members of the given files."""
        result = AnalysisResult(root=root, files_scanned=len(file_paths))
        per_file: dict[Path, list[MemberScores]] = {}

        if self._max_workers == 1 or len(file_paths) < _PARALLEL_THRESHOLD:
            for file_path in file_paths:
                scores = self._score_file_safely(file_path)
                if scores is None:
                    result.failed_files.append(str(file_path))
                else:
                    per_file[file_path] = scores
        else:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                futures = {executor.submit(self._score_file_safely, fp): fp for fp in file_paths}
                for future in as_completed(futures):
                    fp = futures[future]
                    try:
                        scores = future.result()
                    except Exception as e:
                        logger.warning(f"Error scoring {fp}: {e}")
                        scores = None
                    if scores is None:
                        result.failed_files.append(str(fp))
                    else:
                        per_file[fp] = scores

        # Merge in path order; ranking imposes the final order anyway
        for file_path in sorted(per_file):
            result.members.extend(per_file[file_path])
        result.failed_files.sort()

        logger.info(
            f"Scored {len(result.members)} members in "
            f"{len(per_file)}/{len(file_paths)} files"
        )
        return result

    def analyze(self, root_path: PathLike) -> AnalysisResult:
        """Enumerate the source files of ``root_path`` and score them.

        Raises:
            InvalidPathError: If root_path is not a directory
            FileAccessError: If the directory cannot be listed
        """
        root = Path(root_path)
        file_paths = enumerate_source_files(root, self.config)
        logger.debug(f"Found {len(file_paths)} source files under {root}")
        return self.analyze_files(file_paths, root=str(root))


def analyze(root_path: PathLike, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Score every member under ``root_path``."""
    return RankingEngine(config).analyze(root_path)


def rank_by_statement_count(
    root_path: PathLike, limit: Optional[int] = None, config: Optional[AnalysisConfig] = None
) -> list[ScoredResult]:
    """Members with the most statements, best first.

    Args:
        root_path: Directory of source files
        limit: Entries to keep (defaults to ``config.limit``, 100)
        config: Analysis configuration
    """
    config = config or AnalysisConfig()
    if limit is None:
        limit = config.limit
    return analyze(root_path, config).top(Metric.STATEMENTS, limit)


def rank_by_nesting_depth(
    root_path: PathLike, limit: Optional[int] = None, config: Optional[AnalysisConfig] = None
) -> list[ScoredResult]:
    """Members with the deepest control-flow nesting, best first.

    Args:
        root_path: Directory of source files
        limit: Entries to keep (defaults to ``config.limit``, 100)
        config: Analysis configuration
    """
    config = config or AnalysisConfig()
    if limit is None:
        limit = config.limit
    return analyze(root_path, config).top(Metric.NESTING, limit)
