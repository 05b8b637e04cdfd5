"""Result records produced by the analysis."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..metrics import Metric


def base_name(path: str) -> str:
    """File name part of a path written with either separator."""
    return path.replace("\\", "/").rsplit("/", 1)[-1]


@dataclass(frozen=True)
class ScoredResult:
    """One ranked entry.

    Attributes:
        file: Base name of the file holding the member
        line: First line of the member (1-indexed)
        value: Metric score
    """

    file: str
    line: int
    value: int

    def sort_key(self) -> tuple[int, str, int]:
        """Value descending, then file and line ascending."""
        return (-self.value, self.file, self.line)

    def __str__(self) -> str:
        return f"{self.value}\t{self.file}:{self.line}"


@dataclass(frozen=True)
class MemberScores:
    """Both metric values of one extracted member.

    Attributes:
        path: Full path of the source file
        line: First line of the member (1-indexed)
        statements: Statement count
        nesting: Maximum nesting depth
        kind: Member kind name (method_declaration, ...)
    """

    path: str
    line: int
    statements: int
    nesting: int
    kind: str = ""

    @property
    def file(self) -> str:
        return base_name(self.path)

    def score(self, metric: Metric) -> int:
        if metric is Metric.NESTING:
            return self.nesting
        return self.statements

    def result(self, metric: Metric) -> ScoredResult:
        return ScoredResult(file=self.file, line=self.line, value=self.score(metric))


@dataclass
class AnalysisResult:
    """Everything one run over a directory produced.

    Attributes:
        root: Analyzed directory
        members: Scores of every extracted member, in no particular order
        files_scanned: Number of source files attempted
        failed_files: Files dropped because they could not be read or parsed
    """

    root: str
    members: list[MemberScores] = field(default_factory=list)
    files_scanned: int = 0
    failed_files: list[str] = field(default_factory=list)

    def top(self, metric: Metric, limit: int) -> list[ScoredResult]:
        """Rank all members by ``metric`` and keep the first ``limit``.

        Raises:
            ValueError: If limit is negative
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        results = (m.result(metric) for m in self.members)
        return sorted(results, key=ScoredResult.sort_key)[:limit]
