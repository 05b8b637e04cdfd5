"""Analysis-related exceptions: file access, parsing, parser availability."""

from pathlib import Path

from .base import MemberRankError


class AnalysisError(MemberRankError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file or directory cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when file content cannot be turned into a syntax tree."""

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class ParserUnavailableError(AnalysisError):
    """Raised when tree-sitter or the grammar for a language is not installed."""

    def __init__(self, language: str, package: str):
        super().__init__(
            f"No parser available for {language}",
            details={"language": language, "install": f"pip install {package}"},
        )
        self.language = language
        self.package = package
