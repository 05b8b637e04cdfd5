"""Exception hierarchy for memberrank."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ParserUnavailableError,
    ParsingError,
)
from .base import MemberRankError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "MemberRankError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "ParserUnavailableError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
