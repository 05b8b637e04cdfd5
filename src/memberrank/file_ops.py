"""
Safe file operations for memberrank.

Directory enumeration with size and pattern filters, and result writing.
"""

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Optional

from .config import AnalysisConfig
from .exceptions import FileAccessError, InvalidPathError

logger = logging.getLogger(__name__)


def validate_root(root_dir: Path) -> Path:
    """
    Resolve the analysis root and make sure it is a readable directory.

    Raises:
        InvalidPathError: If the path is missing or not a directory
    """
    if not root_dir.exists():
        raise InvalidPathError(root_dir, "path does not exist")
    if not root_dir.is_dir():
        raise InvalidPathError(root_dir, "path is not a directory")
    return root_dir.resolve()


def safe_scan_directory(
    root_dir: Path,
    pattern: str = "*",
    max_file_size: Optional[int] = None,
    follow_symlinks: bool = False,
) -> Generator[Path, None, None]:
    """
    Scan a directory for regular files.

    Args:
        root_dir: Directory to scan
        pattern: Glob pattern ("*" for the top level, "**/*" to recurse)
        max_file_size: Skip files larger than this many bytes
        follow_symlinks: Whether to follow symbolic links

    Yields:
        File paths

    Raises:
        FileAccessError: If the directory cannot be listed
    """
    try:
        for path in root_dir.glob(pattern):
            if path.is_symlink() and not follow_symlinks:
                continue

            if not path.is_file():
                continue

            if max_file_size is not None:
                try:
                    size = path.stat().st_size
                except OSError as e:
                    logger.warning(f"Skipping {path}: {e}")
                    continue
                if size > max_file_size:
                    logger.info(f"Skipping {path}: {size} bytes exceeds size limit")
                    continue

            yield path

    except OSError as e:
        raise FileAccessError(root_dir, f"Directory scan failed: {e}")


def should_skip_file(filepath: Path, exclude_patterns: list[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Args:
        filepath: File to check
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    for pattern in exclude_patterns:
        if filepath.match(pattern):
            return True
    return False


def enumerate_source_files(root_dir: Path, config: Optional[AnalysisConfig] = None) -> list[Path]:
    """
    List the source files of a directory, sorted by path.

    Only files with one of ``config.extensions`` are kept. The top level of
    ``root_dir`` is scanned unless ``config.recursive`` is set.

    Raises:
        InvalidPathError: If root_dir is not a directory
        FileAccessError: If the directory cannot be listed
    """
    config = config or AnalysisConfig()
    root_dir = validate_root(root_dir)
    extensions = {ext.lower() for ext in config.extensions}

    files = []
    for path in safe_scan_directory(
        root_dir,
        pattern="**/*" if config.recursive else "*",
        max_file_size=config.max_file_size_bytes,
        follow_symlinks=config.follow_symlinks,
    ):
        if path.suffix.lower() not in extensions:
            continue
        if should_skip_file(path.relative_to(root_dir), config.exclude_patterns):
            logger.debug(f"Excluded {path}")
            continue
        files.append(path)

    return sorted(files)


def safe_write_file(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write a file, creating its parent directory if needed.

    Raises:
        FileAccessError: If file cannot be written
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding=encoding, newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(filepath, f"Write failed: {e}")
