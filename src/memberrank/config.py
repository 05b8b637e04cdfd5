"""Configuration loading and management for memberrank.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Project config (./memberrank.toml)
    3. Explicit config file
    4. Environment variables (MEMBERRANK_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(limit=20, recursive=True)
    >>> config.limit
    20
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_LIMIT = 100
PROJECT_CONFIG_NAME = "memberrank.toml"
ENV_PREFIX = "MEMBERRANK_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a ranking run.

    Attributes:
        Ranking:
            limit: Number of entries kept per ranking

        Performance tuning:
            workers: Number of parallel workers (None = auto-detect)

        File discovery:
            extensions: Accepted source file extensions
            recursive: Descend into subdirectories of the root
            follow_symlinks: Include symbolic links
            exclude_patterns: Glob patterns to exclude (e.g. "*.Designer.cs")
            max_file_size_mb: Files larger than this are skipped (None = no limit)

        Parsing and metrics:
            strict_parse: Drop files whose syntax tree contains errors
            count_compound_statements: Count if/while/try/... as statements too

        Output control:
            verbosity: Logging verbosity level
    """

    limit: int = DEFAULT_LIMIT

    workers: Optional[int] = None  # None = auto-detect from CPU cores

    extensions: list[str] = field(default_factory=lambda: [".cs"])
    recursive: bool = False
    follow_symlinks: bool = True
    exclude_patterns: list[str] = field(default_factory=list)
    max_file_size_mb: Optional[float] = None  # None = no size limit

    strict_parse: bool = False
    count_compound_statements: bool = False

    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.limit < 1:
            raise InvalidConfigError("limit", self.limit, "must be at least 1")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.max_file_size_mb is not None and self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if not self.extensions:
            raise InvalidConfigError("extensions", self.extensions, "must not be empty")
        for ext in self.extensions:
            if not ext.startswith("."):
                raise InvalidConfigError("extensions", ext, "extensions must start with '.'")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def max_file_size_bytes(self) -> Optional[int]:
        """Get max file size in bytes, or None when unlimited."""
        if self.max_file_size_mb is None:
            return None
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
    """
    merged: dict = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from MEMBERRANK_* environment variables.

    Supported environment variables:
        MEMBERRANK_LIMIT: int
        MEMBERRANK_WORKERS: int
        MEMBERRANK_RECURSIVE: bool (true/false/1/0)
        MEMBERRANK_FOLLOW_SYMLINKS: bool
        MEMBERRANK_MAX_FILE_SIZE_MB: float
        MEMBERRANK_STRICT_PARSE: bool
        MEMBERRANK_COUNT_COMPOUND_STATEMENTS: bool
        MEMBERRANK_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any MEMBERRANK_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]; extract X
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    # List types (extensions, exclude_patterns) come from TOML only
    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A ``[memberrank]`` table is used when present, otherwise the top level.
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("memberrank", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid [memberrank] section in '{path}'")
    return dict(section)
