"""Tests for config.py - defaults, validation and source precedence."""

import os

import pytest

from memberrank.config import AnalysisConfig, load_config
from memberrank.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run in an empty directory with no MEMBERRANK_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in [n for n in os.environ if n.startswith("MEMBERRANK_")]:
        monkeypatch.delenv(name)
    return tmp_path


class TestDefaults:
    def test_defaults(self):
        config = AnalysisConfig()
        assert config.limit == 100
        assert config.workers is None
        assert config.extensions == [".cs"]
        assert config.recursive is False
        assert config.count_compound_statements is False
        assert config.exclude_patterns == []
        assert config.follow_symlinks is True
        assert config.max_file_size_mb is None
        assert config.max_file_size_bytes is None

    def test_max_file_size_bytes(self):
        assert AnalysisConfig(max_file_size_mb=1.5).max_file_size_bytes == 1572864

    def test_load_without_sources(self):
        assert load_config() == AnalysisConfig()


class TestValidation:
    """Invalid values are rejected at construction."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"limit": 0},
            {"workers": 0},
            {"max_file_size_mb": 0},
            {"extensions": []},
            {"extensions": ["cs"]},
            {"verbosity": "loud"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidConfigError):
            AnalysisConfig(**kwargs)

    def test_invalid_config_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            load_config(limit=-5)

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(colour="blue")


class TestSources:
    """Merging of files, environment and overrides."""

    def test_project_config(self, isolated):
        (isolated / "memberrank.toml").write_text("limit = 20\nrecursive = true\n")
        config = load_config()
        assert config.limit == 20
        assert config.recursive is True

    def test_memberrank_table(self, isolated):
        path = isolated / "settings.toml"
        path.write_text('[memberrank]\nextensions = [".cs", ".csx"]\nworkers = 2\n')
        config = load_config(config_file=path)
        assert config.extensions == [".cs", ".csx"]
        assert config.workers == 2

    def test_explicit_file_beats_project_config(self, isolated):
        (isolated / "memberrank.toml").write_text("limit = 20\n")
        explicit = isolated / "other.toml"
        explicit.write_text("limit = 30\n")
        assert load_config(config_file=explicit).limit == 30

    def test_missing_file(self, isolated):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=isolated / "absent.toml")

    def test_malformed_file(self, isolated):
        path = isolated / "broken.toml"
        path.write_text("limit = = 3\n")
        with pytest.raises(ConfigurationError):
            load_config(config_file=path)

    def test_env_beats_files(self, isolated, monkeypatch):
        (isolated / "memberrank.toml").write_text("limit = 20\n")
        monkeypatch.setenv("MEMBERRANK_LIMIT", "40")
        monkeypatch.setenv("MEMBERRANK_RECURSIVE", "yes")
        monkeypatch.setenv("MEMBERRANK_MAX_FILE_SIZE_MB", "2.5")
        config = load_config()
        assert config.limit == 40
        assert config.recursive is True
        assert config.max_file_size_mb == 2.5

    def test_bad_env_value(self, monkeypatch):
        monkeypatch.setenv("MEMBERRANK_STRICT_PARSE", "sometimes")
        with pytest.raises(ConfigurationError, match="MEMBERRANK_STRICT_PARSE"):
            load_config()

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("MEMBERRANK_LIMIT", "40")
        assert load_config(limit=5).limit == 5

    def test_none_overrides_ignored(self, monkeypatch):
        monkeypatch.setenv("MEMBERRANK_WORKERS", "3")
        config = load_config(workers=None, recursive=None)
        assert config.workers == 3
        assert config.recursive is False

    def test_verbosity_flags(self):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False, quiet=False).verbosity == "normal"
