"""Tests for file_ops.py - source enumeration and result writing."""

import pytest

from memberrank.config import AnalysisConfig
from memberrank.exceptions import FileAccessError, InvalidPathError
from memberrank.file_ops import enumerate_source_files, safe_write_file, should_skip_file


@pytest.fixture
def tree(tmp_path):
    """A directory with sources at the top level and below it."""
    (tmp_path / "A.cs").write_text("class A {}")
    (tmp_path / "B.CS").write_text("class B {}")
    (tmp_path / "notes.txt").write_text("not code")
    (tmp_path / "Form1.Designer.cs").write_text("partial class Form1 {}")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "C.cs").write_text("class C {}")
    (tmp_path / "obj").mkdir()
    (tmp_path / "obj" / "Gen.cs").write_text("class Gen {}")
    return tmp_path


def names(paths):
    return [p.name for p in paths]


class TestEnumerateSourceFiles:
    def test_top_level_only_by_default(self, tree):
        """Generated and designer files are listed like any other source."""
        assert names(enumerate_source_files(tree)) == ["A.cs", "B.CS", "Form1.Designer.cs"]

    def test_recursive(self, tree):
        config = AnalysisConfig(recursive=True)
        assert names(enumerate_source_files(tree, config)) == [
            "A.cs",
            "B.CS",
            "Form1.Designer.cs",
            "Gen.cs",
            "C.cs",
        ]

    def test_extensions(self, tree):
        config = AnalysisConfig(extensions=[".txt"])
        assert names(enumerate_source_files(tree, config)) == ["notes.txt"]

    def test_exclude_patterns(self, tree):
        config = AnalysisConfig(exclude_patterns=["*.Designer.cs", "obj/*"], recursive=True)
        assert names(enumerate_source_files(tree, config)) == ["A.cs", "B.CS", "C.cs"]

    def test_size_limit(self, tree):
        (tree / "Huge.cs").write_text("x" * 2048)
        assert "Huge.cs" in names(enumerate_source_files(tree))
        config = AnalysisConfig(max_file_size_mb=0.001)
        assert "Huge.cs" not in names(enumerate_source_files(tree, config))

    def test_symlinks(self, tree):
        link = tree / "Link.cs"
        try:
            link.symlink_to(tree / "A.cs")
        except OSError:
            pytest.skip("symlinks not supported")
        assert "Link.cs" in names(enumerate_source_files(tree))
        skipped = enumerate_source_files(tree, AnalysisConfig(follow_symlinks=False))
        assert "Link.cs" not in names(skipped)

    def test_empty_directory(self, tmp_path):
        assert enumerate_source_files(tmp_path) == []

    def test_missing_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            enumerate_source_files(tmp_path / "missing")

    def test_root_is_file(self, tree):
        with pytest.raises(InvalidPathError):
            enumerate_source_files(tree / "A.cs")


class TestShouldSkipFile:
    def test_patterns(self, tmp_path):
        patterns = ["*.g.cs", "bin/*"]
        assert should_skip_file(tmp_path / "View.g.cs", patterns)
        assert should_skip_file(tmp_path / "bin" / "X.cs", patterns)
        assert not should_skip_file(tmp_path / "Program.cs", patterns)


class TestSafeWriteFile:
    def test_creates_parent(self, tmp_path):
        target = tmp_path / "out" / "ranking.txt"
        safe_write_file(target, "3\tA.cs:1\n")
        assert target.read_bytes() == b"3\tA.cs:1\n"

    def test_write_failure(self, tmp_path):
        (tmp_path / "blocker").write_text("")
        with pytest.raises(FileAccessError):
            safe_write_file(tmp_path / "blocker" / "ranking.txt", "")
