"""Tests for file discovery (linecounter.core.discover)."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from linecounter.core.discover import DiscoverConfig, discover_files, iter_source_files


@pytest.fixture()
def tree(tmp_path: Path) -> Path:
    for rel in ("b.kt", "a.kt", "sub/c.kt", "sub/deeper/d.KT", "sub/e.java", "README.md"):
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("x\n")
    return tmp_path


class TestDiscoverFiles:
    def test_finds_extension_recursively(self, tree: Path):
        found = [p.relative_to(tree).as_posix() for p in discover_files(tree, ".kt")]
        assert found == ["a.kt", "b.kt", "sub/c.kt", "sub/deeper/d.KT"]

    def test_other_extension(self, tree: Path):
        found = [p.name for p in discover_files(tree, ".java")]
        assert found == ["e.java"]

    def test_missing_root_yields_nothing(self, tmp_path: Path):
        assert discover_files(tmp_path / "missing") == []

    def test_ignore_files(self, tree: Path):
        cfg = DiscoverConfig(root=tree, extension=".kt", ignore_files=frozenset({"b.kt"}))
        assert [p.name for p in iter_source_files(cfg)] == ["a.kt", "c.kt", "d.KT"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_skipped_by_default(self, tree: Path, tmp_path_factory):
        outside = tmp_path_factory.mktemp("outside") / "linked.kt"
        outside.write_text("y\n")
        try:
            (tree / "linked.kt").symlink_to(outside)
        except OSError:
            pytest.skip("cannot create symlink")

        names = [p.name for p in discover_files(tree, ".kt")]
        assert "linked.kt" not in names

        names = [p.name for p in discover_files(tree, ".kt", follow_symlinks=True)]
        assert "linked.kt" in names


class TestUnlistableDirectories:
    def test_error_handed_to_callback(self, tree: Path, deny_directory):
        deny_directory("sub")
        errors: list[OSError] = []
        found = list(
            iter_source_files(DiscoverConfig(root=tree, extension=".kt"), on_error=errors.append)
        )
        assert [p.name for p in found] == ["a.kt", "b.kt"]
        assert len(errors) == 1
        assert Path(errors[0].filename) == tree / "sub"

    def test_raises_without_callback(self, tree: Path, deny_directory):
        deny_directory("sub")
        with pytest.raises(PermissionError):
            discover_files(tree, ".kt")
