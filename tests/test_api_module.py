"""Tests for the programmatic entrypoint (linecounter.api)."""

from __future__ import annotations

from pathlib import Path

import jsonschema
import pytest

from linecounter.api import REPORT_SCHEMA, SCHEMA_VERSION, count_lines
from linecounter.contracts.load import load_schema, validate_instance
from linecounter.core.config import CounterConfig
from linecounter.errors import DirectoryNotFoundError, SourceFileNotFoundError


@pytest.fixture()
def kotlin_tree(tmp_path: Path) -> Path:
    (tmp_path / "a.kt").write_text("fun a() {\n\n}\n\n  \n")
    (tmp_path / "b.kt").write_text("")
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "c.kt").write_text("val c = 1\n")
    return tmp_path


_CFG = CounterConfig()


class TestCountLines:
    def test_directory_report(self, kotlin_tree: Path):
        result = count_lines(kotlin_tree, config=_CFG)
        assert result["schema_version"] == SCHEMA_VERSION
        assert result["extension"] == ".kt"
        assert [(f["file_name"], f["line_count"]) for f in result["files"]] == [
            ("a.kt", 2),
            ("b.kt", 0),
            ("c.kt", 1),
        ]
        assert result["files"][2]["path"] == "pkg/c.kt"
        assert result["errors"] == []
        assert result["summary"] == {"files_counted": 3, "total_lines": 3, "files_failed": 0}

    def test_single_file(self, kotlin_tree: Path):
        result = count_lines(kotlin_tree, file="a", config=_CFG)
        assert [f["file_name"] for f in result["files"]] == ["a.kt"]

    def test_extension_override(self, kotlin_tree: Path):
        (kotlin_tree / "s.py").write_text("x = 1\n")
        result = count_lines(kotlin_tree, extension="py", config=_CFG)
        assert [f["file_name"] for f in result["files"]] == ["s.py"]
        assert result["extension"] == ".py"

    def test_empty_directory(self, tmp_path: Path):
        result = count_lines(tmp_path, config=_CFG)
        assert result["files"] == []
        assert result["summary"]["files_counted"] == 0

    def test_errors_propagate(self, kotlin_tree: Path):
        with pytest.raises(DirectoryNotFoundError):
            count_lines(kotlin_tree / "missing", config=_CFG)
        with pytest.raises(SourceFileNotFoundError):
            count_lines(kotlin_tree, file="zzz", config=_CFG)

    def test_result_matches_schema(self, kotlin_tree: Path):
        validate_instance(count_lines(kotlin_tree, config=_CFG), REPORT_SCHEMA)


class TestReportSchema:
    def test_schema_loads(self):
        schema = load_schema(REPORT_SCHEMA)
        assert schema["properties"]["schema_version"]["const"] == SCHEMA_VERSION

    def test_negative_count_rejected(self, kotlin_tree: Path):
        result = count_lines(kotlin_tree, config=_CFG)
        result["files"][0]["line_count"] = -1
        with pytest.raises(jsonschema.ValidationError):
            validate_instance(result, REPORT_SCHEMA)
