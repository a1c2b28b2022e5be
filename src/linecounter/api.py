"""
linecounter.api
===============

Programmatic entrypoint for using linecounter as a backend engine.

Goals:
  - No argparse / CLI dependencies
  - Stable, JSON-friendly output validated against ``line_report.schema.json``

Usage::

    from linecounter.api import count_lines

    report = count_lines("src/main/kotlin", extension=".kt")
    report = count_lines("src/main/kotlin", file="Main")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from linecounter.contracts.load import validate_instance
from linecounter.core.config import CounterConfig
from linecounter.core.counter import scan
from linecounter.model.report import ReadFailure, ScanRequest

SCHEMA_VERSION = "line_report_v1"
REPORT_SCHEMA = "line_report.schema.json"


def count_lines(
    root: str | Path,
    *,
    file: str | None = None,
    extension: str | None = None,
    config: CounterConfig | None = None,
) -> dict[str, Any]:
    """Scan *root* and return the report dict.

    Raises the ``linecounter.errors`` exceptions unchanged; per-file read
    failures are collected under ``"errors"``.
    """
    cfg = config or CounterConfig.from_env()
    request = ScanRequest(
        root_directory=Path(root),
        file_filter=file,
        extension=extension or cfg.extension,
    )

    failures: list[ReadFailure] = []
    reports = scan(
        request,
        on_error=failures.append,
        encoding=cfg.encoding,
        follow_symlinks=cfg.follow_symlinks,
    )

    result: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "root": request.root_directory.as_posix(),
        "extension": request.extension,
        "files": [r.to_dict() for r in reports],
        "errors": [f.to_dict() for f in failures],
        "summary": {
            "files_counted": len(reports),
            "total_lines": sum(r.line_count for r in reports),
            "files_failed": len(failures),
        },
    }
    validate_instance(result, REPORT_SCHEMA)
    return result
