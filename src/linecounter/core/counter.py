"""Line counter: count non-blank lines per file and build FileReports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

from linecounter.core.config import check_encoding
from linecounter.core.discover import DiscoverConfig, iter_source_files
from linecounter.errors import (
    DirectoryNotFoundError,
    FileReadError,
    SourceFileNotFoundError,
)
from linecounter.model.report import FileReport, ReadFailure, ScanRequest

_logger = logging.getLogger(__name__)

ErrorCallback = Callable[[ReadFailure], None]


def count_non_blank_lines(path: Path, encoding: str = "utf-8") -> int:
    """Count lines of *path* that contain at least one non-whitespace char.

    Universal-newline text mode, so ``\\n``, ``\\r\\n`` and ``\\r`` all end
    a line. Undecodable bytes are replaced rather than failing the file.

    Raises :class:`FileReadError` when the file cannot be opened or read.
    """
    count = 0
    try:
        with open(path, "r", encoding=encoding, errors="replace", newline=None) as fh:
            for line in fh:
                if line.strip():
                    count += 1
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e
    return count


def format_report(report: FileReport) -> str:
    return f"File: {report.file_name} | Lines: {report.line_count}"


def _rel_or_abs(root: Path, path: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _report_for(root: Path, path: Path, encoding: str) -> FileReport:
    return FileReport(
        file_name=path.name,
        line_count=count_non_blank_lines(path, encoding),
        path=_rel_or_abs(root, path),
    )


def iter_reports(
    request: ScanRequest,
    *,
    on_error: ErrorCallback | None = None,
    encoding: str = "utf-8",
    follow_symlinks: bool = False,
) -> Iterator[FileReport]:
    """Lazily yield one :class:`FileReport` per counted file.

    Raises :class:`DirectoryNotFoundError` before yielding anything when the
    root is missing, and :class:`SourceFileNotFoundError` in single-file
    mode when the named file does not exist. Unreadable files, and
    directories that cannot be listed, are logged, handed to *on_error*
    and skipped.
    """
    check_encoding(encoding)
    root = request.root_directory
    if not root.is_dir():
        raise DirectoryNotFoundError(root)

    def _skip(path: Path, reason: str) -> None:
        _logger.warning("Skipping unreadable %s: %s", path, reason)
        if on_error is not None:
            on_error(ReadFailure(path=_rel_or_abs(root, path), reason=reason))

    def _walk_error(err: OSError) -> None:
        _skip(Path(err.filename or root), err.strerror or str(err))

    if request.single_file:
        target = request.target_file()
        if not target.is_file():
            raise SourceFileNotFoundError(target)
        files: Iterator[Path] = iter([target])
    else:
        files = iter_source_files(
            DiscoverConfig(
                root=root,
                extension=request.extension,
                follow_symlinks=follow_symlinks,
            ),
            on_error=_walk_error,
        )

    for path in files:
        try:
            report = _report_for(root, path, encoding)
        except FileReadError as e:
            _skip(path, e.reason)
            continue
        _logger.debug("Counted %s: %d non-blank lines", report.path, report.line_count)
        yield report


def scan(
    request: ScanRequest,
    *,
    on_error: ErrorCallback | None = None,
    encoding: str = "utf-8",
    follow_symlinks: bool = False,
) -> list[FileReport]:
    """Run one scan and return every report, in discovery order."""
    return list(
        iter_reports(
            request,
            on_error=on_error,
            encoding=encoding,
            follow_symlinks=follow_symlinks,
        )
    )
