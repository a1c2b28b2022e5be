"""Value types passed between the scanner and its callers."""

from __future__ import annotations

from .report import FileReport, ReadFailure, ScanRequest

__all__ = ["FileReport", "ReadFailure", "ScanRequest"]
