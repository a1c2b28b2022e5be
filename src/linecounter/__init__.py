"""linecounter: count non-blank lines in source trees."""

__all__ = [
    "__version__",
    "count_lines",
    "scan",
    "FileReport",
    "ScanRequest",
    "ReadFailure",
    "LineCounterError",
    "DirectoryNotFoundError",
    "SourceFileNotFoundError",
    "FileReadError",
]
__version__ = "0.1.0"

from linecounter.api import count_lines  # noqa: E402, F401
from linecounter.core.counter import scan  # noqa: E402, F401
from linecounter.errors import (  # noqa: E402, F401
    DirectoryNotFoundError,
    FileReadError,
    LineCounterError,
    SourceFileNotFoundError,
)
from linecounter.model import FileReport, ReadFailure, ScanRequest  # noqa: E402, F401
