"""FileReport / ScanRequest: the scanner's input and output records."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_EXTENSION = ".kt"


def normalize_extension(ext: str) -> str:
    """Return *ext* with exactly one leading dot (``"kt"`` -> ``".kt"``)."""
    ext = ext.strip()
    if not ext or ext == ".":
        raise ValueError("extension must not be empty")
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True, slots=True)
class ScanRequest:
    """One invocation's worth of input.

    ``file_filter`` is a file name *without* extension; when set, only
    ``root_directory / (file_filter + extension)`` is counted.
    """

    root_directory: Path
    file_filter: str | None = None
    extension: str = DEFAULT_EXTENSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "root_directory", Path(self.root_directory))
        object.__setattr__(self, "extension", normalize_extension(self.extension))
        if self.file_filter == "":
            object.__setattr__(self, "file_filter", None)

    @property
    def single_file(self) -> bool:
        return self.file_filter is not None

    def target_file(self) -> Path:
        """Path of the file named by ``file_filter``."""
        if self.file_filter is None:
            raise ValueError("request has no file filter")
        return self.root_directory / f"{self.file_filter}{self.extension}"


@dataclass(frozen=True, slots=True)
class FileReport:
    """Non-blank line count for a single file."""

    file_name: str
    line_count: int
    path: str = ""

    def __post_init__(self) -> None:
        if self.line_count < 0:
            raise ValueError(f"line_count must be >= 0, got {self.line_count}")
        if not self.path:
            object.__setattr__(self, "path", self.file_name)

    def to_dict(self) -> dict:
        return {
            "file_name": self.file_name,
            "path": self.path,
            "line_count": self.line_count,
        }


@dataclass(frozen=True, slots=True)
class ReadFailure:
    """A file, or directory, skipped because it could not be read."""

    path: str
    reason: str

    def to_dict(self) -> dict:
        return {"path": self.path, "reason": self.reason}
