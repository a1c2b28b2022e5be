"""Exception hierarchy shared by the scanner, the scaffold task and the CLI."""

from __future__ import annotations

from pathlib import Path


class LineCounterError(Exception):
    """Base class for every error raised by linecounter."""


class DirectoryNotFoundError(LineCounterError, FileNotFoundError):
    """The scan root is missing (or is not a directory)."""

    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__(f"directory not found: {directory.as_posix()}")


class SourceFileNotFoundError(LineCounterError, FileNotFoundError):
    """Single-file mode was asked for a file that does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"file not found: {path.as_posix()}")


class FileReadError(LineCounterError, OSError):
    """A file was found but could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path.as_posix()}: {reason}")


class ScaffoldError(LineCounterError, ValueError):
    """Invalid input for the create-folder task."""


class ConfigError(LineCounterError, ValueError):
    """A configuration value (e.g. the text encoding) is unusable."""
