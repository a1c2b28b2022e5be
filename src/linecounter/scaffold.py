"""Create-folder task: make ``plugin-folder`` with a placeholder text file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from linecounter.errors import ScaffoldError

_logger = logging.getLogger(__name__)

FOLDER_NAME = "plugin-folder"
DEFAULT_TXT_NAME = "default"
PLACEHOLDER_TEXT = "Test File"


@dataclass(frozen=True)
class ScaffoldResult:
    folder: Path
    file: Path
    txt_name: str | None

    def summary(self) -> str:
        return f"Folder: {self.folder.name} | File: {self.file.stem}"


def _check_name(name: str) -> None:
    if not name or name in (".", "..") or "/" in name or "\\" in name:
        raise ScaffoldError(f"invalid file name: {name!r}")


def create_folder(base_dir: str | Path = ".", txt_name: str | None = None) -> ScaffoldResult:
    """Create ``<base_dir>/plugin-folder/<txt_name or default>.txt``.

    The folder may already exist; the text file is (over)written with
    ``"Test File"``.
    """
    if txt_name is not None:
        _check_name(txt_name)
    folder = Path(base_dir) / FOLDER_NAME
    folder.mkdir(parents=True, exist_ok=True)
    target = folder / f"{txt_name or DEFAULT_TXT_NAME}.txt"
    target.write_text(PLACEHOLDER_TEXT, encoding="utf-8")

    result = ScaffoldResult(folder=folder, file=target, txt_name=txt_name)
    _logger.info("Folder: %s | File: %s", folder.name, target.stem)
    return result
