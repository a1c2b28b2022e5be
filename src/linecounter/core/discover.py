"""File discovery: find source files with a given extension."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator

from linecounter.model.report import DEFAULT_EXTENSION

WalkErrorCallback = Callable[[OSError], None]


@dataclass(frozen=True)
class DiscoverConfig:
    """Configuration for file discovery.

    Nothing is excluded by default: every file under *root* carrying
    *extension* is reported. Symlinked directories are never descended.
    """

    root: Path = field(default_factory=lambda: Path("."))
    extension: str = DEFAULT_EXTENSION
    ignore_files: frozenset[str] = frozenset()
    follow_symlinks: bool = False


def _sort_key(root: Path, p: Path) -> str:
    return p.relative_to(root).as_posix()


def iter_source_files(
    cfg: DiscoverConfig,
    *,
    on_error: WalkErrorCallback | None = None,
) -> Iterator[Path]:
    """Yield matching files under *cfg.root*, sorted by relative POSIX path.

    The root itself is not checked here; a missing root yields nothing.
    Directories that cannot be listed are passed to *on_error* (the
    ``OSError`` carries the directory in ``filename``); without a callback
    the error is raised.
    """
    root = cfg.root
    if not root.is_dir():
        return

    def _walk_error(err: OSError) -> None:
        if on_error is None:
            raise err
        on_error(err)

    ext = cfg.extension.lower()
    matches: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_walk_error):
        for name in filenames:
            p = Path(dirpath) / name
            if p.is_symlink() and not cfg.follow_symlinks:
                continue
            if not p.is_file():
                continue
            if name in cfg.ignore_files:
                continue
            if p.suffix.lower() != ext:
                continue
            matches.append(p)
    yield from sorted(matches, key=lambda p: _sort_key(root, p))


def discover_files(
    root: Path,
    extension: str = DEFAULT_EXTENSION,
    *,
    follow_symlinks: bool = False,
) -> list[Path]:
    """Recursively find files ending in *extension* under *root*.

    Returns
    -------
    List of paths (as found under *root*), sorted by relative POSIX path.
    """
    return list(
        iter_source_files(
            DiscoverConfig(
                root=root,
                extension=extension,
                follow_symlinks=follow_symlinks,
            )
        )
    )
