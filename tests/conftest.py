"""Shared fixtures."""

from __future__ import annotations

import os
from typing import Callable

import pytest

import linecounter.core.discover as discover_mod


@pytest.fixture()
def deny_directory(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Make directories with the given name fail to list during discovery.

    Wraps ``os.walk`` as seen by ``linecounter.core.discover``: the named
    directory is pruned and reported through ``onerror`` with EACCES, as
    ``os.walk`` does for a directory the user cannot read.
    """
    real_walk = os.walk
    denied: set[str] = set()

    def fake_walk(top, topdown=True, onerror=None, followlinks=False):
        for dirpath, dirnames, filenames in real_walk(
            top, topdown=topdown, onerror=onerror, followlinks=followlinks
        ):
            for name in [d for d in dirnames if d in denied]:
                dirnames.remove(name)
                if onerror is not None:
                    onerror(
                        PermissionError(13, "Permission denied", os.path.join(dirpath, name))
                    )
            yield dirpath, dirnames, filenames

    monkeypatch.setattr(discover_mod.os, "walk", fake_walk)
    return denied.add
