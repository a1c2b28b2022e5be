"""Counter configuration dataclass."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, replace

from linecounter.errors import ConfigError
from linecounter.model.report import DEFAULT_EXTENSION, normalize_extension

TRUTHY_VALUES = ("1", "true", "yes", "on")


def check_encoding(encoding: str) -> str:
    """Return *encoding* unchanged, or raise :class:`ConfigError` if unknown."""
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {encoding!r}") from e
    return encoding


@dataclass(frozen=True)
class CounterConfig:
    """Immutable counter configuration.

    Environment variables override the defaults via :meth:`from_env`:
    ``LINECOUNTER_EXTENSION``, ``LINECOUNTER_ENCODING``,
    ``LINECOUNTER_FOLLOW_SYMLINKS``.
    """

    extension: str = DEFAULT_EXTENSION
    encoding: str = "utf-8"
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        check_encoding(self.encoding)

    @classmethod
    def from_env(cls) -> "CounterConfig":
        cfg = cls()
        ext = os.getenv("LINECOUNTER_EXTENSION")
        if ext:
            cfg = replace(cfg, extension=normalize_extension(ext))
        enc = os.getenv("LINECOUNTER_ENCODING")
        if enc:
            cfg = replace(cfg, encoding=enc)
        follow = os.getenv("LINECOUNTER_FOLLOW_SYMLINKS")
        if follow is not None:
            cfg = replace(cfg, follow_symlinks=follow.lower() in TRUTHY_VALUES)
        return cfg
