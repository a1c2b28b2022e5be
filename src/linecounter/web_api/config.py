"""Web API settings, read from ``LINECOUNTER_API_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from linecounter.core.config import TRUTHY_VALUES
from linecounter.errors import ConfigError


@dataclass(frozen=True)
class ApiSettings:
    """Immutable web API settings.

    ``host``/``port`` only apply when the app is started with
    ``python -m linecounter.web_api.main``; under ``uvicorn`` the command
    line wins.
    """

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> "ApiSettings":
        cfg = cls()
        host = os.getenv("LINECOUNTER_API_HOST")
        if host:
            cfg = replace(cfg, host=host)
        port = os.getenv("LINECOUNTER_API_PORT")
        if port:
            try:
                cfg = replace(cfg, port=int(port))
            except ValueError as e:
                raise ConfigError(f"invalid LINECOUNTER_API_PORT: {port!r}") from e
        debug = os.getenv("LINECOUNTER_API_DEBUG")
        if debug is not None:
            cfg = replace(cfg, debug=debug.lower() in TRUTHY_VALUES)
        origins = os.getenv("LINECOUNTER_API_CORS_ORIGINS")
        if origins:
            cfg = replace(
                cfg,
                cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            )
        return cfg


settings = ApiSettings.from_env()
