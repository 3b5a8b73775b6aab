"""Logging setup shared by the handlers and the CLI."""

from __future__ import annotations

import logging
import os

from core.constants import ENV_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_level(level: str | None = None) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    level_name = (level or os.getenv(ENV_LOG_LEVEL) or "INFO").strip().upper()
    resolved = logging.getLevelName(level_name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | None = None) -> None:
    resolved = resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        # Lambda installs its own handler before importing the function module.
        root.setLevel(resolved)
        return
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


__all__ = ["configure_logging", "resolve_level"]
