# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Runtime settings.

Defaults can be overridden with environment variables so that batch jobs
can relax or tighten behaviour without code changes. Unparsable values
fall back to the default rather than failing at import time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().upper()
    if isinstance(logging.getLevelName(value), int):
        return value
    return default


@dataclass(frozen=True)
class Settings:
    """Tunables shared by the library and the command line."""

    allow_rounding: bool = False
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Build :class:`Settings` from the current environment."""

    return Settings(
        allow_rounding=_load_bool("SECRET_FINDER_ALLOW_ROUNDING", False),
        log_level=_load_level("SECRET_FINDER_LOG_LEVEL", "WARNING"),
    )


settings = load_settings()


__all__ = ["Settings", "settings", "load_settings"]
