# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Logger factory for the package.

Importing the library only installs a ``NullHandler``; output handlers are
left to the application. The command line calls :func:`configure` to get a
stderr handler.
"""

from __future__ import annotations

import logging

from ..config import settings

ROOT_LOGGER = "secret_finder"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

_cli_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return ``secret_finder.<name>``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure(level: str | int | None = None) -> logging.Logger:
    """Attach one stderr handler to the package logger and set its level."""
    global _cli_handler
    root = logging.getLogger(ROOT_LOGGER)
    if _cli_handler is None:
        _cli_handler = logging.StreamHandler()
        _cli_handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(_cli_handler)
    root.setLevel(level if level is not None else settings.log_level)
    return root


__all__ = ["get_logger", "configure", "ROOT_LOGGER"]
