# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Threshold secret reconstruction by exact Lagrange interpolation.

Shares carry their y-value as text in a base between 2 and 36.
:func:`find_secret` picks the ``k`` shares with the lowest ``x``, decodes
them with :func:`decode` and returns the constant term computed by
:func:`interpolate`.
"""

from __future__ import annotations

from .codec import decode, encode
from .errors import (
    DuplicateAbscissa,
    InsufficientShares,
    InvalidBase,
    InvalidDigit,
    NonIntegerResult,
    SecretFinderError,
    ShareFormatError,
)
from .ingest import load_document, parse_document
from .interpolate import interpolate, interpolate_at
from .models import Point, Share, ThresholdSpec
from .recovery import find_secret
from .selector import select

__version__ = "0.1.0"

__all__ = [
    "decode",
    "encode",
    "select",
    "interpolate",
    "interpolate_at",
    "find_secret",
    "load_document",
    "parse_document",
    "Share",
    "Point",
    "ThresholdSpec",
    "SecretFinderError",
    "InvalidBase",
    "InvalidDigit",
    "InsufficientShares",
    "DuplicateAbscissa",
    "NonIntegerResult",
    "ShareFormatError",
]
