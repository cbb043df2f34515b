# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Secret reconstruction from encoded shares."""

from __future__ import annotations

from typing import Collection

from .codec import decode
from .config import settings
from .interpolate import interpolate
from .models import Point, Share, ThresholdSpec
from .selector import select
from .utils.logging import get_logger

log = get_logger("recovery")


def decode_share(share: Share) -> Point:
    return Point(share.x, decode(share.raw_value, share.base))


def find_secret(
    shares: Collection[Share],
    threshold: ThresholdSpec,
    *,
    allow_rounding: bool | None = None,
) -> int:
    """Recover the secret from ``shares`` using the first ``k`` by ``x``.

    ``allow_rounding=None`` defers to :data:`secret_finder.config.settings`.
    """
    if allow_rounding is None:
        allow_rounding = settings.allow_rounding
    if len(shares) < threshold.n:
        log.warning("expected %d shares, got %d", threshold.n, len(shares))

    chosen = select(shares, threshold.k)
    points = [decode_share(share) for share in chosen]
    return interpolate(points, allow_rounding=allow_rounding)


__all__ = ["decode_share", "find_secret"]
