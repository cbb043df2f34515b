# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Deterministic choice of ``k`` shares out of a larger collection."""

from __future__ import annotations

from typing import Iterable

from .errors import InsufficientShares
from .models import Share
from .utils.logging import get_logger

log = get_logger("selector")


def select(shares: Iterable[Share], k: int) -> list[Share]:
    """Return the ``k`` shares with the lowest ``x``, in ascending order.

    Any ``k`` shares of a consistent sharing reconstruct the same secret;
    lowest-x-first only makes runs reproducible. The input is not modified.
    """
    if k < 1:
        raise InsufficientShares(f"threshold k must be at least 1, got {k}")
    ordered = sorted(shares, key=lambda share: share.x)
    if len(ordered) < k:
        raise InsufficientShares(f"need {k} shares, got {len(ordered)}")
    chosen = ordered[:k]
    log.debug("selected x=%s out of %d shares", [s.x for s in chosen], len(ordered))
    return chosen


__all__ = ["select"]
