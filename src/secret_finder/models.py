# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Value objects passed between the decoder, selector and interpolator."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InsufficientShares


@dataclass(frozen=True)
class Share:
    """One encoded share: abscissa ``x`` and ``raw_value`` written in ``base``."""

    x: int
    base: int
    raw_value: str


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ThresholdSpec:
    """Declares ``n`` shares in total of which ``k`` reconstruct the secret."""

    n: int
    k: int

    def __post_init__(self) -> None:
        if self.k < 1:
            raise InsufficientShares(f"threshold k must be at least 1, got {self.k}")
        if self.n < self.k:
            raise InsufficientShares(f"share count n={self.n} is below threshold k={self.k}")


__all__ = ["Share", "Point", "ThresholdSpec"]
