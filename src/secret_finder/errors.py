# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Exceptions raised while decoding shares and reconstructing a secret."""

from __future__ import annotations


class SecretFinderError(ValueError):
    """Base class for every input error reported by :mod:`secret_finder`."""


class InvalidBase(SecretFinderError):
    pass


class InvalidDigit(SecretFinderError):
    pass


class InsufficientShares(SecretFinderError):
    pass


class DuplicateAbscissa(SecretFinderError):
    pass


class NonIntegerResult(SecretFinderError):
    """The interpolated value is a proper fraction."""

    def __init__(self, numerator: int, denominator: int) -> None:
        super().__init__(f"interpolation does not reduce to an integer: {numerator}/{denominator}")
        self.numerator = numerator
        self.denominator = denominator


class ShareFormatError(SecretFinderError):
    """A share document is missing fields or holds malformed values."""


__all__ = [
    "SecretFinderError",
    "InvalidBase",
    "InvalidDigit",
    "InsufficientShares",
    "DuplicateAbscissa",
    "NonIntegerResult",
    "ShareFormatError",
]
