# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

"""Positional decoding of share values written in bases 2 to 36.

Digits ``0``-``9`` carry their usual value and letters (either case) carry
10 to 35. Integers are unbounded, so values far beyond 64 bits decode
exactly.
"""

from __future__ import annotations

import string

from .errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36

_ALPHABET = string.digits + string.ascii_lowercase
_DIGITS = {ch: i for i, ch in enumerate(_ALPHABET)}
_DIGITS.update((ch, i + 10) for i, ch in enumerate(string.ascii_uppercase))


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(f"base must be an integer, got {base!r}")
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBase(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")


def digit_value(char: str) -> int:
    """Return the numeric value of a single alphanumeric digit."""
    try:
        return _DIGITS[char]
    except (KeyError, TypeError):
        raise InvalidDigit(f"{char!r} is not an alphanumeric digit") from None


def decode(value: str, base: int) -> int:
    """Decode ``value`` written in ``base`` into an integer."""
    _check_base(base)
    if not value:
        raise InvalidDigit("value must not be empty")

    result = 0
    for pos, char in enumerate(value):
        digit = digit_value(char)
        if digit >= base:
            raise InvalidDigit(f"digit {char!r} at position {pos} is not valid in base {base}")
        result = result * base + digit
    return result


def encode(number: int, base: int) -> str:
    """Write a non-negative integer in ``base`` using lowercase digits."""
    _check_base(base)
    if number < 0:
        raise ValueError("only non-negative integers can be encoded")
    if number == 0:
        return "0"

    digits: list[str] = []
    while number:
        number, rem = divmod(number, base)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


__all__ = ["MIN_BASE", "MAX_BASE", "digit_value", "decode", "encode"]
