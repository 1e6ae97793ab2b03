"""Parsing and printing of byte and bit quantities with K/M/G suffixes."""

from __future__ import annotations

import math
import re

VERSION = "2.0.8"
VERSION_DATE = "6 Mar 2015"

_BINARY_MULTIPLIERS = {
    "G": 1024 * 1024 * 1024,
    "M": 1024 * 1024,
    "K": 1024,
    "g": 1000 * 1000 * 1000,
    "m": 1000 * 1000,
    "k": 1000,
}

_BYTE_LABELS = ("Byte", "KByte", "MByte", "GByte")
_BIT_LABELS = ("bit", "Kbit", "Mbit", "Gbit")
_EXPLICIT_UNITS = {"B": 0, "K": 1, "M": 2, "G": 3}
_GIGA = 3

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse(text: str) -> float:
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    number = float(match.group(1))
    suffix = text[match.end():match.end() + 1]
    return number * _BINARY_MULTIPLIERS.get(suffix, 1)


def byte_atof(text: str) -> float:
    """Parse a number with an optional suffix.

    ``K``, ``M`` and ``G`` scale by powers of 1024; ``k``, ``m`` and ``g``
    by powers of 1000. Only the character right after the number is
    considered; any other suffix is ignored.
    """
    return _parse(text)


def byte_atoi(text: str) -> int:
    """Parse like :func:`byte_atof` and truncate to a non-negative integer."""
    number = _parse(text)
    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"{text!r} is not a finite quantity")
    if number < 0:
        raise ValueError(f"{text!r} is negative")
    return int(number)


def format_bytes(value: float, fmt: str) -> str:
    """Render a byte count in the unit chosen by ``fmt``.

    Upper-case ``B``, ``K``, ``M``, ``G`` print bytes; lower-case letters
    print bits (the value is multiplied by 8 first). ``A``/``a`` or any
    other character picks the largest unit that keeps the number small.
    """
    if len(fmt) != 1:
        raise ValueError("format must be a single character")
    as_bytes = fmt.isupper()
    if not as_bytes:
        value *= 8
    base = 1024.0 if as_bytes else 1000.0

    conv = _EXPLICIT_UNITS.get(fmt.upper())
    if conv is None:
        conv = 0
        scaled = value
        while scaled >= base and conv < _GIGA:
            scaled /= base
            conv += 1

    value /= base ** conv
    label = (_BYTE_LABELS if as_bytes else _BIT_LABELS)[conv]

    if value < 9.995:
        return f"{value:4.2f} {label}"
    if value < 99.95:
        return f"{value:4.1f} {label}"
    return f"{value:4.0f} {label}"


def pattern(size: int) -> bytes:
    """Return ``size`` bytes of repeating ASCII digits for use as payload."""
    if size < 0:
        raise ValueError("size must not be negative")
    digits = b"0123456789"
    repeats, rest = divmod(size, len(digits))
    return digits * repeats + digits[:rest]