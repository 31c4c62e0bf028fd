"""
Lenient integer scanning for the date and time fields of a receipt.

Fields are read left to right.  Scanning stops at the first field that
cannot be read, and every field from that point on is reported as ``0``.
Nothing here raises.
"""
from __future__ import annotations

import re

_INT_RE = re.compile(r"[ \t\r]*([+-]?[0-9]+)")

# Values outside a signed 64-bit integer fail like any other bad field.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def scan_ints(text: str, sep: str, count: int) -> list[int]:
    """Read up to ``count`` integers separated by the literal ``sep``.

    >>> scan_ints("2022-01-01", "-", 3)
    [2022, 1, 1]
    >>> scan_ints("2022-xx-01", "-", 3)
    [2022, 0, 0]
    """
    values = [0] * count
    pos = 0
    for i in range(count):
        if i > 0:
            if not text.startswith(sep, pos):
                break
            pos += len(sep)
        m = _INT_RE.match(text, pos)
        if m is None:
            break
        value = int(m.group(1))
        if not INT_MIN <= value <= INT_MAX:
            break
        values[i] = value
        pos = m.end()
    return values


def parse_date_parts(text: str) -> tuple[int, int, int]:
    """Return ``(year, month, day)`` from a ``YYYY-MM-DD`` string."""
    year, month, day = scan_ints(text, "-", 3)
    return year, month, day


def parse_time_parts(text: str) -> tuple[int, int]:
    """Return ``(hour, minute)`` from an ``HH:MM`` string."""
    hour, minute = scan_ints(text, ":", 2)
    return hour, minute
